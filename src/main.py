import sys
import logging
import signal

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QTimer

from src.presentation.views.main_window import MainWindow
from src.presentation.viewmodels.menu_vm import MenuViewModel
from src.presentation.services.command_handler import WindowCommandHandler
from src.presentation.services.localizer_factory import FtlLocalizerFactory
from src.presentation.menu import application_name
from src.presentation.state.app_state import AppState
from src.print_l10n.infrastructure.logging import setup_logging
from src.config import get_settings, BASE_DIR

logger = logging.getLogger(__name__)

def setup_environment():
    """Sets up the environment for the application."""
    if str(BASE_DIR) not in sys.path:
        sys.path.insert(0, str(BASE_DIR))

def handle_sigint(signum, frame):
    """Handles KeyboardInterrupt (Ctrl+C)."""
    logger.info("Received SIGINT (Ctrl+C). Exiting...")
    QApplication.quit()

def main():
    """
    Main entry point for the application.
    Bootstraps the QApplication and the main window with MVVM dependencies.
    """
    setup_environment()
    signal.signal(signal.SIGINT, handle_sigint)

    try:
        # 1. Load Configuration
        try:
            settings = get_settings()
            setup_logging(settings.env)
            logger.info(f"Configuration loaded successfully. Environment: {settings.env}")
        except Exception as e:
            logger.critical(f"Failed to load configuration: {e}")
            sys.exit(1)

        # 2. Initialize Application
        app = QApplication(sys.argv)
        app.setApplicationVersion(settings.app.version)

        # 3. Resolve Resources
        resources_dir = settings.l10n.resources_path
        if not resources_dir.is_dir():
            logger.critical(f"Translation resources not found at: {resources_dir}")
            sys.exit(1)

        # 4. Initialize Dependencies (Services)
        logger.info("Initializing services...")
        localizer_factory = FtlLocalizerFactory(settings.l10n)
        command_handler = WindowCommandHandler()

        # 5. Initialize ViewModel
        logger.info("Initializing ViewModel...")
        state = AppState(locale=settings.l10n.locale or "")
        menu_vm = MenuViewModel(localizer_factory, command_handler, state)
        menu_vm.initialize()
        if menu_vm.localizer is None:
            logger.critical("No translation table could be loaded")
            sys.exit(1)

        state.title = application_name(menu_vm.localizer, settings.app.name)
        app.setApplicationName(state.title)

        # 6. Initialize View (Window)
        logger.info("Initializing View...")
        window = MainWindow(state.title, menu_vm)
        command_handler.attach_window(window, on_open_dir=window.set_project_dir)
        window.show()

        # 7. Setup Signal Handling Helper
        timer = QTimer()
        timer.timeout.connect(lambda: None)
        timer.start(500)

        # 8. Execute
        sys.exit(app.exec())

    except Exception as e:
        logger.critical(f"Application failed to start: {e}", exc_info=True)
        sys.exit(1)

if __name__ == "__main__":
    main()
