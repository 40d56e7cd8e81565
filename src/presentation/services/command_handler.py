import logging
from typing import Any, Callable, Optional
from urllib.parse import quote_plus

from PySide6.QtCore import QUrl
from PySide6.QtGui import QDesktopServices
from PySide6.QtWidgets import QApplication, QFileDialog, QWidget

from src.presentation.commands import Command
from src.presentation.interfaces.protocols import ICommandHandler

logger = logging.getLogger(__name__)

# Slots Qt text widgets provide for the Edit menu
_EDIT_SLOTS = {
    Command.UNDO: "undo",
    Command.REDO: "redo",
    Command.CUT: "cut",
    Command.COPY: "copy",
    Command.PASTE: "paste",
    Command.SELECT_ALL: "selectAll",
}

SEARCH_URLS = {
    Command.SEARCH: "https://www.google.com/search?q={}",
    Command.SEARCH_SCHOLAR: "https://scholar.google.com/scholar?q={}",
}

class WindowCommandHandler(ICommandHandler):
    """
    Executes menu commands against the main window.
    Commands without a handler are logged and ignored.
    """

    def __init__(self, window: Optional[QWidget] = None, on_open_dir: Optional[Callable[[str], None]] = None):
        self._window = window
        self._on_open_dir = on_open_dir
        self._current_dir: Optional[str] = None

    @property
    def current_dir(self) -> Optional[str]:
        return self._current_dir

    def attach_window(self, window: QWidget, on_open_dir: Optional[Callable[[str], None]] = None) -> None:
        """The window is created after the ViewModel that owns this handler."""
        self._window = window
        if on_open_dir is not None:
            self._on_open_dir = on_open_dir

    def execute(self, command: Command, payload: Any = None) -> None:
        if command in _EDIT_SLOTS:
            self._forward_to_focus(_EDIT_SLOTS[command])
        elif command in SEARCH_URLS:
            self._search(SEARCH_URLS[command], payload)
        elif command is Command.SHOW_OPEN_PANEL:
            self._open_directory()
        elif command is Command.RELOAD_DIR:
            self._reload_directory()
        elif command is Command.CLOSE_WINDOW:
            self._window.close()
        elif command is Command.QUIT_APP:
            QApplication.quit()
        elif command is Command.HIDE_APPLICATION:
            self._window.showMinimized()
        elif command is Command.SET_THEME:
            logger.info(f"Theme selected: {payload}")
        else:
            logger.debug(f"No handler for command {command.value}")

    def _forward_to_focus(self, slot: str) -> None:
        widget = QApplication.focusWidget()
        if widget is not None and hasattr(widget, slot):
            getattr(widget, slot)()

    def _search(self, template: str, text: Optional[str]) -> None:
        query = (text or "").strip()
        if not query:
            logger.debug("Search requested without selected text")
            return
        QDesktopServices.openUrl(QUrl(template.format(quote_plus(query))))

    def _open_directory(self) -> None:
        path = QFileDialog.getExistingDirectory(self._window)
        if not path:
            return
        logger.info(f"Open directory: {path}")
        self._set_directory(path)

    def _reload_directory(self) -> None:
        if self._current_dir is None:
            logger.debug("Reload requested before a directory was opened")
            return
        logger.info(f"Reload directory: {self._current_dir}")
        self._set_directory(self._current_dir)

    def _set_directory(self, path: str) -> None:
        self._current_dir = path
        if self._on_open_dir:
            self._on_open_dir(path)
