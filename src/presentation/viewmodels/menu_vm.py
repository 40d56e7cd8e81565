import logging
from PySide6.QtCore import QObject, Signal, Slot
from typing import Any, List, Optional

from src.print_l10n.application.localizer import Localizer
from src.print_l10n.domain.errors import LocalizationError
from src.presentation.commands import Command
from src.presentation.interfaces.protocols import ICommandHandler, ILocalizerFactory
from src.presentation.menu import Menu, editor_context_menu, make_menu, project_context_menu
from src.presentation.resources.strings import UIStrings
from src.presentation.state.app_state import AppState, Platform

logger = logging.getLogger(__name__)

class MenuViewModel(QObject):
    """
    ViewModel for the menu bar.
    Owns the localizer and the AppState the menu is built from, and forwards
    triggered menu commands to the command handler.
    """

    # Signals to notify the View
    menu_changed = Signal(object)
    error_occurred = Signal(str)

    def __init__(
        self,
        localizer_factory: ILocalizerFactory,
        command_handler: ICommandHandler,
        state: Optional[AppState] = None,
        platform: Optional[Platform] = None,
    ):
        super().__init__()
        self._localizer_factory = localizer_factory
        self._command_handler = command_handler
        self._state = state or AppState()
        self._platform = platform or Platform.current()

        self._localizer: Optional[Localizer] = None
        self._menu: Optional[Menu] = None

    @property
    def state(self) -> AppState:
        return self._state

    @property
    def menu(self) -> Optional[Menu]:
        return self._menu

    @property
    def localizer(self) -> Optional[Localizer]:
        return self._localizer

    def initialize(self) -> None:
        """Loads the localizer for the state's locale and builds the first menu."""
        self.set_locale(self._state.locale or None)

    @Slot(str)
    def set_locale(self, locale: Optional[str]):
        """
        Switches to another locale and rebuilds the menu.
        Keeps the current localizer if the new one cannot be loaded.
        """
        try:
            localizer = self._localizer_factory.create(locale or None)
        except LocalizationError as e:
            logger.error(f"Failed to load translations for {locale}: {e}")
            self.error_occurred.emit(UIStrings.ERR_LOAD_TRANSLATIONS.format(locale, e))
            return

        self._localizer = localizer
        self._state.locale = localizer.locale
        self.rebuild()

    @Slot(list)
    def set_themes(self, themes: List[str]):
        """
        Replaces the theme list. The menu is only rebuilt when the number
        of themes changes.
        """
        changed = len(themes) != len(self._state.themes)
        self._state.themes = list(themes)
        if changed:
            self.rebuild()

    @Slot()
    def rebuild(self):
        if self._localizer is None:
            return

        try:
            self._menu = make_menu(self._state, self._localizer, self._platform)
        except LocalizationError as e:
            logger.error(f"Menu rebuild failed: {e}")
            self.error_occurred.emit(UIStrings.ERR_GENERIC.format(str(e)))
            return

        self.menu_changed.emit(self._menu)

    def project_context_menu(self) -> Optional[Menu]:
        """Menu for the project panel, built from the current localizer."""
        if self._localizer is None:
            return None
        return project_context_menu(self._localizer)

    def editor_context_menu(self) -> Optional[Menu]:
        if self._localizer is None:
            return None
        return editor_context_menu(self._localizer)

    def trigger(self, command: Command, payload: Any = None):
        """
        Handles a menu item activation coming from the View.
        """
        if command is Command.REBUILD_MENUS:
            self.rebuild()
            return

        if command is Command.SET_THEME:
            self._state.theme_name = payload

        try:
            self._command_handler.execute(command, payload)
        except Exception as e:
            logger.error(f"Command {command.value} failed: {e}", exc_info=True)
            self.error_occurred.emit(UIStrings.ERR_COMMAND_FAILED.format(command.value, str(e)))
