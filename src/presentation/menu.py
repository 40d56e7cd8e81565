"""
Menu bar model for the main window.

The model is plain data: labels are resolved through the localizer when the
menu is built, and each item carries the Command it issues. The Qt view turns
it into a QMenuBar.
"""
import dataclasses
from typing import Any, List, Optional, Tuple, Union

from src.print_l10n.application.localizer import Localizer
from src.presentation.commands import Command
from src.presentation.state.app_state import AppState, Platform


@dataclasses.dataclass(frozen=True)
class MenuItem:
    label: str
    command: Command
    hotkey: Optional[str] = None
    payload: Any = None


@dataclasses.dataclass(frozen=True)
class Separator:
    pass


@dataclasses.dataclass(frozen=True)
class Menu:
    label: str
    entries: Tuple[Union["Menu", MenuItem, Separator], ...] = ()

    def submenus(self) -> List["Menu"]:
        return [e for e in self.entries if isinstance(e, Menu)]

    def items(self) -> List[MenuItem]:
        return [e for e in self.entries if isinstance(e, MenuItem)]

    def find(self, label: str) -> Optional["Menu"]:
        """First direct submenu with this label."""
        for menu in self.submenus():
            if menu.label == label:
                return menu
        return None


SEPARATOR = Separator()


def application_name(localizer: Localizer, override: Optional[str] = None) -> str:
    """
    Name for the window title. The menus name the app through the `-app-name`
    term, so the title follows it unless `override` is configured.
    """
    return override or localizer.term("-app-name")


def make_menu(state: AppState, localizer: Localizer, platform: Platform) -> Menu:
    """
    Build the whole menu bar. The returned root Menu has no label;
    its entries are the top-level menus.
    """
    menus = []
    if platform is Platform.MACOS:
        menus.append(application_menu(localizer))
    menus.append(file_menu(localizer, platform))
    menus.append(edit_menu(localizer))
    menus.append(view_menu(state, localizer))
    return Menu("", tuple(menus))


def application_menu(localizer: Localizer) -> Menu:
    L = localizer.format
    return Menu(L("macos-menu-application-menu"), (
        MenuItem(L("macos-menu-about-app"), Command.SHOW_ABOUT),
        SEPARATOR,
        MenuItem(L("macos-menu-preferences"), Command.SHOW_PREFERENCES, "Ctrl+,"),
        SEPARATOR,
        MenuItem(L("macos-menu-services"), Command.SHOW_SERVICES),
        SEPARATOR,
        MenuItem(L("macos-menu-hide-app"), Command.HIDE_APPLICATION, "Ctrl+H"),
        MenuItem(L("macos-menu-hide-others"), Command.HIDE_OTHERS, "Ctrl+Alt+H"),
        MenuItem(L("macos-menu-show-all"), Command.SHOW_ALL),
        SEPARATOR,
        MenuItem(L("macos-menu-quit-app"), Command.QUIT_APP, "Ctrl+Q"),
    ))


def file_menu(localizer: Localizer, platform: Platform) -> Menu:
    # Ctrl maps to Cmd on macOS
    L = localizer.format
    entries = [
        MenuItem(L("common-menu-file-new"), Command.NEW_FILE, "Ctrl+N"),
        MenuItem(L("common-menu-file-open"), Command.SHOW_OPEN_PANEL, "Ctrl+O", {"select_directories": True}),
        MenuItem(L("common-menu-file-save"), Command.SAVE_FILE, "Ctrl+S"),
    ]
    if platform is not Platform.MACOS:
        entries.append(MenuItem(L("common-menu-file-save-as"), Command.SHOW_SAVE_PANEL, "Ctrl+Shift+S"))
    entries.extend([
        SEPARATOR,
        MenuItem(L("common-menu-file-close"), Command.CLOSE_WINDOW, "Ctrl+W"),
    ])
    if platform is not Platform.MACOS:
        entries.extend([
            SEPARATOR,
            MenuItem(L("win-menu-file-exit"), Command.QUIT_APP),
        ])
    return Menu(L("common-menu-file-menu"), tuple(entries))


def edit_menu(localizer: Localizer) -> Menu:
    L = localizer.format
    return Menu(L("common-menu-edit-menu"), (
        MenuItem(L("common-menu-undo"), Command.UNDO, "Ctrl+Z"),
        MenuItem(L("common-menu-redo"), Command.REDO, "Ctrl+Shift+Z"),
        SEPARATOR,
        MenuItem(L("common-menu-cut"), Command.CUT, "Ctrl+X"),
        MenuItem(L("common-menu-copy"), Command.COPY, "Ctrl+C"),
        MenuItem(L("common-menu-paste"), Command.PASTE, "Ctrl+V"),
        MenuItem(L("common-menu-select-all"), Command.SELECT_ALL, "Ctrl+A"),
    ))


def view_menu(state: AppState, localizer: Localizer) -> Menu:
    return Menu(localizer.format("common-menu-view-menu"), (themes_menu(state, localizer),))


def themes_menu(state: AppState, localizer: Localizer) -> Menu:
    # Theme names come from the editor core and are shown as-is
    items = tuple(
        MenuItem(theme, Command.SET_THEME, payload=theme)
        for theme in state.themes
    )
    return Menu(localizer.format("common-menu-themes-menu"), items)


# Context menus are built when they are shown. Each label carries an English
# default so a table without the entry still yields a usable menu.

def project_context_menu(localizer: Localizer) -> Menu:
    return Menu("", (
        MenuItem(localizer.format("menu-item-reload", default="Reload"), Command.RELOAD_DIR),
    ))


def editor_context_menu(localizer: Localizer) -> Menu:
    """Items act on the editor's selected text, passed as the payload when triggered."""
    L = localizer.format
    return Menu("", (
        MenuItem(L("menu-item-search", default="Search"), Command.SEARCH),
        MenuItem(L("menu-item-google-scholar", default="Google Scholar"), Command.SEARCH_SCHOLAR),
    ))
