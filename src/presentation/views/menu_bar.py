from typing import Any, Callable, Dict, Tuple

from PySide6.QtGui import QAction, QActionGroup, QKeySequence
from PySide6.QtWidgets import QMenu, QMenuBar, QWidget

from src.presentation.commands import Command
from src.presentation.menu import Menu, MenuItem, Separator
from src.presentation.viewmodels.menu_vm import MenuViewModel

# Qt moves actions with these roles into the macOS application menu
_MENU_ROLES = {
    Command.SHOW_ABOUT: QAction.MenuRole.AboutRole,
    Command.SHOW_PREFERENCES: QAction.MenuRole.PreferencesRole,
    Command.QUIT_APP: QAction.MenuRole.QuitRole,
}


class MenuBarView:
    """
    Renders the view model's Menu into a QMenuBar and re-renders it
    every time the view model rebuilds the menu.
    """

    def __init__(self, menu_bar: QMenuBar, view_model: MenuViewModel):
        self._menu_bar = menu_bar
        self._vm = view_model
        self._menus: Dict[Tuple[str, ...], QMenu] = {}
        self._vm.menu_changed.connect(self.render)

        if self._vm.menu is not None:
            self.render(self._vm.menu)

    @property
    def menu_bar(self) -> QMenuBar:
        return self._menu_bar

    def qmenu(self, *path: str) -> QMenu:
        """Rendered QMenu by label path, e.g. qmenu("View", "Themes")."""
        return self._menus[path]

    def render(self, menu: Menu) -> None:
        self._menu_bar.clear()
        self._menus = {}
        for entry in menu.submenus():
            self._populate(self._menu_bar.addMenu(entry.label), entry, (entry.label,))

    def _populate(self, qmenu: QMenu, menu: Menu, path: Tuple[str, ...]) -> None:
        self._menus[path] = qmenu
        theme_group = None
        for entry in menu.entries:
            if isinstance(entry, Separator):
                qmenu.addSeparator()
            elif isinstance(entry, Menu):
                self._populate(qmenu.addMenu(entry.label), entry, path + (entry.label,))
            else:
                action = self._create_action(entry, qmenu)
                if entry.command is Command.SET_THEME:
                    if theme_group is None:
                        theme_group = QActionGroup(qmenu)
                        theme_group.setExclusive(True)
                    action.setCheckable(True)
                    action.setChecked(entry.payload == self._vm.state.theme_name)
                    theme_group.addAction(action)
                qmenu.addAction(action)

    def _create_action(self, item: MenuItem, parent: QMenu) -> QAction:
        action = QAction(item.label, parent)
        if item.hotkey:
            action.setShortcut(QKeySequence(item.hotkey))
        action.setMenuRole(_MENU_ROLES.get(item.command, QAction.MenuRole.NoRole))
        action.triggered.connect(lambda checked=False, i=item: self._vm.trigger(i.command, i.payload))
        return action


def build_context_menu(menu: Menu, parent: QWidget, on_trigger: Callable[[MenuItem], Any]) -> QMenu:
    """
    Popup QMenu for a context Menu. `on_trigger` receives the activated item,
    so the caller can attach the payload known only at that moment.
    """
    qmenu = QMenu(parent)
    for entry in menu.entries:
        if isinstance(entry, Separator):
            qmenu.addSeparator()
        elif isinstance(entry, MenuItem):
            action = qmenu.addAction(entry.label)
            action.triggered.connect(lambda checked=False, i=entry: on_trigger(i))
    return qmenu
