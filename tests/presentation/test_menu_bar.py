import pytest
from unittest.mock import MagicMock

pytest.importorskip("PySide6")

from PySide6.QtGui import QAction
from PySide6.QtWidgets import QMenuBar, QWidget

from src.print_l10n.application.localizer import Localizer
from src.presentation.interfaces.protocols import ICommandHandler, ILocalizerFactory
from src.presentation.state.app_state import AppState, Platform
from src.presentation.viewmodels.menu_vm import MenuViewModel
from src.presentation.commands import Command
from src.presentation.menu import MenuItem
from src.presentation.views.menu_bar import MenuBarView, build_context_menu

@pytest.fixture
def view_model(qapp, zh_table, en_table):
    factory = MagicMock(spec=ILocalizerFactory)
    factory.create.return_value = Localizer([zh_table, en_table])
    vm = MenuViewModel(factory, MagicMock(spec=ICommandHandler), AppState(themes=["dark", "light"], theme_name="light"), Platform.MACOS)
    vm.initialize()
    return vm

@pytest.fixture
def view(qapp, view_model):
    return MenuBarView(QMenuBar(), view_model)

def top_level_titles(menu_bar):
    return [a.text() for a in menu_bar.actions()]

def test_renders_localized_menus(view):
    assert top_level_titles(view.menu_bar) == ["应用", "文件", "编辑", "View"]
    assert view.qmenu("View", "Themes").title() == "Themes"

def test_actions_carry_shortcuts_and_separators(view):
    actions = view.qmenu("文件").actions()

    assert [a.text() for a in actions if not a.isSeparator()] == ["新建", "打开…", "Save", "关闭"]
    assert any(a.isSeparator() for a in actions)
    assert actions[1].shortcut().toString() == "Ctrl+O"

def test_about_and_quit_get_application_roles(view):
    actions = view.qmenu("应用").actions()
    assert actions[0].menuRole() == QAction.MenuRole.AboutRole
    assert actions[-1].menuRole() == QAction.MenuRole.QuitRole

def test_current_theme_is_checked(view):
    themes = view.qmenu("View", "Themes").actions()

    assert [a.text() for a in themes] == ["dark", "light"]
    assert [a.isChecked() for a in themes] == [False, True]

def test_triggering_action_reaches_view_model(view, view_model):
    themes = view.qmenu("View", "Themes").actions()

    themes[0].trigger()

    assert view_model.state.theme_name == "dark"

def test_rerenders_when_theme_count_changes(view, view_model):
    view_model.set_themes(["dark", "light", "mono"])
    themes = view.qmenu("View", "Themes").actions()
    assert [a.text() for a in themes] == ["dark", "light", "mono"]

def test_context_menu_passes_activated_item(qapp, view_model):
    triggered = []
    parent = QWidget()
    qmenu = build_context_menu(view_model.editor_context_menu(), parent, triggered.append)
    actions = qmenu.actions()

    assert [a.text() for a in actions] == ["搜索", "谷歌学术"]
    actions[1].trigger()
    assert triggered == [MenuItem("谷歌学术", Command.SEARCH_SCHOLAR)]
