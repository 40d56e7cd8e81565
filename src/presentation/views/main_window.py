from PySide6.QtCore import QDir, QPoint, Qt
from PySide6.QtWidgets import QFileSystemModel, QMainWindow, QMessageBox, QPlainTextEdit, QSplitter, QTreeView

from src.presentation.resources.strings import UIStrings
from src.presentation.viewmodels.menu_vm import MenuViewModel
from src.presentation.views.menu_bar import MenuBarView, build_context_menu


class MainWindow(QMainWindow):
    """
    Editor window: a project tree, a text area and the localized menu bar.
    Both panels show localized context menus on right click.
    """

    def __init__(self, title: str, view_model: MenuViewModel):
        super().__init__()
        self._vm = view_model

        self.setWindowTitle(title)
        self.resize(1024, 768)
        self.setMinimumSize(1024, 768)

        self.project_model = QFileSystemModel(self)
        self.project_model.setFilter(QDir.Filter.AllEntries | QDir.Filter.NoDotAndDotDot)

        self.project_tree = QTreeView(self)
        self.project_tree.setModel(self.project_model)
        self.project_tree.setHeaderHidden(True)
        for column in range(1, self.project_model.columnCount()):
            self.project_tree.hideColumn(column)
        self.project_tree.setContextMenuPolicy(Qt.ContextMenuPolicy.CustomContextMenu)
        self.project_tree.customContextMenuRequested.connect(self._show_project_menu)

        self.editor = QPlainTextEdit(self)
        self.editor.setContextMenuPolicy(Qt.ContextMenuPolicy.CustomContextMenu)
        self.editor.customContextMenuRequested.connect(self._show_editor_menu)

        splitter = QSplitter(self)
        splitter.addWidget(self.project_tree)
        splitter.addWidget(self.editor)
        splitter.setStretchFactor(1, 1)
        self.setCentralWidget(splitter)

        self.menu_bar_view = MenuBarView(self.menuBar(), view_model)
        self._vm.error_occurred.connect(self.show_error)

    def set_project_dir(self, path: str) -> None:
        """Shows `path` in the project tree. Called again on reload to re-read it."""
        self.project_model.setRootPath("")
        self.project_tree.setRootIndex(self.project_model.setRootPath(path))

    def show_error(self, message: str) -> None:
        QMessageBox.critical(self, UIStrings.TITLE_ERROR, message)

    def _show_project_menu(self, pos: QPoint) -> None:
        menu = self._vm.project_context_menu()
        if menu is None:
            return
        qmenu = build_context_menu(menu, self, lambda item: self._vm.trigger(item.command, item.payload))
        qmenu.exec(self.project_tree.viewport().mapToGlobal(pos))

    def _show_editor_menu(self, pos: QPoint) -> None:
        menu = self._vm.editor_context_menu()
        if menu is None:
            return
        qmenu = build_context_menu(
            menu, self, lambda item: self._vm.trigger(item.command, self.selected_text())
        )
        qmenu.exec(self.editor.viewport().mapToGlobal(pos))

    def selected_text(self) -> str:
        # Qt uses U+2029 as the paragraph separator in selections
        return self.editor.textCursor().selectedText().replace("\u2029", "\n")
