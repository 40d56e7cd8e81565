from enum import Enum


class Command(str, Enum):
    """
    Commands issued by menu items.
    Application commands keep the `print.*` selector names.
    """
    # Application
    REBUILD_MENUS = "print.rebuild-menus"
    RELOAD_DIR = "print.reload-dir"
    SEARCH = "print.search"
    SEARCH_SCHOLAR = "print.search-scholar"
    SET_THEME = "print.set-theme"

    # Platform standard commands
    SHOW_ABOUT = "app.show-about"
    SHOW_PREFERENCES = "app.show-preferences"
    SHOW_SERVICES = "app.show-services"
    HIDE_APPLICATION = "app.hide-application"
    HIDE_OTHERS = "app.hide-others"
    SHOW_ALL = "app.show-all"
    QUIT_APP = "app.quit"

    NEW_FILE = "file.new"
    SHOW_OPEN_PANEL = "file.show-open-panel"
    SAVE_FILE = "file.save"
    SHOW_SAVE_PANEL = "file.show-save-panel"
    CLOSE_WINDOW = "file.close-window"

    UNDO = "edit.undo"
    REDO = "edit.redo"
    CUT = "edit.cut"
    COPY = "edit.copy"
    PASTE = "edit.paste"
    SELECT_ALL = "edit.select-all"
