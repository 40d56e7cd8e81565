import dataclasses
import sys
from enum import Enum, auto
from typing import List


class Platform(Enum):
    """
    Menu conventions to follow.
    """
    MACOS = auto()         # Application menu, no Exit item
    WINDOWS = auto()       # Exit item in the File menu
    LINUX = auto()         # Same layout as Windows

    @classmethod
    def current(cls) -> "Platform":
        if sys.platform == "darwin":
            return cls.MACOS
        if sys.platform == "win32":
            return cls.WINDOWS
        return cls.LINUX


@dataclasses.dataclass
class AppState:
    """
    Application data the menus are built from.
    """
    title: str = ""
    theme_name: str = ""
    themes: List[str] = dataclasses.field(default_factory=list)
    locale: str = ""
