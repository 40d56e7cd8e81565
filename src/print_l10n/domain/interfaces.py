from typing import List, Protocol
from .models import MessageTable


class IResourceLoader(Protocol):
    """
    Interface for reading message tables from storage.
    Read-Only (ISP).
    """
    def available_locales(self) -> List[str]:
        ...

    def load(self, locale: str) -> MessageTable:
        """
        Load, merge and validate every resource of a locale.
        """
        ...
