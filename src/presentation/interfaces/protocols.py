from typing import Any, Optional, Protocol

from src.print_l10n.application.localizer import Localizer
from src.presentation.commands import Command

class ILocalizerFactory(Protocol):
    """
    Interface for building a Localizer for a locale.
    Decouples the Presentation Layer from how tables are stored.
    """
    def create(self, locale: Optional[str]) -> Localizer:
        """
        Builds a localizer for the requested locale.

        Args:
            locale: Requested locale code, or None for the configured default.

        Returns:
            Localizer: Falls back to the default locale for missing messages.

        Raises:
            LocalizationError: If the tables cannot be loaded.
        """
        ...

class ICommandHandler(Protocol):
    """
    Interface for executing menu commands (open, save, set theme...).
    """
    def execute(self, command: Command, payload: Any = None) -> None:
        """Runs the command. Payload is command specific (e.g. theme name)."""
        ...
