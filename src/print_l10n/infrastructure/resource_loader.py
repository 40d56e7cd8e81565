import structlog
from pathlib import Path
from typing import List, Union
from ..domain.models import MessageTable
from ..domain.errors import LocalizationError, ResourceNotFoundError
from ..application.ftl_parser import FtlParser
from ..application.validator import validate_table

logger = structlog.get_logger()

DEFAULT_RESOURCES_DIR = Path(__file__).resolve().parent.parent / "resources"


class FtlResourceLoader:
    """
    Reads `<resources_dir>/<locale>/*.ftl` into validated MessageTables.
    """

    def __init__(self, resources_dir: Union[str, Path] = DEFAULT_RESOURCES_DIR):
        self._resources_dir = Path(resources_dir)

    @property
    def resources_dir(self) -> Path:
        return self._resources_dir

    def available_locales(self) -> List[str]:
        if not self._resources_dir.is_dir():
            return []
        return sorted(
            p.name for p in self._resources_dir.iterdir()
            if p.is_dir() and any(p.glob("*.ftl"))
        )

    def load(self, locale: str) -> MessageTable:
        """
        Parse every resource of `locale` into one table and check its references.

        Raises:
            ResourceNotFoundError: no `.ftl` files for the locale.
            LocalizationError: syntax errors, duplicates, dangling or cyclic references.
        """
        locale_dir = self._resources_dir / locale
        paths = sorted(locale_dir.glob("*.ftl")) if locale_dir.is_dir() else []
        if not paths:
            raise ResourceNotFoundError(locale, str(locale_dir))

        resources = [(path.name, path.read_text(encoding="utf-8")) for path in paths]
        table = FtlParser.parse_resources(resources, locale)

        errors = validate_table(table)
        if errors:
            logger.error("l10n_table_invalid", locale=locale, errors=errors)
            raise LocalizationError(f"Invalid table for '{locale}': " + "; ".join(errors))

        logger.info("l10n_table_loaded", locale=locale, resources=[p.name for p in paths], entries=len(table))
        return table
