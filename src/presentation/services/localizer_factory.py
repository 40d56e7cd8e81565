import logging
from typing import Optional

from src.config import LocalizationConfig
from src.presentation.interfaces.protocols import ILocalizerFactory
from src.print_l10n.application.localizer import Localizer
from src.print_l10n.application.locale_negotiation import detect_system_locale
from src.print_l10n.domain.interfaces import IResourceLoader
from src.print_l10n.infrastructure.resource_loader import FtlResourceLoader

logger = logging.getLogger(__name__)

class FtlLocalizerFactory(ILocalizerFactory):
    """
    Builds localizers from .ftl resources according to LocalizationConfig.
    """

    def __init__(self, config: LocalizationConfig, loader: Optional[IResourceLoader] = None):
        self._config = config
        self._loader = loader or FtlResourceLoader(config.resources_path)

    def create(self, locale: Optional[str]) -> Localizer:
        # Explicit request > configured locale > system locale > default
        requested = locale or self._config.locale or detect_system_locale()
        logger.info(f"Creating localizer for requested locale: {requested}")
        return Localizer.for_locale(
            self._loader,
            requested,
            self._config.default_locale,
            self._config.missing_key_policy,
        )
