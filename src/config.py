from enum import Enum
from pathlib import Path
from functools import lru_cache
from typing import Optional
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.print_l10n.domain.models import MissingKeyPolicy

BASE_DIR = Path(__file__).resolve().parent.parent


#  Working modes
class AppEnvironment(str, Enum):
    """Working modes"""
    DEV = "development"
    PROD = "production"
    TEST = "testing"


#  Application config
class AppConfig(BaseModel):
    """Application config"""
    name: Optional[str] = Field(
        default=None,
        description="Window title override. Menus always use the -app-name term of the active locale"
    )
    version: str = Field(default="0.1.0", description="Application version")


#  Localization config
class LocalizationConfig(BaseModel):
    """Localization config"""
    resources_dir: Path = Field(
        default=Path("src/print_l10n/resources"),
        description="Directory holding one sub-directory of .ftl files per locale"
    )
    locale: Optional[str] = Field(default=None, description="Requested locale, detected from the system if unset")
    default_locale: str = Field(default="en-US", description="Locale used when a message is missing")
    missing_key_policy: MissingKeyPolicy = Field(
        default=MissingKeyPolicy.RAISE,
        description="raise: fail on unknown identifiers, show_identifier: display the identifier"
    )

    @property
    def resources_path(self) -> Path:
        """Absolute resources directory"""
        if self.resources_dir.is_absolute():
            return self.resources_dir
        return BASE_DIR / self.resources_dir


#  Main Settings
class Settings(BaseSettings):
    """
    Main Settings class.
    Reads configuration from .env file or environment variables.
    """
    model_config = SettingsConfigDict(
        env_file=BASE_DIR / ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra = "ignore"
    )

    env: AppEnvironment = Field(default=AppEnvironment.DEV, alias="APP_ENV")

    # Compose configs
    app: AppConfig = Field(default_factory=AppConfig)
    l10n: LocalizationConfig = Field(default_factory=LocalizationConfig)


@lru_cache
def get_settings() -> Settings:
    """
    Creates and returns a (cached) instance of settings.
    Used for Dependency Injection.
    """
    return Settings()
