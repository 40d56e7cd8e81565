import pytest
from unittest.mock import patch

from src.config import LocalizationConfig, Settings, BASE_DIR
from src.print_l10n.domain.models import MissingKeyPolicy
from src.print_l10n.infrastructure.resource_loader import DEFAULT_RESOURCES_DIR
from src.presentation.services.localizer_factory import FtlLocalizerFactory

def test_default_settings():
    settings = Settings()
    assert settings.app.name is None
    assert settings.l10n.default_locale == "en-US"
    assert settings.l10n.missing_key_policy is MissingKeyPolicy.RAISE
    assert settings.l10n.resources_path == BASE_DIR / "src/print_l10n/resources"

def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("APP_ENV", "production")
    monkeypatch.setenv("L10N__LOCALE", "zh-CN")
    monkeypatch.setenv("L10N__MISSING_KEY_POLICY", "show_identifier")

    settings = Settings()

    assert settings.env.value == "production"
    assert settings.l10n.locale == "zh-CN"
    assert settings.l10n.missing_key_policy is MissingKeyPolicy.SHOW_IDENTIFIER

def test_explicit_locale_wins():
    factory = FtlLocalizerFactory(LocalizationConfig(resources_dir=DEFAULT_RESOURCES_DIR, locale="en-US"))
    assert factory.create("zh-CN").locales == ["zh-CN", "en-US"]

def test_configured_locale_used_when_none_requested():
    factory = FtlLocalizerFactory(LocalizationConfig(resources_dir=DEFAULT_RESOURCES_DIR, locale="zh"))
    assert factory.create(None).locale == "zh-CN"

def test_system_locale_used_last():
    factory = FtlLocalizerFactory(LocalizationConfig(resources_dir=DEFAULT_RESOURCES_DIR))
    with patch("src.presentation.services.localizer_factory.detect_system_locale", return_value="zh_CN"):
        assert factory.create(None).locale == "zh-CN"
    with patch("src.presentation.services.localizer_factory.detect_system_locale", return_value=None):
        assert factory.create(None).locales == ["en-US"]

def test_policy_passed_to_localizer():
    config = LocalizationConfig(resources_dir=DEFAULT_RESOURCES_DIR, missing_key_policy="show_identifier")
    localizer = FtlLocalizerFactory(config).create("en-US")
    assert localizer.format("no-such-label") == "no-such-label"
