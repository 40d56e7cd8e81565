import pytest
from unittest.mock import MagicMock
from src.print_l10n.application.ftl_parser import FtlParser
from src.print_l10n.application.localizer import Localizer
from src.print_l10n.application.locale_negotiation import fallback_chain, negotiate_locale, normalize_locale
from src.print_l10n.domain.interfaces import IResourceLoader
from src.print_l10n.domain.models import MissingKeyPolicy
from src.print_l10n.domain.errors import MissingKeyError

@pytest.fixture
def localizer(zh_table, en_table):
    return Localizer([zh_table, en_table])

def test_locale_is_most_specific(localizer):
    assert localizer.locale == "zh-CN"
    assert localizer.locales == ["zh-CN", "en-US"]

def test_format_uses_first_table(localizer):
    assert localizer.format("common-menu-file-menu") == "文件"
    assert localizer.format("macos-menu-about-app") == "关于 Print UI"

def test_falls_back_to_default_locale(localizer):
    assert localizer.has_message("common-menu-select-all")
    assert localizer.format("common-menu-select-all") == "Select All"

def test_missing_everywhere_raises(localizer):
    with pytest.raises(MissingKeyError) as exc_info:
        localizer.format("common-menu-file-print")
    assert exc_info.value.locales == ("zh-CN", "en-US")

def test_show_identifier_policy_returns_identifier(zh_table):
    localizer = Localizer([zh_table], MissingKeyPolicy.SHOW_IDENTIFIER)
    assert localizer.format("common-menu-file-print") == "common-menu-file-print"

def test_terms_not_reachable_through_format(localizer):
    assert not localizer.has_message("-app-name")
    with pytest.raises(MissingKeyError):
        localizer.format("-app-name")

def test_identifiers_cover_the_chain(localizer, zh_table):
    identifiers = localizer.identifiers()
    assert identifiers[:len(list(zh_table.messages()))] == [e.identifier for e in zh_table.messages()]
    assert "common-menu-select-all" in identifiers
    assert "-app-name" not in identifiers

def test_every_identifier_resolves_non_empty(localizer):
    for identifier in localizer.identifiers():
        assert localizer.format(identifier)

def test_reloading_gives_identical_output(loader):
    first = Localizer([loader.load("zh-CN"), loader.load("en-US")])
    second = Localizer([loader.load("zh-CN"), loader.load("en-US")])
    assert {i: first.format(i) for i in first.identifiers()} == {i: second.format(i) for i in second.identifiers()}

def test_requires_a_table():
    with pytest.raises(ValueError):
        Localizer([])

def test_for_locale_negotiates_and_loads_chain():
    loader = MagicMock(spec=IResourceLoader)
    loader.available_locales.return_value = ["en-US", "zh-CN"]
    loader.load.side_effect = lambda code: FtlParser.parse(f"hello = hello {code}", code)

    localizer = Localizer.for_locale(loader, "zh_CN.UTF-8", "en-US")

    assert localizer.locales == ["zh-CN", "en-US"]
    assert localizer.format("hello") == "hello zh-CN"

def test_for_locale_default_only_loads_once():
    loader = MagicMock(spec=IResourceLoader)
    loader.available_locales.return_value = ["en-US", "zh-CN"]
    loader.load.side_effect = lambda code: FtlParser.parse("hello = hi", code)

    localizer = Localizer.for_locale(loader, "fr-FR", "en-US")

    assert localizer.locales == ["en-US"]
    loader.load.assert_called_once_with("en-US")

@pytest.mark.parametrize("requested, expected", [
    ("zh-CN", "zh-CN"),
    ("zh_cn", "zh-CN"),
    ("zh_CN.UTF-8", "zh-CN"),
    ("zh", "zh-CN"),
    ("zh-TW", "zh-CN"),
    ("en", "en-US"),
    ("de-DE", "en-US"),
    (None, "en-US"),
    ("", "en-US"),
])
def test_negotiate_locale(requested, expected):
    assert negotiate_locale(requested, ["en-US", "zh-CN"], "en-US") == expected

def test_fallback_chain():
    assert fallback_chain("zh-CN", "en-US") == ["zh-CN", "en-US"]
    assert fallback_chain("en-US", "en-US") == ["en-US"]
    assert normalize_locale("en_US@euro") == "en-us"

def test_default_used_before_policy(zh_table):
    for policy in MissingKeyPolicy:
        localizer = Localizer([zh_table], policy)
        assert localizer.format("menu-item-print", default="Print") == "Print"

def test_default_ignored_when_message_exists(localizer):
    assert localizer.format("menu-item-reload", default="Reload") == "重新加载"
    assert localizer.format("common-menu-select-all", default="Everything") == "Select All"

def test_default_is_not_cached(zh_table):
    localizer = Localizer([zh_table])
    assert localizer.format("menu-item-print", default="Print") == "Print"
    with pytest.raises(MissingKeyError):
        localizer.format("menu-item-print")

def test_entry_comes_from_supplying_table(localizer):
    assert localizer.entry("common-menu-file-menu").group == "文件菜单"
    assert localizer.entry("common-menu-select-all").group == "Edit menu"
    assert localizer.entry("-app-name") is None
    assert localizer.entry("nope") is None

def test_term_resolves_along_chain(localizer):
    assert localizer.term("-app-name") == "Print UI"

    brand = FtlParser.parse("-brand = Print\n-app-name = { -brand } UI\nabout = About { -app-name }", "en-US")
    assert Localizer([brand]).term("-app-name") == "Print UI"

    with pytest.raises(MissingKeyError):
        localizer.term("-no-such-term")
