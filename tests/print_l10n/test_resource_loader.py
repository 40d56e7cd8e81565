import pytest
from src.print_l10n.infrastructure.resource_loader import FtlResourceLoader
from src.print_l10n.domain.errors import DuplicateIdentifierError, FtlSyntaxError, LocalizationError, ResourceNotFoundError

def test_shipped_locales(loader):
    assert loader.available_locales() == ["en-US", "zh-CN"]

def test_merges_resources_of_a_locale(write_locale):
    write_locale("en-US", "-app-name = Print UI\n", name="terms.ftl")
    resources = write_locale("en-US", "about = About { -app-name }\n", name="menu.ftl")

    table = FtlResourceLoader(resources).load("en-US")

    assert table.locale == "en-US"
    assert len(table) == 2
    # menu.ftl sorts before terms.ftl, references resolve across files anyway
    assert list(table) == ["about", "-app-name"]

def test_dangling_reference_rejected_at_load(write_locale):
    resources = write_locale("en-US", "about = About { -app-name }\n")
    with pytest.raises(LocalizationError, match="-app-name"):
        FtlResourceLoader(resources).load("en-US")

def test_duplicates_across_files_rejected(write_locale):
    write_locale("en-US", "x = 1\n", name="a.ftl")
    resources = write_locale("en-US", "x = 2\n", name="b.ftl")
    with pytest.raises(DuplicateIdentifierError):
        FtlResourceLoader(resources).load("en-US")

def test_syntax_error_names_resource(write_locale):
    resources = write_locale("en-US", "ok = 1\nbroken\n", name="menu.ftl")
    with pytest.raises(FtlSyntaxError) as exc_info:
        FtlResourceLoader(resources).load("en-US")
    assert str(exc_info.value).startswith("menu.ftl:2:")

def test_unknown_locale(write_locale, tmp_path):
    write_locale("en-US", "x = 1\n")
    with pytest.raises(ResourceNotFoundError) as exc_info:
        FtlResourceLoader(tmp_path).load("fr-FR")
    assert exc_info.value.locale == "fr-FR"

def test_directories_without_ftl_are_ignored(write_locale, tmp_path):
    write_locale("en-US", "x = 1\n")
    (tmp_path / "empty").mkdir()
    assert FtlResourceLoader(tmp_path).available_locales() == ["en-US"]

def test_missing_resources_dir(tmp_path):
    assert FtlResourceLoader(tmp_path / "nope").available_locales() == []

def test_loading_twice_is_identical(loader):
    assert loader.load("zh-CN") == loader.load("zh-CN")

@pytest.mark.parametrize("source", [
    'blank = { "" }\n',
    '-app-name = { "" }\nabout = { -app-name }\n',
])
def test_empty_values_rejected_at_load(write_locale, source):
    resources = write_locale("en-US", source)
    with pytest.raises(FtlSyntaxError, match="Expected a value"):
        FtlResourceLoader(resources).load("en-US")
