import os
import pytest

from src.print_l10n.infrastructure.logging import setup_logging
from src.print_l10n.infrastructure.resource_loader import DEFAULT_RESOURCES_DIR, FtlResourceLoader

# Qt widgets are created without a display in tests
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session", autouse=True)
def configure_logging():
    # Route structlog through stdlib logging so CLI stdout stays clean
    setup_logging("testing")

@pytest.fixture
def loader():
    return FtlResourceLoader(DEFAULT_RESOURCES_DIR)

@pytest.fixture
def zh_table(loader):
    return loader.load("zh-CN")

@pytest.fixture
def en_table(loader):
    return loader.load("en-US")

@pytest.fixture
def write_locale(tmp_path):
    """Writes `<tmp>/<locale>/<name>` and returns the resources dir."""
    def _write(locale, source, name="menu.ftl"):
        locale_dir = tmp_path / locale
        locale_dir.mkdir(exist_ok=True)
        (locale_dir / name).write_text(source, encoding="utf-8")
        return tmp_path
    return _write

@pytest.fixture(scope="session")
def qapp():
    widgets = pytest.importorskip("PySide6.QtWidgets")
    app = widgets.QApplication.instance() or widgets.QApplication([])
    yield app
