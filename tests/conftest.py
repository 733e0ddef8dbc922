"""Pytest configuration and fixtures for configdir tests."""

import pytest

from configdir import settings
from configdir.install_layout import InstallLayout, get_install_layout
from configdir.platform import get_home_dir_provider

AMBIENT_ENV_VARS = (
    settings.WINDIR_ENV,
    settings.SYSTEMROOT_ENV,
    settings.ALLUSERSPROFILE_ENV,
    settings.APPDATA_ENV,
    settings.XDG_CONFIG_DIRS_ENV,
    settings.XDG_CONFIG_HOME_ENV,
    settings.PERL_MM_OPT_ENV,
    settings.PERL_LOCAL_LIB_ROOT_ENV,
    settings.SITE_STEM_ENV,
    settings.VENDOR_STEM_ENV,
)


class FakeHomeDir:
    """Home directory provider returning a fixed path."""

    def __init__(self, home: str | None):
        self.home = home
        self.available = home is not None

    def my_home(self) -> str | None:
        return self.home


@pytest.fixture(autouse=True)
def reset_detection_caches():
    """Make every test start with fresh capability detection."""
    get_home_dir_provider.cache_clear()
    get_install_layout.cache_clear()
    yield
    get_home_dir_provider.cache_clear()
    get_install_layout.cache_clear()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every environment variable the resolvers read."""
    for name in AMBIENT_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def layout(monkeypatch):
    """Pin the install layout to known directories."""
    fixed = InstallLayout(
        prefix="/opt/python",
        site_lib="/opt/site/lib/python3.12/site-packages",
        site_bin="/opt/site/bin",
        vendor_lib="/usr/lib/python3/dist-packages",
        vendor_bin="/usr/bin",
    )
    monkeypatch.setattr("configdir.resolvers.get_install_layout", lambda: fixed)
    return fixed


@pytest.fixture
def home(monkeypatch):
    """Use /home/me as the home directory."""
    provider = FakeHomeDir("/home/me")
    monkeypatch.setattr("configdir.resolvers.get_home_dir_provider", lambda: provider)
    return provider


@pytest.fixture
def no_home(monkeypatch):
    """Simulate a process whose home directory cannot be determined."""
    provider = FakeHomeDir(None)
    monkeypatch.setattr("configdir.resolvers.get_home_dir_provider", lambda: provider)
    return provider


@pytest.fixture
def windows(monkeypatch):
    """Apply the Windows rules and path syntax regardless of the host."""
    monkeypatch.setattr("configdir.platform.is_windows", lambda: True)
    monkeypatch.setattr("configdir.resolvers.is_windows", lambda: True)
