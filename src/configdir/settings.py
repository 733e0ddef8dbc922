"""Simple settings for configdir."""

from importlib.metadata import PackageNotFoundError, version


def get_version():
    """Get the current version of configdir."""
    try:
        return version("configdir")
    except PackageNotFoundError:
        # Fallback for development when package isn't installed
        return "dev"


# Application metadata
APP_NAME = "configdir"
VERSION = get_version()

# Environment variables read by the resolvers
WINDIR_ENV = "windir"
SYSTEMROOT_ENV = "SystemRoot"  # Used when windir is missing
ALLUSERSPROFILE_ENV = "ALLUSERSPROFILE"
APPDATA_ENV = "APPDATA"
XDG_CONFIG_DIRS_ENV = "XDG_CONFIG_DIRS"
XDG_CONFIG_HOME_ENV = "XDG_CONFIG_HOME"
PERL_MM_OPT_ENV = "PERL_MM_OPT"
PERL_LOCAL_LIB_ROOT_ENV = "PERL_LOCAL_LIB_ROOT"  # Set by an active local::lib

# Explicit install stem overrides
SITE_STEM_ENV = "CONFIGDIR_SITE_STEM"
VENDOR_STEM_ENV = "CONFIGDIR_VENDOR_STEM"

# Default locations
SYSTEM_CFG_DIR = "/etc"
XDG_DEFAULT_CFG_DIR = "/etc/xdg"
LOCAL_CFG_DIR = "/usr/local/etc"
DEFAULT_WINDOWS_DIR = "C:\\Windows"
ETC_DIR_NAME = "etc"
XDG_CONFIG_HOME_NAME = ".config"

# Scheme used by Debian-patched interpreters for distribution packages
VENDOR_SCHEME = "deb_system"
