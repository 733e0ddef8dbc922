"""Configuration directory resolvers, one per category.

Each category maps to a pure function of the optional application name
(``cfg_base``) and the process environment. :func:`resolve` is the single
entry point that validates the call shape and dispatches; the public
``*_cfg_dir`` functions are thin wrappers around it.
"""

import logging
import os
import sys
from collections.abc import Callable
from enum import Enum

from . import settings
from .exceptions import InvalidArgumentError
from .install_layout import get_install_layout
from .locallib import get_install_base
from .paths import find_common_base_dir, split_path_list
from .platform import get_home_dir_provider, is_windows, path_module

logger = logging.getLogger(__name__)


class Category(str, Enum):
    """Configuration location conventions."""

    SYSTEM = "system"
    DESKTOP = "desktop"
    CORE = "core"
    SITE = "site"
    VENDOR = "vendor"
    LOCAL = "local"
    LOCALLIB = "locallib"
    SINGLEAPP = "singleapp"
    HERE = "here"
    USER = "user"
    XDG_CONFIG_HOME = "xdg_config_home"

    @property
    def function_name(self) -> str:
        """Name of the public function resolving this category."""
        if self is Category.XDG_CONFIG_HOME:
            return "xdg_config_home"
        return f"{self.value}_cfg_dir"

    @property
    def max_args(self) -> int:
        """Number of application names the category accepts."""
        return 0 if self is Category.SINGLEAPP else 1


def _app_parts(cfg_base: str | None) -> list[str]:
    return [cfg_base] if cfg_base else []


def _etc_below(stem: str, cfg_base: str | None) -> list[str]:
    return [path_module().join(stem, settings.ETC_DIR_NAME, *_app_parts(cfg_base))]


def _system_cfg_dir(cfg_base: str | None) -> list[str]:
    if is_windows():
        windir = (
            os.environ.get(settings.WINDIR_ENV)
            or os.environ.get(settings.SYSTEMROOT_ENV)
            or settings.DEFAULT_WINDOWS_DIR
        )
        return [windir]
    return [path_module().join(settings.SYSTEM_CFG_DIR, *_app_parts(cfg_base))]


def _desktop_cfg_dir(cfg_base: str | None) -> list[str]:
    pm = path_module()
    if is_windows():
        all_users = os.environ.get(settings.ALLUSERSPROFILE_ENV)
        appdata = os.environ.get(settings.APPDATA_ENV)
        if not all_users or not appdata:
            return []
        appdata_name = pm.basename(pm.normpath(appdata))
        return [pm.join(all_users, appdata_name, *_app_parts(cfg_base))]

    dirs = split_path_list(os.environ.get(settings.XDG_CONFIG_DIRS_ENV))
    if not dirs:
        dirs = [settings.XDG_DEFAULT_CFG_DIR]
    return [pm.join(base, *_app_parts(cfg_base)) for base in dirs]


def _core_cfg_dir(cfg_base: str | None) -> list[str]:
    return _etc_below(get_install_layout().prefix, cfg_base)


def _site_cfg_dir(cfg_base: str | None) -> list[str]:
    layout = get_install_layout()
    stem = layout.site_stem or find_common_base_dir(layout.site_lib, layout.site_bin)
    return _etc_below(stem, cfg_base)


def _vendor_cfg_dir(cfg_base: str | None) -> list[str]:
    layout = get_install_layout()
    stem = layout.vendor_stem or find_common_base_dir(
        layout.vendor_lib, layout.vendor_bin
    )
    return _etc_below(stem, cfg_base)


def _local_cfg_dir(cfg_base: str | None) -> list[str]:
    # No distribution independent location on Windows
    if is_windows():
        return []
    return [path_module().join(settings.LOCAL_CFG_DIR, *_app_parts(cfg_base))]


def _locallib_cfg_dir(cfg_base: str | None) -> list[str]:
    install_base = get_install_base()
    if install_base is None:
        return []
    return _etc_below(install_base, cfg_base)


def _singleapp_cfg_dir(cfg_base: str | None) -> list[str]:
    pm = path_module()
    program = sys.argv[0] if sys.argv and sys.argv[0] else sys.executable
    try:
        app_bin = pm.dirname(pm.abspath(program))
    except OSError:
        # Relative program path and the working directory is gone
        return []
    app_dir = pm.dirname(app_bin)
    return [pm.join(app_dir, settings.ETC_DIR_NAME)]


def _here_cfg_dir(cfg_base: str | None) -> list[str]:
    pm = path_module()
    try:
        here = pm.abspath(os.getcwd())
    except OSError:
        return []
    return [pm.join(here, *_app_parts(cfg_base), settings.ETC_DIR_NAME)]


def _user_cfg_dir(cfg_base: str | None) -> list[str]:
    home = get_home_dir_provider().my_home()
    if home is None:
        return []
    return [path_module().join(home, *("." + app for app in _app_parts(cfg_base)))]


def _xdg_config_home(cfg_base: str | None) -> list[str]:
    pm = path_module()
    dirs = split_path_list(os.environ.get(settings.XDG_CONFIG_HOME_ENV), pm.pathsep)
    if dirs:
        return [pm.join(base, *_app_parts(cfg_base)) for base in dirs]

    if is_windows():
        appdata = os.environ.get(settings.APPDATA_ENV)
        if not appdata:
            return []
        return [pm.join(appdata, *_app_parts(cfg_base))]

    home = get_home_dir_provider().my_home()
    if home is None:
        return []
    return [pm.join(home, settings.XDG_CONFIG_HOME_NAME, *_app_parts(cfg_base))]


RESOLVERS: dict[Category, Callable[[str | None], list[str]]] = {
    Category.SYSTEM: _system_cfg_dir,
    Category.DESKTOP: _desktop_cfg_dir,
    Category.CORE: _core_cfg_dir,
    Category.SITE: _site_cfg_dir,
    Category.VENDOR: _vendor_cfg_dir,
    Category.LOCAL: _local_cfg_dir,
    Category.LOCALLIB: _locallib_cfg_dir,
    Category.SINGLEAPP: _singleapp_cfg_dir,
    Category.HERE: _here_cfg_dir,
    Category.USER: _user_cfg_dir,
    Category.XDG_CONFIG_HOME: _xdg_config_home,
}


def check_arity(
    function_name: str, cfg_base: tuple[str, ...], max_args: int = 1
) -> str | None:
    """
    Validate the number of application names passed to a resolver.

    Args:
        function_name: Public name reported in the error.
        cfg_base: Positional arguments the caller passed.
        max_args: Number of arguments the function accepts.

    Returns:
        The application name, or None when none was given.

    Raises:
        InvalidArgumentError: If more than ``max_args`` arguments were given.
    """
    if len(cfg_base) > max_args:
        raise InvalidArgumentError(function_name, max_args, len(cfg_base))
    return cfg_base[0] if cfg_base else None


def resolve(
    category: Category | str, *cfg_base: str, caller: str | None = None
) -> list[str]:
    """
    Resolve the candidate directories of a single category.

    Candidates are not checked for existence.

    Args:
        category: Category or its name, e.g. ``"site"``.
        *cfg_base: Optional application name.
        caller: Function name reported on a bad call, defaults to the
            category's public function.

    Returns:
        Absolute directory paths in priority order.

    Raises:
        ValueError: If ``category`` names no category.
        InvalidArgumentError: If too many application names were given.
    """
    category = Category(category)
    app = check_arity(caller or category.function_name, cfg_base, category.max_args)
    dirs = RESOLVERS[category](app)
    logger.debug(f"{category.value} candidates for {app!r}: {dirs}")
    return dirs


def system_cfg_dir(*cfg_base: str) -> list[str]:
    """Directory holding operating system configuration.

    ``/etc`` on Unix-like systems, ``%windir%`` on Windows.
    """
    return resolve(Category.SYSTEM, *cfg_base)


def desktop_cfg_dir(*cfg_base: str) -> list[str]:
    """Directories holding desktop application configuration.

    The ``XDG_CONFIG_DIRS`` entries, ``/etc/xdg`` when unset. On Windows,
    ``%ALLUSERSPROFILE%`` joined with the base name of ``%APPDATA%``.
    """
    return resolve(Category.DESKTOP, *cfg_base)


def machine_cfg_dir(*cfg_base: str) -> list[str]:
    """Deprecated alias for :func:`desktop_cfg_dir`."""
    return resolve(Category.DESKTOP, *cfg_base, caller="machine_cfg_dir")


def xdg_config_dirs(*cfg_base: str) -> list[str]:
    """Alias for :func:`desktop_cfg_dir`."""
    return resolve(Category.DESKTOP, *cfg_base, caller="xdg_config_dirs")


def core_cfg_dir(*cfg_base: str) -> list[str]:
    """The ``etc`` directory below the interpreter install prefix."""
    return resolve(Category.CORE, *cfg_base)


def site_cfg_dir(*cfg_base: str) -> list[str]:
    """The ``etc`` directory below the site install stem.

    The stem is ``CONFIGDIR_SITE_STEM`` when set, otherwise the common
    base directory of the site library and script directories.
    """
    return resolve(Category.SITE, *cfg_base)


def vendor_cfg_dir(*cfg_base: str) -> list[str]:
    """The ``etc`` directory below the vendor (distribution) install stem."""
    return resolve(Category.VENDOR, *cfg_base)


def local_cfg_dir(*cfg_base: str) -> list[str]:
    """``/usr/local/etc`` for third party software; nothing on Windows."""
    return resolve(Category.LOCAL, *cfg_base)


def locallib_cfg_dir(*cfg_base: str) -> list[str]:
    """The ``etc`` directory below the active local::lib ``INSTALL_BASE``."""
    return resolve(Category.LOCALLIB, *cfg_base)


def singleapp_cfg_dir(*cfg_base: str) -> list[str]:
    """The ``etc`` directory beside the running program's ``bin`` directory.

    Takes no application name.
    """
    return resolve(Category.SINGLEAPP, *cfg_base)


def here_cfg_dir(*cfg_base: str) -> list[str]:
    """The ``etc`` directory below the current working directory."""
    return resolve(Category.HERE, *cfg_base)


def user_cfg_dir(*cfg_base: str) -> list[str]:
    """The user's home directory, or ``~/.<app>`` for an application."""
    return resolve(Category.USER, *cfg_base)


def xdg_config_home(*cfg_base: str) -> list[str]:
    """User configuration directories for desktop applications.

    The ``XDG_CONFIG_HOME`` entries when set; otherwise ``%APPDATA%`` on
    Windows and ``~/.config`` elsewhere.
    """
    return resolve(Category.XDG_CONFIG_HOME, *cfg_base)
