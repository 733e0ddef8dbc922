"""configdir - locate platform configuration directories."""

from .exceptions import ConfigDirError, InvalidArgumentError
from .locallib import parse_install_base
from .lookup import candidate_dirs, config_dirs
from .paths import find_common_base_dir
from .resolvers import (
    Category,
    core_cfg_dir,
    desktop_cfg_dir,
    here_cfg_dir,
    local_cfg_dir,
    locallib_cfg_dir,
    machine_cfg_dir,
    resolve,
    singleapp_cfg_dir,
    site_cfg_dir,
    system_cfg_dir,
    user_cfg_dir,
    vendor_cfg_dir,
    xdg_config_dirs,
    xdg_config_home,
)
from .settings import VERSION as __version__

__all__ = [
    "Category",
    "ConfigDirError",
    "InvalidArgumentError",
    "__version__",
    "candidate_dirs",
    "config_dirs",
    "core_cfg_dir",
    "desktop_cfg_dir",
    "find_common_base_dir",
    "here_cfg_dir",
    "local_cfg_dir",
    "locallib_cfg_dir",
    "machine_cfg_dir",
    "parse_install_base",
    "resolve",
    "singleapp_cfg_dir",
    "site_cfg_dir",
    "system_cfg_dir",
    "user_cfg_dir",
    "vendor_cfg_dir",
    "xdg_config_dirs",
    "xdg_config_home",
]
