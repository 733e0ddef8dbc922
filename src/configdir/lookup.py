"""Umbrella lookup across every configuration category."""

import logging
import os

from .resolvers import RESOLVERS, Category, check_arity

logger = logging.getLogger(__name__)

# Priority order of the aggregated lookup. locallib is resolved on request only.
LOOKUP_ORDER = (
    Category.SYSTEM,
    Category.DESKTOP,
    Category.LOCAL,
    Category.SINGLEAPP,
    Category.CORE,
    Category.SITE,
    Category.VENDOR,
    Category.HERE,
    Category.USER,
    Category.XDG_CONFIG_HOME,
)


def is_readable_dir(path: str) -> bool:
    """
    Check whether ``path`` is an existing directory readable by this process.

    Paths that cannot be checked at all count as unusable.
    """
    try:
        return os.path.isdir(path) and os.access(path, os.R_OK)
    except (OSError, ValueError):
        return False


def candidate_dirs(*cfg_base: str) -> list[str]:
    """
    Collect the candidates of every category without checking the filesystem.

    The single-application directory is only included when no application
    name is given.

    Args:
        *cfg_base: Optional application name.

    Returns:
        Deduplicated candidates, first occurrence kept.

    Raises:
        InvalidArgumentError: If more than one application name was given.
    """
    app = check_arity("candidate_dirs", cfg_base)

    dirs: list[str] = []
    for category in LOOKUP_ORDER:
        if category is Category.SINGLEAPP:
            if not cfg_base:
                dirs.extend(RESOLVERS[category](None))
            continue
        dirs.extend(RESOLVERS[category](app))

    return list(dict.fromkeys(dirs))


def config_dirs(*cfg_base: str) -> list[str]:
    """
    Get every existing, readable configuration directory.

    Categories are searched in priority order: system, desktop, local,
    single application (only without an application name), core, site,
    vendor, here, user and XDG config home.

    Examples:
        >>> config_dirs()  # doctest: +SKIP
        ['/etc', '/etc/xdg', '/usr/local/etc', '/home/me', '/home/me/.config']
        >>> config_dirs("myapp")  # doctest: +SKIP
        ['/etc/myapp', '/home/me/.myapp']

    Args:
        *cfg_base: Optional application name.

    Returns:
        Directories in priority order. Empty when none exists.

    Raises:
        InvalidArgumentError: If more than one application name was given.
    """
    check_arity("config_dirs", cfg_base)
    candidates = candidate_dirs(*cfg_base)
    found = [path for path in candidates if is_readable_dir(path)]
    logger.debug(
        f"config_dirs{cfg_base!r}: kept {len(found)} of {len(candidates)} candidates"
    )
    return found
