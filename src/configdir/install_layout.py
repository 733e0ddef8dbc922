"""Installation roots of the running interpreter.

These play the part of build-time configuration: the interpreter prefix
(``core``), the library and script directories packages are installed into
(``site``) and the ones the OS distribution installs into (``vendor``).
"""

import logging
import os
import sys
import sysconfig
from functools import lru_cache

from pydantic import BaseModel, ConfigDict

from . import settings

logger = logging.getLogger(__name__)


class InstallLayout(BaseModel):
    """Install roots used by the core, site and vendor resolvers.

    Examples:
        >>> layout = InstallLayout(
        ...     prefix="/usr",
        ...     site_lib="/usr/local/lib/python3/site-packages",
        ...     site_bin="/usr/local/bin",
        ...     vendor_lib="/usr/lib/python3/dist-packages",
        ...     vendor_bin="/usr/bin",
        ... )
        >>> layout.site_stem is None
        True
    """

    model_config = ConfigDict(frozen=True)

    prefix: str
    site_lib: str
    site_bin: str
    site_stem: str | None = None  # Explicit override, skips stem derivation
    vendor_lib: str
    vendor_bin: str
    vendor_stem: str | None = None


def _vendor_paths() -> dict[str, str]:
    """Get the distribution's install paths for the base interpreter."""
    base_vars = {"base": sys.base_prefix, "platbase": sys.base_exec_prefix}
    if settings.VENDOR_SCHEME in sysconfig.get_scheme_names():
        return sysconfig.get_paths(scheme=settings.VENDOR_SCHEME, vars=base_vars)
    return sysconfig.get_paths(vars=base_vars)


def detect_install_layout() -> InstallLayout:
    """Read the install roots of the running interpreter from ``sysconfig``.

    Returns:
        A fresh :class:`InstallLayout`.
    """
    site_paths = sysconfig.get_paths()
    vendor_paths = _vendor_paths()

    layout = InstallLayout(
        prefix=sys.base_prefix,
        site_lib=site_paths["purelib"],
        site_bin=site_paths["scripts"],
        site_stem=os.environ.get(settings.SITE_STEM_ENV) or None,
        vendor_lib=vendor_paths["purelib"],
        vendor_bin=vendor_paths["scripts"],
        vendor_stem=os.environ.get(settings.VENDOR_STEM_ENV) or None,
    )
    logger.debug(f"Detected install layout: {layout.model_dump()}")
    return layout


@lru_cache(maxsize=1)
def get_install_layout() -> InstallLayout:
    """Get the install layout, detected once per process."""
    return detect_install_layout()
