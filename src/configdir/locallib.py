"""Support for Perl local::lib style ``INSTALL_BASE`` settings."""

import os

from . import settings

INSTALL_BASE_KEY = "INSTALL_BASE="
_QUOTES = "\"'"


def parse_install_base(value: str | None) -> str | None:
    """
    Extract the ``INSTALL_BASE`` path from a MakeMaker options string.

    ``PERL_MM_OPT`` typically looks like ``INSTALL_BASE=/home/me/perl5``.
    Only the last ``INSTALL_BASE=`` assignment counts and it runs to the end
    of the string.

    Edge cases:
        - ``None``, empty string or no ``INSTALL_BASE=`` key: ``None``.
        - ``INSTALL_BASE="/x"`` or ``INSTALL_BASE='/x'``: ``/x``.
        - ``INSTALL_BASE=/x"`` (dangling trailing quote): ``/x``.
        - A value with a quote anywhere else, or an empty value: ``None``.

    Args:
        value: Raw options string.

    Returns:
        The install base path, or None if none can be extracted.
    """
    if not value:
        return None

    index = value.rfind(INSTALL_BASE_KEY)
    if index < 0:
        return None

    base = value[index + len(INSTALL_BASE_KEY) :]
    if len(base) >= 2 and base[0] in _QUOTES and base[-1] == base[0]:
        base = base[1:-1]
    elif base[-1:] and base[-1] in _QUOTES:
        base = base[:-1]

    if not base or any(quote in base for quote in _QUOTES):
        return None
    return base


def is_local_lib_active() -> bool:
    """Check whether a local::lib environment is active in this process."""
    return bool(os.environ.get(settings.PERL_LOCAL_LIB_ROOT_ENV))


def get_install_base() -> str | None:
    """Get the active local::lib install base, if any."""
    if not is_local_lib_active():
        return None
    return parse_install_base(os.environ.get(settings.PERL_MM_OPT_ENV))
