"""Platform detection and home directory lookup."""

import logging
import ntpath
import os
import posixpath
from functools import lru_cache
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from types import ModuleType
from typing import Protocol

logger = logging.getLogger(__name__)


def is_windows() -> bool:
    """
    Detect if running on a Windows-like system.

    Returns:
        True on Windows, False on Unix-like systems.
    """
    return os.name == "nt"


def path_module() -> ModuleType:
    """
    Get the path module matching the detected platform.

    Resolvers build paths through this instead of ``os.path`` so the
    Windows rules can be exercised on any host.

    Returns:
        ``ntpath`` on Windows, ``posixpath`` otherwise.
    """
    return ntpath if is_windows() else posixpath


def pure_path_class() -> type[PurePath]:
    """
    Get the pure path flavour matching the detected platform.

    Returns:
        ``PureWindowsPath`` on Windows, ``PurePosixPath`` otherwise.
    """
    return PureWindowsPath if is_windows() else PurePosixPath


class HomeDirProvider(Protocol):
    """Minimal interface for looking up the current user's home directory."""

    available: bool

    def my_home(self) -> str | None:
        """Return the home directory, or None when it is unknown."""


class ExpanduserHomeDir:
    """Home directory provider backed by ``os.path.expanduser``."""

    available = True

    def my_home(self) -> str | None:
        home = os.path.expanduser("~")
        if home == "~" or not os.path.isabs(home):
            return None
        return home


class NullHomeDir:
    """Provider used when the home directory cannot be determined."""

    available = False

    def my_home(self) -> str | None:
        return None


@lru_cache(maxsize=1)
def get_home_dir_provider() -> HomeDirProvider:
    """
    Select the home directory provider for this process.

    The check runs once; later calls return the same provider.

    Returns:
        An :class:`ExpanduserHomeDir` when the platform can resolve ``~``,
        otherwise a :class:`NullHomeDir`.
    """
    provider = ExpanduserHomeDir()
    if provider.my_home() is None:
        logger.debug("Home directory cannot be resolved, user lookups disabled")
        return NullHomeDir()
    logger.debug("Using expanduser home directory provider")
    return provider
