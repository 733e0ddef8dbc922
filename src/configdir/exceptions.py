"""Custom exceptions for configdir.

All errors raised by this package derive from :class:`ConfigDirError`.
Missing environment variables or directories are not errors; resolvers
return empty results for those.
"""


class ConfigDirError(Exception):
    """Base exception for all configdir operations."""

    pass


class InvalidArgumentError(ConfigDirError, TypeError):
    """A resolver was called with more application names than it accepts.

    This is always a caller bug.
    """

    def __init__(self, function_name: str, max_args: int, given: int):
        self.function_name = function_name
        self.max_args = max_args
        self.given = given
        super().__init__(
            f"{function_name}({_signature(max_args)}), "
            f"not {function_name}({_signature(given, optional=False)}): "
            f"accepts at most {max_args} application name(s), got {given}"
        )


def _signature(count: int, optional: bool = True) -> str:
    if count == 0:
        return ""
    if optional:
        return "[cfg_base]"
    return ", ".join(["cfg_base"] * count)
