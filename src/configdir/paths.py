"""Path utilities shared by the directory resolvers."""

from .platform import path_module, pure_path_class


def split_dirs(path: str) -> tuple[str, list[str]]:
    """Split a path into its drive and its non-empty directory segments.

    The root separator is kept on the drive part, so ``/usr/lib`` becomes
    ``("/", ["usr", "lib"])`` and ``C:\\Perl\\lib`` becomes
    ``("C:\\", ["Perl", "lib"])``.
    """
    pure = pure_path_class()(path)
    parts = pure.parts[1:] if pure.anchor else pure.parts
    return pure.anchor, list(parts)


def find_common_base_dir(dir_a: str, dir_b: str) -> str:
    """Return the deepest directory shared by ``dir_a`` and ``dir_b``.

    Segments are compared pairwise from the root and the walk stops at the
    first mismatch or at the end of the shorter path. The result keeps the
    drive of ``dir_a``; paths sharing nothing beyond the root yield that root.

    Examples:
        >>> find_common_base_dir("/usr/lib/perl5", "/usr/bin")
        '/usr'
        >>> find_common_base_dir("/opt/app", "/opt/app/lib")
        '/opt/app'
    """
    pm = path_module()
    drive_a, dirs_a = split_dirs(dir_a)
    _, dirs_b = split_dirs(dir_b)

    common: list[str] = []
    for segment_a, segment_b in zip(dirs_a, dirs_b):
        if segment_a != segment_b:
            break
        common.append(segment_a)

    if not common:
        return drive_a
    return pm.join(drive_a, *common)


def split_path_list(value: str | None, separator: str | None = None) -> list[str]:
    """Split a path-list environment value, keeping absolute entries only.

    Args:
        value: Raw variable content, e.g. ``/etc/xdg:/opt/xdg``.
        separator: Entry separator, defaults to ``:``.

    Returns:
        The absolute entries in their original order.
    """
    if not value:
        return []
    pm = path_module()
    entries = value.split(separator or ":")
    return [entry for entry in entries if entry and pm.isabs(entry)]
