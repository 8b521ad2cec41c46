"""
Single-Separator Path Composition.

Folder functions never touch the filesystem: they build path strings. This
module owns the one rule every composition follows, so that a root written
as ``/data/raw/`` and one written as ``/data/raw`` produce identical paths.
"""

# Standard Imports
from typing import Optional

# Internal Imports
from .constants import PATH_SEPARATOR


# PATH COMPOSITION
def join_path(base: str, fragment: Optional[str] = None) -> str:
    """
    Joins ``fragment`` onto ``base`` with exactly one separator between them.

    Trailing separators on ``base`` and leading separators on ``fragment``
    are collapsed, so ``join_path("/a/", "/b")`` and ``join_path("/a", "b")``
    both yield ``"/a/b"``. Nothing else about either part is normalized.

    Args:
        base: Directory string the fragment is appended to.
        fragment: Relative path fragment. ``None`` or empty returns ``base``.

    Returns:
        The composed path string.

    Example:
        >>> join_path("/data/raw/", "sample.txt")
        '/data/raw/sample.txt'
        >>> join_path("/", "etc")
        '/etc'
    """
    if not fragment:
        return base

    tail = fragment.lstrip(PATH_SEPARATOR)
    if not tail:
        return base

    head = base.rstrip(PATH_SEPARATOR)
    if not head and base:
        # base was the filesystem root itself
        return f"{PATH_SEPARATOR}{tail}"

    return f"{head}{PATH_SEPARATOR}{tail}"
