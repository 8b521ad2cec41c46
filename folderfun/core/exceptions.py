"""
Error Hierarchy.

Two failure kinds surface to callers: a folder whose root cannot be found in
any configuration source, and a lookup of an accessor that was never defined.
Both derive from FolderFunError so scripts can catch the package as a whole.
"""

# Standard Imports
from typing import Iterable, Tuple


class FolderFunError(Exception):
    """Base class for all folderfun errors."""


class ConfigurationError(FolderFunError):
    """
    Raised when no configuration source yields a root for a folder.

    Attributes:
        name: Folder name passed to ``define``.
        variables: Every configuration key that was tried, in lookup casing order.
    """

    def __init__(self, name: str, variables: Iterable[str]):
        self.name = name
        self.variables: Tuple[str, ...] = tuple(variables)
        tried = ", ".join(repr(v) for v in self.variables)
        super().__init__(
            f"Cannot define folder {name!r}: no setting or environment variable "
            f"provides a value for {tried}"
        )


class AccessorNotFoundError(FolderFunError, LookupError):
    """
    Raised when an accessor name has no registered folder function.

    Attributes:
        accessor_name: The name that was looked up.
    """

    def __init__(self, accessor_name: str):
        self.accessor_name = accessor_name
        super().__init__(f"No folder function registered as {accessor_name!r}")
