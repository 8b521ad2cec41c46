"""
Folder Function Registry Package.

Folder functions, the registry that defines and enumerates them, and the
process-default registry with its convenience wrappers.
"""

from .defaults import configure, ff, get_registry, list_ff, load_ff, set_ff, set_registry
from .folder_function import FolderFunction
from .registry import FolderFunctionRegistry

__all__ = [
    "FolderFunction",
    "FolderFunctionRegistry",
    "configure",
    "get_registry",
    "set_registry",
    "set_ff",
    "list_ff",
    "load_ff",
    "ff",
]
