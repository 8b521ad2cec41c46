"""
folderfun: named folder functions for scripts.

Define a folder once, from an explicit path or from a setting/environment
variable, then build paths under it from anywhere in the program:

    >>> import folderfun
    >>> ff_in = folderfun.set_ff("In", path="/data/raw/")
    >>> ff_in("sample.txt")
    '/data/raw/sample.txt'
    >>> folderfun.ff("ffIn", "sample.txt")
    '/data/raw/sample.txt'
"""

from .core import (
    ACCESSOR_PREFIX,
    AccessorNotFoundError,
    ConfigurationError,
    FolderFunConfig,
    FolderFunError,
    FolderSpec,
    join_path,
    load_definitions_from_yaml,
    save_listing_as_yaml,
)
from .registry import (
    FolderFunction,
    FolderFunctionRegistry,
    configure,
    ff,
    get_registry,
    list_ff,
    load_ff,
    set_ff,
    set_registry,
)
from .resolver import (
    ConfigurationSource,
    EnvironmentStore,
    NameResolver,
    SettingsStore,
    get_settings,
    opt_or_env_var,
)

__version__ = "0.1.0"

__all__ = [
    "ACCESSOR_PREFIX",
    "AccessorNotFoundError",
    "ConfigurationError",
    "ConfigurationSource",
    "EnvironmentStore",
    "FolderFunConfig",
    "FolderFunError",
    "FolderFunction",
    "FolderFunctionRegistry",
    "FolderSpec",
    "NameResolver",
    "SettingsStore",
    "configure",
    "ff",
    "get_registry",
    "get_settings",
    "join_path",
    "list_ff",
    "load_definitions_from_yaml",
    "load_ff",
    "opt_or_env_var",
    "save_listing_as_yaml",
    "set_ff",
    "set_registry",
]
