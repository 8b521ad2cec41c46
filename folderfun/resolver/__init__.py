"""
Name Resolution Package.

Configuration sources and the resolver that searches them, in priority and
casing order, for the value behind a symbolic name.
"""

from .name_resolver import NameResolver, default_sources, get_settings, opt_or_env_var
from .sources import ConfigurationSource, EnvironmentStore, SettingsStore

__all__ = [
    "ConfigurationSource",
    "SettingsStore",
    "EnvironmentStore",
    "NameResolver",
    "default_sources",
    "get_settings",
    "opt_or_env_var",
]
