"""
Configuration Package Initialization.

Flat public API for the pydantic schemas and semantic types used to
configure registries and describe folder definitions.
"""

from .folder_spec import FolderSpec
from .settings_config import FolderFunConfig
from .types import AccessorPrefix, FolderName, LogLevel, OptionalFragment

__all__ = [
    "FolderFunConfig",
    "FolderSpec",
    "AccessorPrefix",
    "FolderName",
    "LogLevel",
    "OptionalFragment",
]
