"""
Core Utilities Package

Exposes the shared building blocks: path constants and joining,
configuration schemas, logging, YAML I/O and the error hierarchy.
"""

# Configuration
from .config import FolderFunConfig, FolderSpec

# Errors
from .exceptions import AccessorNotFoundError, ConfigurationError, FolderFunError

# Input/Output Utilities
from .io import load_config_from_yaml, load_definitions_from_yaml, save_listing_as_yaml

# Logging
from .logger import reset_logger, setup_logger

# Constants & Paths
from .paths import (
    ACCESSOR_PREFIX,
    CASE_VARIANTS,
    DEBUG_ENV_VAR,
    LOGGER_NAME,
    PATH_SEPARATOR,
    join_path,
)

__all__ = [
    # Configuration
    "FolderFunConfig",
    "FolderSpec",
    # Errors
    "FolderFunError",
    "ConfigurationError",
    "AccessorNotFoundError",
    # I/O
    "load_config_from_yaml",
    "load_definitions_from_yaml",
    "save_listing_as_yaml",
    # Logging
    "setup_logger",
    "reset_logger",
    # Paths
    "ACCESSOR_PREFIX",
    "CASE_VARIANTS",
    "DEBUG_ENV_VAR",
    "LOGGER_NAME",
    "PATH_SEPARATOR",
    "join_path",
]
