"""
Path Constants and Composition Package.

Centralizes the naming conventions and the path-joining rule shared by the
resolver and the registry:
1. Static: logger identity, accessor prefix and separator via 'constants'.
2. Dynamic: single-separator string composition via 'joining'.
"""

# Public Interface
from .constants import (
    ACCESSOR_PREFIX,
    CASE_VARIANTS,
    DEBUG_ENV_VAR,
    LOGGER_NAME,
    PATH_SEPARATOR,
)
from .joining import join_path

# Export Schema
__all__ = [
    "ACCESSOR_PREFIX",
    "CASE_VARIANTS",
    "DEBUG_ENV_VAR",
    "LOGGER_NAME",
    "PATH_SEPARATOR",
    "join_path",
]
