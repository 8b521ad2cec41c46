"""
Naming and Layout Constants.

Single source of truth for the identifiers the rest of the package agrees on:
the logger identity, the accessor prefix that turns a folder name into an
accessor name, and the separator used when composing path strings.
"""

# Standard Imports
from typing import Final, Tuple

# GLOBAL CONSTANTS

# Global logger identity used by all modules to ensure log synchronization
LOGGER_NAME: Final[str] = "folderfun"

# Marker prepended to a folder name to build its accessor name ("In" -> "ffIn")
ACCESSOR_PREFIX: Final[str] = "ff"

# Paths are composed as plain strings; no platform translation is applied
PATH_SEPARATOR: Final[str] = "/"

# Casing variants tried for every configuration source, in lookup order
CASE_VARIANTS: Final[Tuple[str, ...]] = ("exact", "upper", "lower")

# Environment switch forcing DEBUG verbosity regardless of configured level
DEBUG_ENV_VAR: Final[str] = "FOLDERFUN_DEBUG"
