"""
Input/Output Utilities.

YAML manifest loading for batch folder definitions and export of registry
listings.
"""

from .serialization import (
    load_config_from_yaml,
    load_definitions_from_yaml,
    save_listing_as_yaml,
)

__all__ = [
    "load_config_from_yaml",
    "load_definitions_from_yaml",
    "save_listing_as_yaml",
]
