"""
Semantic Type Definitions & Validation Primitives.

Annotated pydantic types shared by the configuration schemas. Constraints are
enforced at schema construction so malformed folder names or prefixes are
rejected before they reach the registry.
"""

# =========================================================================== #
#                                Standard Imports                             #
# =========================================================================== #
from typing import Annotated, Literal, Optional

# =========================================================================== #
#                                Third-Party Imports                          #
# =========================================================================== #
from pydantic import BeforeValidator, Field

# =========================================================================== #
#                                VALIDATORS                                   #
# =========================================================================== #


def _empty_to_none(v: Optional[str]) -> Optional[str]:
    """Treat blank optional strings as not supplied."""
    if isinstance(v, str) and v == "":
        return None
    return v


# =========================================================================== #
#                                1. IDENTIFIERS                               #
# =========================================================================== #

FolderName = Annotated[str, Field(min_length=1)]
AccessorPrefix = Annotated[str, Field(min_length=1, pattern=r"^[A-Za-z_][A-Za-z0-9_]*$")]

# =========================================================================== #
#                                2. FILESYSTEM                                #
# =========================================================================== #

OptionalFragment = Annotated[Optional[str], BeforeValidator(_empty_to_none)]

# =========================================================================== #
#                                3. TELEMETRY                                 #
# =========================================================================== #

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
