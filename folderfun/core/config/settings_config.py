"""
Registry Behaviour Manifest.

Declarative schema for the knobs a FolderFunctionRegistry reads at
construction: the accessor prefix and the verbosity of its logger.
"""

# =========================================================================== #
#                                Standard Imports                             #
# =========================================================================== #
from typing import Any, Dict

# =========================================================================== #
#                                Third-Party Imports                          #
# =========================================================================== #
from pydantic import BaseModel, ConfigDict, Field, model_validator

# =========================================================================== #
#                               Internal Imports                              #
# =========================================================================== #
from ..paths import ACCESSOR_PREFIX
from .types import AccessorPrefix, LogLevel

# =========================================================================== #
#                           Registry Configuration                            #
# =========================================================================== #


class FolderFunConfig(BaseModel):
    """
    Immutable registry settings.

    Attributes:
        prefix: Marker prepended to folder names to form accessor names.
        log_level: Verbosity of the package logger.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    prefix: AccessorPrefix = Field(default=ACCESSOR_PREFIX)
    log_level: LogLevel = Field(default="INFO")

    @model_validator(mode="before")
    @classmethod
    def handle_empty_config(cls, data: Any) -> Any:
        """
        Handles an empty YAML section by returning the defaults.

        When YAML contains 'folderfun:' with no values, pydantic receives None.
        """
        if data is None:
            return {}
        return data

    @classmethod
    def from_mapping(cls, data: Dict[str, Any]) -> "FolderFunConfig":
        """Builds a config from a plain mapping (e.g. a parsed YAML section)."""
        return cls.model_validate(data)
