"""
Configuration Sources.

A configuration source answers one question: what string is stored under
this exact key, if any. Two sources ship with the package, a process-local
settings store for script-level overrides and a view over the process
environment. Anything with a matching ``lookup`` method can be added to a
resolver's source list.
"""

# Standard Imports
import os
from typing import Dict, Iterator, Mapping, Optional, Protocol, runtime_checkable


# SOURCE CONTRACT
@runtime_checkable
class ConfigurationSource(Protocol):
    """
    Structural contract for key/value configuration stores.

    Implementations return the stored string for ``key`` or None when absent.
    Keys are matched exactly; casing fallbacks are the resolver's job.
    """

    def lookup(self, key: str) -> Optional[str]: ...


# SETTINGS STORE
class SettingsStore:
    """
    Process-local key/value overrides, consulted before the environment.

    Example:
        >>> settings = SettingsStore()
        >>> settings.set("PROCESSED", "/scratch/processed")
        >>> settings.lookup("PROCESSED")
        '/scratch/processed'
    """

    def __init__(self, values: Optional[Mapping[str, str]] = None):
        self._values: Dict[str, str] = {}
        for key, value in (values or {}).items():
            self.set(key, value)

    def set(self, key: str, value: Optional[str]) -> None:
        """
        Stores ``value`` under ``key``. Setting None removes the key.

        Raises:
            ValueError: If ``key`` is not a non-empty string.
            TypeError: If ``value`` is neither a string nor None.
        """
        if not isinstance(key, str) or not key:
            raise ValueError(f"Setting key must be a non-empty string, got {key!r}")
        if value is None:
            self.unset(key)
            return
        if not isinstance(value, str):
            raise TypeError(
                f"Setting {key!r} must be a string, got {type(value).__name__}"
            )
        self._values[key] = value

    def unset(self, key: str) -> None:
        """Removes ``key`` if present; unknown keys are ignored."""
        self._values.pop(key, None)

    def lookup(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def keys(self) -> Iterator[str]:
        return iter(list(self._values))

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"SettingsStore(keys={list(self._values)})"


# ENVIRONMENT STORE
class EnvironmentStore:
    """
    Read-only view over environment variables.

    Reads ``os.environ`` live at every lookup unless an explicit mapping is
    supplied, so variables exported after construction are still seen.
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self._environ = environ

    @property
    def environ(self) -> Mapping[str, str]:
        return os.environ if self._environ is None else self._environ

    def lookup(self, key: str) -> Optional[str]:
        return self.environ.get(key)

    def __repr__(self) -> str:
        origin = "os.environ" if self._environ is None else "mapping"
        return f"EnvironmentStore({origin})"
