"""
Prioritized Configuration-Name Resolution.

Turns a symbolic name into a root path string by walking an ordered list of
configuration sources. For each source, in priority order, the name is tried
as given, then upper-cased, then lower-cased. The first non-empty value wins.

    sources = [settings, environment]
    resolve("Data") tries:
        settings["Data"], settings["DATA"], settings["data"],
        environ["Data"],  environ["DATA"],  environ["data"]

An empty string stored under a key counts as absent, so a blank override
never masks a real value further down the list.
"""

# =========================================================================== #
#                                Standard Imports                             #
# =========================================================================== #
import logging
from typing import List, Optional, Sequence, Tuple

# =========================================================================== #
#                                Internal Imports                             #
# =========================================================================== #
from ..core.paths import CASE_VARIANTS, LOGGER_NAME
from .sources import ConfigurationSource, EnvironmentStore, SettingsStore

# =========================================================================== #
#                                Global State                                 #
# =========================================================================== #
# Settings shared by every resolver built with default sources
_default_settings: SettingsStore = SettingsStore()

logger = logging.getLogger(LOGGER_NAME)


def get_settings() -> SettingsStore:
    """Returns the process-wide settings store used by default resolvers."""
    return _default_settings


def default_sources() -> List[ConfigurationSource]:
    """Settings store first, process environment second."""
    return [_default_settings, EnvironmentStore()]


# =========================================================================== #
#                                  Resolver                                   #
# =========================================================================== #


class NameResolver:
    """
    Resolves configuration names against an ordered list of sources.

    Attributes:
        sources: Configuration sources in priority order.

    Example:
        >>> resolver = NameResolver([SettingsStore({"DATA": "/srv/data"})])
        >>> resolver.resolve("data")
        '/srv/data'
    """

    def __init__(self, sources: Optional[Sequence[ConfigurationSource]] = None):
        self.sources: Tuple[ConfigurationSource, ...] = tuple(
            default_sources() if sources is None else sources
        )

    @staticmethod
    def variants(name: str) -> List[str]:
        """
        Casing variants of ``name`` in lookup order, duplicates removed.

        Raises:
            ValueError: If ``name`` is not a non-empty string.
        """
        if not isinstance(name, str) or not name:
            raise ValueError(f"Configuration name must be a non-empty string, got {name!r}")

        transforms = {
            "exact": name,
            "upper": name.upper(),
            "lower": name.lower(),
        }
        ordered: List[str] = []
        for variant in CASE_VARIANTS:
            key = transforms[variant]
            if key not in ordered:
                ordered.append(key)
        return ordered

    def candidates(self, name: str) -> List[Tuple[ConfigurationSource, str]]:
        """Every (source, key) pair ``resolve`` would query, in order."""
        keys = self.variants(name)
        return [(source, key) for source in self.sources for key in keys]

    def resolve(self, name: str) -> Optional[str]:
        """
        Returns the first non-empty value found for ``name``, or None.

        The value is returned exactly as stored.
        """
        for source, key in self.candidates(name):
            value = source.lookup(key)
            if value is None or value == "":
                continue
            logger.debug(f"Resolved {name!r} via {source!r}[{key!r}] -> {value}")
            return value

        logger.debug(f"Could not resolve {name!r} in {len(self.sources)} sources")
        return None

    def __repr__(self) -> str:
        return f"NameResolver(sources={list(self.sources)!r})"


# =========================================================================== #
#                               Convenience API                               #
# =========================================================================== #


def opt_or_env_var(name: str) -> Optional[str]:
    """
    Resolves ``name`` against the process settings, then the environment.

    Useful on its own for any configuration value, not only folder roots.
    """
    return NameResolver().resolve(name)
