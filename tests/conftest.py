"""
Pytest Configuration and Shared Fixtures for the folderfun Test Suite.

Provides isolated configuration sources, resolvers and registries so tests
never depend on the real process environment, plus helpers that restore the
process-default registry and settings store afterwards.
"""

# Standard Imports
import logging
from typing import Dict

# Third-Party Imports
import pytest

# Internal Imports
from folderfun.core.logger import reset_logger
from folderfun.core.paths import LOGGER_NAME
from folderfun.registry import FolderFunctionRegistry, get_registry, set_registry
from folderfun.resolver import EnvironmentStore, NameResolver, SettingsStore, get_settings


# SOURCE FIXTURES
@pytest.fixture
def settings():
    """Empty process-local settings store."""
    return SettingsStore()


@pytest.fixture
def environ() -> Dict[str, str]:
    """Plain dict standing in for os.environ."""
    return {}


@pytest.fixture
def resolver(settings, environ):
    """Resolver over the isolated settings store and fake environment."""
    return NameResolver([settings, EnvironmentStore(environ)])


@pytest.fixture
def registry(resolver):
    """Fresh registry wired to the isolated resolver."""
    return FolderFunctionRegistry(resolver=resolver)


# PROCESS-DEFAULT FIXTURES
@pytest.fixture
def default_registry(resolver):
    """Installs a fresh default registry and restores the previous one."""
    previous = get_registry()
    fresh = set_registry(FolderFunctionRegistry(resolver=resolver))
    yield fresh
    set_registry(previous)


@pytest.fixture
def default_settings():
    """Process settings store, with any keys added by the test removed afterwards."""
    store = get_settings()
    before = set(store.keys())
    yield store
    for key in list(store.keys()):
        if key not in before:
            store.unset(key)


# LOGGING FIXTURES
@pytest.fixture
def package_logger():
    """Package logger, with handlers from setup_logger closed and its level restored afterwards."""
    logger = logging.getLogger(LOGGER_NAME)
    level = logger.level
    yield logger
    reset_logger(LOGGER_NAME)
    logger.setLevel(level)
