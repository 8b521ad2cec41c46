"""
Process-Default Registry.

Scripts usually want one shared namespace of folders reachable from anywhere
in the program. This module holds that instance and exposes thin wrappers
over it. Libraries and tests that need isolation construct their own
FolderFunctionRegistry, or install one with ``set_registry``.
"""

# Standard Imports
from pathlib import Path
from typing import List, Optional, Tuple

# Internal Imports
from ..core.config import FolderFunConfig
from ..core.io import load_definitions_from_yaml
from ..core.logger import setup_logger
from .folder_function import FolderFunction
from .registry import FolderFunctionRegistry, PathLike

# Global State
_registry: Optional[FolderFunctionRegistry] = None


def get_registry() -> FolderFunctionRegistry:
    """Returns the process-default registry, creating it on first use."""
    global _registry
    if _registry is None:
        _registry = FolderFunctionRegistry()
    return _registry


def set_registry(registry: FolderFunctionRegistry) -> FolderFunctionRegistry:
    """Installs ``registry`` as the process default and returns it."""
    global _registry
    if not isinstance(registry, FolderFunctionRegistry):
        raise TypeError(f"Expected FolderFunctionRegistry, got {type(registry).__name__}")
    _registry = registry
    return registry


def configure(
    config: Optional[FolderFunConfig] = None, log_dir: Optional[Path] = None
) -> FolderFunctionRegistry:
    """
    Applies ``config`` to logging and installs a fresh default registry.

    Args:
        config: Registry settings; defaults apply when omitted.
        log_dir: Optional directory for a rotating log file.

    Returns:
        The newly installed default registry (empty).
    """
    cfg = config or FolderFunConfig()
    log = setup_logger(level=cfg.log_level, log_dir=log_dir)
    log.debug(f"Default registry configured (prefix={cfg.prefix!r})")
    return set_registry(FolderFunctionRegistry(config=cfg))


# CONVENIENCE WRAPPERS
def set_ff(
    name: str,
    path: Optional[PathLike] = None,
    path_var: Optional[str] = None,
    postpend: Optional[PathLike] = None,
) -> FolderFunction:
    """Defines a folder in the default registry; see FolderFunctionRegistry.define."""
    return get_registry().define(name, path=path, path_var=path_var, postpend=postpend)


def list_ff() -> List[Tuple[str, str]]:
    """Lists the default registry's accessors and their bases."""
    return get_registry().list()


def ff(accessor_name: str, fragment: Optional[PathLike] = None) -> str:
    """Builds a path with an accessor from the default registry."""
    return get_registry().invoke(accessor_name, fragment)


def load_ff(yaml_path: Path) -> List[FolderFunction]:
    """Defines every folder of a YAML manifest in the default registry, all or nothing."""
    return get_registry().define_many(load_definitions_from_yaml(yaml_path))
