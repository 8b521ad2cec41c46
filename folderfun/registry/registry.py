"""
Folder Function Registry.

Owns the mapping from accessor names to FolderFunctions. Defining a folder
picks its root (explicit path, a named configuration variable, or the folder
name itself), builds the FolderFunction and stores it under ``prefix + name``.

Registry Semantics:
    - Last write wins: redefining a name silently replaces the entry
    - Stable listing: entries are listed in first-definition order; a
      redefinition keeps the slot of the entry it replaces
    - Atomic definitions: a failed define (or define_many) leaves the
      registry exactly as it was
    - No locking: concurrent callers must serialize access themselves
"""

# =========================================================================== #
#                                Standard Imports                             #
# =========================================================================== #
import logging
import os
from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union

# =========================================================================== #
#                                Internal Imports                             #
# =========================================================================== #
from ..core.config import FolderFunConfig, FolderSpec
from ..core.exceptions import AccessorNotFoundError, ConfigurationError
from ..core.paths import LOGGER_NAME
from ..resolver import NameResolver
from .folder_function import FolderFunction

PathLike = Union[str, "os.PathLike[str]"]

logger = logging.getLogger(LOGGER_NAME)

# =========================================================================== #
#                                  REGISTRY                                   #
# =========================================================================== #


class FolderFunctionRegistry:
    """
    Defines, stores and enumerates folder functions.

    Attributes:
        resolver (NameResolver): Looks up roots for folders defined without
            an explicit path.
        config (FolderFunConfig): Accessor prefix and logging preferences.

    Example:
        >>> registry = FolderFunctionRegistry()
        >>> ff_in = registry.define("In", path="/data/raw/")
        >>> registry.invoke("ffIn", "sample.txt")
        '/data/raw/sample.txt'
        >>> ff_in("sample.txt")
        '/data/raw/sample.txt'
    """

    def __init__(
        self,
        resolver: Optional[NameResolver] = None,
        config: Optional[FolderFunConfig] = None,
    ):
        self.resolver = resolver or NameResolver()
        self.config = config or FolderFunConfig()
        self._functions: Dict[str, FolderFunction] = {}

    @property
    def prefix(self) -> str:
        return self.config.prefix

    def accessor_name_for(self, name: str) -> str:
        """Predicts the accessor name ``define(name)`` registers."""
        return f"{self.prefix}{name}"

    # ------------------------------------------------------------------ #
    #                              Mutation                              #
    # ------------------------------------------------------------------ #

    def define(
        self,
        name: str,
        path: Optional[PathLike] = None,
        path_var: Optional[str] = None,
        postpend: Optional[PathLike] = None,
    ) -> FolderFunction:
        """
        Creates (or replaces) the folder function for ``name``.

        Root priority:
            1. ``path`` when given and non-empty, used as-is
            2. the value of configuration variable ``path_var``
            3. the value of configuration variable ``name``

        Args:
            name: Folder name; the accessor is registered as prefix + name.
            path: Explicit root directory.
            path_var: Configuration variable naming the root directory.
            postpend: Subfolder appended to the root once, at definition.

        Returns:
            FolderFunction: The stored accessor, callable with a fragment.

        Raises:
            ValueError: If ``name`` is empty.
            ConfigurationError: If the root cannot be resolved.
        """
        spec = FolderSpec(
            name=name,
            path=_as_str(path),
            path_var=path_var,
            postpend=_as_str(postpend),
        )
        folder_fn = self._build(spec)
        self._store(folder_fn)
        return folder_fn

    def define_many(self, specs: Iterable[FolderSpec]) -> List[FolderFunction]:
        """
        Defines a batch of folders, all or nothing.

        Every root is resolved before anything is stored, so one failing
        spec leaves the registry untouched.

        Raises:
            ConfigurationError: For the first spec whose root is unresolved.
        """
        built = [self._build(spec) for spec in specs]
        for folder_fn in built:
            self._store(folder_fn)
        return built

    # ------------------------------------------------------------------ #
    #                               Access                               #
    # ------------------------------------------------------------------ #

    def get(self, accessor_name: str) -> FolderFunction:
        """
        Returns the folder function stored under ``accessor_name``.

        Raises:
            AccessorNotFoundError: If nothing is registered under that name.
        """
        try:
            return self._functions[accessor_name]
        except KeyError:
            raise AccessorNotFoundError(accessor_name) from None

    def invoke(self, accessor_name: str, fragment: Optional[PathLike] = None) -> str:
        """
        Builds a path with the accessor registered as ``accessor_name``.

        An omitted or empty fragment returns the effective base unchanged.

        Raises:
            AccessorNotFoundError: If ``accessor_name`` was never defined.
        """
        return self.get(accessor_name)(_as_str(fragment))

    def list(self) -> List[Tuple[str, str]]:
        """Snapshot of (accessor_name, effective_base) in definition order."""
        return [(acc, fn.effective_base) for acc, fn in self._functions.items()]

    def exists(self, accessor_name: str) -> bool:
        return accessor_name in self._functions

    # ------------------------------------------------------------------ #
    #                           Internal Helpers                         #
    # ------------------------------------------------------------------ #

    def _build(self, spec: FolderSpec) -> FolderFunction:
        """Determines the root for ``spec`` and creates its folder function."""
        if spec.path:
            root, source = spec.path, "explicit"
        else:
            variable = spec.path_var or spec.name
            root = self.resolver.resolve(variable)
            if root is None:
                error = ConfigurationError(spec.name, self.resolver.variants(variable))
                logger.debug(str(error))
                raise error
            source = variable

        return FolderFunction.create(
            name=spec.name,
            root=root,
            postpend=spec.postpend,
            prefix=self.prefix,
            source=source,
        )

    def _store(self, folder_fn: FolderFunction) -> None:
        replaced = folder_fn.accessor_name in self._functions
        self._functions[folder_fn.accessor_name] = folder_fn
        verb = "Redefined" if replaced else "Defined"
        logger.debug(f"{verb} {folder_fn.accessor_name} -> {folder_fn.effective_base}")

    # ------------------------------------------------------------------ #
    #                              Protocols                             #
    # ------------------------------------------------------------------ #

    def __getitem__(self, accessor_name: str) -> FolderFunction:
        return self.get(accessor_name)

    def __contains__(self, accessor_name: object) -> bool:
        return accessor_name in self._functions

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._functions))

    def __len__(self) -> int:
        return len(self._functions)

    def __repr__(self) -> str:
        return f"FolderFunctionRegistry(prefix={self.prefix!r}, accessors={list(self._functions)})"


def _as_str(value: Optional[PathLike]) -> Optional[str]:
    if value is None:
        return None
    return os.fspath(value)
