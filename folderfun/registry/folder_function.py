"""
Folder Function Value Object.

A FolderFunction binds a folder name to a fixed base directory and turns
relative fragments into path strings under it. The base (root plus optional
postpend) is computed once at creation; redefining a folder produces a new
object rather than mutating this one.
"""

# =========================================================================== #
#                                Standard Imports                             #
# =========================================================================== #
import os
from typing import Optional, Union

# =========================================================================== #
#                                Third-Party Imports                          #
# =========================================================================== #
from pydantic import BaseModel, ConfigDict, Field

# =========================================================================== #
#                                Internal Imports                             #
# =========================================================================== #
from ..core.config import FolderName
from ..core.paths import ACCESSOR_PREFIX, join_path

# =========================================================================== #
#                               FOLDER FUNCTION                               #
# =========================================================================== #


class FolderFunction(BaseModel):
    """
    Immutable, callable path builder for one named folder.

    Example:
        >>> ff_in = FolderFunction.create("In", "/data/raw/")
        >>> ff_in.accessor_name
        'ffIn'
        >>> ff_in("sample.txt")
        '/data/raw/sample.txt'
        >>> ff_in()
        '/data/raw/'
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    # Identity
    name: FolderName
    accessor_name: str

    # Location
    root: str = Field(min_length=1)
    postpend: Optional[str] = None
    effective_base: str

    # Provenance: "explicit" or the configuration key that supplied root
    source: str = "explicit"

    @classmethod
    def create(
        cls,
        name: str,
        root: str,
        postpend: Optional[str] = None,
        prefix: str = ACCESSOR_PREFIX,
        source: str = "explicit",
    ) -> "FolderFunction":
        """
        Factory computing the accessor name and the effective base.

        Args:
            name: Folder name as chosen by the caller.
            root: Base directory string.
            postpend: Subfolder joined onto root; None or empty means none.
            prefix: Marker prepended to ``name`` to form the accessor name.
            source: Where ``root`` came from, for listings and debugging.
        """
        effective_base = join_path(root, postpend) if postpend else root
        return cls(
            name=name,
            accessor_name=f"{prefix}{name}",
            root=root,
            postpend=postpend or None,
            effective_base=effective_base,
            source=source,
        )

    def __call__(self, fragment: Optional[Union[str, "os.PathLike[str]"]] = None) -> str:
        """Returns the base, or the base joined with ``fragment``."""
        if fragment is not None:
            fragment = os.fspath(fragment)
        return join_path(self.effective_base, fragment)

    def __repr__(self) -> str:
        return f"FolderFunction({self.accessor_name!r} -> {self.effective_base!r})"
