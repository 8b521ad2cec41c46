"""
Folder Manifest Serialization Utilities.

Loads batches of folder definitions from YAML manifests and exports a
registry listing back to YAML for inspection. The export is a snapshot for
humans and debugging; nothing in the package reloads it implicitly.

Manifest layout::

    folders:
      In: /data/raw/            # shorthand for {path: /data/raw/}
      Data:
        path_var: DATA
        postpend: proj1
      Results:                  # resolves the name "Results" itself
"""

# =========================================================================== #
#                                Standard Imports                             #
# =========================================================================== #
import logging
import os
from pathlib import Path
from typing import Any, Dict, List

# =========================================================================== #
#                                Third-Party Imports                          #
# =========================================================================== #
import yaml
from pydantic import ValidationError

# =========================================================================== #
#                                Internal Imports                             #
# =========================================================================== #
from ..config import FolderSpec
from ..paths import LOGGER_NAME

# =========================================================================== #
#                               YAML Orchestration                            #
# =========================================================================== #


def load_config_from_yaml(yaml_path: Path) -> Dict[str, Any]:
    """
    Loads a raw dictionary from a YAML file.

    Args:
        yaml_path (Path): Path to the source YAML file.

    Returns:
        Dict[str, Any]: The parsed document, ``{}`` for an empty file.

    Raises:
        FileNotFoundError: If the specified path does not exist.
        ValueError: If the document is not a mapping.
    """
    yaml_path = Path(yaml_path)
    if not yaml_path.exists():
        raise FileNotFoundError(f"YAML manifest not found at: {yaml_path}")

    with open(yaml_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(
            f"YAML manifest {yaml_path} must contain a mapping, got {type(data).__name__}"
        )
    return data


def load_definitions_from_yaml(yaml_path: Path) -> List[FolderSpec]:
    """
    Reads the ``folders:`` section of a manifest into validated specs.

    Args:
        yaml_path (Path): Path to the manifest.

    Returns:
        List[FolderSpec]: One spec per entry, in document order.

    Raises:
        FileNotFoundError: If the manifest does not exist.
        ValueError: If the section or any entry is malformed.
    """
    logger = logging.getLogger(LOGGER_NAME)
    data = load_config_from_yaml(yaml_path)

    section = data.get("folders")
    if section is None:
        return []
    if not isinstance(section, dict):
        raise ValueError(f"'folders' in {yaml_path} must be a mapping of name -> entry")

    specs: List[FolderSpec] = []
    for name, entry in section.items():
        try:
            specs.append(FolderSpec.from_entry(str(name), entry))
        except ValidationError as e:
            raise ValueError(f"Invalid folder entry {name!r} in {yaml_path}: {e}") from e

    logger.debug(f"Loaded {len(specs)} folder definitions from {yaml_path}")
    return specs


def save_listing_as_yaml(registry: Any, yaml_path: Path) -> Path:
    """
    Writes a registry snapshot as ``{accessor_name: effective_base}``.

    Args:
        registry (Any): Any object exposing ``list()`` of (name, base) pairs.
        yaml_path (Path): The destination filesystem path.

    Returns:
        Path: The path that was written.

    Raises:
        OSError: If a filesystem-level error occurs (permissions, disk full).
    """
    logger = logging.getLogger(LOGGER_NAME)
    yaml_path = Path(yaml_path)

    listing = {accessor: base for accessor, base in registry.list()}

    try:
        _persist_yaml_atomic(listing, yaml_path)
    except OSError as e:
        logger.error(f"IO Error: Could not write YAML to {yaml_path}. Error: {e}")
        raise

    logger.info(f"Folder listing exported to {yaml_path.name} ({len(listing)} entries)")
    return yaml_path


# =========================================================================== #
#                               Internal Helpers                              #
# =========================================================================== #


def _persist_yaml_atomic(data: Any, path: Path) -> None:
    """
    Writes to a sibling temp file, fsyncs, then replaces the target.

    Readers never observe a half-written listing.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_name(f".{path.name}.tmp")

    try:
        with open(tmp_path, "w", encoding="utf-8") as f:
            yaml.safe_dump(
                data,
                f,
                default_flow_style=False,
                sort_keys=False,
                indent=4,
                allow_unicode=True,
            )
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_path, path)
    finally:
        if tmp_path.exists():
            tmp_path.unlink()
