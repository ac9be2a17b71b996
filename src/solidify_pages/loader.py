"""Load page sources and data files from disk."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from solidify_pages.enums import DuplicateKeyPolicy
from solidify_pages.errors import DataFormatError
from solidify_pages.types import PageModel

logger = logging.getLogger("solidify_pages.loader")

DATA_SUFFIXES = (".yaml", ".yml", ".json")


def load_page(
    path: Path, *, duplicate_keys: DuplicateKeyPolicy = DuplicateKeyPolicy.APPEND
) -> PageModel:
    """Parse the page stored at *path*.

    Raises:
        FileNotFoundError: If *path* does not exist.
    """
    return PageModel.from_file(path, duplicate_keys=duplicate_keys)


def load_data(path: Path) -> dict[str, Any]:
    """Read a YAML or JSON data file into a dict.

    An empty file yields an empty dict.

    Raises:
        FileNotFoundError: If *path* does not exist.
        DataFormatError: If the document is not a mapping.
    """
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise DataFormatError(
            f"Data file {path} must contain a mapping, got {type(data).__name__}"
        )
    return data


def load_data_directory(root: Path) -> dict[str, Any]:
    """Collect every data file under *root* into one nested dict.

    Each file is keyed by its directory parts and stem relative to *root*,
    so ``root/blog/authors.yaml`` lands at ``data["blog"]["authors"]``.

    Raises:
        FileNotFoundError: If *root* does not exist.
    """
    root = Path(root)
    if not root.is_dir():
        raise FileNotFoundError(f"Data directory {root} does not exist")

    data: dict[str, Any] = {}
    for file in sorted(root.rglob("*")):
        if not file.is_file() or file.suffix.lower() not in DATA_SUFFIXES:
            continue
        *parents, _ = file.relative_to(root).parts
        node = data
        for part in parents:
            node = node.setdefault(part, {})
        node[file.stem] = load_data(file)
        logger.debug("Loaded data file %s", file)
    return data
