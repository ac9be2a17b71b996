"""Bind a page's model tree to an external data object.

Every leaf of the model tree is a dotted path such as
``Data.Company.Staff``. Resolution replaces each leaf with the value found
at that path in the data mapping::

    model = PathTree.from_dict({"Team": "Data.Company.Staff"})
    resolve_model(model, {"Company": {"Staff": ["Ann", "Bob"]}})
    # PathTree([('Team', ['Ann', 'Bob'])])

A leading ``Data`` segment names the data root and is skipped. Walking into
a value that is not a mapping yields ``None``; a key missing from a mapping
raises :class:`MissingDataKeyError`.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from solidify_pages.errors import MissingDataKeyError
from solidify_pages.tree import PathTree

logger = logging.getLogger("solidify_pages.resolver")

DATA_ROOT = "Data"
PATH_SEPARATOR = "."


def resolve_path(path: str, data: Mapping[str, Any] | PathTree) -> Any:
    """Look up the dotted *path* in *data*.

    Plain mappings and path trees are walked; any other value ends the walk
    with ``None``.

    Raises:
        MissingDataKeyError: If a mapping along the path lacks the next key.
    """
    if not path:
        return None

    segments = path.split(PATH_SEPARATOR)
    if segments[0] == DATA_ROOT:
        segments = segments[1:]
        if not segments:
            return None

    value: Any = data
    for segment in segments:
        if not isinstance(value, (Mapping, PathTree)):
            logger.debug("Path %r walks into a non-mapping value at %r", path, segment)
            return None
        if segment not in value:
            raise MissingDataKeyError(path, segment)
        value = value[segment]
    return value


def resolve_model(tree: PathTree, data: Mapping[str, Any] | PathTree) -> PathTree:
    """Return a copy of *tree* with every leaf path resolved against *data*.

    Neither *tree* nor *data* is modified, so one model can be bound to
    several data objects in turn.
    """
    resolved = PathTree()
    for key, value in tree.items():
        if isinstance(value, PathTree):
            resolved.put(key, resolve_model(value, data))
        else:
            resolved.put(key, resolve_path(value, data))
    return resolved
