"""Diagnostics for parsed pages.

Reports header patterns that parse without error but rarely mean what the
author intended.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from solidify_pages.tree import PathTree

if TYPE_CHECKING:
    from solidify_pages.types import PageModel


def validate_page(page: PageModel) -> list[str]:
    """Check a parsed page for suspicious attributes.

    Returns a list of messages. An empty list means the page is clean.
    """
    errors: list[str] = []

    for prefix, tree in (("Custom", page.custom), ("Model", page.model)):
        for path in _duplicate_paths(tree, (prefix,)):
            errors.append(f"Attribute '{path}' is defined more than once")
        for segments, value in tree.walk((prefix,)):
            dotted = ".".join(segments)
            if "" in segments:
                errors.append(f"Attribute '{dotted}' has an empty path segment")
            if prefix == "Model" and not value:
                errors.append(f"Model attribute '{dotted}' has no data path")

    if page.template_type is not None and not page.template_id:
        errors.append(
            f"Page sets TemplateType '{page.template_type.value}' but no TemplateId"
        )

    return errors


def _duplicate_paths(tree: PathTree, prefix: tuple[str, ...]) -> list[str]:
    seen: set[str] = set()
    found: list[str] = []
    for key, value in tree.items():
        if key in seen and ".".join((*prefix, key)) not in found:
            found.append(".".join((*prefix, key)))
        seen.add(key)
        if isinstance(value, PathTree):
            found.extend(_duplicate_paths(value, (*prefix, key)))
    return found
