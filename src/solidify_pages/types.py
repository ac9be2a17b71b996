"""Page model produced by the front-matter parser."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from solidify_pages.enums import DuplicateKeyPolicy, TemplateType
from solidify_pages.resolver import resolve_model
from solidify_pages.tree import PathTree


@dataclass(frozen=True)
class PageModel:
    """Parsed page attributes and body.

    Header fields:
        title: Page title (``Title``).
        url: Output URL (``Url``).
        template_type: Template engine (``TemplateType``).
        template_id: Layout to render with (``TemplateId``, ``Template``,
            ``LayoutId`` or ``Layout``).

    ``custom`` holds ``Custom.*`` attributes as free-form data. ``model``
    holds ``Model.*`` attributes, whose values are data paths bound by
    :meth:`resolve`. ``content`` is everything after the ``---`` line.
    """

    title: str | None = None
    url: str | None = None
    template_type: TemplateType | None = None
    template_id: str | None = None
    custom: PathTree = field(default_factory=PathTree)
    model: PathTree = field(default_factory=PathTree)
    content: str = ""

    @classmethod
    def from_text(
        cls, text: str, *, duplicate_keys: DuplicateKeyPolicy = DuplicateKeyPolicy.APPEND
    ) -> PageModel:
        """Parse a page from its raw source text."""
        from solidify_pages.parser import parse_page

        return parse_page(text, duplicate_keys=duplicate_keys)

    @classmethod
    def from_file(
        cls, path: Path, *, duplicate_keys: DuplicateKeyPolicy = DuplicateKeyPolicy.APPEND
    ) -> PageModel:
        """Parse a page from a UTF-8 source file.

        Raises:
            FileNotFoundError: If *path* does not exist.
        """
        return cls.from_text(Path(path).read_text(encoding="utf-8"), duplicate_keys=duplicate_keys)

    def resolve(self, data: Mapping[str, Any]) -> PathTree:
        """Return the model tree with its data paths looked up in *data*."""
        return resolve_model(self.model, data)
