"""Closed vocabularies used by the page parser."""

from __future__ import annotations

from enum import Enum

from solidify_pages.errors import InvalidTemplateTypeError


class TemplateType(Enum):
    """Template engine a page is rendered with."""

    MUSTACHE = "Mustache"
    HANDLEBARS = "Handlebars"
    RAZOR = "Razor"

    @classmethod
    def parse(cls, name: str, line: str | None = None) -> TemplateType:
        """Match *name* against the member names, ignoring ASCII case.

        *line* is the header line reported on failure; it defaults to *name*.

        Raises:
            InvalidTemplateTypeError: If *name* is not a member name.
        """
        wanted = name.strip()
        if wanted.isascii():
            for member in cls:
                if member.name == wanted.upper():
                    return member
        known = ", ".join(member.value for member in cls)
        raise InvalidTemplateTypeError(
            f"\"{name}\" is not a valid TemplateType, expected one of: {known}",
            name if line is None else line,
        )


class DuplicateKeyPolicy(Enum):
    """What happens when a path tree receives a key it already holds.

    - ``APPEND``: keep both entries as siblings under the same key.
    - ``OVERWRITE``: the later entry replaces the earlier one in place.
    - ``MERGE``: two subtrees are merged recursively, anything else is
      overwritten.
    """

    APPEND = "append"
    OVERWRITE = "overwrite"
    MERGE = "merge"
