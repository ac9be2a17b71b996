"""Front-matter parser for page source files.

A page is a block of ``Name: Value`` attribute lines, a ``---`` separator
line, and the body::

    Title: About us
    Template: default
    Custom.Menu.Order: 3
    Model.Team: Data.Company.Staff
    ---
    <h1>{{Title}}</h1>

Fixed attribute names are matched case-insensitively. Dotted names under
``Custom`` and ``Model`` are stored as paths in the page's custom and model
trees.
"""

from __future__ import annotations

import logging
import re
from typing import Any

from solidify_pages.enums import DuplicateKeyPolicy, TemplateType
from solidify_pages.errors import (
    MalformedAttributeLineError,
    UnknownAttributeError,
    UnknownAttributeNamespaceError,
)
from solidify_pages.tree import PathTree, insert_path
from solidify_pages.types import PageModel

logger = logging.getLogger("solidify_pages.parser")

SEPARATOR = "---"
LINE_TERMINATOR = "\r\n"
ATTRIBUTE_SEPARATOR = ":"
PATH_SEPARATOR = "."

TITLE_ATTRIBUTES = frozenset({"title"})
URL_ATTRIBUTES = frozenset({"url"})
TEMPLATE_TYPE_ATTRIBUTES = frozenset({"templatetype"})
TEMPLATE_ID_ATTRIBUTES = frozenset({"templateid", "template", "layoutid", "layout"})
CUSTOM_PREFIX = "custom"
MODEL_PREFIX = "model"

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> list[str]:
    """Split *text* on ``\\r\\n``, ``\\r`` or ``\\n``, one break per terminator."""
    return _LINE_BREAK.split(text)


def parse_page(
    text: str, *, duplicate_keys: DuplicateKeyPolicy = DuplicateKeyPolicy.APPEND
) -> PageModel:
    """Parse raw page text into a :class:`PageModel`.

    Header lines run up to the first line that is exactly ``---`` once
    trimmed; blank header lines are skipped. Without a separator the whole
    document is header and the content is empty. The body is rejoined with
    ``\\r\\n`` whatever terminators the source used.

    Args:
        text: Raw page source.
        duplicate_keys: How the custom and model trees treat a repeated key.

    Raises:
        MalformedAttributeLineError: A header line has no ``:``.
        InvalidTemplateTypeError: ``TemplateType`` is not a known kind.
        UnknownAttributeNamespaceError: A dotted name is not under
            ``Custom`` or ``Model``.
        UnknownAttributeError: A plain name is not a fixed attribute.
    """
    lines = split_lines(text)
    trimmed = [line.strip() for line in lines]

    if SEPARATOR in trimmed:
        separator_index = trimmed.index(SEPARATOR)
        header = trimmed[:separator_index]
        content = LINE_TERMINATOR.join(lines[separator_index + 1 :])
    else:
        header = trimmed
        content = ""

    fields: dict[str, Any] = {}
    custom = PathTree()
    model = PathTree()

    for line in header:
        if not line:
            continue
        name, value = _split_attribute(line)
        key = name.lower()

        if key in TITLE_ATTRIBUTES:
            fields["title"] = value
        elif key in URL_ATTRIBUTES:
            fields["url"] = value
        elif key in TEMPLATE_TYPE_ATTRIBUTES:
            fields["template_type"] = TemplateType.parse(value, line)
        elif key in TEMPLATE_ID_ATTRIBUTES:
            fields["template_id"] = value
        elif PATH_SEPARATOR in name:
            prefix, *segments = name.split(PATH_SEPARATOR)
            if prefix.lower() == CUSTOM_PREFIX:
                insert_path(custom, segments, value, policy=duplicate_keys)
            elif prefix.lower() == MODEL_PREFIX:
                insert_path(model, segments, value, policy=duplicate_keys)
            else:
                raise UnknownAttributeNamespaceError(
                    f"Attribute \"{name}\" is not under the Custom or Model namespace "
                    f"(line \"{line}\")",
                    line,
                )
        else:
            raise UnknownAttributeError(f"Unknown attribute \"{name}\" at line \"{line}\"", line)

    logger.debug(
        "Parsed page header: %d attribute lines, %d custom and %d model entries",
        sum(1 for line in header if line),
        len(custom),
        len(model),
    )

    return PageModel(custom=custom, model=model, content=content, **fields)


def _split_attribute(line: str) -> tuple[str, str]:
    name, separator, value = line.partition(ATTRIBUTE_SEPARATOR)
    if not separator:
        raise MalformedAttributeLineError(
            f"Attribute line \"{line}\" has no \"{ATTRIBUTE_SEPARATOR}\" separator", line
        )
    return name.strip(), value.strip()

