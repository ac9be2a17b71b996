"""Error hierarchy for page parsing and model resolution."""

from __future__ import annotations


class PageError(Exception):
    """Base for all solidify_pages errors."""


class PageParseError(PageError, ValueError):
    """Base for errors raised while parsing a page header.

    Attributes:
        line: The offending header line, verbatim.
    """

    def __init__(self, message: str, line: str) -> None:
        super().__init__(message)
        self.line = line


class MalformedAttributeLineError(PageParseError):
    """Raised when a header line has no ``:`` separator."""


class InvalidTemplateTypeError(PageParseError):
    """Raised when ``TemplateType`` names no known template kind."""


class UnknownAttributeNamespaceError(PageParseError):
    """Raised when a dotted attribute name is not under ``Custom`` or ``Model``."""


class UnknownAttributeError(PageParseError):
    """Raised when an attribute name matches none of the fixed attributes."""


class MissingDataKeyError(PageError, KeyError):
    """Raised when a model path names a key absent from the data object."""

    def __init__(self, path: str, segment: str) -> None:
        super().__init__(f"Key \"{segment}\" not found in data while resolving path \"{path}\"")
        self.path = path
        self.segment = segment

    def __str__(self) -> str:
        return str(self.args[0])


class DataFormatError(PageError, ValueError):
    """Raised when a data file does not hold a mapping at its top level."""
