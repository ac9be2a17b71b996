"""Front-matter parsing and data binding for page source files.

Parse a page, then bind its model attributes to site data::

    from solidify_pages import PageModel

    page = PageModel.from_text(
        "Title: Team\\n"
        "Model.Members: Data.Company.Staff\\n"
        "---\\n"
        "<ul>{{#Members}}<li>{{.}}</li>{{/Members}}</ul>"
    )
    page.title                                   # "Team"
    page.resolve({"Company": {"Staff": ["Ann"]}})  # PathTree([('Members', ['Ann'])])
"""

from solidify_pages.enums import DuplicateKeyPolicy, TemplateType
from solidify_pages.errors import (
    DataFormatError,
    InvalidTemplateTypeError,
    MalformedAttributeLineError,
    MissingDataKeyError,
    PageError,
    PageParseError,
    UnknownAttributeError,
    UnknownAttributeNamespaceError,
)
from solidify_pages.loader import load_data, load_data_directory, load_page
from solidify_pages.parser import parse_page
from solidify_pages.resolver import resolve_model, resolve_path
from solidify_pages.tree import PathTree, insert_path
from solidify_pages.types import PageModel
from solidify_pages.validate import validate_page

__all__ = [
    "PageModel",
    "PathTree",
    "TemplateType",
    "DuplicateKeyPolicy",
    "parse_page",
    "insert_path",
    "resolve_model",
    "resolve_path",
    "load_page",
    "load_data",
    "load_data_directory",
    "validate_page",
    "PageError",
    "PageParseError",
    "MalformedAttributeLineError",
    "InvalidTemplateTypeError",
    "UnknownAttributeNamespaceError",
    "UnknownAttributeError",
    "MissingDataKeyError",
    "DataFormatError",
]
