"""Tests for page front-matter parsing."""

from pathlib import Path

import pytest

from solidify_pages.enums import DuplicateKeyPolicy, TemplateType
from solidify_pages.errors import (
    InvalidTemplateTypeError,
    MalformedAttributeLineError,
    PageParseError,
    UnknownAttributeError,
    UnknownAttributeNamespaceError,
)
from solidify_pages.parser import parse_page, split_lines

FIXTURES = Path(__file__).parent / "fixtures"


class TestSplitLines:
    def test_crlf_is_a_single_break(self):
        assert split_lines("a\r\nb") == ["a", "b"]

    def test_mixed_terminators(self):
        assert split_lines("a\rb\nc\r\nd") == ["a", "b", "c", "d"]

    def test_blank_line_between_crlf_pairs_is_kept(self):
        assert split_lines("a\r\n\r\nb") == ["a", "", "b"]


class TestFixedAttributes:
    @pytest.mark.parametrize("line", ["Title: A", "title: A", " Title : A ", "TITLE:A"])
    def test_title_is_case_and_space_insensitive(self, line):
        page = parse_page(f"{line}\n---\n")

        assert page.title == "A"

    @pytest.mark.parametrize("name", ["TemplateId", "Template", "LayoutId", "Layout", "layout"])
    def test_template_id_aliases(self, name):
        page = parse_page(f"{name}: x\n---\n")

        assert page.template_id == "x"

    def test_url(self):
        page = parse_page("Url: /blog/index.html\n---\n")

        assert page.url == "/blog/index.html"

    def test_value_keeps_later_colons(self):
        page = parse_page("Url: https://example.com:8080/a\n---\n")

        assert page.url == "https://example.com:8080/a"

    def test_template_type_matches_member_name(self):
        page = parse_page("TemplateType: razor\n---\n")

        assert page.template_type is TemplateType.RAZOR

    def test_invalid_template_type_raises(self):
        with pytest.raises(InvalidTemplateTypeError, match="bogus") as exc_info:
            parse_page("TemplateType: bogus\n---\n")

        assert exc_info.value.line == "TemplateType: bogus"

    def test_template_type_rejects_long_s_spelling(self):
        with pytest.raises(InvalidTemplateTypeError) as exc_info:
            parse_page("TemplateType: mu\u017ftache\n---\n")

        assert exc_info.value.line == "TemplateType: mu\u017ftache"

    def test_duplicate_fixed_attribute_last_wins(self):
        page = parse_page("Title: First\nTitle: Second\n---\n")

        assert page.title == "Second"

    def test_missing_attributes_default_to_none(self):
        page = parse_page("---\nbody")

        assert page.title is None
        assert page.url is None
        assert page.template_type is None
        assert page.template_id is None


class TestNamespacedAttributes:
    def test_custom_path_builds_nested_tree(self):
        page = parse_page("Custom.Foo.Bar: 1\n---\n")

        assert page.custom == {"Foo": {"Bar": "1"}}
        assert page.model == {}

    def test_model_path_builds_nested_tree(self):
        page = parse_page("Model.User.Name: Data.Profile.DisplayName\n---\n")

        assert page.model == {"User": {"Name": "Data.Profile.DisplayName"}}

    def test_prefix_is_case_insensitive(self):
        page = parse_page("cUSTOM.a: 1\nMODEL.b: 2\n---\n")

        assert page.custom == {"a": "1"}
        assert page.model == {"b": "2"}

    def test_empty_segments_are_kept(self):
        page = parse_page("Custom.a..b: 1\n---\n")

        assert page.custom == {"a": {"": {"b": "1"}}}

    def test_repeated_branch_appends_sibling_by_default(self):
        page = parse_page("Custom.Menu.Order: 3\nCustom.Menu.Caption: Team\n---\n")

        assert page.custom.keys() == ["Menu", "Menu"]
        assert [menu.to_dict() for menu in page.custom.get_all("Menu")] == [
            {"Order": "3"},
            {"Caption": "Team"},
        ]

    def test_merge_policy_combines_branches(self):
        page = parse_page(
            "Custom.Menu.Order: 3\nCustom.Menu.Caption: Team\n---\n",
            duplicate_keys=DuplicateKeyPolicy.MERGE,
        )

        assert page.custom == {"Menu": {"Order": "3", "Caption": "Team"}}

    def test_unknown_namespace_raises(self):
        with pytest.raises(UnknownAttributeNamespaceError, match="Foo.Bar"):
            parse_page("Foo.Bar: 1\n---\n")


class TestHeaderErrors:
    def test_unknown_attribute_raises(self):
        with pytest.raises(UnknownAttributeError, match="Author"):
            parse_page("Author: Ann\n---\n")

    def test_line_without_colon_raises(self):
        with pytest.raises(MalformedAttributeLineError) as exc_info:
            parse_page("Title A\n---\n")

        assert exc_info.value.line == "Title A"

    def test_parse_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            parse_page("nonsense\n---\n")

    def test_error_after_valid_lines_still_raises(self):
        with pytest.raises(PageParseError):
            parse_page("Title: ok\nCustom.a: 1\nWhat: now\n---\nbody")


class TestContent:
    def test_content_is_lines_after_separator_joined_with_crlf(self):
        page = parse_page("Title: A\n---\nline one\nline two")

        assert page.content == "line one\r\nline two"

    def test_blank_lines_before_separator_are_ignored(self):
        page = parse_page("\n\nTitle: A\n\n   \n---\nbody")

        assert page.title == "A"
        assert page.content == "body"

    def test_only_first_separator_ends_header(self):
        page = parse_page("Title: A\n---\nintro\n---\noutro")

        assert page.content == "intro\r\n---\r\noutro"

    def test_indented_separator_is_recognised(self):
        page = parse_page("Title: A\n  ---  \nbody")

        assert page.content == "body"

    def test_body_lines_are_kept_verbatim(self):
        page = parse_page("---\n  indented\nTitle: not parsed")

        assert page.content == "  indented\r\nTitle: not parsed"
        assert page.title is None

    def test_without_separator_everything_is_header(self):
        page = parse_page("Title: A\n\nUrl: /a")

        assert page.title == "A"
        assert page.url == "/a"
        assert page.content == ""

    def test_without_separator_body_like_lines_fail(self):
        with pytest.raises(MalformedAttributeLineError):
            parse_page("Title: A\nJust some text")

    def test_empty_document(self):
        page = parse_page("")

        assert page.content == ""
        assert page.custom == {}


class TestFixturePages:
    def test_parses_team_page(self):
        page = parse_page((FIXTURES / "pages/team.html").read_text())

        assert page.title == "Our Team"
        assert page.url == "/about/team.html"
        assert page.template_type is TemplateType.MUSTACHE
        assert page.template_id == "default"
        assert page.model == {
            "Members": "Data.Company.Staff",
            "Company": {"Name": "Data.Company.Name"},
        }
        assert "<h1>{{Title}}</h1>" in page.content

    def test_crlf_source_keeps_body_blank_lines(self):
        text = (FIXTURES / "pages/post.md").read_bytes().decode("utf-8")

        page = parse_page(text)

        assert page.title == "Hello, world"
        assert page.content == "First line\r\n\r\nLast line\r\n"

    def test_parsing_is_deterministic(self):
        text = (FIXTURES / "pages/team.html").read_text()

        assert parse_page(text) == parse_page(text)
