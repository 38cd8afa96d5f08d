"""Tests for the stylesheet parser."""

from pathlib import Path

import pytest

from cssindent.model import AtRule, Comment, Declaration, Root, Rule, SourceSpan
from cssindent.parser import ParseError, parse_stylesheet

FIXTURES = Path(__file__).parent.parent / "fixtures"


# ---------------------------------------------------------------------------
# Structure
# ---------------------------------------------------------------------------


class TestSimpleRule:
    @pytest.fixture()
    def root(self) -> Root:
        return parse_stylesheet("a {\n  color: red;\n}\n")

    def test_one_rule(self, root: Root) -> None:
        assert len(root.nodes) == 1
        assert isinstance(root.first, Rule)

    def test_selector(self, root: Root) -> None:
        assert root.first.selector == "a"

    def test_declaration(self, root: Root) -> None:
        decl = root.first.first
        assert isinstance(decl, Declaration)
        assert decl.prop == "color"
        assert decl.value == "red"
        assert decl.parent is root.first

    def test_raw_whitespace(self, root: Root) -> None:
        rule = root.first
        assert rule.raw_before == ""
        assert rule.first.raw_before == "\n  "
        assert rule.raw_after == "\n"
        assert root.raw_after == "\n"

    def test_spans(self, root: Root) -> None:
        rule = root.first
        assert rule.span == SourceSpan(1, 3)
        assert rule.first.span == SourceSpan(2, 2)


class TestNesting:
    def test_nested_rules(self):
        root = parse_stylesheet("a {\n  b {\n    color: red;\n  }\n}")
        outer = root.first
        inner = outer.first
        assert isinstance(inner, Rule)
        assert inner.selector == "b"
        assert inner.parent is outer
        assert inner.raw_after == "\n  "
        assert inner.span == SourceSpan(2, 4)
        assert outer.span == SourceSpan(1, 5)

    def test_at_rule_with_body(self):
        root = parse_stylesheet("@media (min-width: 600px) {\n  a { color: red }\n}")
        media = root.first
        assert isinstance(media, AtRule)
        assert media.name == "media"
        assert media.params == "(min-width: 600px)"
        assert media.has_body
        assert isinstance(media.first, Rule)

    def test_at_rule_without_body(self):
        root = parse_stylesheet('@import "reset.css";\na {}')
        imp = root.first
        assert isinstance(imp, AtRule)
        assert imp.name == "import"
        assert imp.params == '"reset.css"'
        assert not imp.has_body
        assert imp.raw_after is None
        assert root.nodes[1].raw_before == "\n"

    def test_last_declaration_without_semicolon(self):
        root = parse_stylesheet("a { color: red; margin: 0 }")
        decls = root.first.nodes
        assert [d.prop for d in decls] == ["color", "margin"]
        assert decls[1].value == "0"
        assert root.first.raw_after == " "

    def test_empty_selector_block(self):
        root = parse_stylesheet("{}")
        assert isinstance(root.first, Rule)
        assert root.first.selector == ""


class TestRawText:
    def test_multiline_selector_preserved(self):
        root = parse_stylesheet("a,\n  b {\n}")
        assert root.first.selector == "a,\n  b"

    def test_multiline_value_preserved(self):
        root = parse_stylesheet("a {\n  transition: opacity 1s,\n    color 2s;\n}")
        assert root.first.first.value == "opacity 1s,\n    color 2s"

    def test_value_with_semicolon_in_parens(self):
        root = parse_stylesheet("a { background: url(data:image/png;base64,AAA); }")
        decl = root.first.first
        assert decl.prop == "background"
        assert decl.value == "url(data:image/png;base64,AAA)"

    def test_pseudo_class_selector(self):
        root = parse_stylesheet("a:hover { color: red; }")
        assert root.first.selector == "a:hover"

    def test_string_with_braces(self):
        root = parse_stylesheet('a { content: "{;}"; }')
        assert root.first.first.value == '"{;}"'

    def test_comment_nodes(self):
        root = parse_stylesheet("/* head */\na {\n  /* inner */\n  color: red;\n}")
        comment = root.first
        assert isinstance(comment, Comment)
        assert comment.text == " head "
        rule = root.nodes[1]
        assert rule.raw_before == "\n"
        assert isinstance(rule.first, Comment)
        assert rule.nodes[1].previous_sibling is rule.first

    def test_no_break_space_in_value(self):
        root = parse_stylesheet("a {\n  content:\xa0x\xa0y;\n}")
        decl = root.first.first
        assert decl.prop == "content"
        assert decl.value == "x\xa0y"

    def test_no_break_space_in_selector(self):
        root = parse_stylesheet("a\xa0b {}")
        assert root.first.selector == "a\xa0b"

    def test_vertical_tab_is_word_text(self):
        root = parse_stylesheet("a {\n  content: x\vy;\n}")
        assert root.first.first.value == "x\vy"

    def test_stray_semicolons_join_raw_before(self):
        root = parse_stylesheet("a {};\nb {}")
        assert root.nodes[1].raw_before == ";\n"


class TestFixtureFile:
    def test_valid_fixture(self):
        root = parse_stylesheet((FIXTURES / "valid.css").read_text())
        kinds = [type(n).__name__ for n in root.nodes]
        assert kinds == ["Comment", "AtRule", "Rule", "AtRule"]
        media = root.nodes[3]
        assert media.first.selector == ".nav,\n  .footer"
        assert media.span == SourceSpan(11, 16)


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TestParseErrors:
    def test_unclosed_block(self):
        with pytest.raises(ParseError, match="Unclosed block") as info:
            parse_stylesheet("a {\n  color: red;\n")
        assert info.value.line == 1

    def test_unexpected_closing_brace(self):
        with pytest.raises(ParseError, match="Unexpected") as info:
            parse_stylesheet("a {}\n}")
        assert info.value.line == 2

    def test_unknown_word(self):
        with pytest.raises(ParseError, match="Unknown word"):
            parse_stylesheet("a { color red; }")

    def test_missing_property(self):
        with pytest.raises(ParseError, match="no property"):
            parse_stylesheet("a { : red; }")

    def test_unterminated_string(self):
        with pytest.raises(ParseError) as info:
            parse_stylesheet('a {\n  content: "abc;\n}')
        assert info.value.line == 2
