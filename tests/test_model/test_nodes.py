"""Tests for the stylesheet tree model."""

from cssindent.model import (
    AtRule,
    Comment,
    Declaration,
    NodeKind,
    Root,
    Rule,
    SourceSpan,
)


def _tree() -> tuple[Root, Rule, Declaration, Rule, Declaration]:
    root = Root()
    outer = Rule(selector=".a")
    root.append(outer)
    first = Declaration(prop="color", value="red")
    outer.append(first)
    inner = Rule(selector=".a .b")
    outer.append(inner)
    second = Declaration(prop="margin", value="0")
    inner.append(second)
    return root, outer, first, inner, second


class TestNodeKinds:
    def test_kind_tags(self):
        assert Root().kind is NodeKind.ROOT
        assert Rule().kind is NodeKind.RULE
        assert AtRule().kind is NodeKind.AT_RULE
        assert Declaration().kind is NodeKind.DECLARATION
        assert Comment().kind is NodeKind.COMMENT

    def test_kind_values_match_glossary(self):
        assert NodeKind.RULE.value == "block-rule"
        assert NodeKind.AT_RULE.value == "at-rule"
        assert NodeKind.DECLARATION.value == "declaration"


class TestIdentity:
    def test_equal_fields_are_distinct_nodes(self):
        a = Rule(selector=".x")
        b = Rule(selector=".x")
        assert a != b
        assert len({a, b}) == 2

    def test_node_is_usable_as_dict_key(self):
        rule = Rule(selector=".x")
        table = {rule: 1}
        rule.selector = ".y"
        assert table[rule] == 1


class TestTreeNavigation:
    def test_append_sets_parent(self):
        root, outer, first, inner, second = _tree()
        assert outer.parent is root
        assert first.parent is outer
        assert second.parent is inner

    def test_first(self):
        root, outer, first, _, _ = _tree()
        assert root.first is outer
        assert outer.first is first
        assert Root().first is None

    def test_previous_sibling(self):
        _, outer, first, inner, second = _tree()
        assert inner.previous_sibling is first
        assert first.previous_sibling is None
        assert second.previous_sibling is None
        assert outer.previous_sibling is None

    def test_previous_sibling_detached(self):
        assert Rule().previous_sibling is None

    def test_append_records_index(self):
        root = Root()
        rules = [Rule(selector=f".r{i}") for i in range(500)]
        for rule in rules:
            root.append(rule)
        assert [rule.index for rule in rules] == list(range(500))
        assert rules[0].previous_sibling is None
        assert all(rules[i].previous_sibling is rules[i - 1] for i in range(1, 500))

    def test_previous_sibling_across_kinds(self):
        rule = Rule(selector=".a")
        comment = Comment(text=" note ")
        decl = Declaration(prop="color", value="red")
        for child in (comment, decl):
            rule.append(child)
        assert decl.previous_sibling is comment

    def test_previous_sibling_without_append(self):
        root = Root()
        root.append(Rule(selector=".a"))
        stray = Rule(selector=".b")
        stray.parent = root
        assert stray.index is None
        assert stray.previous_sibling is None

    def test_walk_is_depth_first_document_order(self):
        root, outer, first, inner, second = _tree()
        assert list(root.walk()) == [outer, first, inner, second]

    def test_span_default(self):
        assert Declaration().span == SourceSpan(1, 1)


class TestAtRule:
    def test_body_presence(self):
        assert AtRule(name="media").has_body
        assert not AtRule(name="import", raw_after=None).has_body
