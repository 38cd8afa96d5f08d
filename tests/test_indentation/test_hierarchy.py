"""Tests for the hierarchy map."""

import pytest

from cssindent.indentation import HierarchyEntry, HierarchyError, HierarchyMap
from cssindent.model import Root, Rule


class TestHierarchyMap:
    def test_record_and_lookup(self):
        hierarchy = HierarchyMap()
        root = Root()
        rule = Rule(selector=".a")
        entry = hierarchy.record(rule, root, 0)
        assert entry == HierarchyEntry(superordinate=root, level=0)
        assert hierarchy.lookup(rule) is entry
        assert rule in hierarchy
        assert len(hierarchy) == 1

    def test_lookup_missing(self):
        assert HierarchyMap().lookup(Rule()) is None

    def test_write_once(self):
        hierarchy = HierarchyMap()
        root = Root()
        rule = Rule(selector=".a")
        hierarchy.record(rule, root, 0)
        with pytest.raises(HierarchyError):
            hierarchy.record(rule, root, 1)
        assert hierarchy.lookup(rule).level == 0

    def test_negative_level_rejected(self):
        with pytest.raises(HierarchyError):
            HierarchyMap().record(Rule(), Root(), -1)

    def test_keys_by_identity(self):
        hierarchy = HierarchyMap()
        a = Rule(selector=".a")
        twin = Rule(selector=".a")
        hierarchy.record(a, Root(), 0)
        assert twin not in hierarchy

    def test_iteration_in_insertion_order(self):
        hierarchy = HierarchyMap()
        root = Root()
        rules = [Rule(selector=s) for s in (".c", ".a", ".b")]
        for rule in rules:
            hierarchy.record(rule, root, 0)
        assert list(hierarchy) == rules

    def test_maps_are_independent(self):
        rule = Rule()
        first = HierarchyMap()
        first.record(rule, Root(), 0)
        assert rule not in HierarchyMap()
