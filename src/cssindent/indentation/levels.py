"""Level calculator: how many indent units a node's position demands."""

from __future__ import annotations

from cssindent.indentation.errors import MalformedTreeError
from cssindent.indentation.hierarchy import HierarchyMap
from cssindent.model.nodes import Declaration, Node, Root


class LevelCalculator:
    """Compute indentation levels by walking a node's ancestors.

    A parent with a hierarchy entry short-circuits the walk. With the
    ``block`` exception every non-declaration is pulled back one level, so
    nested blocks sit flush with the block that contains them.
    """

    def __init__(self, hierarchy: HierarchyMap, block_exception: bool = False) -> None:
        self.hierarchy = hierarchy
        self.block_exception = block_exception

    def level(self, node: Node) -> int:
        return self._level(node, set())

    def _level(self, node: Node, seen: set[int]) -> int:
        parent = node.parent
        if parent is None:
            raise MalformedTreeError(f"{node!r} is not attached to a root")
        if isinstance(parent, Root):
            return 0
        if id(node) in seen:
            raise MalformedTreeError(f"Cyclic parent chain at {node!r}")
        seen.add(id(node))

        entry = self.hierarchy.lookup(parent)
        if entry is not None:
            level = entry.level + 1
        else:
            level = self._level(parent, seen) + 1

        if self.block_exception and not isinstance(node, Declaration):
            level -= 1
        return level
