"""Hierarchy tracking for one indentation run.

The map records, for every node whose level has been confirmed, the node it
is subordinate to and its level. The level calculator uses it as a memo for
parent levels; the hierarchical selector resolver uses it to find peers of
earlier rules. A map lives for exactly one check run.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from cssindent.indentation.errors import HierarchyError
from cssindent.model.nodes import Node


@dataclass(frozen=True)
class HierarchyEntry:
    """Confirmed position of a node: who it hangs off and how deep it sits."""

    superordinate: Node
    level: int


class HierarchyMap:
    """Write-once mapping from node to :class:`HierarchyEntry`."""

    def __init__(self) -> None:
        self._entries: dict[Node, HierarchyEntry] = {}

    def record(self, node: Node, superordinate: Node, level: int) -> HierarchyEntry:
        if node in self._entries:
            raise HierarchyError(f"Hierarchy entry for {node!r} already recorded")
        if level < 0:
            raise HierarchyError(f"Negative level {level} for {node!r}")
        entry = HierarchyEntry(superordinate=superordinate, level=level)
        self._entries[node] = entry
        return entry

    def lookup(self, node: Node) -> HierarchyEntry | None:
        return self._entries.get(node)

    def __contains__(self, node: object) -> bool:
        return node in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._entries)
