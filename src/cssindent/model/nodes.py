"""Stylesheet syntax tree: Root, Rule, AtRule, Declaration and Comment nodes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator


class NodeKind(Enum):
    """Closed set of node kinds a stylesheet tree can hold."""

    ROOT = "root"
    RULE = "block-rule"
    AT_RULE = "at-rule"
    DECLARATION = "declaration"
    COMMENT = "comment"


@dataclass(frozen=True)
class SourceSpan:
    """1-based line range a node occupies in the source."""

    start_line: int
    end_line: int


@dataclass(eq=False)
class Node:
    """Base class for every tree node.

    Nodes compare and hash by identity so they can key per-run lookup tables.
    ``raw_before`` holds the text between the previous sibling (or the
    opening brace) and the node itself.
    """

    raw_before: str = ""
    span: SourceSpan = field(default_factory=lambda: SourceSpan(1, 1))
    parent: Container | None = field(default=None, repr=False)
    index: int | None = field(default=None, init=False, repr=False)

    kind = NodeKind.ROOT

    @property
    def previous_sibling(self) -> Node | None:
        """Return the node immediately before this one under the same parent.

        Uses the position recorded by :meth:`Container.append`; a node whose
        parent was assigned by hand, or whose slot no longer holds it, has no
        previous sibling.
        """
        parent, index = self.parent, self.index
        if parent is None or not index:
            return None
        siblings = parent.nodes
        if index >= len(siblings) or siblings[index] is not self:
            return None
        return siblings[index - 1]


@dataclass(eq=False)
class Container(Node):
    """A node that holds children.

    ``raw_after`` is the text between the last child and the closing brace;
    it is ``None`` for at-rules that have no body.
    """

    nodes: list[Node] = field(default_factory=list, repr=False)
    raw_after: str | None = ""

    @property
    def first(self) -> Node | None:
        return self.nodes[0] if self.nodes else None

    def append(self, child: Node) -> None:
        child.parent = self
        child.index = len(self.nodes)
        self.nodes.append(child)

    def walk(self) -> Iterator[Node]:
        """Yield every descendant once, depth-first in document order."""
        for child in self.nodes:
            yield child
            if isinstance(child, Container):
                yield from child.walk()


@dataclass(eq=False)
class Root(Container):
    """Top of the tree; it has no indentation of its own."""

    kind = NodeKind.ROOT


@dataclass(eq=False)
class Rule(Container):
    """A selector followed by a block, e.g. ``.foo .bar { ... }``."""

    selector: str = ""

    kind = NodeKind.RULE


@dataclass(eq=False)
class AtRule(Container):
    """An ``@name params`` statement, with or without a block."""

    name: str = ""
    params: str = ""

    kind = NodeKind.AT_RULE

    @property
    def has_body(self) -> bool:
        return self.raw_after is not None


@dataclass(eq=False)
class Declaration(Node):
    """A ``prop: value`` pair inside a block."""

    prop: str = ""
    value: str = ""

    kind = NodeKind.DECLARATION


@dataclass(eq=False)
class Comment(Node):
    """A ``/* ... */`` comment."""

    text: str = ""

    kind = NodeKind.COMMENT
