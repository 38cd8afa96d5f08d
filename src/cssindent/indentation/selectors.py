"""Hierarchical selectors: indent flat sibling rules by selector prefix.

In the hierarchy, rule A is subordinate to rule B when A's selector starts
with B's selector. Each rule can be subordinate to one other rule but
superordinate to many::

    .foo {}
      .foo .bar {}
        .foo .bar .baz {}
      .foo .qux {}

Subordinates do not always follow their superordinate directly, so when a
rule does not extend the previous rule's selector we walk back up the
recorded superordinates looking for one it does extend. The prefix test is a
plain string comparison: ``.foo`` is a prefix of ``.foobar``.
"""

from __future__ import annotations

import logging

from cssindent.indentation.errors import HierarchyError
from cssindent.indentation.hierarchy import HierarchyMap
from cssindent.model.nodes import Node, Rule

logger = logging.getLogger(__name__)


def resolve_level(node: Node, naive_level: int, hierarchy: HierarchyMap) -> int:
    """Return the level of *node* once selector hierarchy is taken into account.

    Records the node in *hierarchy* when it is found to be subordinate to an
    earlier rule. Anything that is not a rule preceded by a rule keeps
    *naive_level* and is not recorded.
    """
    prev = node.previous_sibling
    if not isinstance(node, Rule) or not isinstance(prev, Rule):
        return naive_level

    if node.selector.startswith(prev.selector):
        prev_entry = hierarchy.lookup(prev)
        level = prev_entry.level + 1 if prev_entry is not None else naive_level + 1
        hierarchy.record(node, prev, level)
        logger.debug("%r is subordinate to %r at level %d", node.selector, prev.selector, level)
        return level

    # Not subordinate to prev; maybe a peer of prev, or of one of the rules
    # prev hangs off.
    candidate: Node = prev
    visited: set[int] = set()
    while True:
        entry = hierarchy.lookup(candidate)
        if entry is None:
            break
        if id(candidate) in visited:
            raise HierarchyError(f"Cyclic superordinate chain at {candidate!r}")
        visited.add(id(candidate))

        superordinate = entry.superordinate
        if isinstance(superordinate, Rule) and node.selector.startswith(superordinate.selector):
            hierarchy.record(node, superordinate, entry.level)
            logger.debug(
                "%r is a peer under %r at level %d",
                node.selector,
                superordinate.selector,
                entry.level,
            )
            return entry.level
        candidate = superordinate

    return naive_level
