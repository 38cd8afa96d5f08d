"""The indentation rule: one check run over one stylesheet tree."""

from __future__ import annotations

import logging

from cssindent.indentation.hierarchy import HierarchyMap
from cssindent.indentation.indent_unit import IndentUnit
from cssindent.indentation.levels import LevelCalculator
from cssindent.indentation.selectors import resolve_level
from cssindent.indentation.whitespace import WhitespaceValidator
from cssindent.model.config import IndentationConfig
from cssindent.model.diagnostic import Diagnostic
from cssindent.model.nodes import AtRule, Declaration, Node, Root, Rule

logger = logging.getLogger(__name__)

_CHECKED_TYPES = (Rule, AtRule, Declaration)


class IndentationCheck:
    """State for a single indentation run.

    Every run owns a fresh :class:`HierarchyMap`, so levels confirmed for one
    tree never leak into another. Nodes are visited in document order because
    hierarchical selectors depend on earlier rules having been resolved.
    """

    def __init__(self, root: Root, config: IndentationConfig | None = None) -> None:
        self.root = root
        self.config = config or IndentationConfig()
        self.unit = IndentUnit.from_setting(self.config.indent)
        self.hierarchy = HierarchyMap()
        self.calculator = LevelCalculator(
            self.hierarchy, block_exception=self.config.block_exception
        )
        self.validator = WhitespaceValidator(
            self.unit,
            severity=self.config.severity,
            value_exception=self.config.value_exception,
        )
        self.levels: dict[Node, int] = {}

    def run(self) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []
        for node in self.root.walk():
            if not isinstance(node, _CHECKED_TYPES):
                continue
            level = self.node_level(node)
            self.levels[node] = level
            diagnostics.extend(
                self.validator.validate(node, level, first_in_root=node is self.root.first)
            )
        logger.debug(
            "Indentation check visited %d node(s), %d diagnostic(s)",
            len(self.levels),
            len(diagnostics),
        )
        return diagnostics

    def node_level(self, node: Node) -> int:
        """Compute the level of *node* and record it in the hierarchy."""
        level = self.calculator.level(node)
        if self.config.hierarchical_selectors:
            # resolve_level records the node itself when it joins a hierarchy.
            return resolve_level(node, level, self.hierarchy)
        # Without selector hierarchy the superordinate can only be the parent.
        self.hierarchy.record(node, node.parent, level)
        return level


def check_indentation(root: Root, config: IndentationConfig | None = None) -> list[Diagnostic]:
    """Run the indentation rule over *root* and return its diagnostics."""
    return IndentationCheck(root, config).run()
