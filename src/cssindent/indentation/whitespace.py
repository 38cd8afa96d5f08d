"""Whitespace validator: compare actual indentation against the expected level."""

from __future__ import annotations

from typing import Iterator

from cssindent.indentation.indent_unit import IndentUnit, expectation_message
from cssindent.model.diagnostic import Diagnostic, Severity
from cssindent.model.nodes import Container, Declaration, Node, Rule

RULE_NAME = "indentation"

_INDENT_CHARS = " \t"


def leading_whitespace(text: str, start: int) -> str | None:
    """Return the run of spaces and tabs starting at *start*.

    Returns None when the run hits a line break or the end of *text*: a blank
    line has no content whose indentation could be wrong.
    """
    end = start
    while end < len(text) and text[end] in _INDENT_CHARS:
        end += 1
    if end == len(text) or text[end] in "\r\n":
        return None
    return text[start:end]


def trailing_indent(raw: str) -> str:
    """Return the part of *raw* after its last newline."""
    return raw[raw.rfind("\n") + 1:]


def _continuation_lines(text: str) -> Iterator[tuple[int, str | None]]:
    """Yield ``(newline ordinal, leading whitespace)`` for each newline in *text*."""
    ordinal = 0
    index = text.find("\n")
    while index != -1:
        ordinal += 1
        yield ordinal, leading_whitespace(text, index + 1)
        index = text.find("\n", index + 1)


class WhitespaceValidator:
    """Check the four whitespace regions a node can own.

    Before the node, before its closing brace, inside a multi-line value and
    inside a multi-line selector.
    """

    def __init__(
        self,
        unit: IndentUnit,
        severity: Severity = Severity.ERROR,
        value_exception: bool = False,
    ) -> None:
        self.unit = unit
        self.severity = severity
        self.value_exception = value_exception

    def validate(self, node: Node, level: int, first_in_root: bool = False) -> list[Diagnostic]:
        diagnostics = self.check_before(node, level, first_in_root)
        diagnostics.extend(self.check_after(node, level))
        if isinstance(node, Declaration):
            diagnostics.extend(self.check_value(node, level))
        elif isinstance(node, Rule):
            diagnostics.extend(self.check_selector(node, level))
        return diagnostics

    def check_before(self, node: Node, level: int, first_in_root: bool = False) -> list[Diagnostic]:
        # Without a newline there is no indentation to check, unless the node
        # opens the file.
        before = node.raw_before
        if not first_in_root and "\n" not in before:
            return []
        if trailing_indent(before) == self.unit.expected(level):
            return []
        return [self._report(node, level, node.span.start_line)]

    def check_after(self, node: Node, level: int) -> list[Diagnostic]:
        if not isinstance(node, Container):
            return []
        after = node.raw_after
        if after is None or "\n" not in after:
            return []
        if trailing_indent(after) == self.unit.expected(level):
            return []
        return [self._report(node, level, node.span.end_line)]

    def check_value(self, decl: Declaration, level: int) -> list[Diagnostic]:
        value_level = level if self.value_exception else level + 1
        return self._check_lines(decl, decl.value, value_level)

    def check_selector(self, rule: Rule, level: int) -> list[Diagnostic]:
        return self._check_lines(rule, rule.selector, level)

    def _check_lines(self, node: Node, text: str, level: int) -> list[Diagnostic]:
        if "\n" not in text:
            return []
        expected = self.unit.expected(level)
        diagnostics: list[Diagnostic] = []
        for ordinal, actual in _continuation_lines(text):
            if actual is not None and actual != expected:
                diagnostics.append(
                    self._report(node, level, node.span.start_line + ordinal)
                )
        return diagnostics

    def _report(self, node: Node, level: int, line: int) -> Diagnostic:
        return Diagnostic(
            rule=RULE_NAME,
            severity=self.severity,
            message=expectation_message(self.unit, level, line),
            line=line,
            node=node,
        )
