"""Diagnostic model: structured lint messages for stylesheet analysis."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from cssindent.model.nodes import Node


class Severity(Enum):
    """Severity level for a diagnostic message."""

    ERROR = "ERROR"
    WARNING = "WARNING"


@dataclass(frozen=True)
class Diagnostic:
    """A single finding about a stylesheet.

    Attributes:
        rule: Identifier for the rule that produced this diagnostic.
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        line: 1-based source line the finding points at.
        node: The tree node involved, if applicable.
    """

    rule: str
    severity: Severity
    message: str
    line: int
    node: Node | None = field(default=None, compare=False, repr=False)

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        return f"{self.severity.value} line {self.line}: {self.message} ({self.rule})"
