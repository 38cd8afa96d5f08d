"""Linter facade: parse stylesheet source and run the indentation rule."""

from __future__ import annotations

import logging

from cssindent.indentation import check_indentation
from cssindent.model.config import IndentationConfig
from cssindent.model.diagnostic import Diagnostic
from cssindent.parser import parse_stylesheet

logger = logging.getLogger(__name__)


class LintError(Exception):
    """Raised when linting produces ERROR-severity diagnostics."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        messages = [str(d) for d in diagnostics if d.is_error]
        super().__init__(
            f"Lint failed with {len(messages)} error(s): " + "; ".join(messages)
        )


def lint_source(source: str, config: IndentationConfig | None = None) -> list[Diagnostic]:
    """Parse *source* and return every indentation diagnostic, node by node.

    Raises :class:`~cssindent.parser.ParseError` when the source is not a
    well-formed stylesheet.
    """
    config = config or IndentationConfig()
    root = parse_stylesheet(source)
    diagnostics = check_indentation(root, config)
    logger.info(
        "Linted %d top-level node(s) with indent=%s: %d diagnostic(s)",
        len(root.nodes),
        config.indent,
        len(diagnostics),
    )
    return diagnostics


def lint_or_raise(source: str, config: IndentationConfig | None = None) -> list[Diagnostic]:
    """Lint; raises :class:`LintError` if any ERROR diagnostics exist.

    Returns the remaining (warning) diagnostics when no errors are found.
    """
    diagnostics = lint_source(source, config)
    errors = [d for d in diagnostics if d.is_error]
    if errors:
        raise LintError(errors)
    return diagnostics
