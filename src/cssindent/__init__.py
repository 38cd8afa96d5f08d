"""cssindent -- indentation linter for stylesheets."""

__version__ = "0.1.0"

from cssindent.indentation import IndentationCheck, check_indentation  # noqa: E402
from cssindent.linter import LintError, lint_or_raise, lint_source  # noqa: E402
from cssindent.model import Diagnostic, IndentationConfig, Severity  # noqa: E402
from cssindent.parser import ParseError, parse_stylesheet  # noqa: E402

__all__ = [
    "__version__",
    "IndentationCheck",
    "check_indentation",
    "LintError",
    "lint_source",
    "lint_or_raise",
    "Diagnostic",
    "IndentationConfig",
    "Severity",
    "ParseError",
    "parse_stylesheet",
]
