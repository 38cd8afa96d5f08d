from cssindent.indentation.errors import HierarchyError, MalformedTreeError
from cssindent.indentation.hierarchy import HierarchyEntry, HierarchyMap
from cssindent.indentation.indent_unit import IndentUnit, expectation_message
from cssindent.indentation.levels import LevelCalculator
from cssindent.indentation.rule import IndentationCheck, check_indentation
from cssindent.indentation.selectors import resolve_level
from cssindent.indentation.whitespace import RULE_NAME, WhitespaceValidator, leading_whitespace

__all__ = [
    "RULE_NAME",
    "HierarchyError",
    "MalformedTreeError",
    "HierarchyEntry",
    "HierarchyMap",
    "IndentUnit",
    "expectation_message",
    "LevelCalculator",
    "resolve_level",
    "WhitespaceValidator",
    "leading_whitespace",
    "IndentationCheck",
    "check_indentation",
]
