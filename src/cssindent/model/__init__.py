"""cssindent model layer -- public type re-exports."""

from cssindent.model.config import ConfigError, IndentationConfig, load_config
from cssindent.model.diagnostic import Diagnostic, Severity
from cssindent.model.nodes import (
    AtRule,
    Comment,
    Container,
    Declaration,
    Node,
    NodeKind,
    Root,
    Rule,
    SourceSpan,
)

__all__ = [
    # nodes
    "NodeKind",
    "SourceSpan",
    "Node",
    "Container",
    "Root",
    "Rule",
    "AtRule",
    "Declaration",
    "Comment",
    # diagnostic
    "Severity",
    "Diagnostic",
    # config
    "ConfigError",
    "IndentationConfig",
    "load_config",
]
