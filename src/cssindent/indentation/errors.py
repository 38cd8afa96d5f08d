"""Errors raised when a tree breaks the indentation check's assumptions."""


class MalformedTreeError(Exception):
    """Raised when a node's parent chain is cyclic or detached from the root."""


class HierarchyError(Exception):
    """Raised when the hierarchy map would be overwritten or walked in a cycle."""
