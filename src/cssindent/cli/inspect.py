"""CLI command: cssindent inspect -- display the tree with expected levels."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from cssindent.cli.options import build_config, indent_options
from cssindent.indentation import IndentationCheck
from cssindent.model.nodes import AtRule, Comment, Declaration, Node, Root, Rule
from cssindent.parser import ParseError, parse_stylesheet


def _depth(node: Node) -> int:
    depth = 0
    parent = node.parent
    while parent is not None and not isinstance(parent, Root):
        depth += 1
        parent = parent.parent
    return depth


def _first_line(text: str, limit: int = 50) -> str:
    line = text.split("\n", 1)[0]
    if len(line) > limit or "\n" in text:
        return line[:limit] + "..."
    return line


def _describe(node: Node) -> str:
    if isinstance(node, Rule):
        return f'rule "{_first_line(node.selector)}"'
    if isinstance(node, AtRule):
        return f"@{node.name} {_first_line(node.params)}".rstrip()
    if isinstance(node, Declaration):
        return f"{node.prop}: {_first_line(node.value)}"
    if isinstance(node, Comment):
        return "comment"
    return node.kind.value  # pragma: no cover


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@indent_options
def inspect(
    file: str,
    indent: int | str | None,
    exceptions: tuple[str, ...],
    hierarchical_selectors: bool,
    config_path: str | None,
    warn: bool,
) -> None:
    """Parse a stylesheet and show the level expected for every node."""
    config = build_config(indent, exceptions, hierarchical_selectors, config_path, warn)
    path = Path(file)

    try:
        root = parse_stylesheet(path.read_text(encoding="utf-8"))
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    check = IndentationCheck(root, config)
    diagnostics = check.run()

    click.echo(f"File:  {path.name}")
    click.echo(f"Nodes: {sum(1 for _ in root.walk())}")
    click.echo()

    for node in root.walk():
        parts = [f"{'  ' * _depth(node)}{_describe(node)}", f"line={node.span.start_line}"]
        if node in check.levels:
            parts.append(f"level={check.levels[node]}")
        click.echo("  ".join(parts))

    click.echo()
    click.echo(f"Diagnostics: {len(diagnostics)}")
