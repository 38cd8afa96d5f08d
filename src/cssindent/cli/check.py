"""CLI command: cssindent check -- lint stylesheet indentation."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from cssindent.cli.options import build_config, indent_options
from cssindent.linter import lint_source
from cssindent.model.diagnostic import Severity
from cssindent.parser import ParseError


@click.command()
@click.argument(
    "files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False)
)
@indent_options
def check(
    files: tuple[str, ...],
    indent: int | str | None,
    exceptions: tuple[str, ...],
    hierarchical_selectors: bool,
    config_path: str | None,
    warn: bool,
) -> None:
    """Check the indentation of one or more stylesheet files.

    Prints one line per finding and exits with code 1 if any file has
    errors or cannot be parsed, 0 otherwise.
    """
    config = build_config(indent, exceptions, hierarchical_selectors, config_path, warn)

    errors = 0
    warnings = 0
    failed = False

    for file in files:
        path = Path(file)
        try:
            diagnostics = lint_source(path.read_text(encoding="utf-8"), config)
        except ParseError as exc:
            click.echo(f"{path}: parse error: {exc}", err=True)
            failed = True
            continue

        for diag in diagnostics:
            click.echo(f"{path}:{diag.line}: {diag.severity.value}: {diag.message} ({diag.rule})")
        errors += sum(1 for d in diagnostics if d.severity is Severity.ERROR)
        warnings += sum(1 for d in diagnostics if d.severity is Severity.WARNING)

    if not errors and not warnings and not failed:
        click.echo(f"OK: {len(files)} file(s) checked (0 diagnostics)")
        sys.exit(0)

    click.echo()
    click.echo(f"Summary: {errors} error(s), {warnings} warning(s) in {len(files)} file(s)")

    if errors or failed:
        sys.exit(1)
    sys.exit(0)
