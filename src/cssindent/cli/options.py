"""Options shared by the check and inspect commands."""

from __future__ import annotations

import dataclasses
from typing import Any, Callable

import click

from cssindent.model.config import (
    KNOWN_EXCEPTIONS,
    TAB,
    ConfigError,
    IndentationConfig,
    load_config,
)
from cssindent.model.diagnostic import Severity


class IndentType(click.ParamType):
    """A positive integer or the keyword ``tab``."""

    name = "indent"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> int | str:
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        text = str(value).strip().lower()
        if text == TAB:
            return TAB
        if text.isdecimal() and int(text) > 0:
            return int(text)
        self.fail(f"{value!r} is not a positive integer or 'tab'", param, ctx)


def indent_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the indentation configuration options to a command."""
    decorators = [
        click.option(
            "--indent",
            type=IndentType(),
            default=None,
            help="Spaces per level, or 'tab'. Defaults to 2.",
        ),
        click.option(
            "--except",
            "exceptions",
            multiple=True,
            type=click.Choice(sorted(KNOWN_EXCEPTIONS)),
            help="Do not expect an extra level for nested blocks or multi-line values.",
        ),
        click.option(
            "--hierarchical-selectors",
            is_flag=True,
            default=False,
            help="Indent rules whose selector extends the previous rule's selector.",
        ),
        click.option(
            "--config",
            "config_path",
            type=click.Path(exists=True, dir_okay=False),
            default=None,
            help="JSON file with an 'indentation' entry.",
        ),
        click.option(
            "--warn",
            is_flag=True,
            default=False,
            help="Report findings as warnings (exit code stays 0).",
        ),
    ]
    for decorator in reversed(decorators):
        func = decorator(func)
    return func


def build_config(
    indent: int | str | None,
    exceptions: tuple[str, ...],
    hierarchical_selectors: bool,
    config_path: str | None,
    warn: bool,
) -> IndentationConfig:
    """Merge a config file (if any) with command line overrides."""
    try:
        config = load_config(config_path) if config_path else IndentationConfig()
        overrides: dict[str, Any] = {}
        if indent is not None:
            overrides["indent"] = indent
        if exceptions:
            overrides["exceptions"] = frozenset(exceptions)
        if hierarchical_selectors:
            overrides["hierarchical_selectors"] = True
        if warn:
            overrides["severity"] = Severity.WARNING
        return dataclasses.replace(config, **overrides) if overrides else config
    except ConfigError as exc:
        raise click.UsageError(str(exc)) from exc
