"""Indentation rule configuration."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from cssindent.model.diagnostic import Severity

TAB = "tab"

BLOCK = "block"
VALUE = "value"
KNOWN_EXCEPTIONS = frozenset({BLOCK, VALUE})


class ConfigError(ValueError):
    """Raised when indentation options are malformed."""


@dataclass(frozen=True)
class IndentationConfig:
    """Options for one indentation check.

    ``indent`` is a positive number of spaces per level, or ``"tab"`` for a
    single tab per level. ``exceptions`` may contain ``"block"`` (nested blocks
    stay flush with their parent) and ``"value"`` (multi-line values stay at
    the declaration's level).
    """

    indent: int | str = 2
    exceptions: frozenset[str] = field(default_factory=frozenset)
    hierarchical_selectors: bool = False
    severity: Severity = Severity.ERROR

    def __post_init__(self) -> None:
        indent = self.indent
        if indent != TAB and (
            isinstance(indent, bool) or not isinstance(indent, int) or indent < 1
        ):
            raise ConfigError(
                f"indent must be a positive integer or {TAB!r}, got {indent!r}"
            )
        # Accept any iterable of names but store a frozenset.
        exceptions = frozenset(self.exceptions)
        unknown = exceptions - KNOWN_EXCEPTIONS
        if unknown:
            raise ConfigError(
                f"Unknown indentation exception(s): {', '.join(sorted(map(str, unknown)))}"
            )
        object.__setattr__(self, "exceptions", exceptions)
        if not isinstance(self.severity, Severity):
            raise ConfigError(f"severity must be a Severity, got {self.severity!r}")

    @property
    def is_tab(self) -> bool:
        return self.indent == TAB

    @property
    def block_exception(self) -> bool:
        return BLOCK in self.exceptions

    @property
    def value_exception(self) -> bool:
        return VALUE in self.exceptions

    @classmethod
    def from_options(
        cls, primary: int | str, secondary: dict[str, Any] | None = None
    ) -> IndentationConfig:
        """Build a config from stylelint-style rule options.

        ``primary`` is the indent setting; ``secondary`` may carry ``except``,
        ``hierarchicalSelectors`` and ``severity`` keys.
        """
        secondary = dict(secondary or {})
        unknown = set(secondary) - {"except", "hierarchicalSelectors", "severity"}
        if unknown:
            raise ConfigError(f"Unknown option(s): {', '.join(sorted(map(str, unknown)))}")

        if isinstance(primary, str) and primary != TAB:
            if not primary.isdecimal():
                raise ConfigError(f"indent must be a positive integer or {TAB!r}")
            primary = int(primary)

        exceptions = secondary.get("except", [])
        if isinstance(exceptions, str) or not isinstance(exceptions, (list, tuple, set, frozenset)):
            raise ConfigError("'except' must be a list of exception names")

        severity_name = str(secondary.get("severity", Severity.ERROR.value)).upper()
        try:
            severity = Severity(severity_name)
        except ValueError:
            raise ConfigError(f"Unknown severity: {severity_name.lower()!r}") from None

        hierarchical = secondary.get("hierarchicalSelectors", False)
        if not isinstance(hierarchical, bool):
            raise ConfigError(
                f"'hierarchicalSelectors' must be true or false, got {hierarchical!r}"
            )

        return cls(
            indent=primary,
            exceptions=frozenset(exceptions),
            hierarchical_selectors=hierarchical,
            severity=severity,
        )


def load_config(path: str | Path) -> IndentationConfig:
    """Read an indentation config from a JSON file.

    Expected shape::

        {"indentation": 2}
        {"indentation": ["tab", {"except": ["value"], "hierarchicalSelectors": true}]}
    """
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in {path}: {exc}") from exc

    if not isinstance(data, dict) or "indentation" not in data:
        raise ConfigError(f"{path} has no 'indentation' entry")

    options = data["indentation"]
    if isinstance(options, list):
        if not 1 <= len(options) <= 2:
            raise ConfigError("'indentation' list must be [primary] or [primary, options]")
        secondary = options[1] if len(options) == 2 else None
        if secondary is not None and not isinstance(secondary, dict):
            raise ConfigError("'indentation' secondary options must be an object")
        return IndentationConfig.from_options(options[0], secondary)
    return IndentationConfig.from_options(options)
