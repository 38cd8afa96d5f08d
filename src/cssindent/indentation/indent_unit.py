"""Indent unit: the literal whitespace for one level and its description."""

from __future__ import annotations

from dataclasses import dataclass

from cssindent.model.config import TAB


@dataclass(frozen=True)
class IndentUnit:
    """One level of indentation: ``size`` spaces, or one tab when size is None."""

    size: int | None = None

    @classmethod
    def from_setting(cls, indent: int | str) -> IndentUnit:
        if indent == TAB:
            return cls(size=None)
        return cls(size=int(indent))

    @property
    def is_tab(self) -> bool:
        return self.size is None

    @property
    def text(self) -> str:
        return "\t" if self.size is None else " " * self.size

    @property
    def word(self) -> str:
        return "tab" if self.is_tab else "space"

    def expected(self, level: int) -> str:
        """Return the whitespace expected before content at *level*."""
        return self.text * level

    def describe(self, level: int) -> str:
        """Render *level* as a count of characters, e.g. ``"4 spaces"``."""
        count = level if self.size is None else level * self.size
        word = self.word if count == 1 else self.word + "s"
        return f"{count} {word}"


def expectation_message(unit: IndentUnit, level: int, line: int) -> str:
    return f"Expected indentation of {unit.describe(level)} at line {line}"
