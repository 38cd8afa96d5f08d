"""Build a stylesheet syntax tree from lark tokens, keeping raw whitespace."""

from __future__ import annotations

from pathlib import Path

from lark import Lark, Token
from lark.exceptions import UnexpectedCharacters, UnexpectedInput

from cssindent.model.nodes import (
    AtRule,
    Comment,
    Container,
    Declaration,
    Node,
    Root,
    Rule,
    SourceSpan,
)
from cssindent.parser.errors import ParseError

__all__ = ["parse_stylesheet", "TreeBuilder"]

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

# Tokens that end a statement when seen outside parentheses.
_TERMINATORS = frozenset({"LBRACE", "SEMI", "RBRACE"})

_lark: Lark | None = None


def _get_lark() -> Lark:
    global _lark
    if _lark is None:
        _lark = Lark(
            GRAMMAR_PATH.read_text(encoding="utf-8"),
            parser="lalr",
            lexer="basic",
        )
    return _lark


def _tokenize(source: str) -> list[Token]:
    try:
        return list(_get_lark().lex(source))
    except UnexpectedCharacters as exc:
        raise ParseError(
            f"Unexpected character {exc.char!r}", exc.line, exc.column
        ) from exc
    except UnexpectedInput as exc:  # pragma: no cover
        raise ParseError(str(exc), exc.line, exc.column) from exc


def _text(tokens: list[Token]) -> str:
    return "".join(str(t) for t in tokens)


def _last_line(tokens: list[Token]) -> int:
    for token in reversed(tokens):
        if token.type != "WS":
            return token.end_line
    return tokens[-1].end_line


class TreeBuilder:
    """Assemble a Root from a flat token list.

    Whitespace and stray semicolons between statements are accumulated and
    handed to the next node as ``raw_before``; whitespace before a closing
    brace becomes the container's ``raw_after``.
    """

    def __init__(self, tokens: list[Token]) -> None:
        self._tokens = tokens
        self._pos = 0

    def build(self) -> Root:
        root = Root()
        self._read_children(root, opener=None)
        end_line = self._tokens[-1].end_line if self._tokens else 1
        root.span = SourceSpan(1, end_line)
        return root

    # ---- containers ----

    def _read_children(self, container: Container, opener: Token | None) -> None:
        pending: list[str] = []
        while self._pos < len(self._tokens):
            token = self._tokens[self._pos]

            if token.type in ("WS", "SEMI"):
                pending.append(str(token))
                self._pos += 1
                continue

            if token.type == "RBRACE":
                if opener is None:
                    raise ParseError("Unexpected '}'", token.line, token.column)
                self._pos += 1
                container.raw_after = "".join(pending)
                container.span = SourceSpan(container.span.start_line, token.line)
                return

            if token.type == "COMMENT":
                self._pos += 1
                container.append(
                    Comment(
                        raw_before="".join(pending),
                        span=SourceSpan(token.line, token.end_line),
                        text=str(token)[2:-2],
                    )
                )
            else:
                container.append(self._read_statement("".join(pending)))
            pending = []

        if opener is not None:
            raise ParseError("Unclosed block", opener.line, opener.column)
        container.raw_after = "".join(pending)

    # ---- statements ----

    def _read_statement(self, raw_before: str) -> Node:
        start = self._pos
        depth = 0
        while self._pos < len(self._tokens):
            token = self._tokens[self._pos]
            if token.type == "LPAR":
                depth += 1
            elif token.type == "RPAR":
                depth = max(depth - 1, 0)
            elif depth == 0 and token.type in _TERMINATORS:
                break
            self._pos += 1

        body = self._tokens[start:self._pos]
        terminator = self._tokens[self._pos] if self._pos < len(self._tokens) else None

        if terminator is not None and terminator.type == "LBRACE":
            self._pos += 1
            block = self._open_block(body, raw_before, terminator)
            self._read_children(block, opener=terminator)
            return block

        if terminator is not None and terminator.type == "SEMI":
            self._pos += 1
            end_line = terminator.line
        else:
            # Whitespace before a closing brace belongs to the container.
            while body[-1].type == "WS":
                body.pop()
                self._pos -= 1
            end_line = _last_line(body)

        first = body[0]
        if first.type == "AT_KEYWORD":
            return AtRule(
                raw_before=raw_before,
                span=SourceSpan(first.line, end_line),
                name=str(first)[1:],
                params=_text(body[1:]).strip(),
                raw_after=None,
            )
        return self._declaration(body, raw_before, end_line)

    def _open_block(
        self, body: list[Token], raw_before: str, brace: Token
    ) -> Container:
        first = body[0] if body else brace
        span = SourceSpan(first.line, first.line)
        if first.type == "AT_KEYWORD":
            return AtRule(
                raw_before=raw_before,
                span=span,
                name=str(first)[1:],
                params=_text(body[1:]).strip(),
            )
        return Rule(raw_before=raw_before, span=span, selector=_text(body).rstrip())

    def _declaration(
        self, body: list[Token], raw_before: str, end_line: int
    ) -> Declaration:
        first = body[0]
        colon = next((i for i, t in enumerate(body) if t.type == "COLON"), None)
        if colon is None:
            raise ParseError(f"Unknown word {str(first)!r}", first.line, first.column)
        prop = _text(body[:colon]).strip()
        if not prop:
            raise ParseError("Declaration has no property", first.line, first.column)
        return Declaration(
            raw_before=raw_before,
            span=SourceSpan(first.line, end_line),
            prop=prop,
            value=_text(body[colon + 1:]).strip(),
        )


def parse_stylesheet(source: str) -> Root:
    """Parse stylesheet source text into a Root node.

    Raises :class:`ParseError` on unbalanced braces, statements that are
    neither rules nor declarations, and untokenizable input.
    """
    return TreeBuilder(_tokenize(source)).build()
