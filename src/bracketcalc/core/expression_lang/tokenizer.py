"""
Tokenizer for calculator expressions.

Converts an input line into a sequence of typed tokens. Bracket groups are
resolved during the scan, so the result is a tree of tokens: every
``GROUP`` token carries the tokens found between its brackets.
"""

from __future__ import annotations

import logging
from enum import StrEnum, auto

from bracketcalc.core.errors import make_format_error

logger = logging.getLogger(__name__)


class TokenKind(StrEnum):
    """Token types for calculator expressions."""

    NUMBER = auto()

    # Operators
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()
    CARET = auto()

    # Bracketed sub-sequence
    GROUP = auto()


class Token:
    """A single token from the tokenizer.

    ``value`` is set for ``NUMBER`` tokens and ``children`` for ``GROUP``
    tokens. ``pos`` is the column of the first character and does not take
    part in equality. Tokens are immutable once built.
    """

    __slots__ = ("kind", "value", "children", "pos")

    def __init__(
        self,
        kind: TokenKind,
        value: float | None = None,
        children: tuple[Token, ...] = (),
        pos: int = 0,
    ) -> None:
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "value", value)
        object.__setattr__(self, "children", tuple(children))
        object.__setattr__(self, "pos", pos)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"Token is immutable; cannot set {name!r}")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Token is immutable; cannot delete {name!r}")

    def __repr__(self) -> str:
        # Deeply nested groups are written without recursion.
        parts: list[str] = []
        stack: list[Token | str] = [self]
        while stack:
            item = stack.pop()
            if isinstance(item, str):
                parts.append(item)
            elif item.kind == TokenKind.NUMBER:
                parts.append(f"Token({item.kind}, {item.value!r})")
            elif item.kind == TokenKind.GROUP:
                parts.append(f"Token({item.kind}, [")
                stack.append("])")
                for n, child in enumerate(reversed(item.children)):
                    stack.append(child)
                    if n < len(item.children) - 1:
                        stack.append(", ")
            else:
                parts.append(f"Token({item.kind})")
        return "".join(parts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return (
            self.kind == other.kind
            and self.value == other.value
            and self.children == other.children
        )

    def __hash__(self) -> int:
        return hash((self.kind, self.value, self.children))


OPERATOR_CHARS: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "^": TokenKind.CARET,
}

OPENING_BRACKETS = "([<{"
CLOSING_BRACKETS = ")]>}"

_NUMBER_CHARS = "0123456789."


def tokenize(source: str) -> list[Token]:
    """Tokenize an input line into a nested list of tokens.

    Whitespace is skipped without ending a pending number, so ``"1 000"``
    reads as ``1000``. Characters that are not digits, operators, brackets
    or whitespace are ignored. Any closing bracket closes the innermost open
    group, whatever its shape.

    Raises:
        FormatError: On a malformed number, a closing bracket with no open
            group, or a group still open at end of input.
    """
    # stack[0] is the top-level output; each open bracket pushes a new list
    stack: list[list[Token]] = [[]]
    openers: list[int] = []
    digits: list[str] = []
    number_start = 0

    def flush_number() -> None:
        if not digits:
            return
        text = "".join(digits)
        digits.clear()
        try:
            value = float(text)
        except ValueError:
            raise make_format_error(
                f"Malformed number: {text!r}", source, number_start
            ) from None
        stack[-1].append(Token(TokenKind.NUMBER, value, pos=number_start))

    for i, c in enumerate(source):
        if c.isspace():
            continue

        if c in _NUMBER_CHARS:
            if not digits:
                number_start = i
            digits.append(c)
            continue

        flush_number()

        if c in OPERATOR_CHARS:
            stack[-1].append(Token(OPERATOR_CHARS[c], pos=i))
        elif c in OPENING_BRACKETS:
            stack.append([])
            openers.append(i)
            logger.debug("Opened group at column %d (depth %d)", i, len(openers))
        elif c in CLOSING_BRACKETS:
            if not openers:
                raise make_format_error("Unmatched closing bracket", source, i)
            children = stack.pop()
            start = openers.pop()
            stack[-1].append(Token(TokenKind.GROUP, children=tuple(children), pos=start))
            logger.debug("Closed group opened at column %d with %d tokens", start, len(children))

    flush_number()

    if openers:
        raise make_format_error("Unclosed bracket", source, openers[-1])

    return stack[0]
