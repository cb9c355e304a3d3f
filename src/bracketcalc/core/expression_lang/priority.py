"""
Precedence ranks used by the parser to pick split points.

A higher rank binds more loosely and is split first. Operators sharing a
rank are split at their rightmost occurrence, so a chain of them
groups to the left: ``8-3-2`` is ``(8-3)-2``.
"""

from __future__ import annotations

from bracketcalc.core.expression_lang.tokenizer import Token, TokenKind

_RANKS: dict[TokenKind, int] = {
    TokenKind.PLUS: 4,
    TokenKind.MINUS: 4,
    TokenKind.SLASH: 3,
    TokenKind.STAR: 3,
    TokenKind.CARET: 2,
    TokenKind.GROUP: 1,
    TokenKind.NUMBER: 0,
}

# Ranks at or below this are operands, never split points
ATOM_RANK = _RANKS[TokenKind.GROUP]


def priority(token: Token | TokenKind) -> int:
    """Return the precedence rank of a token or token kind."""
    kind = token.kind if isinstance(token, Token) else token
    return _RANKS[kind]
