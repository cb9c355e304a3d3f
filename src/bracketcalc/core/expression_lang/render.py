"""
Turn an expression tree back into text.

``deparse`` flattens the tree into tokens and ``delex`` writes the tokens
out. Groups are always written with parentheses, so ``[1+2]`` comes back
as ``(1+2)``.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from decimal import Decimal

from bracketcalc.core.expression_lang.tokenizer import OPERATOR_CHARS, Token, TokenKind
from bracketcalc.core.ir.expressions import (
    BinaryExpr,
    BinaryOp,
    Expr,
    Grouped,
    Literal,
    left_spine,
)

_OP_TOKENS: dict[BinaryOp, TokenKind] = {
    BinaryOp.ADD: TokenKind.PLUS,
    BinaryOp.SUB: TokenKind.MINUS,
    BinaryOp.MUL: TokenKind.STAR,
    BinaryOp.DIV: TokenKind.SLASH,
    BinaryOp.POW: TokenKind.CARET,
}

_TOKEN_CHARS: dict[TokenKind, str] = {kind: char for char, kind in OPERATOR_CHARS.items()}


def format_number(value: float) -> str:
    """Format a float as the shortest plain decimal that reads back exactly.

    No exponent and no trailing ``.0``: ``3.0 -> "3"``, ``1e-07 -> "0.0000001"``.
    Non-finite values are written ``inf``, ``-inf`` and ``NaN``.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return format(Decimal(repr(value)).normalize(), "f")


def deparse(expr: Expr) -> list[Token]:
    """Flatten an expression tree into an infix token sequence."""
    if isinstance(expr, Literal):
        return [Token(TokenKind.NUMBER, expr.value)]
    if isinstance(expr, BinaryExpr):
        spine = left_spine(expr)
        tokens = deparse(spine[-1].left)
        for node in reversed(spine):
            tokens.append(Token(_OP_TOKENS[node.op]))
            tokens.extend(deparse(node.right))
        return tokens
    if isinstance(expr, Grouped):
        return [Token(TokenKind.GROUP, children=tuple(deparse(expr.inner)))]
    raise TypeError(f"Unknown expression type: {type(expr).__name__}")


def delex(tokens: Iterable[Token]) -> str:
    """Write a token sequence out as text."""
    parts: list[str] = []
    for tok in tokens:
        if tok.kind == TokenKind.NUMBER:
            assert tok.value is not None
            parts.append(format_number(tok.value))
        elif tok.kind == TokenKind.GROUP:
            parts.append(f"({delex(tok.children)})")
        else:
            parts.append(_TOKEN_CHARS[tok.kind])
    return "".join(parts)


def render(expr: Expr) -> str:
    """Reconstruct input text from an expression tree."""
    return delex(deparse(expr))
