"""
Split-based parser for calculator expressions.

Rather than descending through one rule per precedence level, the parser
looks at a whole token sequence, picks the token with the highest rank
(see ``priority``) and splits there. Among tokens of that rank the
rightmost one becomes the root, so everything to its left, including
earlier operators of the same rank, ends up in the left subtree:

    1 + 2 * 3 - 4      highest rank is 4 (+, -); rightmost is '-'
    └─ 1 + 2 * 3  -  4
       └─ 1  +  2 * 3     rank 4 again, '+'
                └─ 2 * 3  rank 3, '*'

Chains of equal rank therefore group to the left: ``8-3-2`` is
``(8-3)-2`` and ``2^3^2`` is ``(2^3)^2``.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from bracketcalc.core.errors import make_structural_error
from bracketcalc.core.expression_lang.priority import ATOM_RANK, priority
from bracketcalc.core.expression_lang.tokenizer import Token, TokenKind, tokenize
from bracketcalc.core.ir.expressions import (
    BinaryExpr,
    BinaryOp,
    Expr,
    Grouped,
    Literal,
)

logger = logging.getLogger(__name__)

TOKEN_OPS: dict[TokenKind, BinaryOp] = {
    TokenKind.PLUS: BinaryOp.ADD,
    TokenKind.MINUS: BinaryOp.SUB,
    TokenKind.STAR: BinaryOp.MUL,
    TokenKind.SLASH: BinaryOp.DIV,
    TokenKind.CARET: BinaryOp.POW,
}


def parse(tokens: Sequence[Token], source: str | None = None) -> Expr:
    """Parse a token sequence into an expression tree.

    Args:
        tokens: Output of ``tokenize``.
        source: The line the tokens came from, used only for error context.

    Returns:
        The root of the expression tree.

    Raises:
        StructuralError: If the sequence (or any part of it) is empty, or
            two operands appear with no operator between them.
    """
    if not tokens:
        raise make_structural_error("Empty expression", source, 0)
    return _parse(list(tokens), source)


def _parse(tokens: list[Token], source: str | None) -> Expr:
    highest = max(priority(tok) for tok in tokens)

    if highest <= ATOM_RANK:
        if len(tokens) > 1:
            raise make_structural_error(
                "Missing operator between operands", source, tokens[1].pos
            )
        return _parse_atom(tokens[0], source)

    # Every operator of the loosest tier splits the sequence; folding the
    # operands left to right makes the rightmost one the root.
    splits = [i for i, tok in enumerate(tokens) if priority(tok) == highest]
    bounds = [-1, *splits, len(tokens)]
    operands = [tokens[start + 1 : end] for start, end in zip(bounds, bounds[1:])]

    for n, operand in enumerate(operands):
        if operand:
            continue
        if n == 0:
            tok = tokens[splits[0]]
            side = "left"
        else:
            tok = tokens[splits[n - 1]]
            side = "right"
        raise make_structural_error(
            f"Operator {TOKEN_OPS[tok.kind].value!r} is missing its {side} operand",
            source,
            tok.pos,
        )

    logger.debug(
        "Splitting %d tokens at %d operators of rank %d", len(tokens), len(splits), highest
    )
    tree = _parse(operands[0], source)
    for index, operand in zip(splits, operands[1:]):
        op = TOKEN_OPS[tokens[index].kind]
        tree = BinaryExpr(op=op, left=tree, right=_parse(operand, source))
    return tree


def _parse_atom(tok: Token, source: str | None) -> Expr:
    if tok.kind == TokenKind.NUMBER:
        assert tok.value is not None
        return Literal(value=tok.value)

    if not tok.children:
        raise make_structural_error("Empty bracket group", source, tok.pos)
    return Grouped(inner=_parse(list(tok.children), source))


def parse_expr(source: str) -> Expr:
    """Parse an expression string into an AST.

    Args:
        source: Expression string (e.g., "(2 + 3) * 4")

    Returns:
        Parsed expression AST.

    Raises:
        FormatError: If tokenization fails.
        StructuralError: If the tokens do not form an expression.
    """
    return parse(tokenize(source), source)
