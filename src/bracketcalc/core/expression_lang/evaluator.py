"""
Expression evaluator for calculator expressions.

Walks the tree and computes a float. Arithmetic follows IEEE-754: dividing
by zero gives an infinity (or NaN for 0/0), a negative base with a
fractional exponent gives NaN, and overflow gives an infinity. None of
these raise.
"""

from __future__ import annotations

import math

from bracketcalc.core.ir.expressions import (
    BinaryExpr,
    BinaryOp,
    Expr,
    Grouped,
    Literal,
    left_spine,
)


def evaluate(expr: Expr) -> float:
    """Evaluate an expression tree."""
    if isinstance(expr, Literal):
        return expr.value

    if isinstance(expr, Grouped):
        return evaluate(expr.inner)

    if isinstance(expr, BinaryExpr):
        return _interpret_chain(expr)

    raise TypeError(f"Unknown expression type: {type(expr).__name__}")


def _interpret_chain(expr: BinaryExpr) -> float:
    """Evaluate a left-leaning chain of operations without recursing down it."""
    spine = left_spine(expr)
    value = evaluate(spine[-1].left)
    for node in reversed(spine):
        value = _apply(node.op, value, evaluate(node.right))
    return value


def _apply(op: BinaryOp, left: float, right: float) -> float:
    if op == BinaryOp.ADD:
        return left + right
    if op == BinaryOp.SUB:
        return left - right
    if op == BinaryOp.MUL:
        return left * right
    if op == BinaryOp.DIV:
        return _divide(left, right)
    if op == BinaryOp.POW:
        return _power(left, right)

    raise ValueError(f"Unknown binary op: {op}")


def _divide(left: float, right: float) -> float:
    """IEEE division: Python raises on a zero divisor, IEEE does not."""
    try:
        return left / right
    except ZeroDivisionError:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)


def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and value.is_integer() and value % 2 == 1


def _power(base: float, exponent: float) -> float:
    """IEEE pow, mapping math.pow's domain and range errors to inf/NaN."""
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        if base == 0:
            # zero to a negative power
            if math.copysign(1.0, base) < 0 and _is_odd_integer(exponent):
                return -math.inf
            return math.inf
        return math.nan
