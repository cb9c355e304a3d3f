"""
Expression tree types for the calculator IR.

Supports:
- Numeric literals: 3, 0.5, 1000
- Arithmetic: +, -, *, /, ^
- Explicit grouping: (a + b), [a], <a>, {a}

Trees are built bottom-up by the parser and never mutated afterwards.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class BinaryOp(StrEnum):
    """Binary operators for expressions."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    POW = "^"


# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class Literal(BaseModel):
    """A numeric literal."""

    value: float = Field(description="The literal value")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.value)


class BinaryExpr(BaseModel):
    """Binary operation: left op right."""

    op: BinaryOp
    left: Expr
    right: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return _write(self, debug=False)

    def __repr__(self) -> str:
        return _write(self, debug=True)


class Grouped(BaseModel):
    """
    A bracketed sub-expression.

    Kept as its own node so the input can be reconstructed with its
    brackets; evaluation looks straight through it.
    """

    inner: Expr = Field(description="The bracketed expression")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return _write(self, debug=False)

    def __repr__(self) -> str:
        return _write(self, debug=True)


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Expr = Literal | BinaryExpr | Grouped

# Rebuild models for recursive forward references
BinaryExpr.model_rebuild()
Grouped.model_rebuild()


# ---------------------------------------------------------------------------
# Tree walking
# ---------------------------------------------------------------------------


def left_spine(expr: BinaryExpr) -> list[BinaryExpr]:
    """Collect the chain of binary nodes reached by following ``left``.

    The root comes first; ``spine[-1].left`` is the leftmost operand of the
    whole chain. A run of same-rank operators parses into such a chain, so
    walking it keeps long inputs off the call stack.
    """
    spine = [expr]
    while isinstance(spine[-1].left, BinaryExpr):
        spine.append(spine[-1].left)
    return spine


def _write(expr: Expr, debug: bool) -> str:
    # Explicit work stack: strings are emitted, nodes are expanded in place.
    parts: list[str] = []
    stack: list[Expr | str] = [expr]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
        elif isinstance(item, Literal):
            parts.append(f"Literal(value={item.value!r})" if debug else str(item.value))
        elif isinstance(item, BinaryExpr):
            if debug:
                parts.append(f"BinaryExpr(op={item.op!r}, left=")
                stack.extend([")", item.right, ", right=", item.left])
            else:
                stack.extend([item.right, f" {item.op.value} ", item.left])
        else:
            parts.append("Grouped(inner=" if debug else "(")
            stack.extend([")", item.inner])
    return "".join(parts)
