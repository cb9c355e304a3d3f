"""
Calculator Intermediate Representation (IR) types.

All types are re-exported from this package for convenience.
"""

from .expressions import (
    BinaryExpr,
    BinaryOp,
    Expr,
    Grouped,
    Literal,
    left_spine,
)

__all__ = [
    "BinaryExpr",
    "BinaryOp",
    "Expr",
    "Grouped",
    "Literal",
    "left_spine",
]
