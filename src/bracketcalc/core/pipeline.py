"""
One pass of the calculator pipeline over a single input line.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from bracketcalc.core.errors import make_structural_error
from bracketcalc.core.expression_lang import evaluate, parse, render, tokenize
from bracketcalc.core.expression_lang.tokenizer import Token
from bracketcalc.core.ir.expressions import Expr

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LineResult:
    """Everything the pipeline produced for one line."""

    source: str
    tokens: tuple[Token, ...]
    tree: Expr
    reconstructed: str
    value: float


def run_line(source: str) -> LineResult:
    """Tokenize, parse, render and evaluate one line.

    Raises:
        FormatError: If the line cannot be tokenized.
        StructuralError: If the tokens do not form an expression, or the
            brackets nest deeper than the interpreter stack allows.
    """
    try:
        tokens = tokenize(source)
        tree = parse(tokens, source)
        return LineResult(
            source=source,
            tokens=tuple(tokens),
            tree=tree,
            reconstructed=render(tree),
            value=evaluate(tree),
        )
    except RecursionError:
        logger.debug("Recursion limit hit on a %d character line", len(source))
        raise make_structural_error("Expression nested too deeply") from None
