"""
Calculator expression language.

Tokenizer, parser, reconstructor and evaluator for arithmetic over
``+ - * / ^`` with nested bracket groups.

Usage:
    from bracketcalc.core.expression_lang import evaluate, parse_expr, render

    expr = parse_expr("[2 + 3] * 4")
    render(expr)    # "(2+3)*4"
    evaluate(expr)  # 20.0
"""

from bracketcalc.core.expression_lang.evaluator import evaluate
from bracketcalc.core.expression_lang.parser import parse, parse_expr
from bracketcalc.core.expression_lang.priority import priority
from bracketcalc.core.expression_lang.render import deparse, delex, format_number, render
from bracketcalc.core.expression_lang.tokenizer import Token, TokenKind, tokenize

__all__ = [
    "Token",
    "TokenKind",
    "delex",
    "deparse",
    "evaluate",
    "format_number",
    "parse",
    "parse_expr",
    "priority",
    "render",
    "tokenize",
]
