"""
bracketcalc - an interactive arithmetic evaluator.

Reads lines of ``+ - * / ^`` arithmetic with nested brackets of any shape,
and shows the tokens, the parse tree, the reconstructed input and the
result for each one.
"""

from __future__ import annotations

from ._version import get_version
from .core import ir
from .core.errors import CalcError, ConfigError, FormatError, StructuralError

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "CalcError",
    "ConfigError",
    "FormatError",
    "StructuralError",
]
