"""Core calculator functionality: IR, tokenizer, parser, reconstructor, evaluator."""

from . import ir
from .config import CalcConfig, load_config
from .errors import (
    CalcError,
    ConfigError,
    ErrorContext,
    FormatError,
    StructuralError,
)
from .pipeline import LineResult, run_line

__all__ = [
    "ir",
    "CalcConfig",
    "CalcError",
    "ConfigError",
    "ErrorContext",
    "FormatError",
    "LineResult",
    "StructuralError",
    "load_config",
    "run_line",
]
