"""Shared pytest fixtures for bracketcalc tests."""

import pytest

from bracketcalc.core.expression_lang import parse_expr
from bracketcalc.core.ir import Expr

_ENV_VARS = ("BRACKETCALC_PROMPT", "BRACKETCALC_FAIL_FAST", "BRACKETCALC_LOG_LEVEL")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep BRACKETCALC_* settings from the developer's shell out of tests."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def nested_tree() -> Expr:
    """Return a tree with groups nested three deep."""
    return parse_expr("{[<1 + 2>] * 3} - 4")
