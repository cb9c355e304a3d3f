"""Tests for running one line through the whole pipeline."""

from __future__ import annotations

import math

import pytest

from bracketcalc.core.errors import FormatError, StructuralError
from bracketcalc.core.ir import BinaryExpr, Grouped
from bracketcalc.core.pipeline import run_line


class TestRunLine:
    def test_all_stages(self) -> None:
        result = run_line("[2 + 3] * 4\n")
        assert result.source == "[2 + 3] * 4\n"
        assert len(result.tokens) == 3
        assert isinstance(result.tree, BinaryExpr)
        assert isinstance(result.tree.left, Grouped)
        assert result.reconstructed == "(2+3)*4"
        assert result.value == 20.0

    def test_result_is_frozen(self) -> None:
        result = run_line("1")
        with pytest.raises(AttributeError):
            result.value = 2.0  # type: ignore[misc]

    def test_numeric_edge_cases_are_values(self) -> None:
        assert run_line("1/0").value == math.inf
        assert math.isnan(run_line("0/0").value)

    def test_format_error(self) -> None:
        with pytest.raises(FormatError):
            run_line("1 + 2)")

    def test_structural_error(self) -> None:
        with pytest.raises(StructuralError):
            run_line("\n")

    def test_tokens_are_a_tuple(self) -> None:
        assert isinstance(run_line("1+2").tokens, tuple)

    def test_long_chain(self) -> None:
        source = "+".join(["1"] * 1500)
        result = run_line(source)
        assert result.value == 1500.0
        assert result.reconstructed == source
        assert len(result.tokens) == 2999

    def test_nesting_too_deep(self) -> None:
        source = "(" * 5000 + "1" + ")" * 5000
        with pytest.raises(StructuralError, match="nested too deeply"):
            run_line(source)
