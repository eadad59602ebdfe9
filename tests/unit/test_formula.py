"""Tests for part formula evaluation.

Tests cover:
- Arithmetic and operator precedence
- Variable lookup by whole identifier
- Fail-soft evaluation returning 0
- Strict evaluation raising FormulaError
"""

from __future__ import annotations

import pytest

from cabinet_pricing.domain import PricingError
from cabinet_pricing.domain.services.formula import (
    BinaryOp,
    FormulaError,
    FormulaEvaluator,
    Number,
    UnaryOp,
    Variable,
    evaluate,
    evaluate_strict,
    parse,
    tokenize,
)


@pytest.fixture
def bindings() -> dict[str, float]:
    return {
        "width": 600.0,
        "height": 720.0,
        "depth": 560.0,
        "left_width": 900.0,
        "right_width": 600.0,
        "qty": 2.0,
    }


class TestTokenize:
    """Tests for the formula tokenizer."""

    def test_splits_numbers_names_and_operators(self) -> None:
        tokens = tokenize("width - 36.5")
        assert [(t.kind, t.text) for t in tokens] == [
            ("name", "width"),
            ("op", "-"),
            ("number", "36.5"),
        ]

    def test_records_positions(self) -> None:
        tokens = tokenize("a + b")
        assert [t.position for t in tokens] == [0, 2, 4]

    @pytest.mark.parametrize("formula", ["width; 1", "'1'", "width % 2", "a,b", "2^3"])
    def test_rejects_other_characters(self, formula: str) -> None:
        with pytest.raises(FormulaError):
            tokenize(formula)


class TestParse:
    """Tests for the recursive descent parser."""

    def test_builds_tree_with_precedence(self) -> None:
        tree = parse("1 + 2 * width")
        assert tree == BinaryOp(
            "+", Number(1.0), BinaryOp("*", Number(2.0), Variable("width"))
        )

    def test_unary_minus(self) -> None:
        assert parse("-depth") == UnaryOp("-", Variable("depth"))

    def test_lowercases_identifiers(self) -> None:
        assert parse("WIDTH") == Variable("width")

    @pytest.mark.parametrize("formula", ["", "   ", "(1 + 2", "1 2", "1 +", "()", "2 (3)"])
    def test_rejects_malformed_formulas(self, formula: str) -> None:
        with pytest.raises(FormulaError):
            parse(formula)


class TestEvaluateStrict:
    """Tests for evaluate_strict."""

    def test_simple_subtraction(self, bindings: dict[str, float]) -> None:
        assert evaluate_strict("width - 36", bindings) == 564.0

    def test_operator_precedence(self) -> None:
        assert evaluate_strict("2 + 3 * 4", {}) == 14.0
        assert evaluate_strict("(2 + 3) * 4", {}) == 20.0
        assert evaluate_strict("10 - 4 - 3", {}) == 3.0
        assert evaluate_strict("24 / 4 / 2", {}) == 3.0

    def test_decimals(self) -> None:
        assert evaluate_strict("1.5 * 2", {}) == 3.0
        assert evaluate_strict(".5 * 4", {}) == 2.0

    def test_unary_operators(self, bindings: dict[str, float]) -> None:
        assert evaluate_strict("-width + 700", bindings) == 100.0
        assert evaluate_strict("+3 - -2", {}) == 5.0

    def test_corner_variables_do_not_collide_with_width(
        self, bindings: dict[str, float]
    ) -> None:
        """left_width is looked up whole, never as 'left_' + width."""
        assert evaluate_strict("left_width", bindings) == 900.0
        assert evaluate_strict("(left_width + right_width) / 2", bindings) == 750.0

    def test_case_insensitive_names(self) -> None:
        assert evaluate_strict("WIDTH - 10", {"width": 100}) == 90.0
        assert evaluate_strict("width - 10", {"Width": 100}) == 90.0

    def test_qty_binding(self, bindings: dict[str, float]) -> None:
        assert evaluate_strict("qty * 2", bindings) == 4.0

    def test_unknown_variable_raises(self, bindings: dict[str, float]) -> None:
        with pytest.raises(FormulaError, match="Unknown variable"):
            evaluate_strict("length - 10", bindings)

    def test_division_by_zero_raises(self) -> None:
        with pytest.raises(FormulaError, match="Division by zero"):
            evaluate_strict("10 / (5 - 5)", {})

    @pytest.mark.parametrize(
        "formula",
        ["9" * 400, f"{'9' * 400} - {'9' * 400}", f"width * {'9' * 400}"],
    )
    def test_non_finite_result_raises(
        self, formula: str, bindings: dict[str, float]
    ) -> None:
        with pytest.raises(FormulaError, match="not finite"):
            evaluate_strict(formula, bindings)

    def test_error_carries_formula(self) -> None:
        with pytest.raises(FormulaError) as exc_info:
            evaluate_strict("width +", {"width": 1})
        assert exc_info.value.formula == "width +"

    def test_formula_error_is_pricing_error(self) -> None:
        assert issubclass(FormulaError, PricingError)


class TestEvaluate:
    """Tests for the fail-soft evaluate entry point."""

    def test_valid_formula(self, bindings: dict[str, float]) -> None:
        assert evaluate("height - 4", bindings) == 716.0

    @pytest.mark.parametrize(
        "formula",
        [
            "",
            "width +",
            "__import__('os')",
            "unknown * 2",
            "1 / 0",
            "width; 1",
            "9" * 400,
            f"{'9' * 400} - {'9' * 400}",
        ],
    )
    def test_invalid_formula_returns_zero(
        self, formula: str, bindings: dict[str, float]
    ) -> None:
        assert evaluate(formula, bindings) == 0.0

    def test_invalid_formula_logs_warning(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level("WARNING"):
            evaluate("width +", {"width": 1})
        assert "width +" in caplog.text

    def test_deterministic(self, bindings: dict[str, float]) -> None:
        results = {evaluate("(width - 36) / 2 + depth * 0.1", bindings) for _ in range(5)}
        assert len(results) == 1


class TestFormulaEvaluator:
    """Tests for the configurable evaluator."""

    def test_default_is_fail_soft(self) -> None:
        assert FormulaEvaluator().evaluate("oops", {}) == 0.0

    def test_strict_raises(self) -> None:
        with pytest.raises(FormulaError):
            FormulaEvaluator(strict=True).evaluate("oops", {})

    def test_strict_valid_formula(self) -> None:
        assert FormulaEvaluator(strict=True).evaluate("w * 2", {"w": 3}) == 6.0
