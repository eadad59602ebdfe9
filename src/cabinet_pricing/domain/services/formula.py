"""Evaluation of part dimension formulas.

Formulas are small arithmetic expressions over named cabinet variables,
for example ``"width - 36"`` or ``"(left_width + right_width) / 2"``.

The text is tokenized and parsed into a restricted syntax tree that only
knows numbers, variable references, unary ``+``/``-`` and the binary
operators ``+ - * /``. Variables are looked up by whole identifier, so
``left_width`` and ``width`` can never overlap. Nothing in a formula is
ever passed to ``eval``.

Two entry points are provided:

- :func:`evaluate` is fail-soft. A formula that cannot be evaluated yields
  ``0.0`` and a logged warning, so one bad part never aborts a quote.
- :func:`evaluate_strict` raises :class:`FormulaError` instead.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Mapping, Union

from ..value_objects import PricingError

__all__ = [
    "BinaryOp",
    "FormulaError",
    "FormulaEvaluator",
    "Node",
    "Number",
    "UnaryOp",
    "Variable",
    "evaluate",
    "evaluate_strict",
    "parse",
    "tokenize",
]

logger = logging.getLogger(__name__)


class FormulaError(PricingError):
    """Raised when a formula cannot be parsed or evaluated."""

    def __init__(self, message: str, formula: str = "") -> None:
        self.formula = formula
        super().__init__(message)


_TOKEN_RE = re.compile(
    r"\s*(?:(?P<number>\d+(?:\.\d*)?|\.\d+)|(?P<name>[A-Za-z_][A-Za-z0-9_]*)|(?P<op>[-+*/()]))"
)


@dataclass(frozen=True)
class Token:
    kind: str  # "number", "name" or "op"
    text: str
    position: int


def tokenize(formula: str) -> list[Token]:
    """Split a formula into number, name and operator tokens.

    Raises:
        FormulaError: If the formula contains any other character.
    """
    tokens: list[Token] = []
    pos = 0
    length = len(formula)
    while pos < length:
        if formula[pos].isspace():
            pos += 1
            continue
        match = _TOKEN_RE.match(formula, pos)
        if match is None:
            raise FormulaError(
                f"Unexpected character {formula[pos]!r} at position {pos}",
                formula,
            )
        kind = match.lastgroup or ""
        tokens.append(Token(kind, match.group(kind), match.start(kind)))
        pos = match.end()
    return tokens


# Syntax tree


@dataclass(frozen=True)
class Number:
    value: float


@dataclass(frozen=True)
class Variable:
    name: str


@dataclass(frozen=True)
class UnaryOp:
    op: str
    operand: Node


@dataclass(frozen=True)
class BinaryOp:
    op: str
    left: Node
    right: Node


Node = Union[Number, Variable, UnaryOp, BinaryOp]


class _Parser:
    """Recursive descent parser with the usual precedence.

    expr   := term (("+" | "-") term)*
    term   := factor (("*" | "/") factor)*
    factor := ("+" | "-") factor | NUMBER | NAME | "(" expr ")"
    """

    def __init__(self, tokens: list[Token], formula: str) -> None:
        self._tokens = tokens
        self._formula = formula
        self._pos = 0

    def _peek(self) -> Token | None:
        if self._pos < len(self._tokens):
            return self._tokens[self._pos]
        return None

    def _next(self) -> Token:
        token = self._peek()
        if token is None:
            raise FormulaError("Unexpected end of formula", self._formula)
        self._pos += 1
        return token

    def parse(self) -> Node:
        node = self._expr()
        leftover = self._peek()
        if leftover is not None:
            raise FormulaError(
                f"Unexpected {leftover.text!r} at position {leftover.position}",
                self._formula,
            )
        return node

    def _expr(self) -> Node:
        node = self._term()
        while (token := self._peek()) is not None and token.text in ("+", "-"):
            self._pos += 1
            node = BinaryOp(token.text, node, self._term())
        return node

    def _term(self) -> Node:
        node = self._factor()
        while (token := self._peek()) is not None and token.text in ("*", "/"):
            self._pos += 1
            node = BinaryOp(token.text, node, self._factor())
        return node

    def _factor(self) -> Node:
        token = self._next()
        if token.kind == "number":
            return Number(float(token.text))
        if token.kind == "name":
            return Variable(token.text.lower())
        if token.text in ("+", "-"):
            return UnaryOp(token.text, self._factor())
        if token.text == "(":
            node = self._expr()
            closing = self._next()
            if closing.text != ")":
                raise FormulaError(
                    f"Expected ')' at position {closing.position}", self._formula
                )
            return node
        raise FormulaError(
            f"Unexpected {token.text!r} at position {token.position}", self._formula
        )


@lru_cache(maxsize=512)
def parse(formula: str) -> Node:
    """Parse a formula into a syntax tree.

    Results are cached per formula text; trees are immutable.

    Raises:
        FormulaError: If the formula is empty or malformed.
    """
    if not formula or not formula.strip():
        raise FormulaError("Formula is empty", formula)
    return _Parser(tokenize(formula), formula).parse()


def _visit(node: Node, bindings: Mapping[str, float], formula: str) -> float:
    if isinstance(node, Number):
        return node.value
    if isinstance(node, Variable):
        try:
            return float(bindings[node.name])
        except KeyError:
            raise FormulaError(f"Unknown variable {node.name!r}", formula) from None
    if isinstance(node, UnaryOp):
        value = _visit(node.operand, bindings, formula)
        return -value if node.op == "-" else value

    left = _visit(node.left, bindings, formula)
    right = _visit(node.right, bindings, formula)
    if node.op == "+":
        return left + right
    if node.op == "-":
        return left - right
    if node.op == "*":
        return left * right
    if right == 0:
        raise FormulaError("Division by zero", formula)
    return left / right


def evaluate_strict(formula: str, bindings: Mapping[str, float]) -> float:
    """Evaluate a formula, raising :class:`FormulaError` on any failure."""
    lowered = {name.lower(): value for name, value in bindings.items()}
    result = _visit(parse(formula), lowered, formula)
    if not math.isfinite(result):
        raise FormulaError("Formula result is not finite", formula)
    return result


def evaluate(formula: str, bindings: Mapping[str, float]) -> float:
    """Evaluate a formula, returning ``0.0`` when it cannot be evaluated."""
    try:
        return evaluate_strict(formula, bindings)
    except FormulaError as e:
        logger.warning("Formula %r evaluated to 0: %s", formula, e)
        return 0.0


class FormulaEvaluator:
    """Evaluator with a configured failure policy.

    Args:
        strict: Raise :class:`FormulaError` instead of returning 0.
    """

    def __init__(self, strict: bool = False) -> None:
        self.strict = strict

    def evaluate(self, formula: str, bindings: Mapping[str, float]) -> float:
        if self.strict:
            return evaluate_strict(formula, bindings)
        return evaluate(formula, bindings)
