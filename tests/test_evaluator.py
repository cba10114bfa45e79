"""Tests for the tree-walking evaluator and the full lex/parse/evaluate pipeline."""

import pytest

from tests.utils import eval_text, parse_text
from ast_nodes import IntLiteralNode, BinaryOpNode
from evaluator import evaluate, apply_operator, evaluate_subtrees
from errors import EvaluationError, DivisionByZeroError, IntegerOverflowError
from tokens import Token, Operator


def _bin(left, op, right):
    return BinaryOpNode(
        left=IntLiteralNode(token=Token.integer(left)) if isinstance(left, int) else left,
        operator=op,
        right=IntLiteralNode(token=Token.integer(right)) if isinstance(right, int) else right,
    )


def test_hand_built_tree_multiplication_before_addition():
    ast = _bin(3, Operator.ADD, _bin(2, Operator.MUL, 5))
    assert evaluate(ast) == 13


def test_hand_built_tree_division_before_subtraction():
    ast = _bin(3, Operator.SUB, _bin(6, Operator.DIV, 2))
    assert evaluate(ast) == 0


@pytest.mark.parametrize(
    "src, expected",
    [
        ("3 + 2 * 5", 13),
        ("3 - 2 * 5", -7),
        ("3 + 10 / 5", 5),
        ("3 - 6 / 2", 0),
        ("3 - 2 - 1", 0),
        ("(200 + 50) * 3", 750),
        ("3 * (100 + 50)", 450),
        ("3+2*5", 13),
        ("8 / 4 / 2", 1),
        ("((7))", 7),
        ("2 * (3 + 4) * 5 - 10 / (1 + 1)", 65),
    ],
)
def test_scenarios(src, expected):
    assert eval_text(src) == expected


def test_division_truncates_toward_zero():
    assert eval_text("7 / 2") == 3
    assert eval_text("(0 - 7) / 2") == -3
    assert eval_text("7 / (0 - 2)") == -3
    assert eval_text("(0 - 7) / (0 - 2)") == 3


def test_division_by_zero_is_fatal():
    with pytest.raises(DivisionByZeroError):
        eval_text("3 / 0")


def test_division_by_zero_inside_subexpression():
    with pytest.raises(EvaluationError):
        eval_text("1 + 4 / (2 - 2)")


def test_overflow_is_fatal():
    with pytest.raises(IntegerOverflowError):
        eval_text("2147483647 + 1")
    with pytest.raises(IntegerOverflowError):
        eval_text("65536 * 65536")


def test_values_at_32_bit_bounds_are_allowed():
    assert eval_text("2147483647") == 2147483647
    assert eval_text("0 - 2147483647 - 1") == -2147483648


def test_min_int_divided_by_minus_one_overflows():
    with pytest.raises(IntegerOverflowError):
        apply_operator(Operator.DIV, -2147483648, -1)


def test_evaluation_error_is_a_runtime_error():
    with pytest.raises(RuntimeError):
        eval_text("1 / 0")


def test_very_long_chain_evaluates():
    assert eval_text(" + ".join(["1"] * 5000)) == 5000
    assert eval_text(" - ".join(["1"] * 5000)) == 1 - 4999


def test_evaluate_subtrees_gives_every_node_its_value():
    ast = parse_text("(2 + 3) * 4")
    values = evaluate_subtrees(ast)
    assert values[id(ast)] == 20
    assert values[id(ast.left)] == 5
    assert values[id(ast.right)] == 4


def test_evaluate_subtrees_propagates_errors_upward():
    ast = parse_text("1 + 4 / 0")
    values = evaluate_subtrees(ast)
    assert values[id(ast.left)] == 1
    assert isinstance(values[id(ast.right)], DivisionByZeroError)
    assert values[id(ast)] is values[id(ast.right)]
