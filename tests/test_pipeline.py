"""End-to-end properties of the pipeline functions."""
import pytest

from expression_tree.common.errors import DivisionByZero, InvalidExpression
from expression_tree.common.tree import BinaryTree
from expression_tree.pipeline import (
    build_tree,
    build_tree_from_postfix,
    evaluate,
    evaluate_postfix,
    infix_from_tree,
    postfix_from_infix,
    process_expression,
)


EXPRESSIONS = [
    "((40-5)*(9/(2+1)))",
    "(12+345)",
    "(10-3)",
    "(10/3)",
    "((1-2)-(3-4))",
    "(( 100 / 7 ) * ( 8 - 9 ))",
    "(((1+2)+3)+4)",
    "5",
]


def test_end_to_end() -> None:
    """The demonstration expression goes through every stage."""
    infix = "((40-5)*(9/(2+1)))"
    assert postfix_from_infix(infix) == "40 5 - 9 2 1 + / * "
    tree = build_tree(infix)
    assert infix_from_tree(tree) == "((40-5)*(9/(2+1)))"
    assert evaluate(tree) == 105


@pytest.mark.parametrize("infix", EXPRESSIONS)
def test_round_trip_is_idempotent(infix):
    """Rebuilding a rebuilt expression changes nothing."""
    normalized = infix_from_tree(build_tree(infix))
    assert infix_from_tree(build_tree(normalized)) == normalized


@pytest.mark.parametrize("infix", EXPRESSIONS)
def test_conversion_agreement(infix):
    """Evaluating the tree matches evaluating the postfix text."""
    assert evaluate(build_tree(infix)) == evaluate_postfix(postfix_from_infix(infix))


@pytest.mark.parametrize("infix", EXPRESSIONS)
def test_tree_from_postfix_matches_tree_from_infix(infix):
    """Both construction paths give the same tree."""
    assert build_tree_from_postfix(postfix_from_infix(infix)) == build_tree(infix)


def test_non_commutative_order() -> None:
    """Subtraction and division keep left-to-right operand order."""
    assert evaluate(build_tree("(10-3)")) == 7
    assert evaluate(build_tree("(10/3)")) == 3


def test_errors() -> None:
    """Both fault kinds propagate to the caller."""
    with pytest.raises(InvalidExpression):
        postfix_from_infix("(1+2")
    with pytest.raises(DivisionByZero):
        evaluate(build_tree("(5/0)"))


def test_empty_tree() -> None:
    """The empty tree evaluates to 0."""
    assert evaluate(BinaryTree()) == 0


def test_process_expression() -> None:
    """process_expression collects every stage of the pipeline."""
    result = process_expression("((40-5)*(9/(2+1)))")
    assert result.expression == "((40-5)*(9/(2+1)))"
    assert result.postfix == "40 5 - 9 2 1 + / * "
    assert result.infix == "((40-5)*(9/(2+1)))"
    assert result.value == 105


def test_process_expression_lenient() -> None:
    """Lenient mode is passed through to the tree builder."""
    assert process_expression("(1 2)", strict=False).value == 2
    with pytest.raises(InvalidExpression):
        process_expression("(1 2)")
