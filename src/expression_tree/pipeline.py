"""
Function-style access to the expression pipeline.

infix text -> postfix text -> tree -> value | infix text
"""
from expression_tree.common.models import ExpressionResult
from expression_tree.common.tree import BinaryTree
from expression_tree.core.builder import TreeBuilder
from expression_tree.core.converter import ExpressionConverter
from expression_tree.core.evaluator import TreeEvaluator
from expression_tree.core.reconstructor import InfixReconstructor


def postfix_from_infix(infix: str) -> str:
    return ExpressionConverter.postfix_from_infix(infix)


def build_tree(infix: str, strict: bool = True) -> BinaryTree:
    return TreeBuilder.build_tree(infix, strict=strict)


def build_tree_from_postfix(postfix: str, strict: bool = True) -> BinaryTree:
    return TreeBuilder.build_tree_from_postfix(postfix, strict=strict)


def evaluate(tree: BinaryTree) -> int:
    return TreeEvaluator.evaluate(tree)


def evaluate_postfix(postfix: str) -> int:
    return TreeEvaluator.evaluate_postfix(postfix)


def infix_from_tree(tree: BinaryTree) -> str:
    return InfixReconstructor.infix_from_tree(tree)


def process_expression(expression: str, strict: bool = True) -> ExpressionResult:
    """
    Run an infix expression through every stage of the pipeline.

    :param str expression: Fully-parenthesized infix expression
    :param bool strict: Reject postfix input leaving extra operands

    :return: Postfix form, rebuilt infix and value
    :rtype: ExpressionResult
    :raises InvalidExpression: If the expression is malformed
    :raises DivisionByZero: If a divisor evaluates to zero
    """
    postfix = postfix_from_infix(expression)
    tree = build_tree_from_postfix(postfix, strict=strict)
    return ExpressionResult(
        expression=expression,
        postfix=postfix,
        infix=infix_from_tree(tree),
        value=evaluate(tree),
    )
