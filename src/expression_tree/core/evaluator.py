"""Evaluate expression trees to integers."""
import operator
from typing import Callable, Dict

from expression_tree.common.errors import DivisionByZero, InvalidExpression
from expression_tree.common.stack import Stack
from expression_tree.common.tokenizer import TokenKind, tokenize
from expression_tree.common.tree import BinaryTree


# Type alias for operator functions (taking two ints, returning an int)
OperatorFn = Callable[[int, int], int]


def truncating_div(left: int, right: int) -> int:
    """
    Integer division rounding toward zero.

    Python's // floors, so the quotient is taken on absolute values and the
    sign restored afterwards: 7 / -2 gives -3, not -4.

    :raises DivisionByZero: If right is zero
    """
    try:
        quotient = abs(left) // abs(right)
    except ZeroDivisionError as exc:
        raise DivisionByZero(f"Division by zero: {left} / {right}") from exc
    return quotient if (left < 0) == (right < 0) else -quotient


OPERATORS: Dict[str, OperatorFn] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": truncating_div,
}


class TreeEvaluator:
    """
    Compute the integer value of an expression tree.

    Algorithm:
        1. Linearize the tree with a postorder traversal (postfix order)
        2. Fold the postfix tokens against a value stack
    """

    @staticmethod
    def linearize(tree: BinaryTree) -> str:
        """
        Join the labels of a postorder traversal with single spaces.

        :param BinaryTree tree: Expression tree

        :return: Postfix-equivalent string
        :rtype: str
        """
        return " ".join(node.label for node in tree.postorder())

    @staticmethod
    def evaluate_postfix(postfix: str) -> int:
        """
        Evaluate a postfix expression.

        :param str postfix: Postfix expression, items separated by whitespace

        :return: Integer value
        :rtype: int
        :raises InvalidExpression: If the expression is malformed or a literal is too long
        :raises StackUnderflow: If an operator lacks operands
        :raises DivisionByZero: If a divisor evaluates to zero
        """
        stack: Stack[int] = Stack()
        for token in tokenize(postfix):
            if token.kind is TokenKind.INTEGER:
                try:
                    stack.push(int(token.text))
                except ValueError as exc:
                    # Literals past the interpreter's int string conversion limit
                    raise InvalidExpression(
                        f"Integer literal too long ({len(token.text)} digits)", position=token.position
                    ) from exc
            elif token.kind is TokenKind.OPERATOR:
                # Right operand was pushed last
                right: int = stack.pop()
                left: int = stack.pop()
                stack.push(OPERATORS[token.text](left, right))
            else:
                raise InvalidExpression("Invalid postfix expression", position=token.position)

        if len(stack) != 1:
            raise InvalidExpression(f"Invalid postfix expression (remaining operands): {postfix!r}")
        return stack.pop()

    @staticmethod
    def evaluate(tree: BinaryTree) -> int:
        """
        Evaluate an expression tree.

        :param BinaryTree tree: Expression tree

        :return: Integer value, 0 for an empty tree
        :rtype: int
        :raises DivisionByZero: If a divisor evaluates to zero
        """
        if tree.is_empty():
            return 0
        return TreeEvaluator.evaluate_postfix(TreeEvaluator.linearize(tree))
