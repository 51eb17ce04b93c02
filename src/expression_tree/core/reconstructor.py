"""Rebuild fully-parenthesized infix text from expression trees."""
from expression_tree.common.errors import InvalidExpression
from expression_tree.common.stack import Stack
from expression_tree.common.tokenizer import TokenKind, tokenize
from expression_tree.common.tree import BinaryTree
from expression_tree.core.evaluator import TreeEvaluator


class InfixReconstructor:
    """Turn a tree (or postfix text) back into fully-parenthesized infix."""

    @staticmethod
    def infix_from_postfix(postfix: str) -> str:
        """
        Fold a postfix expression into infix, parenthesizing every operation.

        A lone literal comes back unwrapped.

        :param str postfix: Postfix expression, items separated by whitespace

        :return: Fully-parenthesized infix expression, "" for empty input
        :rtype: str
        :raises InvalidExpression: If operands are left over
        :raises StackUnderflow: If an operator lacks operands
        """
        stack: Stack[str] = Stack()
        for token in tokenize(postfix):
            if token.kind is TokenKind.INTEGER:
                stack.push(token.text)
            elif token.kind is TokenKind.OPERATOR:
                right = stack.pop()
                left = stack.pop()
                stack.push(f"({left}{token.text}{right})")
            else:
                raise InvalidExpression("Invalid postfix expression", position=token.position)
        if len(stack) > 1:
            raise InvalidExpression(f"Invalid postfix expression (remaining operands): {postfix!r}")
        return "" if stack.is_empty() else stack.pop()

    @staticmethod
    def infix_from_tree(tree: BinaryTree) -> str:
        return InfixReconstructor.infix_from_postfix(TreeEvaluator.linearize(tree))
