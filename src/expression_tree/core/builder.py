"""Build expression trees from postfix or infix expressions."""
from expression_tree.common.errors import InvalidExpression, StackUnderflow
from expression_tree.common.logger import logger
from expression_tree.common.stack import Stack
from expression_tree.common.tokenizer import TokenKind, tokenize
from expression_tree.common.tree import BinaryTree
from expression_tree.core.converter import ExpressionConverter


class TreeBuilder:
    """
    Build a BinaryTree bottom-up from a postfix token stream.

    Literals become single-leaf trees. An operator pops the two most recent
    trees (right operand first) and pushes a new tree with the operator at
    its root.
    """

    @staticmethod
    def build_tree_from_postfix(postfix: str, strict: bool = True) -> BinaryTree:
        """
        Construct an expression tree from a postfix expression.

        :param str postfix: Postfix expression, items separated by whitespace
        :param bool strict: Reject input leaving more than one tree on the stack

        :return: Expression tree
        :rtype: BinaryTree
        :raises InvalidExpression: On a parenthesis, unknown character, empty input
            or, in strict mode, leftover operands
        :raises StackUnderflow: If an operator lacks operands
        """
        stack: Stack[BinaryTree] = Stack()

        for token in tokenize(postfix):
            if token.kind is TokenKind.INTEGER:
                stack.push(BinaryTree.leaf(token.text))
            elif token.kind is TokenKind.OPERATOR:
                if len(stack) < 2:
                    raise StackUnderflow(f"Operator {token.text!r} is missing an operand", position=token.position)
                right = stack.pop()
                left = stack.pop()
                stack.push(BinaryTree.combine(token.text, left, right))
            else:
                raise InvalidExpression("Invalid postfix expression", position=token.position)

        if stack.is_empty():
            raise InvalidExpression(f"Empty postfix expression: {postfix!r}")

        if len(stack) > 1:
            if strict:
                raise InvalidExpression(f"Invalid postfix expression (remaining operands): {postfix!r}")
            logger.warning(f"⚠️ Ignoring {len(stack) - 1} leftover operand(s) in {postfix!r}")

        return stack.pop()

    @staticmethod
    def build_tree(infix: str, strict: bool = True) -> BinaryTree:
        """
        Construct an expression tree from a fully-parenthesized infix expression.

        :param str infix: Infix expression
        :param bool strict: See build_tree_from_postfix

        :return: Expression tree
        :rtype: BinaryTree
        :raises InvalidExpression: If the expression is malformed
        """
        postfix = ExpressionConverter.postfix_from_infix(infix)
        return TreeBuilder.build_tree_from_postfix(postfix, strict=strict)
