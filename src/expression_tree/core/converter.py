"""Convert fully-parenthesized infix expressions to postfix."""
from typing import List

from expression_tree.common.errors import InvalidExpression
from expression_tree.common.logger import logger
from expression_tree.common.stack import Stack
from expression_tree.common.tokenizer import TokenKind, tokenize


class ExpressionConverter:
    """
    Convert infix expressions to postfix (Reverse Polish Notation).

    The infix expression must be fully parenthesized, so operator precedence
    never has to be compared: each operator waits on the stack until the
    `)` that closes its group pops it.

    Examples:
        - Infix: ((40-5)*(9/(2+1)))
        - Postfix: "40 5 - 9 2 1 + / * "

    Every item of the postfix string is followed by one space, the last one
    included, so multi-digit literals stay intact.
    """

    @staticmethod
    def postfix_from_infix(infix: str) -> str:
        """
        Transform a fully-parenthesized infix expression into postfix.

        :param str infix: Infix expression (integers, whitespace, parentheses and + - * /)

        :return: Postfix expression
        :rtype: str
        :raises InvalidExpression: On an unrecognized character or unbalanced parentheses
        """
        output: List[str] = []
        stack: Stack[str] = Stack()

        for token in tokenize(infix):
            if token.kind is TokenKind.LPAREN:
                stack.push(token.text)
            elif token.kind is TokenKind.RPAREN:
                # Emit every deferred operator of the group, then drop the "("
                while not stack.is_empty() and stack.top() != "(":
                    output.append(stack.pop() + " ")
                if stack.is_empty():
                    raise InvalidExpression("Unbalanced ')' in infix expression", position=token.position)
                stack.pop()
            elif token.kind is TokenKind.OPERATOR:
                stack.push(token.text)
            else:
                output.append(token.text + " ")

        if not stack.is_empty():
            raise InvalidExpression(f"Invalid infix expression (unclosed group): {infix!r}")

        postfix = "".join(output)
        logger.debug(f"🔁 {infix!r} -> {postfix!r}")
        return postfix
