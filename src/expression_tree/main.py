"""
Command-line entry point.

Runs an expression (the demonstration one by default) through the pipeline
and prints, in order:
- the infix input
- its postfix conversion
- the infix rebuilt from the expression tree
- the integer value
"""
import argparse
from typing import List, Literal, Optional

from pydantic import BaseModel, ValidationError

from expression_tree.common.errors import DivisionByZero, InvalidExpression
from expression_tree.common.logger import logger, set_level
from expression_tree.common.models import ExpressionResult
from expression_tree.pipeline import process_expression


DEFAULT_EXPRESSION = "((40-5)*(9/(2+1)))"


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    expression : str
        Fully-parenthesized infix expression.
    strict : bool
        Reject postfix streams leaving extra operands.
    log_level : str
        Logging level name.
    """

    expression: str = DEFAULT_EXPRESSION
    strict: bool = True
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"


def parse_args(argv: Optional[List[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :param argv: Arguments, sys.argv[1:] when None
    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = argparse.ArgumentParser(
        prog="expression-tree",
        description="Convert, build, rebuild and evaluate fully-parenthesized arithmetic expressions",
    )
    parser.add_argument(
        "expression",
        nargs="?",
        default=DEFAULT_EXPRESSION,
        help=f"Infix expression (default: {DEFAULT_EXPRESSION})",
    )
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="Keep the last operand instead of failing when a postfix stream leaves extras",
    )
    parser.add_argument("--log-level", default="WARNING", type=str.upper, help="Logging level")

    args = parser.parse_args(argv)

    try:
        return CliArgs(expression=args.expression, strict=not args.lenient, log_level=args.log_level)
    except ValidationError as exc:
        parser.error(str(exc))


def run_demo(expression: str, strict: bool = True) -> ExpressionResult:
    """
    Print the four representations of an expression to stdout.

    Nothing is printed if any stage fails.

    :param str expression: Infix expression
    :param bool strict: Strict tree building
    :return: Every representation of the expression
    :raises InvalidExpression: If the expression is malformed
    :raises DivisionByZero: If a divisor evaluates to zero
    """
    result = process_expression(expression, strict=strict)
    print(result.expression)
    print(result.postfix)
    print(result.infix)
    print(result.value)
    return result


def main(argv: Optional[List[str]] = None) -> None:
    """
    Console script entry point.
    """
    cli_args = parse_args(argv)
    set_level(cli_args.log_level)

    try:
        run_demo(cli_args.expression, strict=cli_args.strict)
    except (InvalidExpression, DivisionByZero) as exc:
        logger.error(f"❌ Could not process {cli_args.expression!r}: {exc}")
        raise SystemExit(1) from exc


if __name__ == "__main__":
    main()
