"""Pydantic model for the output of the expression pipeline."""
from pydantic import BaseModel, Field


class ExpressionResult(BaseModel):
    """Every representation produced for one expression."""

    expression: str = Field(..., description="Original infix expression")
    postfix: str = Field(..., description="Postfix form, space-terminated items")
    infix: str = Field(..., description="Fully-parenthesized infix rebuilt from the tree")
    value: int = Field(..., description="Integer value of the expression")
