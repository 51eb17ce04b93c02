"""Generic last-in-first-out stack."""
from typing import Generic, List, TypeVar

from expression_tree.common.errors import StackUnderflow


T = TypeVar("T")


class Stack(Generic[T]):
    """
    List-backed LIFO stack.

    Popping or peeking an empty stack raises StackUnderflow instead of
    IndexError, so callers folding malformed input get a syntax error.
    """

    def __init__(self) -> None:
        self._items: List[T] = []

    def push(self, item: T) -> None:
        self._items.append(item)

    def pop(self) -> T:
        """
        Remove and return the most recently pushed item.

        :return: Top item
        :raises StackUnderflow: If the stack is empty
        """
        if not self._items:
            raise StackUnderflow("Pop from an empty stack")
        return self._items.pop()

    def top(self) -> T:
        """
        Return the most recently pushed item without removing it.

        :return: Top item
        :raises StackUnderflow: If the stack is empty
        """
        if not self._items:
            raise StackUnderflow("Top of an empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r})"
