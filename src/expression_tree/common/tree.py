"""Immutable binary expression tree."""
from collections import deque
from typing import Iterator, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from expression_tree.common.stack import Stack
from expression_tree.common.tokenizer import DIGITS, OPERATORS


def is_literal(label: str) -> bool:
    """Return True if the label is a non-negative integer literal."""
    return bool(label) and all(char in DIGITS for char in label)


def is_operator(label: str) -> bool:
    """Return True if the label is one of the four operator characters."""
    return len(label) == 1 and label in OPERATORS


class Node(BaseModel):
    """
    A position in an expression tree.

    A node is a leaf iff its label is an integer literal. Operator nodes
    always have exactly two children, left being the first operand.
    Nodes are frozen: a tree is built bottom-up and never mutated.
    """

    model_config = ConfigDict(frozen=True)

    label: str = Field(..., description="Integer literal or operator character")
    left: Optional["Node"] = Field(default=None, description="First operand")
    right: Optional["Node"] = Field(default=None, description="Second operand")

    @model_validator(mode="after")
    def check_arity(self) -> "Node":
        """Ensure literals are leaves and operators have two children."""
        has_children = (self.left is not None, self.right is not None)
        if is_literal(self.label):
            if any(has_children):
                raise ValueError(f"Literal {self.label!r} cannot have children")
        elif is_operator(self.label):
            if not all(has_children):
                raise ValueError(f"Operator {self.label!r} needs two children")
        else:
            raise ValueError(f"Invalid node label: {self.label!r}")
        return self

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


class BinaryTree(BaseModel):
    """
    Binary tree of expression nodes, possibly empty.

    Construction:
        - BinaryTree() is the empty tree
        - BinaryTree.leaf("42") is a single-literal tree
        - BinaryTree.combine("+", left, right) grafts two existing trees
          under a new operator root, leaving both operands untouched

    Traversals (preorder, inorder, postorder, breadthfirst) return a fresh
    lazy iterator over node positions on every call.
    """

    model_config = ConfigDict(frozen=True)

    root: Optional[Node] = Field(default=None, description="Root position, None for an empty tree")

    @classmethod
    def leaf(cls, label: str) -> "BinaryTree":
        return cls(root=Node(label=label))

    @classmethod
    def combine(cls, label: str, left: "BinaryTree", right: "BinaryTree") -> "BinaryTree":
        """
        Build a new tree whose root holds `label` over two existing trees.

        :param str label: Operator character for the new root
        :param BinaryTree left: Tree providing the first operand
        :param BinaryTree right: Tree providing the second operand

        :return: New tree
        :rtype: BinaryTree
        :raises ValueError: If either operand is empty or the label is not an operator
        """
        if left.is_empty() or right.is_empty():
            raise ValueError("Cannot combine an empty tree")
        return cls(root=Node(label=label, left=left.root, right=right.root))

    def is_empty(self) -> bool:
        return self.root is None

    def __len__(self) -> int:
        return sum(1 for _ in self.positions())

    def height(self) -> int:
        """
        Return the number of edges on the longest root-to-leaf path.

        A single-leaf tree has height 0; the empty tree also reports 0.
        """
        if self.root is None:
            return 0
        deepest = 0
        queue = deque([(self.root, 0)])
        while queue:
            node, depth = queue.popleft()
            deepest = max(deepest, depth)
            if not node.is_leaf():
                queue.append((node.left, depth + 1))
                queue.append((node.right, depth + 1))
        return deepest

    def positions(self) -> Iterator[Node]:
        return self.preorder()

    def preorder(self) -> Iterator[Node]:
        if self.root is None:
            return
        pending: Stack[Node] = Stack()
        pending.push(self.root)
        while not pending.is_empty():
            node = pending.pop()
            yield node
            if not node.is_leaf():
                pending.push(node.right)
                pending.push(node.left)

    def inorder(self) -> Iterator[Node]:
        yield from self._walk(children_first=False)

    def postorder(self) -> Iterator[Node]:
        """Visit the left subtree, then the right subtree, then the node."""
        yield from self._walk(children_first=True)

    def breadthfirst(self) -> Iterator[Node]:
        if self.root is None:
            return
        queue = deque([self.root])
        while queue:
            node = queue.popleft()
            yield node
            if not node.is_leaf():
                queue.append(node.left)
                queue.append(node.right)

    def _walk(self, children_first: bool) -> Iterator[Node]:
        # Entries are (node, expanded); an expanded node is emitted when popped.
        if self.root is None:
            return
        pending: Stack[tuple[Node, bool]] = Stack()
        pending.push((self.root, False))
        while not pending.is_empty():
            node, expanded = pending.pop()
            if expanded or node.is_leaf():
                yield node
                continue
            if children_first:
                pending.push((node, True))
                pending.push((node.right, False))
                pending.push((node.left, False))
            else:
                pending.push((node.right, False))
                pending.push((node, True))
                pending.push((node.left, False))
