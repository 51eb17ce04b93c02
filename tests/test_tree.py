"""Test classes Node and BinaryTree."""
from pydantic import ValidationError
import pytest

from expression_tree.common.tree import BinaryTree, Node


@pytest.fixture
def tree() -> BinaryTree:
    """Tree for ((1+2)*3)."""
    total = BinaryTree.combine("+", BinaryTree.leaf("1"), BinaryTree.leaf("2"))
    return BinaryTree.combine("*", total, BinaryTree.leaf("3"))


def labels(nodes) -> list:
    return [node.label for node in nodes]


def test_empty_tree() -> None:
    """A tree without root is empty and has no positions."""
    tree = BinaryTree()
    assert tree.is_empty()
    assert len(tree) == 0
    assert tree.height() == 0
    assert list(tree.postorder()) == []
    assert list(tree.breadthfirst()) == []


def test_leaf() -> None:
    """A leaf tree holds one literal node."""
    tree = BinaryTree.leaf("42")
    assert not tree.is_empty()
    assert tree.root.label == "42"
    assert tree.root.is_leaf()
    assert len(tree) == 1


def test_combine_keeps_operand_order(tree: BinaryTree) -> None:
    """combine puts the first operand on the left."""
    assert tree.root.label == "*"
    assert tree.root.left.label == "+"
    assert tree.root.right.label == "3"
    assert tree.root.left.left.label == "1"
    assert tree.root.left.right.label == "2"


def test_combine_leaves_operands_untouched() -> None:
    """Operand trees are still usable after being combined."""
    left, right = BinaryTree.leaf("1"), BinaryTree.leaf("2")
    BinaryTree.combine("-", left, right)
    assert left.root.is_leaf() and right.root.is_leaf()


def test_combine_empty_tree() -> None:
    """Combining an empty tree is rejected."""
    with pytest.raises(ValueError):
        BinaryTree.combine("+", BinaryTree(), BinaryTree.leaf("1"))


@pytest.mark.parametrize("method,expected", [
    ("preorder", ["*", "+", "1", "2", "3"]),
    ("inorder", ["1", "+", "2", "*", "3"]),
    ("postorder", ["1", "2", "+", "3", "*"]),
    ("breadthfirst", ["*", "+", "3", "1", "2"]),
    ("positions", ["*", "+", "1", "2", "3"]),
])
def test_traversals(tree: BinaryTree, method, expected):
    """Traversals visit nodes in their defining order."""
    assert labels(getattr(tree, method)()) == expected


def test_postorder_is_restartable(tree: BinaryTree) -> None:
    """Each call to postorder starts a fresh traversal."""
    assert labels(tree.postorder()) == labels(tree.postorder())


def test_postorder_shared_subtree() -> None:
    """A subtree used as both operands is visited twice."""
    four = BinaryTree.leaf("4")
    assert labels(BinaryTree.combine("+", four, four).postorder()) == ["4", "4", "+"]


def test_size_and_height(tree: BinaryTree) -> None:
    """Size counts every node, height counts edges on the longest path."""
    assert len(tree) == 5
    assert tree.height() == 2


def test_postorder_deep_tree() -> None:
    """Traversal does not recurse, so deep trees are fine."""
    tree = BinaryTree.leaf("0")
    for _ in range(5000):
        tree = BinaryTree.combine("+", tree, BinaryTree.leaf("1"))
    assert sum(1 for _ in tree.postorder()) == 10001


@pytest.mark.parametrize("kwargs", [
    {"label": "+"},
    {"label": "-", "left": Node(label="1")},
    {"label": "1", "left": Node(label="2"), "right": Node(label="3")},
    {"label": "x"},
    {"label": ""},
    {"label": "++", "left": Node(label="1"), "right": Node(label="2")},
])
def test_node_arity_validation(kwargs):
    """Literals must be leaves and operators must have two children."""
    with pytest.raises(ValidationError):
        Node(**kwargs)


def test_node_is_frozen() -> None:
    """Nodes cannot be mutated after construction."""
    node = Node(label="1")
    with pytest.raises(ValidationError):
        node.label = "2"
