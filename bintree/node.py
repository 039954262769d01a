"""Binary tree nodes with parent links, and the queries made on them."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Optional


class Node:
    """A binary tree node holding an integer value.

    Creating a node records its parent but does not attach it to that
    parent; assign it to ``parent.left`` or ``parent.right``, or use
    :meth:`insert_left` / :meth:`insert_right`, which do both.
    """

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: Optional[Node] = None) -> None:
        self.value = value
        self.parent = parent
        self.left: Optional[Node] = None
        self.right: Optional[Node] = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"

    # -- building -------------------------------------------------------

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; an existing left child moves below it."""
        new_node = Node(value, self)
        if self.left is not None:
            new_node.left = self.left
            self.left.parent = new_node
        self.left = new_node
        return new_node

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; an existing right child moves below it."""
        new_node = Node(value, self)
        if self.right is not None:
            new_node.right = self.right
            self.right.parent = new_node
        self.right = new_node
        return new_node

    def delete(self) -> None:
        """Detach this subtree from its parent and break every link inside it."""
        parent = self.parent
        if parent is not None:
            if parent.left is self:
                parent.left = None
            if parent.right is self:
                parent.right = None
        for node in list(self._nodes_postorder()):
            node.left = None
            node.right = None
            node.parent = None

    # -- predicates -----------------------------------------------------

    def is_leaf(self) -> bool:
        """True when the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """True when the node has no parent."""
        return self.parent is None

    # -- traversals -----------------------------------------------------

    def _nodes_postorder(self) -> Iterator[Node]:
        if self.left is not None:
            yield from self.left._nodes_postorder()
        if self.right is not None:
            yield from self.right._nodes_postorder()
        yield self

    def preorder(self) -> Iterator[int]:
        """Yield values in pre-order: node, left subtree, right subtree."""
        yield self.value
        if self.left is not None:
            yield from self.left.preorder()
        if self.right is not None:
            yield from self.right.preorder()

    def inorder(self) -> Iterator[int]:
        """Yield values in in-order: left subtree, node, right subtree."""
        if self.left is not None:
            yield from self.left.inorder()
        yield self.value
        if self.right is not None:
            yield from self.right.inorder()

    def postorder(self) -> Iterator[int]:
        """Yield values in post-order: left subtree, right subtree, node."""
        for node in self._nodes_postorder():
            yield node.value

    # -- measures -------------------------------------------------------

    def height(self) -> int:
        """Number of edges on the longest path down to a leaf."""
        left = 1 + self.left.height() if self.left is not None else 0
        right = 1 + self.right.height() if self.right is not None else 0
        return max(left, right)

    def depth(self) -> int:
        """Number of edges up to the root."""
        count = 0
        node = self.parent
        while node is not None:
            count += 1
            node = node.parent
        return count

    def size(self) -> int:
        """Number of nodes in this subtree."""
        return sum(1 for _ in self._nodes_postorder())

    def leaves(self) -> int:
        """Number of leaves in this subtree."""
        return sum(1 for node in self._nodes_postorder() if node.is_leaf())

    def internal_nodes(self) -> int:
        """Number of nodes in this subtree with at least one child."""
        return sum(1 for node in self._nodes_postorder() if not node.is_leaf())

    @staticmethod
    def _levels(node: Optional[Node]) -> int:
        return 0 if node is None else node.height() + 1

    def balance(self) -> int:
        """Levels of the left subtree minus levels of the right subtree."""
        return self._levels(self.left) - self._levels(self.right)

    def is_full(self) -> bool:
        """True when every node in the subtree has zero or two children."""
        return all(
            (node.left is None) == (node.right is None)
            for node in self._nodes_postorder()
        )

    def _perfect_levels(self) -> int:
        """Levels of a perfect subtree, or 0 when it is not perfect."""
        if self.left is None and self.right is None:
            return 1
        if self.left is None or self.right is None:
            return 0
        left = self.left._perfect_levels()
        right = self.right._perfect_levels()
        if left and left == right:
            return left + 1
        return 0

    def is_perfect(self) -> bool:
        """True when the subtree is full and all its leaves share one depth."""
        return self._perfect_levels() != 0

    # -- relatives ------------------------------------------------------

    def sibling(self) -> Optional[Node]:
        """The other child of this node's parent, if any."""
        parent = self.parent
        if parent is None:
            return None
        return parent.right if parent.left is self else parent.left

    def uncle(self) -> Optional[Node]:
        """The sibling of this node's parent, if any."""
        if self.parent is None:
            return None
        return self.parent.sibling()