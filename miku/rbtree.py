"""Red-black tree with a shared sentinel leaf."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Callable, Iterator


class Color(IntEnum):
    """Node colour."""

    BLACK = 0
    RED = 1


class RBNode:
    """A tree node holding one value."""

    __slots__ = ("value", "left", "right", "parent", "color", "_tree")

    def __init__(self, value: Any = None) -> None:
        self.value = value
        self.left: RBNode | None = None
        self.right: RBNode | None = None
        self.parent: RBNode | None = None
        self.color = Color.BLACK
        self._tree: RBTree | None = None

    def __repr__(self) -> str:
        return f"RBNode({self.value!r}, {self.color.name})"


def _natural_cmp(a, b) -> int:
    return (a > b) - (a < b)


class RBTree:
    """Ordered tree; equal values are kept and placed after existing ones.

    ``cmp(a, b)`` returns a negative number, zero or a positive number;
    without one the values' own ordering is used.
    """

    def __init__(self, cmp: Callable[[Any, Any], int] | None = None) -> None:
        nil = RBNode()
        nil.left = nil.right = nil.parent = nil
        nil.color = Color.BLACK
        self.sentinel = nil
        self._root = nil
        self._cmp = cmp or _natural_cmp

    @property
    def root(self) -> RBNode | None:
        """The root node, or None for an empty tree."""
        return None if self._root is self.sentinel else self._root

    def _rotate_left(self, x: RBNode) -> None:
        nil = self.sentinel
        y = x.right
        x.right = y.left
        if y.left is not nil:
            y.left.parent = x
        y.parent = x.parent
        if x.parent is nil:
            self._root = y
        elif x is x.parent.left:
            x.parent.left = y
        else:
            x.parent.right = y
        y.left = x
        x.parent = y

    def _rotate_right(self, x: RBNode) -> None:
        nil = self.sentinel
        y = x.left
        x.left = y.right
        if y.right is not nil:
            y.right.parent = x
        y.parent = x.parent
        if x.parent is nil:
            self._root = y
        elif x is x.parent.right:
            x.parent.right = y
        else:
            x.parent.left = y
        y.right = x
        x.parent = y

    def _insert_fixup(self, z: RBNode) -> None:
        while z.parent.color is Color.RED:
            grand = z.parent.parent
            if z.parent is grand.left:
                uncle = grand.right
                if uncle.color is Color.RED:
                    z.parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grand.color = Color.RED
                    z = grand
                else:
                    if z is z.parent.right:
                        z = z.parent
                        self._rotate_left(z)
                    z.parent.color = Color.BLACK
                    z.parent.parent.color = Color.RED
                    self._rotate_right(z.parent.parent)
            else:
                uncle = grand.left
                if uncle.color is Color.RED:
                    z.parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grand.color = Color.RED
                    z = grand
                else:
                    if z is z.parent.left:
                        z = z.parent
                        self._rotate_right(z)
                    z.parent.color = Color.BLACK
                    z.parent.parent.color = Color.RED
                    self._rotate_left(z.parent.parent)
        self._root.color = Color.BLACK

    def _transplant(self, u: RBNode, v: RBNode) -> None:
        if u.parent is self.sentinel:
            self._root = v
        elif u is u.parent.left:
            u.parent.left = v
        else:
            u.parent.right = v
        v.parent = u.parent

    def _minimum(self, x: RBNode) -> RBNode:
        while x.left is not self.sentinel:
            x = x.left
        return x

    def _delete_fixup(self, x: RBNode) -> None:
        while x is not self._root and x.color is Color.BLACK:
            if x is x.parent.left:
                w = x.parent.right
                if w.color is Color.RED:
                    w.color = Color.BLACK
                    x.parent.color = Color.RED
                    self._rotate_left(x.parent)
                    w = x.parent.right
                if w.left.color is Color.BLACK and w.right.color is Color.BLACK:
                    w.color = Color.RED
                    x = x.parent
                else:
                    if w.right.color is Color.BLACK:
                        w.left.color = Color.BLACK
                        w.color = Color.RED
                        self._rotate_right(w)
                        w = x.parent.right
                    w.color = x.parent.color
                    x.parent.color = Color.BLACK
                    w.right.color = Color.BLACK
                    self._rotate_left(x.parent)
                    x = self._root
            else:
                w = x.parent.left
                if w.color is Color.RED:
                    w.color = Color.BLACK
                    x.parent.color = Color.RED
                    self._rotate_right(x.parent)
                    w = x.parent.left
                if w.right.color is Color.BLACK and w.left.color is Color.BLACK:
                    w.color = Color.RED
                    x = x.parent
                else:
                    if w.left.color is Color.BLACK:
                        w.right.color = Color.BLACK
                        w.color = Color.RED
                        self._rotate_left(w)
                        w = x.parent.left
                    w.color = x.parent.color
                    x.parent.color = Color.BLACK
                    w.left.color = Color.BLACK
                    self._rotate_right(x.parent)
                    x = self._root
        x.color = Color.BLACK

    def insert(self, value: Any) -> RBNode:
        """Add ``value`` and return the node that holds it."""
        nil = self.sentinel
        node = RBNode(value)
        parent = nil
        cursor = self._root
        while cursor is not nil:
            parent = cursor
            cursor = cursor.left if self._cmp(value, cursor.value) < 0 else cursor.right
        node.parent = parent
        if parent is nil:
            self._root = node
        elif self._cmp(value, parent.value) < 0:
            parent.left = node
        else:
            parent.right = node
        node.left = nil
        node.right = nil
        node.color = Color.RED
        node._tree = self
        self._insert_fixup(node)
        return node

    def delete(self, node: RBNode) -> None:
        """Remove ``node``; raise ValueError if it is not in this tree."""
        if not isinstance(node, RBNode) or node._tree is not self:
            raise ValueError("node does not belong to this tree")
        nil = self.sentinel
        z = node
        y = z
        y_color = y.color
        if z.left is nil:
            x = z.right
            self._transplant(z, z.right)
        elif z.right is nil:
            x = z.left
            self._transplant(z, z.left)
        else:
            y = self._minimum(z.right)
            y_color = y.color
            x = y.right
            if y.parent is z:
                x.parent = y
            else:
                self._transplant(y, y.right)
                y.right = z.right
                y.right.parent = y
            self._transplant(z, y)
            y.left = z.left
            y.left.parent = y
            y.color = z.color
        if y_color is Color.BLACK:
            self._delete_fixup(x)
        z._tree = None
        z.left = z.right = z.parent = None

    def first(self) -> RBNode | None:
        """The smallest node, or None when the tree is empty."""
        if self._root is self.sentinel:
            return None
        return self._minimum(self._root)

    def next(self, node: RBNode) -> RBNode | None:
        """The in-order successor of ``node``, or None after the last one."""
        nil = self.sentinel
        if node.right is not nil:
            return self._minimum(node.right)
        parent = node.parent
        while parent is not nil and node is parent.right:
            node = parent
            parent = parent.parent
        return None if parent is nil else parent

    def empty(self) -> bool:
        """True when the tree holds no nodes."""
        return self._root is self.sentinel

    def __iter__(self) -> Iterator[Any]:
        node = self.first()
        while node is not None:
            yield node.value
            node = self.next(node)