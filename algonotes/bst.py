"""An unbalanced binary search tree."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class Node:
    """A tree node."""

    value: Any
    left: Optional["Node"] = None
    right: Optional["Node"] = None


class BinarySearchTree:
    """Binary search tree; equal values go to the right subtree."""

    def __init__(self) -> None:
        self._root: Optional[Node] = None

    @property
    def root(self) -> Optional[Node]:
        return self._root

    def insert(self, value: Any) -> None:
        """Insert ``value`` as a new leaf."""
        new = Node(value)
        if self._root is None:
            self._root = new
            return
        node = self._root
        while True:
            if node.value > value:
                if node.left is None:
                    node.left = new
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = new
                    return
                node = node.right

    def delete(self, value: Any) -> None:
        """Remove one node holding ``value``; raise KeyError if there is none."""
        parent: Optional[Node] = None
        node = self._root
        while node is not None and node.value != value:
            parent = node
            node = node.right if node.value < value else node.left
        if node is None:
            raise KeyError(value)

        if node.left is not None and node.right is not None:
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            node.value = successor.value
            if successor_parent.left is successor:
                successor_parent.left = successor.right
            else:
                successor_parent.right = successor.right
            return

        child = node.left if node.left is not None else node.right
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child

    def pre_order(self) -> Iterator[Any]:
        """Yield values node, left, right."""
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node.value
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def in_order(self) -> Iterator[Any]:
        """Yield values left, node, right (sorted order)."""
        stack: list[Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def post_order(self) -> Iterator[Any]:
        """Yield values left, right, node."""
        stack = [self._root] if self._root is not None else []
        reversed_values = []
        while stack:
            node = stack.pop()
            reversed_values.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        yield from reversed(reversed_values)

    def __iter__(self) -> Iterator[Any]:
        return self.in_order()