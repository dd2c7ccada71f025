# Mansion/clues.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Optional

from Mansion.rooms import MAX_TEXT, bounded


@dataclass(eq=False)
class ClueNode:
    clue: str
    left: Optional["ClueNode"] = None
    right: Optional["ClueNode"] = None


def insert_clue(root: Optional[ClueNode], clue: str) -> ClueNode:
    """
    Plain BST insert, no rebalancing. Returns the (possibly new) root.
    An existing key leaves the tree untouched.
    """
    if root is None:
        return ClueNode(clue)

    node = root
    while True:
        if clue == node.clue:
            return root
        if clue < node.clue:
            if node.left is None:
                node.left = ClueNode(clue)
                return root
            node = node.left
        else:
            if node.right is None:
                node.right = ClueNode(clue)
                return root
            node = node.right


def contains_clue(root: Optional[ClueNode], clue: str) -> bool:
    node = root
    while node is not None:
        if clue == node.clue:
            return True
        node = node.left if clue < node.clue else node.right
    return False


def iter_in_order(root: Optional[ClueNode]) -> Iterator[str]:
    # explicit stack: sorted insertion degenerates into a chain
    stack: List[ClueNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.clue
        node = node.right


def destroy_clues(root: Optional[ClueNode]) -> List[str]:
    """Post-order teardown. Returns the clues in release order."""
    released: List[str] = []
    stack: List[tuple[ClueNode, bool]] = [(root, False)] if root is not None else []
    while stack:
        node, expanded = stack.pop()
        if expanded:
            node.left = None
            node.right = None
            released.append(node.clue)
            continue
        stack.append((node, True))
        if node.right is not None:
            stack.append((node.right, False))
        if node.left is not None:
            stack.append((node.left, False))
    return released


class ClueIndex:
    """Distinct clues collected so far, kept in alphabetical order."""

    def __init__(self, *, limit: int = MAX_TEXT) -> None:
        self.root: Optional[ClueNode] = None
        self.limit = limit
        self._size = 0

    def insert(self, clue: str) -> bool:
        clue = bounded(clue, self.limit)
        if contains_clue(self.root, clue):
            return False
        self.root = insert_clue(self.root, clue)
        self._size += 1
        return True

    def __contains__(self, clue: object) -> bool:
        return isinstance(clue, str) and contains_clue(self.root, bounded(clue, self.limit))

    def __iter__(self) -> Iterator[str]:
        return iter_in_order(self.root)

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self.root is None

    def destroy(self) -> List[str]:
        released = destroy_clues(self.root)
        self.root = None
        self._size = 0
        return released
