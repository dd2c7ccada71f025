# Mansion/rooms.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Optional

MAX_TEXT = 49  # names and clues are bounded text


def bounded(text: str, limit: int = MAX_TEXT) -> str:
    return text[:limit]


@dataclass(eq=False)
class Room:
    name: str
    clue: str = ""                       # "" -> nothing left to find here
    left: Optional["Room"] = None        # [e] path
    right: Optional["Room"] = None       # [d] path

    @property
    def is_dead_end(self) -> bool:
        return self.left is None and self.right is None

    @property
    def has_clue(self) -> bool:
        return bool(self.clue)

    def take_clue(self) -> str:
        """Hand over the clue and leave the room empty. Second call returns ""."""
        clue, self.clue = self.clue, ""
        return clue


def create_room(name: str, clue: str = "", *, limit: int = MAX_TEXT) -> Room:
    return Room(name=bounded(name, limit), clue=bounded(clue, limit))


def iter_post_order(root: Optional[Room]) -> Iterator[Room]:
    """Children before parent, every room exactly once."""
    stack: List[tuple[Room, bool]] = [(root, False)] if root is not None else []
    while stack:
        room, expanded = stack.pop()
        if expanded:
            yield room
            continue
        stack.append((room, True))
        if room.right is not None:
            stack.append((room.right, False))
        if room.left is not None:
            stack.append((room.left, False))


def dismantle_rooms(root: Optional[Room]) -> List[str]:
    """
    Tear the map down post-order and return the room names in release order.
    Links are cut only after both subtrees were visited.
    """
    released: List[str] = []
    for room in iter_post_order(root):
        room.left = None
        room.right = None
        released.append(room.name)
    return released
