# Mansion/state.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Literal, Tuple

from Mansion.events import Event
from Mansion.rooms import Room

Status = Literal["at_room", "dead_end", "quit"]

@dataclass(frozen=True)
class ExplorationState:
    current: Room
    status: Status = "at_room"
    turn: int = 0                                  # successful moves so far
    visited: Tuple[str, ...] = field(default_factory=tuple)
    events: Tuple[Event, ...] = field(default_factory=tuple)

    @property
    def finished(self) -> bool:
        return self.status != "at_room"


def make_initial_state(root: Room) -> ExplorationState:
    return ExplorationState(current=root, status="at_room", turn=0, visited=tuple(), events=tuple())
