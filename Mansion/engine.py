# Mansion/engine.py
from __future__ import annotations

from dataclasses import replace
from typing import Any, Dict, List, Optional, Tuple

from Mansion.clues import ClueIndex
from Mansion.events import Event, new_event
from Mansion.results import StepResult
from Mansion.rooms import Room
from Mansion.state import ExplorationState, Status, make_initial_state
from Mansion.suspects import SuspectTable

# ----------------------------
# Small helpers
# ----------------------------

def _with_state(
    state: ExplorationState,
    *,
    current: Room | None = None,
    status: Status | None = None,
    turn: int | None = None,
    visited: Tuple[str, ...] | None = None,
    events: Tuple[Event, ...] | None = None,
) -> ExplorationState:
    """Canonical way to copy/update ExplorationState without forgetting fields."""
    kwargs: Dict[str, Any] = {}
    if current is not None:
        kwargs["current"] = current
    if status is not None:
        kwargs["status"] = status
    if turn is not None:
        kwargs["turn"] = turn
    if visited is not None:
        kwargs["visited"] = visited
    if events is not None:
        kwargs["events"] = events
    return replace(state, **kwargs)


def append_events(state: ExplorationState, events: Tuple[Event, ...]) -> ExplorationState:
    if not events:
        return state
    return _with_state(state, events=tuple(state.events) + tuple(events))

def emit(state: ExplorationState, *, type: str, args: Dict[str, Any] | None = None, ok: bool = True, message: str = "") -> Tuple[ExplorationState, Event]:
    ev = new_event(turn=state.turn, type=type, args=args, ok=ok, message=message)
    return append_events(state, (ev,)), ev


# ----------------------------
# Queries
# ----------------------------

def child_in(room: Room, direction: str) -> Optional[Room]:
    if direction == "left":
        return room.left
    if direction == "right":
        return room.right
    raise ValueError(f"Unknown direction: {direction}")


# ----------------------------
# Turn system
# ----------------------------

def advance_turn(state: ExplorationState) -> ExplorationState:
    return _with_state(state, turn=state.turn + 1)


# ----------------------------
# Actions
# ----------------------------

def enter_room(
    state: ExplorationState,
    room: Room,
    *,
    clues: ClueIndex | None = None,
    suspects: SuspectTable | None = None,
) -> Tuple[ExplorationState, StepResult]:
    """
    Arrive in `room`: collect whatever clue is still there, then check for a
    dead end. A room gives up its clue only once.
    """
    state = _with_state(state, current=room, visited=state.visited + (room.name,))
    lines: List[str] = [f"You are in: {room.name}"]
    evs: List[Event] = []

    state, ev = emit(state, type="enter", args={"room": room.name}, message=f"entered {room.name}")
    evs.append(ev)

    if room.has_clue:
        clue = room.take_clue()
        lines.append(f"You found a clue: \"{clue}\"")
        state, ev = emit(state, type="clue", args={"room": room.name, "clue": clue}, message=f"found {clue!r}")
        evs.append(ev)

        if suspects is not None:
            suspect = suspects.lookup(clue)
            if suspect is not None:
                lines.append(f"This clue points to: {suspect}")
                state, ev = emit(state, type="suspect", args={"clue": clue, "suspect": suspect}, message=f"{clue!r} -> {suspect}")
                evs.append(ev)

        if clues is not None:
            clues.insert(clue)

    if room.is_dead_end:
        lines.append("End of the road! This room has no more exits.")
        state = _with_state(state, status="dead_end")
        state, ev = emit(state, type="dead_end", args={"room": room.name}, message=f"dead end at {room.name}")
        evs.append(ev)

    return state, StepResult.success("\n".join(lines), events=tuple(evs), consume_turn=False)


def begin(
    root: Room,
    *,
    clues: ClueIndex | None = None,
    suspects: SuspectTable | None = None,
) -> Tuple[ExplorationState, StepResult]:
    """Start in the root room. Its clue is collected before any command is read."""
    return enter_room(make_initial_state(root), root, clues=clues, suspects=suspects)


def apply_move(
    state: ExplorationState,
    direction: str,
    *,
    clues: ClueIndex | None = None,
    suspects: SuspectTable | None = None,
) -> Tuple[ExplorationState, StepResult]:
    if state.finished:
        return state, StepResult.fail(f"Exploration is over ({state.status}).")

    src = state.current
    dst = child_in(src, direction)
    if dst is None:
        msg = f"There is no path to the {direction} from this room."
        state, ev = emit(state, type="no_path", args={"room": src.name, "direction": direction}, ok=False, message=msg)
        return state, StepResult.fail(msg, events=(ev,))

    state, ev = emit(state, type="move", args={"src": src.name, "dst": dst.name, "direction": direction}, message=f"moved {src.name} -> {dst.name}")
    # Turn advancement is handled by the command registry.
    state, res = enter_room(state, dst, clues=clues, suspects=suspects)
    return state, StepResult.success(res.message, events=(ev,) + res.events, data={"src": src.name, "dst": dst.name, "status": state.status})


def quit_exploration(state: ExplorationState, *, reason: str = "player") -> Tuple[ExplorationState, StepResult]:
    msg = "Exploration ended by the player." if reason == "player" else "No more input. Exploration ended."
    state = _with_state(state, status="quit")
    state, ev = emit(state, type="quit", args={"reason": reason}, message=msg)
    return state, StepResult.success(msg, events=(ev,), consume_turn=False)


def invalid_option(state: ExplorationState, raw: str) -> Tuple[ExplorationState, StepResult]:
    msg = "Invalid option. Try again."
    state, ev = emit(state, type="invalid", args={"input": raw}, ok=False, message=msg)
    return state, StepResult.fail(msg, events=(ev,))
