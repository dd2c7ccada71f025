# Mansion/results.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from Mansion.events import Event

@dataclass(frozen=True)
class StepResult:
    ok: bool
    message: str
    events: Tuple[Event, ...] = field(default_factory=tuple)
    data: Dict[str, Any] = field(default_factory=dict)
    # Only real moves advance the turn counter; quitting and mistakes don't.
    consume_turn: bool = True

    @staticmethod
    def success(message: str, *, events: Tuple[Event, ...] = (), data: Dict[str, Any] | None = None, consume_turn: bool = True) -> "StepResult":
        return StepResult(True, message, tuple(events), dict(data or {}), consume_turn)

    @staticmethod
    def fail(message: str, *, events: Tuple[Event, ...] = (), data: Dict[str, Any] | None = None) -> "StepResult":
        return StepResult(False, message, tuple(events), dict(data or {}), False)
