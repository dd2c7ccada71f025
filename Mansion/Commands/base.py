# Mansion/Commands/base.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Protocol, Tuple

from Mansion.clues import ClueIndex
from Mansion.results import StepResult
from Mansion.state import ExplorationState
from Mansion.suspects import SuspectTable
from Mansion.Commands.spec import CommandSpec

@dataclass(frozen=True)
class ActionContext:
    state: ExplorationState
    # Collaborators are optional: the plain map variant has neither.
    clues: Optional[ClueIndex] = None
    suspects: Optional[SuspectTable] = None

    def with_state(self, state: ExplorationState) -> "ActionContext":
        return ActionContext(state=state, clues=self.clues, suspects=self.suspects)

class Command(Protocol):
    keys: Tuple[str, ...]
    spec: CommandSpec

    def can_run(self, ctx: ActionContext) -> Tuple[bool, str]:
        ...

    def run(self, ctx: ActionContext) -> Tuple[ExplorationState, StepResult]:
        ...
