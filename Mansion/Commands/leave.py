# Mansion/Commands/leave.py
from __future__ import annotations
from typing import Tuple

from Mansion.engine import quit_exploration
from Mansion.results import StepResult
from Mansion.state import ExplorationState
from Mansion.Commands.base import ActionContext
from Mansion.Commands.spec import CommandSpec

class LeaveCommand:
    keys = ("s", "q")

    spec = CommandSpec(
        key="s",
        description="Stop exploring",
        visible=lambda ctx: True,
    )

    def can_run(self, ctx: ActionContext) -> Tuple[bool, str]:
        if ctx.state.finished:
            return False, f"Exploration is over ({ctx.state.status})."
        return True, "OK"

    def run(self, ctx: ActionContext) -> Tuple[ExplorationState, StepResult]:
        return quit_exploration(ctx.state)
