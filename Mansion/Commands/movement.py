# Mansion/Commands/movement.py
from __future__ import annotations
from typing import Optional, Tuple

from Mansion.engine import apply_move, child_in
from Mansion.results import StepResult
from Mansion.state import ExplorationState
from Mansion.Commands.base import ActionContext
from Mansion.Commands.spec import CommandSpec


def _target_name(ctx: ActionContext, direction: str) -> Optional[str]:
    room = child_in(ctx.state.current, direction)
    return room.name if room is not None else None


class _MoveCommand:
    direction = ""

    def can_run(self, ctx: ActionContext) -> Tuple[bool, str]:
        if ctx.state.finished:
            return False, f"Exploration is over ({ctx.state.status})."
        return True, "OK"

    def run(self, ctx: ActionContext) -> Tuple[ExplorationState, StepResult]:
        # A missing child is reported by apply_move; the player stays put.
        return apply_move(ctx.state, self.direction, clues=ctx.clues, suspects=ctx.suspects)


class MoveLeftCommand(_MoveCommand):
    keys = ("e",)
    direction = "left"

    spec = CommandSpec(
        key="e",
        description="Left",
        visible=lambda ctx: ctx.state.current.left is not None,
        target=lambda ctx: _target_name(ctx, "left"),
    )


class MoveRightCommand(_MoveCommand):
    keys = ("d",)
    direction = "right"

    spec = CommandSpec(
        key="d",
        description="Right",
        visible=lambda ctx: ctx.state.current.right is not None,
        target=lambda ctx: _target_name(ctx, "right"),
    )
