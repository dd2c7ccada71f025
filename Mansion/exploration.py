# Mansion/exploration.py
from __future__ import annotations

from typing import Callable, Iterable, Iterator, Optional

from Mansion.clues import ClueIndex
from Mansion.engine import begin, quit_exploration
from Mansion.perception import render_options
from Mansion.rooms import Room
from Mansion.state import ExplorationState
from Mansion.suspects import SuspectTable
from Mansion.Commands.base import ActionContext
from Mansion.Commands.factory import build_commands
from Mansion.Commands.registry import CommandRegistry


def split_commands(lines: Iterable[str]) -> Iterator[str]:
    """Each non-whitespace character of each line is one command."""
    for line in lines:
        for ch in line:
            if not ch.isspace():
                yield ch


def explore(
    root: Room,
    commands: Iterable[str],
    *,
    clues: Optional[ClueIndex] = None,
    suspects: Optional[SuspectTable] = None,
    registry: Optional[CommandRegistry] = None,
    say: Callable[[str], None] = print,
) -> ExplorationState:
    """
    Walk the mansion from `root`, one command per turn, until a dead end or
    the player leaves. Running out of commands counts as leaving.

    Commands are only pulled while the player is standing in a room with
    exits, so a dead end (or quitting) leaves the rest of `commands` unread.
    """
    registry = registry or build_commands()
    state, res = begin(root, clues=clues, suspects=suspects)
    say(res.message)

    ctx = ActionContext(state=state, clues=clues, suspects=suspects)
    source = iter(commands)

    while not ctx.state.finished:
        say(render_options(registry, ctx))
        raw = next(source, None)
        if raw is None:
            state, res = quit_exploration(ctx.state, reason="eof")
            ctx = ctx.with_state(state)
        else:
            ctx, res = registry.invoke(raw, ctx)
        say(res.message)

    return ctx.state
