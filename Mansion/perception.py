# Mansion/perception.py
from __future__ import annotations
from typing import Iterable, List

from Mansion.Commands.base import ActionContext
from Mansion.Commands.registry import CommandRegistry
from Mansion.events import Event


def render_options(registry: CommandRegistry, ctx: ActionContext) -> str:
    out: List[str] = ["Navigation options:"]
    for spec in registry.list_specs(ctx):
        target = spec.target(ctx) if spec.target else None
        if target:
            out.append(f"  [{spec.key}] {spec.description} (to {target})")
        else:
            out.append(f"  [{spec.key}] {spec.description}")
    return "\n".join(out)


def render_clue_list(clues: Iterable[str]) -> str:
    items = list(clues)
    if not items:
        return "No clues were collected."
    out = ["Clues collected (alphabetical order):"]
    out.extend(f"  - {clue}" for clue in items)
    return "\n".join(out)


def render_events(events: Iterable[Event], n: int = 25) -> str:
    evs = list(events)
    if not evs:
        return "(no events)"
    return "\n".join(f"[{ev.turn}] {ev.type} ok={ev.ok} {ev.message}" for ev in evs[-n:])
