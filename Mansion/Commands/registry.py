# Mansion/Commands/registry.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Tuple

from Mansion.engine import advance_turn, invalid_option
from Mansion.results import StepResult
from Mansion.Commands.base import ActionContext, Command
from Mansion.Commands.spec import CommandSpec


def normalize_key(raw: str) -> str:
    """One character, case-insensitive, surrounding whitespace ignored."""
    return raw.strip().lower()


@dataclass
class CommandRegistry:
    commands: Dict[str, Command]

    def register(self, command: Command) -> None:
        for key in command.keys:
            if key in self.commands:
                raise ValueError(f"Duplicate command key: {key}")
            self.commands[key] = command

    def list_specs(self, ctx: ActionContext) -> list[CommandSpec]:
        specs: list[CommandSpec] = []
        seen = set()
        for command in self.commands.values():
            if id(command) in seen:
                continue
            seen.add(id(command))
            spec = getattr(command, "spec", None)
            if spec is None:
                raise AttributeError(f"Command '{command.keys}' is missing .spec")
            if spec.visible(ctx):
                specs.append(spec)
        return specs

    def invoke(self, raw: str, ctx: ActionContext) -> Tuple[ActionContext, StepResult]:
        key = normalize_key(raw)
        command = self.commands.get(key)
        if command is None:
            new_state, res = invalid_option(ctx.state, raw)
            return ctx.with_state(new_state), res

        ok, msg = command.can_run(ctx)
        if not ok:
            return ctx, StepResult.fail(msg)

        new_state, res = command.run(ctx)

        # Centralized turn consumption: only successful moves count.
        if res.ok and res.consume_turn:
            new_state = advance_turn(new_state)

        return ctx.with_state(new_state), res
