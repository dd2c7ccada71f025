# Mansion/Commands/factory.py
from __future__ import annotations

from Mansion.Commands.registry import CommandRegistry
from Mansion.Commands.movement import MoveLeftCommand, MoveRightCommand
from Mansion.Commands.leave import LeaveCommand


def build_commands() -> CommandRegistry:
    reg = CommandRegistry(commands={})
    reg.register(MoveLeftCommand())
    reg.register(MoveRightCommand())
    reg.register(LeaveCommand())
    return reg
