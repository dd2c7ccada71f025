from Mansion.Commands.base import ActionContext
from Mansion.Commands.factory import build_commands
from Mansion.Commands.registry import CommandRegistry

__all__ = ["ActionContext", "CommandRegistry", "build_commands"]
