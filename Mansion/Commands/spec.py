# Mansion/Commands/spec.py
from dataclasses import dataclass
from typing import Any, Callable, Optional

@dataclass(frozen=True)
class CommandSpec:
    key: str
    description: str
    visible: Callable[[Any], bool]                          # ctx -> bool
    target: Optional[Callable[[Any], Optional[str]]] = None  # ctx -> where it leads
