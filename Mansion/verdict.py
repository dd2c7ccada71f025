# Mansion/verdict.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Iterable, Literal

from Mansion.rooms import MAX_TEXT, bounded
from Mansion.suspects import SuspectTable

ACCUSATION_THRESHOLD = 2  # clues needed to make a charge stick

Outcome = Literal["solved", "insufficient", "no_clues"]

@dataclass(frozen=True)
class Verdict:
    accused: str
    count: int
    outcome: Outcome

    @property
    def solved(self) -> bool:
        return self.outcome == "solved"

    @property
    def message(self) -> str:
        if self.outcome == "no_clues":
            return "You collected no clues. Without evidence the accusation fails automatically."
        if self.outcome == "solved":
            return (
                f"Accused: {self.accused}. {self.count} clues point to {self.accused}.\n"
                "The evidence is conclusive. Case closed!"
            )
        return (
            f"Accused: {self.accused}. Only {self.count} clue(s) point to {self.accused}.\n"
            f"At least {ACCUSATION_THRESHOLD} are needed. The culprit walks free..."
        )


def tally_evidence(clues: Iterable[str], suspects: SuspectTable, accused: str) -> int:
    """Count collected clues whose suspect is exactly `accused` (case-sensitive)."""
    return sum(1 for clue in clues if suspects.lookup(clue) == accused)


def judge(clues: Iterable[str], suspects: SuspectTable, accused: str) -> Verdict:
    count = tally_evidence(clues, suspects, accused)
    outcome: Outcome = "solved" if count >= ACCUSATION_THRESHOLD else "insufficient"
    return Verdict(accused=accused, count=count, outcome=outcome)


def run_accusation(
    clues,
    suspects: SuspectTable,
    ask: Callable[[], str],
    *,
    limit: int = MAX_TEXT,
) -> Verdict:
    """
    Ask who did it and weigh the evidence. With an empty clue index the
    question is never asked.
    """
    if clues is None or clues.is_empty():
        return Verdict(accused="", count=0, outcome="no_clues")
    accused = bounded(ask().rstrip("\r\n"), limit)
    return judge(clues, suspects, accused)
