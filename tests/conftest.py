import pytest

from Mansion.clues import ClueIndex
from Mansion.rooms import create_room
from Mansion.suspects import build_suspect_table


@pytest.fixture
def small_mansion():
    """Hall(Fingerprint) -> e: Lounge(Cup), d: Kitchen(no clue)."""
    hall = create_room("Hall", "Fingerprint")
    hall.left = create_room("Lounge", "Cup")
    hall.right = create_room("Kitchen")
    return hall


@pytest.fixture
def butler_table():
    return build_suspect_table([("Fingerprint", "Butler"), ("Cup", "Butler")])


@pytest.fixture
def clues():
    return ClueIndex()


class Transcript:
    """Collects everything the explorer narrates."""

    def __init__(self):
        self.lines = []

    def __call__(self, text):
        self.lines.append(text)

    @property
    def text(self):
        return "\n".join(self.lines)


@pytest.fixture
def transcript():
    return Transcript()
