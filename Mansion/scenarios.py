# Mansion/scenarios.py
from __future__ import annotations
from typing import Dict, List, Tuple

from Mansion.rooms import MAX_TEXT, Room, create_room
from Mansion.suspects import DEFAULT_BUCKETS, SuspectTable, build_suspect_table

# room name -> clue hidden there (rooms not listed are empty)
MANSION_CLUES: Dict[str, str] = {
    "Entrance Hall": "Muddy footprints",
    "Living Room": "Torn velvet glove",
    "Library": "Missing diary page",
    "Study": "Broken pocket watch",
    "Master Bedroom": "Empty poison vial",
    "Kitchen": "Knife missing from the rack",
    "Pantry": "Wine glass with lipstick",
    "Garden": "Fresh soil on the shovel",
}

# clue -> suspect it points to
SUSPECT_FACTS: List[Tuple[str, str]] = [
    ("Muddy footprints", "Gardener Tom"),
    ("Torn velvet glove", "Lady Cordelia"),
    ("Missing diary page", "Lady Cordelia"),
    ("Broken pocket watch", "Butler James"),
    ("Empty poison vial", "Dr. Hartley"),
    ("Knife missing from the rack", "Butler James"),
    ("Wine glass with lipstick", "Lady Cordelia"),
    ("Fresh soil on the shovel", "Gardener Tom"),
]


def build_mansion(*, with_clues: bool = False, limit: int = MAX_TEXT) -> Room:
    """
    Wire up the fixed mansion map:

        Entrance Hall
          e: Living Room
               e: Library
               d: Study
                    d: Master Bedroom
          d: Kitchen
               e: Pantry
               d: Garden
    """
    def room(name: str) -> Room:
        clue = MANSION_CLUES.get(name, "") if with_clues else ""
        return create_room(name, clue, limit=limit)

    hall = room("Entrance Hall")

    hall.left = room("Living Room")
    hall.right = room("Kitchen")

    hall.left.left = room("Library")
    hall.left.right = room("Study")
    # the study only opens to the right
    hall.left.right.right = room("Master Bedroom")

    hall.right.left = room("Pantry")
    hall.right.right = room("Garden")

    return hall


def default_suspect_table(bucket_count: int = DEFAULT_BUCKETS, *, limit: int = MAX_TEXT) -> SuspectTable:
    return build_suspect_table(SUSPECT_FACTS, bucket_count, limit=limit)


def known_suspects() -> List[str]:
    return sorted({suspect for _, suspect in SUSPECT_FACTS})
