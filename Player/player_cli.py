# Player/player_cli.py
from __future__ import annotations

import sys
from typing import Callable, Iterator

from Mansion.clues import ClueIndex
from Mansion.config import GameConfig, VariantConfig, load_game_config
from Mansion.exploration import explore, split_commands
from Mansion.perception import render_clue_list, render_events
from Mansion.rooms import dismantle_rooms
from Mansion.scenarios import build_mansion, default_suspect_table, known_suspects
from Mansion.suspects import SuspectTable
from Mansion.verdict import run_accusation

PROMPT = "Your choice (e/d/s): "
ACCUSE_PROMPT = "Who is the culprit? "


def console_lines(read: Callable[[str], str], prompt: str) -> Iterator[str]:
    """Lines typed by the player. Ends quietly on EOF; the explorer treats that as leaving."""
    while True:
        try:
            yield read(prompt)
        except EOFError:
            return


def console_commands(read: Callable[[str], str], prompt: str = PROMPT) -> Iterator[str]:
    # a line is only read once the previous one is used up
    return split_commands(console_lines(read, prompt))


def _ask_line(read: Callable[[str], str], prompt: str) -> str:
    try:
        return read(prompt)
    except EOFError:
        return ""


def _banner(variant: VariantConfig) -> str:
    bar = "=" * 42
    return f"{bar}\n   {variant.title}\n{bar}\nWelcome to the Entrance Hall! Your mission is to explore the mansion."


def play(variant_key: str, *, config: GameConfig | None = None, read: Callable[[str], str] | None = None) -> int:
    config = config or load_game_config()
    read = read or input
    variant = config.variant(variant_key)
    limit = config.text_limit

    root = None
    clues: ClueIndex | None = None
    suspects: SuspectTable | None = None

    print(_banner(variant))
    try:
        root = build_mansion(with_clues=variant.collect_clues, limit=limit)
        if variant.collect_clues:
            clues = ClueIndex(limit=limit)
        if variant.resolve_suspects:
            suspects = default_suspect_table(config.suspect_buckets, limit=limit)

        state = explore(root, console_commands(read), clues=clues, suspects=suspects)

        if clues is not None:
            print()
            print(render_clue_list(clues))

        if variant.accuse and suspects is not None:
            print()
            if clues is not None and not clues.is_empty():
                print("Suspects: " + ", ".join(known_suspects()))
            verdict = run_accusation(clues, suspects, lambda: _ask_line(read, ACCUSE_PROMPT), limit=limit)
            print(verdict.message)

        if config.show_events:
            print()
            print("=== EVENTS ===")
            print(render_events(state.events))
    except MemoryError:
        print("Memory allocation error!")
        raise SystemExit(1)
    finally:
        dismantle_rooms(root)
        if clues is not None:
            clues.destroy()
        if suspects is not None:
            suspects.destroy()

    print("\nEnd of the game. Memory released.")
    return 0


def main_map() -> None:
    sys.exit(play("map"))


def main_clues() -> None:
    sys.exit(play("clues"))


def main() -> None:
    sys.exit(play("full"))


if __name__ == "__main__":
    main()
