# Mansion/config.py
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import yaml

from Mansion.rooms import MAX_TEXT
from Mansion.suspects import DEFAULT_BUCKETS

# variant key -> (collect clues, resolve suspects, ask for a verdict)
VARIANT_FEATURES: Dict[str, tuple[bool, bool, bool]] = {
    "map": (False, False, False),
    "clues": (True, False, False),
    "full": (True, True, True),
}


@dataclass(frozen=True)
class VariantConfig:
    key: str
    title: str
    collect_clues: bool = False
    resolve_suspects: bool = False
    accuse: bool = False


@dataclass(frozen=True)
class GameConfig:
    title: str = "DETECTIVE QUEST"
    text_limit: int = MAX_TEXT
    suspect_buckets: int = DEFAULT_BUCKETS
    show_events: bool = False
    variants: Dict[str, VariantConfig] = field(default_factory=dict)

    def variant(self, key: str) -> VariantConfig:
        if key not in self.variants:
            raise ValueError(f"Unknown variant: {key}")
        return self.variants[key]


def default_config_path() -> Path:
    # .../Mansion/config.py -> .../Mansion/game_config.yaml
    return Path(__file__).resolve().parent / "game_config.yaml"


def _load_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _positive_int(raw: Dict[str, Any], key: str, default: int) -> int:
    value = raw.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValueError(f"{key} must be a positive integer, got {value!r}")
    return value


def _flag(raw: Dict[str, Any], key: str, default: bool) -> bool:
    value = raw.get(key, default)
    if not isinstance(value, bool):
        raise ValueError(f"{key} must be true or false, got {value!r}")
    return value


def parse_game_config(raw: Dict[str, Any]) -> GameConfig:
    if not isinstance(raw, dict):
        raise ValueError("game config must be a mapping")

    title = str(raw.get("title", GameConfig.title))
    variants_raw = raw.get("variants") or {}
    if not isinstance(variants_raw, dict):
        raise ValueError("variants must be a mapping")

    variants: Dict[str, VariantConfig] = {}
    for key, (clues, suspects, accuse) in VARIANT_FEATURES.items():
        vraw = variants_raw.get(key) or {}
        if not isinstance(vraw, dict):
            raise ValueError(f"variants.{key} must be a mapping, got {vraw!r}")
        variants[key] = VariantConfig(
            key=key,
            title=str(vraw.get("title", f"{title} ({key})")),
            collect_clues=clues,
            resolve_suspects=suspects,
            accuse=accuse,
        )

    unknown = sorted(set(variants_raw) - set(VARIANT_FEATURES))
    if unknown:
        raise ValueError("Unknown variants in config: " + ", ".join(unknown))

    return GameConfig(
        title=title,
        text_limit=_positive_int(raw, "text_limit", MAX_TEXT),
        suspect_buckets=_positive_int(raw, "suspect_buckets", DEFAULT_BUCKETS),
        show_events=_flag(raw, "show_events", False),
        variants=variants,
    )


def load_game_config(path: Path | None = None) -> GameConfig:
    return parse_game_config(_load_yaml(path or default_config_path()))
