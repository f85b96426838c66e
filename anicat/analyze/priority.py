"""Player priority table and per-title player overrides."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType

# Logical player -> (priority, display-name aliases).  The API labels the same
# source either with a localized "Плеер X" prefix or with the bare name.
_PLAYERS: dict[str, tuple[int, tuple[str, ...]]] = {
    "Alloha": (5, ("Плеер Alloha", "Alloha")),
    "Aksor": (4, ("Плеер Aksor", "Aksor")),
    "Kodik": (3, ("Плеер Kodik", "Kodik")),
}

KODIK_ALIASES = frozenset(_PLAYERS["Kodik"][1])


def build_priority_table(
    players: Mapping[str, tuple[int, Iterable[str]]],
) -> Mapping[str, int]:
    """Flatten logical players into a read-only alias -> priority mapping."""
    table: dict[str, int] = {}
    for priority, aliases in players.values():
        for alias in aliases:
            table[alias] = priority
    return MappingProxyType(table)


def load_priority_table(path: str | Path) -> Mapping[str, int]:
    """Load a ``{"player name": priority}`` JSON object as a priority table."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object of player priorities")
    table: dict[str, int] = {}
    for player, priority in data.items():
        if isinstance(priority, bool) or not isinstance(priority, int):
            raise ValueError(f"{path}: priority for {player!r} must be an integer")
        table[player] = priority
    return MappingProxyType(table)


def player_priority(player: str, table: Mapping[str, int]) -> int:
    return table.get(player, 0)


DEFAULT_PRIORITIES: Mapping[str, int] = build_priority_table(_PLAYERS)

# Titles pinned to one player (1512: One Piece).
DEFAULT_TITLE_OVERRIDES: Mapping[str, frozenset[str]] = MappingProxyType(
    {"1512": KODIK_ALIASES}
)
