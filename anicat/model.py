from __future__ import annotations

import math
import re
from dataclasses import dataclass, field

UNKNOWN = "Unknown"

_LEADING_DIGITS = re.compile(r"\s*(\d+)", re.ASCII)


def parse_episode_number(value) -> int | None:
    """Parse an API episode number, or return None when there is none.

    Strings contribute their leading run of digits ("7 серия" -> 7).
    Negative, empty and non-numeric values are treated as missing.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value >= 0 else None
    if isinstance(value, float):
        return int(value) if math.isfinite(value) and value >= 0 else None
    m = _LEADING_DIGITS.match(str(value))
    if m is None:
        return None
    try:
        return int(m.group(1))
    except ValueError:
        return None


def _non_negative_int(value) -> int:
    if isinstance(value, bool):
        return 0
    try:
        n = int(value or 0)
    except (TypeError, ValueError, OverflowError):
        return 0
    return max(n, 0)


@dataclass(slots=True)
class VideoEntry:
    """One video record from the catalog API's videos endpoint."""

    video_id: object
    number: object = None
    player: str = UNKNOWN
    dubbing: str = UNKNOWN
    views: int = 0
    raw: dict = field(default_factory=dict)

    @classmethod
    def from_api(cls, record: dict) -> VideoEntry:
        data = record.get("data") or {}
        return cls(
            video_id=record.get("video_id"),
            number=record.get("number"),
            player=data.get("player") or UNKNOWN,
            dubbing=data.get("dubbing") or UNKNOWN,
            views=_non_negative_int(record.get("views")),
            raw=record,
        )

    @property
    def episode_number(self) -> int:
        parsed = parse_episode_number(self.number)
        return 0 if parsed is None else parsed

    @property
    def has_episode_number(self) -> bool:
        return parse_episode_number(self.number) is not None

    @property
    def duration(self) -> int:
        return _non_negative_int(self.raw.get("duration"))

    @property
    def iframe_url(self) -> str:
        url = self.raw.get("iframe_url") or ""
        if url.startswith("//"):
            return f"https:{url}"
        return url


@dataclass(slots=True)
class PlayerGroup:
    player: str
    videos: list[VideoEntry]
    is_complete: bool = False
    priority: int = 0

    @property
    def episode_count(self) -> int:
        return len(self.videos)

    @property
    def episode_numbers(self) -> list[int]:
        return sorted({v.episode_number for v in self.videos})


@dataclass(slots=True)
class Warning:
    code: str
    message: str
    context: dict = field(default_factory=dict)


@dataclass(slots=True)
class TitleAnalysis:
    title_id: str | None
    player_groups: list[PlayerGroup]
    chosen_player: str | None
    episodes: list[VideoEntry]
    dubbing_groups: dict[str, list[VideoEntry]]
    warnings: list[Warning]
    analysis: dict = field(default_factory=dict)
