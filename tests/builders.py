"""Shared test-data builders for anicat tests."""

from __future__ import annotations

from anicat.model import VideoEntry

_next_id = iter(range(1000, 10**6))


def build_record(
    player: str | None,
    number: object = None,
    *,
    views: int | None = 0,
    dubbing: str | None = "AniLibria",
    video_id: int | None = None,
    **extra,
) -> dict:
    """Build an API-shaped video record."""
    data = {}
    if player is not None:
        data["player"] = player
    if dubbing is not None:
        data["dubbing"] = dubbing
    record = {
        "video_id": next(_next_id) if video_id is None else video_id,
        "data": data,
    }
    if number is not None:
        record["number"] = number
    if views is not None:
        record["views"] = views
    record.update(extra)
    return record


def build_video(player: str | None, number: object = None, **kwargs) -> VideoEntry:
    """Build a VideoEntry from an API-shaped record."""
    return VideoEntry.from_api(build_record(player, number, **kwargs))
