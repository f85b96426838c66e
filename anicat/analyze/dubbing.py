from __future__ import annotations

from collections.abc import Iterable

from anicat.analyze.episodes import order_episodes
from anicat.model import VideoEntry


def partition_by_dubbing(videos: Iterable[VideoEntry]) -> dict[str, list[VideoEntry]]:
    """Bucket already reconciled videos by dubbing track.

    Keys keep first-seen order; each bucket is sorted by episode number.
    """
    grouped: dict[str, list[VideoEntry]] = {}
    for video in videos:
        grouped.setdefault(video.dubbing, []).append(video)
    return {track: order_episodes(track_videos) for track, track_videos in grouped.items()}
