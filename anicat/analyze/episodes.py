from __future__ import annotations

from collections.abc import Iterable

from anicat.model import VideoEntry


def dedupe_episodes(videos: Iterable[VideoEntry]) -> list[VideoEntry]:
    """Keep one video per episode number, preferring the most viewed.

    Equal view counts keep the video seen first.
    """
    by_episode: dict[int, VideoEntry] = {}
    for video in videos:
        current = by_episode.get(video.episode_number)
        if current is None or video.views > current.views:
            by_episode[video.episode_number] = video
    return list(by_episode.values())


def order_episodes(videos: Iterable[VideoEntry]) -> list[VideoEntry]:
    """Sort videos ascending by episode number (stable)."""
    return sorted(videos, key=lambda v: v.episode_number)


def collapsed_episode_zero(videos: Iterable[VideoEntry]) -> list[VideoEntry]:
    """Return the videos that share the synthetic episode 0 bucket.

    Missing or unparseable numbers fall into episode 0 together with a real
    episode 0, so only one of them survives deduplication.  Duplicates of a
    genuine "0" alone are ordinary duplicates and are not reported here.
    """
    zero = [v for v in videos if v.episode_number == 0]
    if len(zero) < 2 or all(v.has_episode_number for v in zero):
        return []
    return zero
