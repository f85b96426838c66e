"""Episode navigation over dubbing groups for the playback page."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from anicat.model import VideoEntry


def find_video(videos: Sequence[VideoEntry], video_id) -> VideoEntry | None:
    """Return the video whose id matches *video_id* (route params are strings)."""
    if video_id is None:
        return None
    wanted = str(video_id)
    return next((v for v in videos if str(v.video_id) == wanted), None)


def resolve_current(videos: Sequence[VideoEntry], video_id) -> VideoEntry | None:
    """Return the requested video, falling back to the first one."""
    video = find_video(videos, video_id)
    if video is None and videos:
        return videos[0]
    return video


def default_track(
    groups: Mapping[str, Sequence[VideoEntry]],
    current: VideoEntry | None = None,
) -> str | None:
    """Pick the dubbing track to show: the current video's, else the first."""
    if current is not None and current.dubbing in groups:
        return current.dubbing
    return next(iter(groups), None)


def adjacent_episodes(
    groups: Mapping[str, Sequence[VideoEntry]],
    track: str | None,
    video_id,
) -> tuple[VideoEntry | None, VideoEntry | None]:
    """Return the (previous, next) videos around *video_id* within *track*."""
    episodes = groups.get(track, []) if track is not None else []
    wanted = str(video_id)
    idx = next((i for i, v in enumerate(episodes) if str(v.video_id) == wanted), None)
    if idx is None:
        return None, None
    prev_ep = episodes[idx - 1] if idx > 0 else None
    next_ep = episodes[idx + 1] if idx + 1 < len(episodes) else None
    return prev_ep, next_ep
