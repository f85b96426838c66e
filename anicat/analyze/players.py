from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from anicat.analyze.priority import player_priority
from anicat.model import PlayerGroup, VideoEntry

log = logging.getLogger(__name__)


def apply_title_override(
    videos: list[VideoEntry],
    title_id,
    overrides: Mapping[str, Iterable[str]],
) -> tuple[list[VideoEntry], bool]:
    """Restrict *videos* to the players pinned for *title_id*.

    Returns the working set and whether the override was applied.  When the
    title has an override but none of its players appear, the full input is
    returned unchanged.
    """
    if title_id is None:
        return videos, False
    allowed = overrides.get(str(title_id))
    if allowed is None:
        return videos, False
    allowed = set(allowed)
    pinned = [v for v in videos if v.player in allowed]
    if not pinned:
        log.debug("Override for title %s matched no videos; using all players", title_id)
        return videos, False
    return pinned, True


def partition_by_player(videos: Iterable[VideoEntry]) -> dict[str, list[VideoEntry]]:
    """Group videos by exact player name, keeping first-seen player order."""
    by_player: dict[str, list[VideoEntry]] = {}
    for video in videos:
        by_player.setdefault(video.player, []).append(video)
    return by_player


def has_complete_episode_list(videos: list[VideoEntry]) -> bool:
    """Return True when the videos' episode numbers have no gaps.

    Only numbers actually present on the record count.  A single distinct
    number is complete even when it is 0; a group without any parsed numbers
    never is.
    """
    valid = {v.episode_number for v in videos if v.has_episode_number}
    if not valid:
        return False
    positive = sorted(n for n in valid if n > 0)
    if len(positive) == 1 or len(valid) == 1:
        return True
    return positive[-1] - positive[0] + 1 == len(positive)


def score_players(
    videos: Iterable[VideoEntry],
    priorities: Mapping[str, int],
) -> list[PlayerGroup]:
    """Partition *videos* by player and score each group."""
    groups: list[PlayerGroup] = []
    for player, player_videos in partition_by_player(videos).items():
        groups.append(
            PlayerGroup(
                player=player,
                videos=player_videos,
                is_complete=has_complete_episode_list(player_videos),
                priority=player_priority(player, priorities),
            )
        )
    return groups


def candidate_pool(groups: list[PlayerGroup]) -> list[PlayerGroup]:
    """Complete groups if there are any, otherwise every group."""
    complete = [g for g in groups if g.is_complete]
    return complete if complete else list(groups)


def select_best_player(groups: list[PlayerGroup]) -> PlayerGroup | None:
    """Pick the highest-priority candidate, then the one with most videos.

    Remaining ties keep first-seen order.
    """
    pool = candidate_pool(groups)
    if not pool:
        return None
    ranked = sorted(pool, key=lambda g: (-g.priority, -g.episode_count))
    best = ranked[0]
    log.debug(
        "Selected player %r (priority=%d, videos=%d, complete=%s) from %d candidate(s)",
        best.player,
        best.priority,
        best.episode_count,
        best.is_complete,
        len(pool),
    )
    return best
