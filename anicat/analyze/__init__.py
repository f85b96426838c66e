"""Episode reconciliation: best-player selection and dubbing grouping."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from anicat.analyze.dubbing import partition_by_dubbing
from anicat.analyze.episodes import collapsed_episode_zero, dedupe_episodes, order_episodes
from anicat.analyze.explain import explain_title
from anicat.analyze.navigation import (
    adjacent_episodes,
    default_track,
    find_video,
    resolve_current,
)
from anicat.analyze.players import (
    apply_title_override,
    candidate_pool,
    has_complete_episode_list,
    partition_by_player,
    score_players,
    select_best_player,
)
from anicat.analyze.priority import (
    DEFAULT_PRIORITIES,
    DEFAULT_TITLE_OVERRIDES,
    build_priority_table,
    load_priority_table,
    player_priority,
)
from anicat.model import PlayerGroup, TitleAnalysis, VideoEntry, Warning

log = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_PRIORITIES",
    "DEFAULT_TITLE_OVERRIDES",
    "build_priority_table",
    "load_priority_table",
    "player_priority",
    "apply_title_override",
    "partition_by_player",
    "has_complete_episode_list",
    "score_players",
    "candidate_pool",
    "select_best_player",
    "dedupe_episodes",
    "order_episodes",
    "partition_by_dubbing",
    "find_video",
    "resolve_current",
    "default_track",
    "adjacent_episodes",
    "explain_title",
    "reconcile",
    "group_by_dubbing",
    "analyze_title",
]


def _as_entries(videos: Iterable[VideoEntry | dict]) -> list[VideoEntry]:
    return [v if isinstance(v, VideoEntry) else VideoEntry.from_api(v) for v in videos]


def _select(
    entries: list[VideoEntry],
    title_override,
    priorities: Mapping[str, int],
    overrides: Mapping[str, Iterable[str]],
) -> tuple[list[VideoEntry], bool, list[PlayerGroup], PlayerGroup | None]:
    working, override_applied = apply_title_override(entries, title_override, overrides)
    groups = score_players(working, priorities)
    return working, override_applied, groups, select_best_player(groups)


def reconcile(
    videos: Iterable[VideoEntry | dict],
    title_override=None,
    *,
    priorities: Mapping[str, int] = DEFAULT_PRIORITIES,
    overrides: Mapping[str, Iterable[str]] = DEFAULT_TITLE_OVERRIDES,
) -> list[VideoEntry]:
    """Return one video per episode, all from the best available player.

    Players whose episode numbers have no gaps are preferred; among those
    (or among all players when none is complete) the highest table priority
    wins, then the player with the most videos.  Within the winner the most
    viewed video is kept per episode number, and the result is sorted by
    episode number.
    """
    entries = _as_entries(videos)
    _, _, _, best = _select(entries, title_override, priorities, overrides)
    if best is None:
        return []
    return order_episodes(dedupe_episodes(best.videos))


def group_by_dubbing(
    videos: Iterable[VideoEntry | dict],
    title_override=None,
    *,
    priorities: Mapping[str, int] = DEFAULT_PRIORITIES,
    overrides: Mapping[str, Iterable[str]] = DEFAULT_TITLE_OVERRIDES,
) -> dict[str, list[VideoEntry]]:
    """Reconcile *videos* and split the result by dubbing track.

    Takes the raw video list; do not pass an already reconciled list.
    """
    episodes = reconcile(
        videos,
        title_override,
        priorities=priorities,
        overrides=overrides,
    )
    return partition_by_dubbing(episodes)


def analyze_title(
    videos: Iterable[VideoEntry | dict],
    title_id=None,
    *,
    priorities: Mapping[str, int] = DEFAULT_PRIORITIES,
    overrides: Mapping[str, Iterable[str]] = DEFAULT_TITLE_OVERRIDES,
) -> TitleAnalysis:
    """Run the reconciliation pipeline once and keep its intermediate results."""
    warnings: list[Warning] = []
    analysis: dict = {}

    entries = _as_entries(videos)
    analysis["input_count"] = len(entries)
    if not entries:
        warnings.append(Warning(code="NO_VIDEOS", message="No videos to reconcile"))

    # 1. Title override and player scoring
    working, override_applied, groups, best = _select(
        entries, title_id, priorities, overrides
    )
    analysis["working_count"] = len(working)
    analysis["override_applied"] = override_applied
    if title_id is not None and str(title_id) in overrides and not override_applied:
        warnings.append(
            Warning(
                code="OVERRIDE_IGNORED",
                message=(
                    f"Title {title_id} is pinned to {sorted(overrides[str(title_id)])} "
                    "but none of its videos use those players"
                ),
            )
        )

    pool = candidate_pool(groups)
    analysis["candidate_pool"] = [g.player for g in pool]
    if groups and not any(g.is_complete for g in groups):
        warnings.append(
            Warning(
                code="NO_COMPLETE_PLAYER",
                message="No player has a gap-free episode list; ranking all players",
                context={"players": [g.player for g in groups]},
            )
        )

    # 2. Deduplicate and order the winner's episodes
    episodes: list[VideoEntry] = []
    if best is not None:
        zero = collapsed_episode_zero(best.videos)
        if zero:
            log.debug("%d videos of %r collapsed into episode 0", len(zero), best.player)
            warnings.append(
                Warning(
                    code="EPISODE_ZERO_COLLAPSED",
                    message=(
                        f"{len(zero)} videos numbered 0 or without a usable "
                        "episode number were merged into a single episode 0"
                    ),
                    context={"video_ids": [v.video_id for v in zero]},
                )
            )
        episodes = order_episodes(dedupe_episodes(best.videos))
        dropped = best.episode_count - len(episodes)
        analysis["dropped_duplicates"] = dropped
        if dropped:
            warnings.append(
                Warning(
                    code="DUPLICATE_EPISODES",
                    message=f"Dropped {dropped} less viewed duplicate video(s)",
                    context={"player": best.player},
                )
            )

    # 3. Group by dubbing track
    dubbing_groups = partition_by_dubbing(episodes)

    return TitleAnalysis(
        title_id=None if title_id is None else str(title_id),
        player_groups=groups,
        chosen_player=best.player if best is not None else None,
        episodes=episodes,
        dubbing_groups=dubbing_groups,
        warnings=warnings,
        analysis=analysis,
    )
