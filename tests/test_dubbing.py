"""Tests for grouping reconciled episodes by dubbing track."""

from __future__ import annotations

from collections import Counter

from builders import build_video

from anicat.analyze import group_by_dubbing, reconcile
from anicat.analyze.dubbing import partition_by_dubbing


def test_groups_keep_first_seen_track_order() -> None:
    videos = [
        build_video("Kodik", "1", dubbing="StudioBand"),
        build_video("Kodik", "2", dubbing="AniLibria"),
        build_video("Kodik", "3", dubbing="StudioBand"),
    ]
    groups = group_by_dubbing(videos)
    assert list(groups) == ["StudioBand", "AniLibria"]
    assert [v.episode_number for v in groups["StudioBand"]] == [1, 3]


def test_track_order_follows_episode_order_not_input_order() -> None:
    videos = [
        build_video("Kodik", "2", dubbing="AniDUB"),
        build_video("Kodik", "1", dubbing="AniLibria"),
    ]
    assert list(group_by_dubbing(videos)) == ["AniLibria", "AniDUB"]


def test_missing_dubbing_groups_under_unknown() -> None:
    groups = group_by_dubbing([build_video("Kodik", "1", dubbing=None)])
    assert list(groups) == ["Unknown"]


def test_grouping_reconciles_first() -> None:
    videos = [
        build_video("Kodik", "1", dubbing="AniDUB"),
        build_video("Kodik", "2", dubbing="AniDUB"),
        build_video("Alloha", "1", dubbing="AniLibria"),
    ]
    groups = group_by_dubbing(videos)
    assert list(groups) == ["AniLibria"]


def test_flattened_groups_match_reconcile(mixed_players_records) -> None:
    groups = group_by_dubbing(mixed_players_records)
    flat = [v.video_id for videos in groups.values() for v in videos]
    assert Counter(flat) == Counter(v.video_id for v in reconcile(mixed_players_records))


def test_title_override_is_forwarded() -> None:
    videos = [
        build_video("Alloha", "1", dubbing="AniLibria"),
        build_video("Kodik", "1", dubbing="AniDUB"),
    ]
    assert list(group_by_dubbing(videos, "1512")) == ["AniDUB"]
    assert list(group_by_dubbing(videos)) == ["AniLibria"]


def test_partition_sorts_each_bucket() -> None:
    videos = [
        build_video("Kodik", "3", dubbing="AniDUB"),
        build_video("Kodik", "1", dubbing="AniDUB"),
    ]
    groups = partition_by_dubbing(videos)
    assert [v.episode_number for v in groups["AniDUB"]] == [1, 3]


def test_empty_input_yields_empty_mapping() -> None:
    assert group_by_dubbing([]) == {}
