"""Unit tests for VideoEntry parsing defaults."""

import pytest

from anicat.model import VideoEntry, parse_episode_number


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("12", 12),
        (" 3", 3),
        ("7 серия", 7),
        ("0", 0),
        (5, 5),
        (2.0, 2),
        ("abc", None),
        ("", None),
        ("-1", None),
        (-4, None),
        (None, None),
        (True, None),
        ("1" * 5000, None),
        (float("inf"), None),
        (float("nan"), None),
        ("\uff11\uff12", None),
    ],
)
def test_parse_episode_number(value, expected) -> None:
    assert parse_episode_number(value) == expected


def test_from_api_applies_defaults_for_missing_fields() -> None:
    """Absent player, dubbing, views and number resolve to documented defaults."""
    video = VideoEntry.from_api({"video_id": 7})
    assert video.player == "Unknown"
    assert video.dubbing == "Unknown"
    assert video.views == 0
    assert video.episode_number == 0
    assert not video.has_episode_number


def test_from_api_treats_empty_strings_as_unknown() -> None:
    video = VideoEntry.from_api({"video_id": 1, "data": {"player": "", "dubbing": ""}})
    assert video.player == "Unknown"
    assert video.dubbing == "Unknown"


def test_from_api_keeps_passthrough_fields() -> None:
    record = {
        "video_id": 9,
        "number": "4",
        "views": "15",
        "duration": 1410,
        "iframe_url": "//kodik.example/v/9",
        "index": 4,
        "data": {"player": "Kodik", "dubbing": "AniDUB"},
    }
    video = VideoEntry.from_api(record)
    assert video.raw is record
    assert video.views == 15
    assert video.duration == 1410
    assert video.iframe_url == "https://kodik.example/v/9"


def test_negative_or_garbage_views_become_zero() -> None:
    assert VideoEntry.from_api({"video_id": 1, "views": -3}).views == 0
    assert VideoEntry.from_api({"video_id": 1, "views": "many"}).views == 0
    assert VideoEntry.from_api({"video_id": 1, "views": float("inf")}).views == 0
    assert VideoEntry.from_api({"video_id": 1, "views": "9" * 5000}).views == 0


def test_infinite_duration_becomes_zero() -> None:
    assert VideoEntry.from_api({"video_id": 1, "duration": float("inf")}).duration == 0
