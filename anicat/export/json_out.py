"""JSON export for title analysis results."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

from anicat.model import TitleAnalysis, VideoEntry


def _video_to_dict(video: VideoEntry) -> dict:
    return {
        "video_id": video.video_id,
        "episode": video.episode_number,
        "player": video.player,
        "dubbing": video.dubbing,
        "views": video.views,
        "record": video.raw,
    }


def analysis_to_dict(analysis: TitleAnalysis) -> dict:
    """Convert a TitleAnalysis to a JSON-serializable dict."""
    players = []
    for group in analysis.player_groups:
        players.append(
            {
                "player": group.player,
                "priority": group.priority,
                "videos": group.episode_count,
                "complete": group.is_complete,
                "episodes": group.episode_numbers,
            }
        )

    warnings = []
    for w in analysis.warnings:
        warnings.append(
            {
                "code": w.code,
                "message": w.message,
                "context": w.context,
            }
        )

    return {
        "schema_version": "anicat.title.v1",
        "title": {
            "id": analysis.title_id,
            "generated_at": datetime.now(timezone.utc).isoformat(),
        },
        "players": players,
        "chosen_player": analysis.chosen_player,
        "episodes": [_video_to_dict(v) for v in analysis.episodes],
        "dubbing": {
            track: [v.video_id for v in videos]
            for track, videos in analysis.dubbing_groups.items()
        },
        "warnings": warnings,
        "analysis": analysis.analysis,
    }


def export_json(
    analysis: TitleAnalysis, path: str | Path | None = None, pretty: bool = True
) -> str:
    """Export analysis to JSON. If path given, write to file. Always returns JSON string."""
    data = analysis_to_dict(analysis)
    indent = 2 if pretty else None
    text = json.dumps(data, indent=indent, ensure_ascii=False, default=str)
    if path is not None:
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(text, encoding="utf-8")
    return text
