"""M3U playlist generation, one file per dubbing track."""

from __future__ import annotations

import re
from pathlib import Path

from anicat.model import TitleAnalysis

_UNSAFE_CHARS = re.compile(r'[<>:"/\\|?*\x00-\x1f]+')


def _safe_filename(name: str) -> str:
    cleaned = _UNSAFE_CHARS.sub("_", name).strip(" .")
    return cleaned or "Unknown"


def export_m3u(analysis: TitleAnalysis, out_dir: str | Path) -> list[Path]:
    """Generate one .m3u file per dubbing track.

    Each entry points at the episode's player iframe URL.  Videos without a
    URL are skipped; tracks left empty produce no file.
    Returns list of created file paths.
    """
    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)

    created: list[Path] = []
    for track, videos in analysis.dubbing_groups.items():
        lines = ["#EXTM3U"]
        for v in videos:
            url = v.iframe_url
            if not url:
                continue
            duration = v.duration if v.duration > 0 else -1
            lines.append(f"#EXTINF:{duration},Episode {v.episode_number} ({track})")
            lines.append(url)
        if len(lines) == 1:
            continue
        filepath = out / f"{_safe_filename(track)}.m3u"
        filepath.write_text("\n".join(lines) + "\n", encoding="utf-8")
        created.append(filepath)

    return created
