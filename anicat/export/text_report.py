"""Text report for terminal display."""

from __future__ import annotations

from anicat.model import TitleAnalysis


def format_duration(seconds: int) -> str:
    """Format seconds as H:MM:SS or M:SS, the way the episode list shows them."""
    hours = seconds // 3600
    minutes = (seconds % 3600) // 60
    secs = seconds % 60
    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def text_report(analysis: TitleAnalysis) -> str:
    """Generate a plain text summary report."""
    lines: list[str] = []

    lines.append("=" * 60)
    lines.append("Title Summary")
    lines.append("=" * 60)
    lines.append(f"  Title:      {analysis.title_id or '?'}")
    lines.append(f"  Videos:     {analysis.analysis.get('input_count', 0)}")
    lines.append(f"  Players:    {len(analysis.player_groups)}")
    lines.append(f"  Chosen:     {analysis.chosen_player or '-'}")
    lines.append(f"  Episodes:   {len(analysis.episodes)}")
    lines.append("")

    lines.append("-" * 60)
    lines.append("Players")
    lines.append("-" * 60)
    lines.append(f"  {'Name':<20} {'Priority':>8} {'Videos':>7}  {'Complete'}")
    lines.append(f"  {'----':<20} {'--------':>8} {'------':>7}  {'--------'}")
    for group in analysis.player_groups:
        complete = "yes" if group.is_complete else "no"
        lines.append(
            f"  {group.player:<20} {group.priority:>8} {group.episode_count:>7}  {complete}"
        )
    lines.append("")

    for track, videos in analysis.dubbing_groups.items():
        lines.append("-" * 60)
        lines.append(f"Episodes: {track}")
        lines.append("-" * 60)
        for v in videos:
            dur = format_duration(v.duration) if v.duration > 0 else "--:--"
            lines.append(
                f"  Ep {v.episode_number:>3}  {dur:>8}  views={v.views:<8} id={v.video_id}"
            )
        lines.append("")

    if analysis.warnings:
        lines.append("-" * 60)
        lines.append("Warnings")
        lines.append("-" * 60)
        for w in analysis.warnings:
            lines.append(f"  [{w.code}] {w.message}")
        lines.append("")

    return "\n".join(lines)
