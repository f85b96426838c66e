from __future__ import annotations

from anicat.model import TitleAnalysis


def _fmt_episode_range(numbers: list[int]) -> str:
    """Format sorted episode numbers as compact runs, e.g. ``1-3, 5``."""
    if not numbers:
        return "-"
    runs: list[str] = []
    start = prev = numbers[0]
    for n in numbers[1:]:
        if n == prev + 1:
            prev = n
            continue
        runs.append(f"{start}-{prev}" if start != prev else f"{start}")
        start = prev = n
    runs.append(f"{start}-{prev}" if start != prev else f"{start}")
    return ", ".join(runs)


def explain_title(analysis: TitleAnalysis) -> str:
    """Generate a multi-line text explanation of the player selection."""
    lines: list[str] = []
    lines.append(f"Title: {analysis.title_id or '?'}")
    lines.append(f"Videos: {analysis.analysis.get('input_count', 0)}")
    if analysis.analysis.get("override_applied"):
        lines.append(f"Override: restricted to {analysis.analysis.get('working_count', 0)} video(s)")
    lines.append("")

    if analysis.player_groups:
        pool = set(analysis.analysis.get("candidate_pool", []))
        lines.append("Player scoring:")
        for group in analysis.player_groups:
            marks = []
            if group.is_complete:
                marks.append("complete")
            if group.player in pool:
                marks.append("candidate")
            if group.player == analysis.chosen_player:
                marks.append("CHOSEN")
            lines.append(
                f"  {group.player}: priority={group.priority}, videos={group.episode_count}, "
                f"episodes=[{_fmt_episode_range(group.episode_numbers)}]"
                + (f" ({', '.join(marks)})" if marks else "")
            )
        lines.append("")

    if analysis.episodes:
        lines.append(f"Episodes kept: {len(analysis.episodes)}")
        for track, videos in analysis.dubbing_groups.items():
            numbers = sorted({v.episode_number for v in videos})
            lines.append(f"  {track}: {len(videos)} episode(s) [{_fmt_episode_range(numbers)}]")
        lines.append("")

    if analysis.warnings:
        lines.append("Warnings:")
        for w in analysis.warnings:
            lines.append(f"  [{w.code}] {w.message}")
        lines.append("")

    return "\n".join(lines)
