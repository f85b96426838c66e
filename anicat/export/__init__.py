"""Output formatters (JSON, text, m3u)."""

from anicat.export.json_out import analysis_to_dict, export_json
from anicat.export.m3u import export_m3u
from anicat.export.text_report import format_duration, text_report
