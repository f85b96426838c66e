"""anicat — episode reconciliation for multi-player video catalogs."""

from anicat.analyze import analyze_title, group_by_dubbing, reconcile
from anicat.model import TitleAnalysis, VideoEntry
