"""
Score Calculator - keyboard-driven text UI for recording scores
and computing summary statistics.
"""

__version__ = "1.0.0"

from .app import AppState, ScoreCalculator
from .models.score_store import ScoreStats, ScoreStore

__all__ = ["AppState", "ScoreCalculator", "ScoreStats", "ScoreStore"]
