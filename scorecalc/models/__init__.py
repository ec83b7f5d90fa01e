from scorecalc.models.score_store import ScoreStats, ScoreStore

__all__ = ["ScoreStats", "ScoreStore"]
