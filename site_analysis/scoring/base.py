"""Shared scoring helpers."""

MIN_SCORE = 0
MAX_SCORE = 100


def clamp_score(score: int) -> int:
    """Clamp a composite score to the 0-100 range."""
    return max(MIN_SCORE, min(MAX_SCORE, int(score)))
