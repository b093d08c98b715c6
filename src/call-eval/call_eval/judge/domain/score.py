"""Score normalisation shared by every judge-produced number."""

import math

MIN_SCORE = 0
MAX_SCORE = 100


def normalize_score(raw: float) -> int:
    """Round half-up, then clamp into [MIN_SCORE, MAX_SCORE].

    Judges are trusted for their qualitative reading, never for numeric
    discipline: negative, oversized and fractional values are all accepted
    and pulled into range.
    """
    rounded = math.floor(raw + 0.5)
    return max(MIN_SCORE, min(MAX_SCORE, rounded))
