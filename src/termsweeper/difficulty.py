"""
Difficulty curve for bomb placement.

Maps a difficulty level onto the probability that any single cell
receives a bomb.
"""
import math


MIN_LEVEL = 1
MAX_LEVEL = 9
MAX_BOMB_PROBABILITY = 0.6
CURVE_MIDPOINT = 5


def bomb_probability(level: int) -> float:
    """
    Shifted logistic curve centred on ``CURVE_MIDPOINT``.

    Low levels approach 0 and high levels approach
    ``MAX_BOMB_PROBABILITY``. Callers keep ``level`` within
    ``MIN_LEVEL..MAX_LEVEL``.
    """
    return MAX_BOMB_PROBABILITY / (1.0 + math.exp(CURVE_MIDPOINT - level))


def clamp_level(level: int) -> int:
    """Clamp a level into the playable range."""
    return max(MIN_LEVEL, min(level, MAX_LEVEL))
