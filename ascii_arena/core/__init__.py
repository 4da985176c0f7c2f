"""
Core rating functionality that doesn't depend on DSPy.
"""

from .elo_rating import (
    BASE_K,
    DECAY_DIVISOR,
    DEFAULT_RATING,
    MIN_K,
    RatingUpdate,
    expected_score,
    k_factor,
    round_half_up,
    update_ratings,
)
from .leaderboard import Leaderboard, ModelEntry
