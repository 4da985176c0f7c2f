"""
ASCII Arena - dynamic K-factor Elo ratings for AI-generated ASCII art.
"""

from .core import (
    Leaderboard,
    ModelEntry,
    RatingUpdate,
    expected_score,
    k_factor,
    update_ratings,
)
from .core.simple_judge import SimpleJudge
from .arena import AsciiArena, AsciiOutput, Vote

__all__ = [
    "AsciiArena",
    "AsciiOutput",
    "Leaderboard",
    "ModelEntry",
    "RatingUpdate",
    "SimpleJudge",
    "Vote",
    "expected_score",
    "k_factor",
    "update_ratings",
]

# The LLM judge needs DSPy; everything else works without it
try:
    from .judge import AsciiArtJudge
    DSPY_AVAILABLE = True
    __all__.append("AsciiArtJudge")
except ImportError:
    DSPY_AVAILABLE = False
