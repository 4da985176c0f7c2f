"""
Core implementation of the dynamic K-factor Elo rating engine.
"""

import math
from typing import NamedTuple


BASE_K = 32.0
MIN_K = 10.0
DECAY_DIVISOR = 30.0
DEFAULT_RATING = 1500.0
RATING_SCALE = 400.0


class RatingUpdate(NamedTuple):
    """New ratings for both sides of a recorded outcome."""

    winner_rating: int
    loser_rating: int


def _check_vote_count(vote_count: int) -> None:
    if vote_count < 0:
        raise ValueError(f"vote_count must be non-negative, got {vote_count}")


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, with exact halves going towards +infinity.

    Args:
        value: Number to round

    Returns:
        The rounded integer
    """
    floor = math.floor(value)
    return int(floor) + (1 if value - floor >= 0.5 else 0)


def k_factor(vote_count: int) -> float:
    """
    Calculate the K-factor for a model with the given number of recorded votes.

    New models start at BASE_K so they find their place quickly; the factor
    decays towards MIN_K as votes accumulate.

    Args:
        vote_count: Number of votes previously recorded for the model

    Returns:
        K-factor between MIN_K and BASE_K

    Raises:
        ValueError: If vote_count is negative
    """
    _check_vote_count(vote_count)
    return max(BASE_K / (1.0 + vote_count / DECAY_DIVISOR), MIN_K)


def expected_score(player_rating: float, opponent_rating: float) -> float:
    """
    Calculate the expected score (win probability) of a player against an opponent.

    Args:
        player_rating: Elo rating of the player
        opponent_rating: Elo rating of the opponent

    Returns:
        Expected score for the player (between 0 and 1)
    """
    exponent = (opponent_rating - player_rating) / RATING_SCALE
    if exponent > 0:
        # Same logistic, rearranged so a huge rating gap underflows instead of overflowing
        t = math.pow(10.0, -exponent)
        return t / (1.0 + t)
    return 1.0 / (1.0 + math.pow(10.0, exponent))


def update_ratings(
    winner_rating: float,
    loser_rating: float,
    winner_vote_count: int,
    loser_vote_count: int,
) -> RatingUpdate:
    """
    Calculate the new ratings of a winner and a loser after one vote.

    Each side moves by its own K-factor, so a new model gains or loses more
    than an established one. Rounding is applied only to the final ratings.

    Args:
        winner_rating: Current rating of the winner
        loser_rating: Current rating of the loser
        winner_vote_count: Votes previously recorded for the winner
        loser_vote_count: Votes previously recorded for the loser

    Returns:
        RatingUpdate with the winner's and loser's new integer ratings

    Raises:
        ValueError: If either vote count is negative
    """
    winner_k = k_factor(winner_vote_count)
    loser_k = k_factor(loser_vote_count)

    expected_winner = expected_score(winner_rating, loser_rating)
    expected_loser = expected_score(loser_rating, winner_rating)

    # Actual score is 1 for the winner and 0 for the loser
    winner_new = round_half_up(winner_rating + winner_k * (1.0 - expected_winner))
    loser_new = round_half_up(loser_rating + loser_k * (0.0 - expected_loser))

    return RatingUpdate(winner_new, loser_new)
