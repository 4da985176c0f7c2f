"""
In-memory leaderboard that applies votes to model ratings.
"""

import logging
import math
import threading
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional, Sequence, Tuple

import numpy as np

from .elo_rating import DEFAULT_RATING, RATING_SCALE, RatingUpdate, k_factor, update_ratings

logger = logging.getLogger(__name__)


@dataclass
class ModelEntry:
    """A model competing on the leaderboard."""

    model_id: str
    model_name: str
    model_config: str = ""
    elo_rating: float = DEFAULT_RATING
    vote_count: int = 0
    metadata: Dict[str, Any] = field(default_factory=dict)


def _snapshot(entry: ModelEntry) -> ModelEntry:
    return replace(entry, metadata=dict(entry.metadata))


class Leaderboard:
    """
    Tracks ratings and vote counts for a set of models.

    Every result is applied as one read-compute-write unit under a lock, so
    concurrent votes on the same model are never lost.
    """

    def __init__(self, default_rating: float = DEFAULT_RATING):
        """
        Initialize an empty leaderboard.

        Args:
            default_rating: Starting rating for models added without one
        """
        if not math.isfinite(default_rating):
            raise ValueError("default_rating must be a finite number")

        self.default_rating = default_rating
        self.entries: Dict[str, ModelEntry] = {}
        self.history: List[Dict[str, Any]] = []
        self._lock = threading.RLock()

    def add_model(
        self,
        model_id: str,
        model_name: str,
        model_config: str = "",
        metadata: Optional[Dict[str, Any]] = None,
        rating: Optional[float] = None,
    ) -> ModelEntry:
        """
        Add a model to the leaderboard.

        Args:
            model_id: Unique ID of the model
            model_name: Display name of the model
            model_config: Free-form description of the generation settings
            metadata: Extra details such as provider or max_tokens
            rating: Starting rating (defaults to default_rating)

        Returns:
            A copy of the new entry
        """
        if rating is not None and not math.isfinite(rating):
            raise ValueError("rating must be a finite number")

        with self._lock:
            if model_id in self.entries:
                raise ValueError(f"Model {model_id!r} is already on the leaderboard")

            entry = ModelEntry(
                model_id=model_id,
                model_name=model_name,
                model_config=model_config,
                elo_rating=self.default_rating if rating is None else rating,
                metadata=dict(metadata or {}),
            )
            self.entries[model_id] = entry
            return _snapshot(entry)

    def get_entry(self, model_id: str) -> ModelEntry:
        """Return a snapshot of a model's entry. Raises KeyError for unknown models."""
        with self._lock:
            return _snapshot(self._entry(model_id))

    def get_rating(self, model_id: str) -> float:
        """
        Get the current rating of a model.

        Args:
            model_id: ID of the model

        Returns:
            The model's current Elo rating
        """
        with self._lock:
            return self._entry(model_id).elo_rating

    def _entry(self, model_id: str) -> ModelEntry:
        try:
            return self.entries[model_id]
        except KeyError:
            raise KeyError(f"Unknown model {model_id!r}") from None

    def record_result(self, winner_id: str, loser_id: str) -> RatingUpdate:
        """
        Record that one model beat another and update both ratings.

        Both vote counts are incremented by one. Nothing is changed if the
        result is rejected.

        Args:
            winner_id: ID of the winning model
            loser_id: ID of the losing model

        Returns:
            RatingUpdate with both new ratings
        """
        if winner_id == loser_id:
            raise ValueError("A model cannot play against itself")

        with self._lock:
            winner = self._entry(winner_id)
            loser = self._entry(loser_id)

            winner_before, loser_before = winner.elo_rating, loser.elo_rating
            winner_k = k_factor(winner.vote_count)
            loser_k = k_factor(loser.vote_count)
            result = update_ratings(
                winner_before, loser_before, winner.vote_count, loser.vote_count
            )

            self.history.append({
                'winner_id': winner_id,
                'loser_id': loser_id,
                'winner_rating_before': winner_before,
                'loser_rating_before': loser_before,
                'winner_rating_after': result.winner_rating,
                'loser_rating_after': result.loser_rating,
                'winner_k': winner_k,
                'loser_k': loser_k,
            })

            winner.elo_rating = result.winner_rating
            loser.elo_rating = result.loser_rating
            winner.vote_count += 1
            loser.vote_count += 1

        logger.info("%s beat %s: %s", winner_id, loser_id, result)
        logger.debug(
            "%s %.1f -> %d, %s %.1f -> %d",
            winner_id, winner_before, result.winner_rating,
            loser_id, loser_before, result.loser_rating,
        )
        return result

    def rankings(self) -> List[ModelEntry]:
        """
        Return snapshots of all entries, best first.

        Ties are broken by fewer votes, then by model name.
        """
        with self._lock:
            entries = [_snapshot(entry) for entry in self.entries.values()]
        entries.sort(key=lambda e: (-e.elo_rating, e.vote_count, e.model_name))
        return entries

    def win_probability_matrix(
        self, model_ids: Optional[Sequence[str]] = None
    ) -> Tuple[List[str], np.ndarray]:
        """
        Calculate the pairwise win probabilities between models.

        Args:
            model_ids: Models to include (defaults to all, in ranking order)

        Returns:
            Tuple of (model IDs, matrix) where matrix[i, j] is the expected
            score of model i against model j
        """
        with self._lock:
            if model_ids is None:
                ids = [entry.model_id for entry in self.rankings()]
            else:
                ids = list(model_ids)
            ratings = np.array([self._entry(model_id).elo_rating for model_id in ids], dtype=float)

        diff = (ratings[np.newaxis, :] - ratings[:, np.newaxis]) / RATING_SCALE
        # 1 / (1 + 10**diff) written with tanh, which stays finite for any gap
        return ids, 0.5 * (1.0 - np.tanh(diff * np.log(10.0) / 2.0))
