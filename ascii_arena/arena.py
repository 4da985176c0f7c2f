"""
A/B voting arena for ASCII art produced by competing models.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from .core import Leaderboard, RatingUpdate

logger = logging.getLogger(__name__)


@dataclass
class AsciiOutput:
    """One model's ASCII art for one prompt."""

    output_id: str
    model_id: str
    prompt_id: str
    content: str


@dataclass
class Vote:
    """A recorded A/B vote and the rating change it caused."""

    output_a_id: str
    output_b_id: str
    winner_id: str
    loser_id: str
    rating_update: RatingUpdate
    explanation: str = ""


class AsciiArena:
    """
    Records A/B votes between ASCII art outputs and feeds them to a leaderboard.

    Votes are cast on outputs, but ratings belong to the models that
    produced them.
    """

    def __init__(
        self,
        leaderboard: Optional[Leaderboard] = None,
        judge_fn: Optional[Callable[[str, str, str], Tuple[str, str, float]]] = None,
    ):
        """
        Initialize an arena.

        Args:
            leaderboard: Leaderboard to update (a new empty one if not given)
            judge_fn: Function that compares two pieces of art and returns
                (winner, explanation, outcome); only needed for judge_pair
        """
        self.leaderboard = leaderboard if leaderboard is not None else Leaderboard()
        self.judge_fn = judge_fn
        self.outputs: Dict[str, AsciiOutput] = {}
        self.votes: List[Vote] = []
        self._lock = threading.RLock()

    def register_output(self, output: AsciiOutput) -> None:
        """
        Make an output available for voting.

        Args:
            output: The output to register; its model must be on the leaderboard
        """
        with self._lock:
            if output.output_id in self.outputs:
                raise ValueError(f"Output {output.output_id!r} is already registered")
            # Raises KeyError for models that are not on the leaderboard
            self.leaderboard.get_entry(output.model_id)
            self.outputs[output.output_id] = output

    def _output(self, output_id: str) -> AsciiOutput:
        try:
            return self.outputs[output_id]
        except KeyError:
            raise KeyError(f"Unknown output {output_id!r}") from None

    def record_vote(
        self,
        output_a_id: str,
        output_b_id: str,
        winner_id: str,
        explanation: str = "",
    ) -> Vote:
        """
        Record a vote for one of two outputs shown side by side.

        Args:
            output_a_id: ID of the output shown as A
            output_b_id: ID of the output shown as B
            winner_id: ID of the preferred output (must be A or B)
            explanation: Optional reason for the vote

        Returns:
            The recorded Vote
        """
        if not output_a_id or not output_b_id or not winner_id:
            raise ValueError("Missing required fields")

        if winner_id not in (output_a_id, output_b_id):
            logger.warning("Rejected vote: %r is neither %r nor %r", winner_id, output_a_id, output_b_id)
            raise ValueError("Invalid winner_id")

        loser_id = output_b_id if winner_id == output_a_id else output_a_id

        with self._lock:
            winner = self._output(winner_id)
            loser = self._output(loser_id)

            if winner.prompt_id != loser.prompt_id:
                logger.warning("Rejected vote: %r and %r answer different prompts", winner_id, loser_id)
                raise ValueError("Outputs must answer the same prompt")

            if winner.model_id == loser.model_id:
                logger.warning("Rejected vote: %r and %r come from the same model", winner_id, loser_id)
                raise ValueError("Outputs must come from different models")

            update = self.leaderboard.record_result(winner.model_id, loser.model_id)
            vote = Vote(
                output_a_id=output_a_id,
                output_b_id=output_b_id,
                winner_id=winner_id,
                loser_id=loser_id,
                rating_update=update,
                explanation=explanation,
            )
            self.votes.append(vote)

        return vote

    def judge_pair(self, output_a_id: str, output_b_id: str, prompt_text: str) -> Vote:
        """
        Let the judge pick the better of two outputs and record its vote.

        Args:
            output_a_id: ID of the output shown as A
            output_b_id: ID of the output shown as B
            prompt_text: The prompt both outputs were drawn for

        Returns:
            The recorded Vote
        """
        if self.judge_fn is None:
            raise ValueError("This arena has no judge; pass judge_fn to use judge_pair")

        with self._lock:
            art_a = self._output(output_a_id).content
            art_b = self._output(output_b_id).content

        _, explanation, outcome = self.judge_fn(prompt_text, art_a, art_b)
        winner_id = output_a_id if outcome >= 0.5 else output_b_id
        return self.record_vote(output_a_id, output_b_id, winner_id, explanation=explanation)
