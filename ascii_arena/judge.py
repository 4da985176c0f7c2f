"""
DSPy-based judge for picking the better of two pieces of ASCII art.
"""

import dspy
from typing import Tuple


class CompareAsciiArt(dspy.Signature):
    """
    Signature for comparing two pieces of ASCII art drawn for the same prompt.
    """
    prompt = dspy.InputField(desc="The prompt both pieces of art were drawn for")
    art_a = dspy.InputField(desc="The first piece of ASCII art")
    art_b = dspy.InputField(desc="The second piece of ASCII art")
    criteria = dspy.InputField(desc="The criteria for judging the art")

    winner = dspy.OutputField(desc="Which piece is better: 'A' or 'B'")
    explanation = dspy.OutputField(desc="Explanation of why the chosen piece is better")


class AsciiArtJudge:
    """
    A DSPy-based judge that votes between two pieces of ASCII art.
    """

    def __init__(self, criteria: str = "faithfulness to the prompt and visual quality"):
        """
        Initialize the judge with custom criteria.

        Args:
            criteria: The criteria for judging the art
        """
        if not criteria or not criteria.strip():
            raise ValueError("criteria must be a non-empty string")

        self.criteria = criteria
        self.predictor = dspy.Predict(CompareAsciiArt)

    def compare(self, prompt: str, art_a: str, art_b: str) -> Tuple[str, str, float]:
        """
        Compare two pieces of art and decide which one wins.

        Args:
            prompt: The prompt both pieces were drawn for
            art_a: The first piece of art
            art_b: The second piece of art

        Returns:
            A tuple containing:
            - The winner ('A' or 'B')
            - The explanation for the decision
            - The outcome score for art_a (1.0 for win, 0.0 for loss)

        Raises:
            ValueError: If the model answers anything other than 'A' or 'B'
        """
        result = self.predictor(
            prompt=prompt,
            art_a=art_a,
            art_b=art_b,
            criteria=self.criteria
        )

        winner = result.winner.strip().strip("'\".").upper()
        explanation = result.explanation

        if winner == 'A':
            outcome = 1.0
        elif winner == 'B':
            outcome = 0.0
        else:
            raise ValueError(f"Judge returned an invalid winner: {result.winner!r}")

        return winner, explanation, outcome
