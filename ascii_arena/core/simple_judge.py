"""
Simple judge implementation without DSPy dependencies.
"""

from typing import Callable, Optional, Tuple


class SimpleJudge:
    """
    A judge for ASCII art pairs that doesn't depend on DSPy.
    Useful for offline runs or as a stand-in for the LLM judge in tests.
    """

    def __init__(
        self,
        compare_fn: Optional[Callable[[str, str, str], Tuple[str, str, float]]] = None,
        criteria: str = "detail",
    ):
        """
        Initialize a SimpleJudge.

        Args:
            compare_fn: Optional function to use for comparing art
            criteria: Criteria to use for comparison (only used if compare_fn is not provided)
        """
        self.compare_fn = compare_fn
        self.criteria = criteria

    def compare(self, prompt: str, art_a: str, art_b: str) -> Tuple[str, str, float]:
        """
        Compare two pieces of ASCII art and return the winner, explanation, and outcome.

        Args:
            prompt: Prompt both pieces were drawn for
            art_a: First piece of art
            art_b: Second piece of art

        Returns:
            Tuple of (winner, explanation, outcome)
            winner: "A" or "B"
            explanation: Explanation of the decision
            outcome: 1.0 for A wins, 0.0 for B wins
        """
        if self.compare_fn:
            return self.compare_fn(prompt, art_a, art_b)

        # Denser drawings win; an A/B vote has no draws, so ties go to A
        ink_a = sum(1 for ch in art_a if not ch.isspace())
        ink_b = sum(1 for ch in art_b if not ch.isspace())

        if ink_b > ink_a:
            return "B", f"B has more detail ({ink_b} vs {ink_a} characters)", 0.0
        return "A", f"A has at least as much detail ({ink_a} vs {ink_b} characters)", 1.0
