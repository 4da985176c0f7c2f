"""
Basic usage example for the ASCII art arena.
"""

import logging

import dspy
from ascii_arena import AsciiArena, AsciiArtJudge, AsciiOutput, Leaderboard


def main():
    logging.basicConfig(level=logging.INFO)

    # Set up DSPy
    lm = dspy.LM("openai/gpt-4o-mini")
    dspy.configure(lm=lm)

    # Register the competing models
    leaderboard = Leaderboard()
    leaderboard.add_model("model-a", "Model A", metadata={"provider": "openai"})
    leaderboard.add_model("model-b", "Model B", metadata={"provider": "anthropic"})

    judge = AsciiArtJudge(criteria="""
    Compare these two drawings based on:
    1. Faithfulness - Which drawing better depicts the prompt?
    2. Craft - Which drawing uses characters more cleverly?
    """)
    arena = AsciiArena(leaderboard, judge_fn=judge.compare)

    arena.register_output(AsciiOutput("a-cat", "model-a", "cat", " /\\_/\\ \n( o.o )\n > ^ <"))
    arena.register_output(AsciiOutput("b-cat", "model-b", "cat", "=^.^="))

    # A human vote and a judged vote
    arena.record_vote("a-cat", "b-cat", winner_id="b-cat")
    vote = arena.judge_pair("a-cat", "b-cat", prompt_text="a cat")
    print(f"Judge picked {vote.winner_id}: {vote.explanation}")

    for rank, entry in enumerate(leaderboard.rankings(), start=1):
        print(f"#{rank} {entry.model_name}: {entry.elo_rating:.0f} ({entry.vote_count} votes)")

    ids, matrix = leaderboard.win_probability_matrix()
    print(f"P({ids[0]} beats {ids[1]}) = {matrix[0, 1]:.2f}")


if __name__ == "__main__":
    main()
