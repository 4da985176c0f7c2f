"""
Tests for the A/B voting arena.
"""

import pytest
from unittest.mock import MagicMock

from ascii_arena import AsciiArena, AsciiOutput, Leaderboard, SimpleJudge, Vote


CAT = " /\\_/\\ \n( o.o )\n > ^ <"
SMALL_CAT = "=^.^="


@pytest.fixture
def leaderboard():
    """Create a leaderboard with three models."""
    board = Leaderboard()
    board.add_model("m1", "model-one")
    board.add_model("m2", "model-two")
    board.add_model("m3", "model-three")
    return board


@pytest.fixture
def arena(leaderboard):
    """Create an arena with outputs for two prompts."""
    arena = AsciiArena(leaderboard)
    arena.register_output(AsciiOutput("o1", "m1", "cat", CAT))
    arena.register_output(AsciiOutput("o2", "m2", "cat", SMALL_CAT))
    arena.register_output(AsciiOutput("o3", "m3", "dog", "U・ᴥ・U"))
    arena.register_output(AsciiOutput("o4", "m1", "cat", "meow"))
    return arena


def test_arena_init():
    """An arena without arguments gets its own empty leaderboard."""
    arena = AsciiArena()

    assert isinstance(arena.leaderboard, Leaderboard)
    assert arena.judge_fn is None
    assert arena.outputs == {}
    assert arena.votes == []


def test_register_duplicate_output(arena):
    """Output IDs are unique."""
    with pytest.raises(ValueError):
        arena.register_output(AsciiOutput("o1", "m2", "cat", "x"))


def test_register_output_unknown_model(arena):
    """Outputs must belong to a model on the leaderboard."""
    with pytest.raises(KeyError):
        arena.register_output(AsciiOutput("o9", "missing", "cat", "x"))

    assert "o9" not in arena.outputs


def test_record_vote_for_a(arena, leaderboard):
    """A vote for A updates the models behind both outputs."""
    vote = arena.record_vote("o1", "o2", "o1")

    assert isinstance(vote, Vote)
    assert vote.winner_id == "o1"
    assert vote.loser_id == "o2"
    assert vote.rating_update == (1516, 1484)
    assert leaderboard.get_rating("m1") == 1516
    assert leaderboard.get_rating("m2") == 1484
    assert arena.votes == [vote]


def test_record_vote_for_b(arena, leaderboard):
    """The loser is whichever output wasn't picked."""
    vote = arena.record_vote("o1", "o2", "o2", explanation="cleaner lines")

    assert vote.loser_id == "o1"
    assert vote.explanation == "cleaner lines"
    assert leaderboard.get_rating("m2") == 1516
    assert leaderboard.get_rating("m1") == 1484
    assert leaderboard.get_entry("m1").vote_count == 1
    assert leaderboard.get_entry("m2").vote_count == 1


@pytest.mark.parametrize("a, b, winner", [
    ("", "o2", "o1"),
    ("o1", None, "o1"),
    ("o1", "o2", ""),
])
def test_record_vote_missing_fields(arena, a, b, winner):
    """All three IDs are required."""
    with pytest.raises(ValueError, match="Missing required fields"):
        arena.record_vote(a, b, winner)


def test_record_vote_invalid_winner(arena, leaderboard):
    """The winner must be one of the two outputs shown."""
    with pytest.raises(ValueError, match="Invalid winner_id"):
        arena.record_vote("o1", "o2", "o3")

    assert arena.votes == []
    assert leaderboard.history == []


def test_record_vote_different_prompts(arena, leaderboard):
    """Outputs for different prompts can't be compared."""
    with pytest.raises(ValueError):
        arena.record_vote("o1", "o3", "o1")

    assert leaderboard.history == []


def test_record_vote_same_model(arena, leaderboard):
    """Two outputs from the same model can't be rated against each other."""
    with pytest.raises(ValueError):
        arena.record_vote("o1", "o4", "o4")

    assert leaderboard.get_entry("m1").vote_count == 0


def test_record_vote_unknown_output(arena):
    """Unknown outputs raise KeyError."""
    with pytest.raises(KeyError):
        arena.record_vote("o1", "o99", "o99")

    assert arena.votes == []


def test_judge_pair_without_judge(arena):
    """judge_pair needs a judge."""
    with pytest.raises(ValueError):
        arena.judge_pair("o1", "o2", "a cat")


def test_judge_pair_with_mock_judge(leaderboard):
    """The judge's verdict is recorded as a vote."""
    judge_fn = MagicMock(return_value=("B", "B is cuter", 0.0))
    arena = AsciiArena(leaderboard, judge_fn=judge_fn)
    arena.register_output(AsciiOutput("o1", "m1", "cat", CAT))
    arena.register_output(AsciiOutput("o2", "m2", "cat", SMALL_CAT))

    vote = arena.judge_pair("o1", "o2", "a cat")

    judge_fn.assert_called_once_with("a cat", CAT, SMALL_CAT)
    assert vote.winner_id == "o2"
    assert vote.explanation == "B is cuter"
    assert leaderboard.get_rating("m2") == 1516


def test_judge_pair_with_simple_judge(leaderboard):
    """The simple judge prefers the more detailed drawing."""
    arena = AsciiArena(leaderboard, judge_fn=SimpleJudge().compare)
    arena.register_output(AsciiOutput("o1", "m1", "cat", SMALL_CAT))
    arena.register_output(AsciiOutput("o2", "m2", "cat", CAT))

    vote = arena.judge_pair("o1", "o2", "a cat")

    assert vote.winner_id == "o2"
    assert leaderboard.rankings()[0].model_id == "m2"


def test_many_votes_keep_counts_consistent(arena, leaderboard):
    """Every recorded vote increments both models' counts exactly once."""
    for i in range(10):
        arena.record_vote("o1", "o2", "o1" if i % 3 else "o2")

    assert len(arena.votes) == 10
    assert leaderboard.get_entry("m1").vote_count == 10
    assert leaderboard.get_entry("m2").vote_count == 10
    assert leaderboard.get_entry("m3").vote_count == 0
