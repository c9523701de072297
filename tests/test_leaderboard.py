"""
Tests for scoreboard snapshots and cell formatting
"""
from scoreboard.models import ProblemState
from scoreboard.services.leaderboard import format_cell

from tests.helpers import build_contest


def test_format_cell():
    assert format_cell(ProblemState(), pending=False) == "."
    assert format_cell(ProblemState(wrong_count=3), pending=False) == "-3"
    assert format_cell(ProblemState(solved=True), pending=False) == "+"
    assert format_cell(ProblemState(solved=True, wrong_count=2), pending=False) == "+2"
    assert format_cell(ProblemState(frozen_pending_count=2), pending=True) == "0/2"
    assert format_cell(ProblemState(wrong_count=1, frozen_pending_count=4), pending=True) == "-1/4"


def test_flush_returns_ranked_scoreboard():
    engine = build_contest(["alpha", "beta"], problem_count=2)
    engine.submit("A", "beta", "Wrong_Answer", 5)
    engine.submit("A", "beta", "Accepted", 10)
    engine.submit("B", "alpha", "Wrong_Answer", 12)

    result = engine.flush()
    assert result.message == "Flush scoreboard."
    board = result.value
    assert board.problems == ["A", "B"]
    assert [(r.team, r.rank, r.solved_count, r.penalty_time, r.cells) for r in board.rows] == [
        ("beta", 1, 1, 30, ["+1", "."]),
        ("alpha", 2, 0, 0, [".", "-1"]),
    ]


def test_snapshot_does_not_rerank():
    engine = build_contest(["alpha", "beta"])
    engine.submit("A", "beta", "Accepted", 10)
    assert [r.team for r in engine.snapshot().rows] == ["alpha", "beta"]
