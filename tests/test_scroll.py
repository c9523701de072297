"""
Tests for the scroll (unfreeze) algorithm
"""
from scoreboard.core.scroll import displaced_by, next_reveal
from scoreboard.models import ErrorKind, RankingChange

from tests.helpers import build_contest


def frozen_contest():
    """
    alpha solves A at 10, beta solves A at 20 after one wrong attempt.
    During freeze: gamma solves A (30) and B (40), beta solves B (60) after
    a frozen wrong attempt, alpha fails C.
    """
    engine = build_contest(["alpha", "beta", "gamma"])
    engine.submit("A", "alpha", "Accepted", 10)
    engine.submit("A", "beta", "Wrong_Answer", 5)
    engine.submit("A", "beta", "Accepted", 20)
    engine.freeze()
    engine.submit("A", "gamma", "Accepted", 30)
    engine.submit("B", "gamma", "Accepted", 40)
    engine.submit("B", "beta", "Wrong_Answer", 50)
    engine.submit("B", "beta", "Accepted", 60)
    engine.submit("C", "alpha", "Wrong_Answer", 70)
    return engine


def test_scroll_not_frozen_changes_nothing():
    engine = build_contest(["alpha", "beta"])
    engine.submit("A", "beta", "Accepted", 10)
    result = engine.scroll()
    assert not result.success
    assert result.error == ErrorKind.NOT_FROZEN
    assert result.message == "Scroll failed: scoreboard has not been frozen."
    # ranking was not recomputed
    assert engine.order == ["alpha", "beta"]


def test_scroll_snapshot_before_reveal():
    engine = frozen_contest()
    before = engine.scroll().value.before
    rows = {row.team: row for row in before.rows}
    assert [row.team for row in before.rows] == ["alpha", "beta", "gamma"]
    assert before.frozen
    assert rows["alpha"].cells == ["+", ".", "."]
    assert rows["beta"].cells == ["+1", "0/2", "."]
    assert rows["gamma"].cells == ["0/1", "0/1", "."]


def test_scroll_ranking_changes():
    engine = frozen_contest()
    report = engine.scroll().value
    assert report.changes == [
        RankingChange(team="gamma", displaced_team="beta", solved_count=1, penalty_time=30),
        RankingChange(team="beta", displaced_team="gamma", solved_count=2, penalty_time=100),
        RankingChange(team="gamma", displaced_team="alpha", solved_count=2, penalty_time=70),
    ]


def test_scroll_final_board():
    engine = frozen_contest()
    after = engine.scroll().value.after
    assert not after.frozen
    assert [(r.team, r.rank, r.solved_count, r.penalty_time, r.cells) for r in after.rows] == [
        ("gamma", 1, 2, 70, ["+", "+", "."]),
        ("beta", 2, 2, 100, ["+1", "+", "."]),
        ("alpha", 3, 1, 10, ["+", ".", "."]),
    ]


def test_scroll_unfreezes_board():
    engine = frozen_contest()
    engine.scroll()
    assert not engine.is_frozen
    assert not any(engine.controller.has_frozen(name) for name in engine.order)
    assert all(p.frozen_pending_count == 0 for team in engine.registry for p in team.problems)
    # can freeze again afterwards
    assert engine.freeze().success


def test_scroll_without_frozen_submissions():
    engine = build_contest(["alpha", "beta"])
    engine.submit("A", "beta", "Accepted", 10)
    engine.freeze()
    report = engine.scroll().value
    assert report.changes == []
    assert [row.team for row in report.before.rows] == ["beta", "alpha"]
    assert report.before.rows == report.after.rows


def test_reveal_without_reorder_emits_nothing():
    engine = build_contest(["alpha", "beta"])
    engine.submit("A", "alpha", "Accepted", 10)
    engine.freeze()
    engine.submit("B", "alpha", "Accepted", 20)
    report = engine.scroll().value
    assert report.changes == []
    assert engine.registry.get("alpha").solved_count == 2


def test_frozen_solve_keeps_only_pre_freeze_wrong_attempts():
    engine = build_contest(["alpha"])
    engine.submit("A", "alpha", "Wrong_Answer", 10)
    engine.freeze()
    engine.submit("A", "alpha", "Wrong_Answer", 50)
    engine.submit("A", "alpha", "Accepted", 60)
    engine.submit("A", "alpha", "Accepted", 90)
    engine.scroll()
    team = engine.registry.get("alpha")
    assert team.problems[0].wrong_count == 1
    assert team.problems[0].first_accept_time == 60
    assert team.penalty_time == 80


def test_accept_at_time_zero_during_freeze_is_revealed():
    engine = build_contest(["alpha"])
    engine.freeze()
    engine.submit("A", "alpha", "Accepted", 0)
    engine.scroll()
    state = engine.registry.get("alpha").problems[0]
    assert state.solved
    assert state.first_accept_time == 0


def test_next_reveal_picks_lowest_team_then_smallest_problem():
    engine = frozen_contest()
    engine.flush()
    assert next_reveal(engine.order, engine.controller) == ("gamma", "A")


def test_displaced_by():
    assert displaced_by(["a", "b", "c"], ["c", "a", "b"], "c") == "b"
    assert displaced_by(["a", "b", "c"], ["a", "c", "b"], "c") == "b"
    assert displaced_by(["a", "b", "c"], ["a", "b", "c"], "c") is None


def replay_directly(engine):
    """Final (solved, penalty) per team straight from the log"""
    result = {}
    for team in engine.registry:
        solved, penalty = 0, 0
        for problem in engine.problems:
            wrong = 0
            for entry in engine.log:
                if entry.team != team.name or entry.problem != problem:
                    continue
                if entry.status.value == "Accepted":
                    solved += 1
                    penalty += 20 * wrong + entry.time
                    break
                if not entry.frozen:
                    wrong += 1
        result[team.name] = (solved, penalty)
    return result


def test_scroll_matches_direct_replay():
    engine = build_contest(["p", "q", "r", "s"], problem_count=4)
    script = [
        ("A", "p", "Wrong_Answer", 3), ("A", "p", "Accepted", 8), ("B", "q", "Accepted", 12),
        ("C", "r", "Runtime_Error", 14), ("C", "r", "Accepted", 19), ("D", "s", "Wrong_Answer", 25),
    ]
    frozen_script = [
        ("D", "s", "Accepted", 31), ("A", "s", "Accepted", 33), ("B", "p", "Wrong_Answer", 35),
        ("B", "p", "Accepted", 38), ("A", "q", "Time_Limit_Exceed", 41), ("C", "q", "Accepted", 44),
        ("B", "r", "Accepted", 47), ("A", "r", "Accepted", 52), ("D", "p", "Wrong_Answer", 55),
    ]
    for args in script:
        engine.submit(*args)
    engine.freeze()
    for args in frozen_script:
        engine.submit(*args)

    expected = replay_directly(engine)
    after = engine.scroll().value.after
    assert {row.team: (row.solved_count, row.penalty_time) for row in after.rows} == expected


def test_jump_over_several_teams_names_previous_neighbour():
    """Moving from last to first names the team that was directly ahead"""
    engine = build_contest(["a", "b", "c"])
    engine.flush()
    engine.freeze()
    engine.submit("A", "c", "Accepted", 1)
    report = engine.scroll().value
    assert report.changes == [
        RankingChange(team="c", displaced_team="b", solved_count=1, penalty_time=1),
    ]
    assert [row.team for row in report.after.rows] == ["c", "a", "b"]


def test_wrong_only_frozen_problem_is_not_revealed():
    engine = build_contest(["alpha", "beta"])
    engine.freeze()
    engine.submit("A", "alpha", "Wrong_Answer", 30)
    engine.submit("B", "beta", "Accepted", 40)
    engine.flush()
    assert next_reveal(engine.order, engine.controller) == ("beta", "B")

    engine.scroll()
    alpha = engine.registry.get("alpha").problems[0]
    assert alpha.frozen_pending_count == 0
    assert alpha.wrong_count == 0
