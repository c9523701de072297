"""
Helpers for building contests in tests
"""
from scoreboard.services.contest import ContestEngine


def build_contest(teams, problem_count=3):
    """Engine with the given teams registered and the contest started"""
    engine = ContestEngine()
    for name in teams:
        assert engine.register_team(name).success
    assert engine.start_contest(300, problem_count).success
    return engine
