"""
Ranking rules (ICPC tie-breaks)

Order:
  1. More solved problems first
  2. Less penalty time first
  3. Acceptance times sorted latest-first, compared position by position;
     the smaller time at the first difference ranks first
  4. Team name, ascending

Team names are unique, so the order is strict and total.
"""
from typing import Iterable, List, Tuple

from scoreboard.models import Team


def ranking_key(team: Team) -> Tuple:
    """Sort key implementing the four tie-break levels"""
    return (-team.solved_count, team.penalty_time, tuple(team.solve_times()), team.name)


def compare_teams(a: Team, b: Team) -> int:
    """
    Three-way comparison

    Returns:
        -1 if `a` ranks ahead of `b`, 1 if behind, 0 only for the same team
    """
    key_a, key_b = ranking_key(a), ranking_key(b)
    if key_a < key_b:
        return -1
    if key_a > key_b:
        return 1
    return 0


def rank_teams(teams: Iterable[Team]) -> List[str]:
    """Full re-sort of the teams, best first"""
    return [team.name for team in sorted(teams, key=ranking_key)]
