"""
Leaderboard service - Assemble scoreboard snapshots
"""
from typing import List

from scoreboard.core.freeze import FreezeController
from scoreboard.models import ProblemState, Scoreboard, ScoreboardRow
from scoreboard.services.team_registry import TeamRegistry


def format_cell(state: ProblemState, pending: bool) -> str:
    """
    Render one problem cell

    Formats:
        solved         "+" or "+<wrong>"
        frozen pending "0/<frozen>" or "-<wrong>/<frozen>"
        otherwise      "." or "-<wrong>"
    """
    wrong = state.wrong_count
    if state.solved:
        return f"+{wrong}" if wrong else "+"
    if pending:
        prefix = f"-{wrong}" if wrong else "0"
        return f"{prefix}/{state.frozen_pending_count}"
    return f"-{wrong}" if wrong else "."


def build_scoreboard(
    registry: TeamRegistry,
    controller: FreezeController,
    order: List[str],
) -> Scoreboard:
    """
    Snapshot of every team in the given ranking order

    Args:
        registry: Registered teams
        controller: Freeze controller (frozen flag and pending problems)
        order: Ranking order, best first

    Returns:
        Scoreboard with one row per team
    """
    rows = []
    for rank, team_name in enumerate(order, start=1):
        team = registry.get(team_name)
        cells = [
            format_cell(state, controller.is_pending(team_name, problem))
            for problem, state in zip(controller.problems, team.problems)
        ]
        rows.append(ScoreboardRow(
            team=team_name,
            rank=rank,
            solved_count=team.solved_count,
            penalty_time=team.penalty_time,
            cells=cells,
        ))

    return Scoreboard(
        problems=list(controller.problems),
        rows=rows,
        frozen=controller.is_frozen,
    )
