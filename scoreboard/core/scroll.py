"""
Scroll (unfreeze) algorithm

Frozen results are revealed one (team, problem) pair at a time:
  - the lowest-ranked team that still has frozen problems goes first
  - within that team, the alphabetically smallest problem goes first
  - the ranking is recomputed after every reveal that solves a problem

Each reveal that moves the revealed team up emits one RankingChange naming
the team that was directly ahead of it before that reveal.
"""
import logging
from typing import List, Optional, Tuple

from scoreboard.core.errors import NotFrozen
from scoreboard.core.freeze import FreezeController
from scoreboard.core.ranking import rank_teams
from scoreboard.models import RankingChange
from scoreboard.services.team_registry import TeamRegistry


logger = logging.getLogger(__name__)


def next_reveal(order: List[str], controller: FreezeController) -> Optional[Tuple[str, str]]:
    """Pick the (team, problem) to reveal next, or None when nothing is frozen"""
    for team_name in reversed(order):
        if controller.has_frozen(team_name):
            return team_name, min(controller.frozen_problems(team_name))
    return None


def displaced_by(old_order: List[str], new_order: List[str], team_name: str) -> Optional[str]:
    """
    Team that was directly ahead of `team_name` before the reveal

    Returns None when the team did not move up.
    """
    old_pos = old_order.index(team_name)
    new_pos = new_order.index(team_name)
    if new_pos >= old_pos:
        return None
    return old_order[old_pos - 1]


def run_scroll(
    registry: TeamRegistry,
    controller: FreezeController,
    order: List[str],
) -> Tuple[List[str], List[RankingChange]]:
    """
    Reveal every frozen problem

    Args:
        registry: Registered teams
        controller: Freeze controller holding the frozen-problem sets
        order: Ranking order at the start of the scroll

    Returns:
        (final ranking order, ranking changes in reveal order)

    Raises:
        NotFrozen: If the board is not frozen
    """
    if not controller.is_frozen:
        raise NotFrozen()

    changes: List[RankingChange] = []
    reveals = 0

    while True:
        pick = next_reveal(order, controller)
        if pick is None:
            break
        team_name, problem = pick
        team = registry.get(team_name)
        reveals += 1

        if not controller.reveal(team, problem):
            continue

        new_order = rank_teams(registry)
        if new_order != order:
            displaced = displaced_by(order, new_order, team_name)
            if displaced is not None:
                changes.append(RankingChange(
                    team=team_name,
                    displaced_team=displaced,
                    solved_count=team.solved_count,
                    penalty_time=team.penalty_time,
                ))
        order = new_order

    controller.thaw(registry)
    logger.info(f"📜 Scroll finished: {reveals} reveals, {len(changes)} ranking changes")
    return order, changes
