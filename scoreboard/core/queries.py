"""
Read-only lookups: team rank and last matching submission
"""
from typing import List, Optional

from scoreboard.core.errors import TeamNotFound
from scoreboard.core.submission_log import SubmissionLog
from scoreboard.models import RankQuery, Status, SubmissionQuery, SubmissionView
from scoreboard.services.team_registry import TeamRegistry


def rank_of(registry: TeamRegistry, order: List[str], team_name: str, is_frozen: bool) -> RankQuery:
    """
    1-based position in the last computed ranking

    The rank is flagged stale while the board is frozen.
    """
    if team_name not in registry:
        raise TeamNotFound("Query ranking failed: cannot find the team.")
    return RankQuery(team=team_name, rank=order.index(team_name) + 1, is_stale=is_frozen)


def last_submission(
    registry: TeamRegistry,
    log: SubmissionLog,
    team_name: str,
    problem: Optional[str] = None,
    status: Optional[Status] = None,
) -> SubmissionQuery:
    """Newest submission of the team matching the filters (None = any)"""
    if team_name not in registry:
        raise TeamNotFound("Query submission failed: cannot find the team.")

    entry = log.find_last(team_name, problem=problem, status=status)
    if entry is None:
        return SubmissionQuery(found=False)
    return SubmissionQuery(
        found=True,
        submission=SubmissionView(
            team=entry.team,
            problem=entry.problem,
            status=entry.status,
            time=entry.time,
        ),
    )
