"""
Contest engine - the single entry point for scoreboard operations

One ContestEngine instance owns the team registry, the submission log and
the freeze state of one contest. Every public method applies one event
synchronously and returns an EngineResult; rejected operations leave the
state untouched.
"""
import functools
import logging
from typing import List, Optional

from scoreboard.core.errors import (
    AlreadyStarted,
    ContestNotStarted,
    InvalidArgument,
    NotFrozen,
    ScoreboardError,
    TeamNotFound,
    UnknownProblem,
)
from scoreboard.core.freeze import FreezeController
from scoreboard.core.queries import last_submission, rank_of
from scoreboard.core.ranking import rank_teams
from scoreboard.core.scroll import run_scroll
from scoreboard.core.submission_log import SubmissionLog
from scoreboard.models import ContestSettings, EngineResult, Scoreboard, ScrollReport
from scoreboard.services.leaderboard import build_scoreboard
from scoreboard.services.team_registry import TeamRegistry
from scoreboard.utils import parse_filter, parse_status, problem_names


logger = logging.getLogger(__name__)

STALE_RANKING_WARNING = "Scoreboard is frozen. The ranking may be inaccurate until it were scrolled."


def engine_operation(method):
    """Convert ScoreboardError raised by an operation into a failed result"""
    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except ScoreboardError as exc:
            logger.warning(f"❌ {method.__name__} rejected: {exc.kind.value} ({exc.message})")
            return EngineResult.fail(exc.kind, exc.message)
    return wrapper


class ContestEngine:
    """Scoreboard of one contest"""

    def __init__(self, settings: Optional[ContestSettings] = None):
        self.settings = settings or ContestSettings()
        self.registry = TeamRegistry()
        self.log = SubmissionLog()
        self.controller = FreezeController(self.log, self.settings.penalty_per_wrong)
        self.started = False
        self.ended = False
        self.duration_minutes = 0
        self.order: List[str] = []

    @property
    def problems(self) -> List[str]:
        return self.controller.problems

    @property
    def is_frozen(self) -> bool:
        return self.controller.is_frozen

    # ==================== MUTATIONS ====================

    @engine_operation
    def register_team(self, name: str) -> EngineResult:
        team = self.registry.register(name)
        self.order.append(team.name)
        logger.info(f"👥 Team {team.name} registered ({len(self.registry)} total)")
        return EngineResult.ok("Add successfully.")

    @engine_operation
    def start_contest(self, duration_minutes: int, problem_count: int) -> EngineResult:
        """
        Start the contest with problems A.. (problem_count of them)

        The duration is informational; submissions past it are accepted.
        """
        if self.started:
            raise AlreadyStarted()
        if not 1 <= problem_count <= self.settings.max_problems:
            raise InvalidArgument(
                f"Start failed: problem count must be between 1 and {self.settings.max_problems}."
            )
        if duration_minutes < 0:
            raise InvalidArgument("Start failed: duration must be non-negative.")

        self.duration_minutes = duration_minutes
        self.controller.problems = problem_names(problem_count)
        self.registry.initialize_problems(problem_count)
        self.started = True
        logger.info(
            f"🏁 Competition started: {len(self.registry)} teams, "
            f"{problem_count} problems, {duration_minutes} minutes"
        )
        return EngineResult.ok("Competition starts.")

    @engine_operation
    def submit(self, problem: str, team_name: str, outcome_label: str, timestamp: int) -> EngineResult:
        """Record a submission; unrecognized outcome labels count as Wrong_Answer"""
        if not self.started:
            raise ContestNotStarted("Submit failed: competition has not started.")
        if team_name not in self.registry:
            raise TeamNotFound("Submit failed: cannot find the team.")
        if problem not in self.problems:
            raise UnknownProblem(f"Submit failed: unknown problem {problem}.")
        if timestamp < 0:
            raise InvalidArgument("Submit failed: time must be non-negative.")

        status = parse_status(outcome_label)
        self.controller.apply(self.registry.get(team_name), problem, status, timestamp)
        logger.debug(f"📥 {team_name} {problem} {status.value} at {timestamp}")
        return EngineResult.ok()

    @engine_operation
    def freeze(self) -> EngineResult:
        if not self.started:
            raise ContestNotStarted("Freeze failed: competition has not started.")
        self.controller.freeze()
        return EngineResult.ok("Freeze scoreboard.")

    @engine_operation
    def flush(self) -> EngineResult:
        """Recompute the ranking and return the full scoreboard"""
        self.order = rank_teams(self.registry)
        return EngineResult.ok("Flush scoreboard.", value=self.snapshot())

    @engine_operation
    def scroll(self) -> EngineResult:
        """
        Reveal all frozen results

        Returns:
            EngineResult with a ScrollReport: the scoreboard before any
            reveal, the ranking changes, and the final scoreboard
        """
        if not self.is_frozen:
            raise NotFrozen()

        self.order = rank_teams(self.registry)
        before = self.snapshot()
        self.order, changes = run_scroll(self.registry, self.controller, self.order)
        report = ScrollReport(before=before, changes=changes, after=self.snapshot())
        return EngineResult.ok("Scroll scoreboard.", value=report)

    @engine_operation
    def end_contest(self) -> EngineResult:
        self.ended = True
        logger.info(f"🛑 Competition ended ({len(self.log)} submissions)")
        return EngineResult.ok("Competition ends.")

    # ==================== QUERIES ====================

    @engine_operation
    def query_rank(self, team_name: str) -> EngineResult:
        result = rank_of(self.registry, self.order, team_name, self.is_frozen)
        warning = STALE_RANKING_WARNING if result.is_stale else None
        return EngineResult.ok("Complete query ranking.", value=result, warning=warning)

    @engine_operation
    def query_submission(
        self,
        team_name: str,
        problem: Optional[str] = None,
        status: Optional[str] = None,
    ) -> EngineResult:
        """
        Last submission of a team

        `problem` and `status` accept "ALL" (or None) to match anything.
        A status filter is parsed leniently like submission outcomes.
        """
        problem_filter = parse_filter(problem)
        status_filter = parse_filter(status)
        result = last_submission(
            self.registry,
            self.log,
            team_name,
            problem=problem_filter,
            status=parse_status(status_filter) if status_filter is not None else None,
        )
        return EngineResult.ok("Complete query submission.", value=result)

    def snapshot(self) -> Scoreboard:
        """Scoreboard in the last computed order (no recomputation)"""
        return build_scoreboard(self.registry, self.controller, self.order)
