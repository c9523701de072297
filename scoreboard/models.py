"""
Data models for the contest scoreboard
"""
from enum import Enum
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field


T = TypeVar("T")


class Status(str, Enum):
    """Judge outcome of a submission"""
    ACCEPTED = "Accepted"
    WRONG_ANSWER = "Wrong_Answer"
    RUNTIME_ERROR = "Runtime_Error"
    TIME_LIMIT_EXCEED = "Time_Limit_Exceed"


class ErrorKind(str, Enum):
    """Distinguishable failure outcomes of engine operations"""
    DUPLICATE_TEAM = "DuplicateTeam"
    COMPETITION_ALREADY_STARTED = "CompetitionAlreadyStarted"
    ALREADY_STARTED = "AlreadyStarted"
    CONTEST_NOT_STARTED = "ContestNotStarted"
    ALREADY_FROZEN = "AlreadyFrozen"
    NOT_FROZEN = "NotFrozen"
    TEAM_NOT_FOUND = "TeamNotFound"
    UNKNOWN_PROBLEM = "UnknownProblem"
    INVALID_ARGUMENT = "InvalidArgument"


class ContestSettings(BaseModel):
    """Contest-wide settings loaded from config/contest.yaml"""
    penalty_per_wrong: int = 20   # Penalty minutes per rejected attempt
    max_problems: int = 26        # Problems are named A..Z
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Submission(BaseModel):
    """One entry of the append-only submission log"""
    model_config = ConfigDict(frozen=True)

    seq: int                      # Position in the log
    team: str
    problem: str
    status: Status
    time: int
    frozen: bool = False          # Received while the board was frozen


class ProblemState(BaseModel):
    """One team's progress on one problem"""
    solved: bool = False
    first_accept_time: int = 0
    wrong_count: int = 0          # Rejected attempts before first acceptance
    total_submissions: int = 0
    frozen_pending_count: int = 0


class Team(BaseModel):
    """Registered team and its scoring state"""
    name: str
    solved_count: int = 0
    penalty_time: int = 0
    problems: List[ProblemState] = Field(default_factory=list)

    def solve_times(self) -> List[int]:
        """Acceptance times of solved problems, latest first"""
        return sorted(
            (p.first_accept_time for p in self.problems if p.solved),
            reverse=True,
        )


class ScoreboardRow(BaseModel):
    team: str
    rank: int
    solved_count: int
    penalty_time: int
    cells: List[str]


class Scoreboard(BaseModel):
    """Snapshot of the board in ranking order"""
    problems: List[str]
    rows: List[ScoreboardRow]
    frozen: bool = False


class RankingChange(BaseModel):
    """A revealed team overtaking another during scroll"""
    team: str
    displaced_team: str
    solved_count: int
    penalty_time: int


class ScrollReport(BaseModel):
    before: Scoreboard
    changes: List[RankingChange]
    after: Scoreboard


class RankQuery(BaseModel):
    team: str
    rank: int
    is_stale: bool = False


class SubmissionView(BaseModel):
    team: str
    problem: str
    status: Status
    time: int


class SubmissionQuery(BaseModel):
    found: bool
    submission: Optional[SubmissionView] = None


class EngineResult(BaseModel, Generic[T]):
    """
    Outcome of one engine operation

    Failures carry an ErrorKind and leave the engine state unchanged.
    A successful operation may still carry a warning (e.g. stale ranking).
    """
    success: bool = True
    error: Optional[ErrorKind] = None
    message: str = ""
    warning: Optional[str] = None
    value: Optional[T] = None

    @classmethod
    def ok(cls, message: str = "", value=None, warning: Optional[str] = None) -> "EngineResult":
        return cls(success=True, message=message, value=value, warning=warning)

    @classmethod
    def fail(cls, error: ErrorKind, message: str) -> "EngineResult":
        return cls(success=False, error=error, message=message)
