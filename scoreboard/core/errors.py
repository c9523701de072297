"""
Scoreboard errors

Raised inside the engine components and converted into failed
EngineResult values at the ContestEngine boundary.
"""
from scoreboard.models import ErrorKind


class ScoreboardError(Exception):
    """Base class for rejected scoreboard operations"""
    kind: ErrorKind = ErrorKind.INVALID_ARGUMENT
    default_message = "Operation failed."

    def __init__(self, message: str = None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class DuplicateTeam(ScoreboardError):
    kind = ErrorKind.DUPLICATE_TEAM
    default_message = "Add failed: duplicated team name."


class CompetitionAlreadyStarted(ScoreboardError):
    kind = ErrorKind.COMPETITION_ALREADY_STARTED
    default_message = "Add failed: competition has started."


class AlreadyStarted(ScoreboardError):
    kind = ErrorKind.ALREADY_STARTED
    default_message = "Start failed: competition has started."


class ContestNotStarted(ScoreboardError):
    kind = ErrorKind.CONTEST_NOT_STARTED
    default_message = "Operation failed: competition has not started."


class AlreadyFrozen(ScoreboardError):
    kind = ErrorKind.ALREADY_FROZEN
    default_message = "Freeze failed: scoreboard has been frozen."


class NotFrozen(ScoreboardError):
    kind = ErrorKind.NOT_FROZEN
    default_message = "Scroll failed: scoreboard has not been frozen."


class TeamNotFound(ScoreboardError):
    kind = ErrorKind.TEAM_NOT_FOUND
    default_message = "Query failed: cannot find the team."


class UnknownProblem(ScoreboardError):
    kind = ErrorKind.UNKNOWN_PROBLEM
    default_message = "Submit failed: unknown problem."


class InvalidArgument(ScoreboardError):
    kind = ErrorKind.INVALID_ARGUMENT
