"""
Submission application and freeze handling

While the board is frozen, submissions on unsolved problems are parked as
"frozen pending" and only take effect when the scroll reveals them.
"""
import logging
from typing import Dict, Iterable, List, Set

from scoreboard.core.errors import AlreadyFrozen
from scoreboard.core.submission_log import SubmissionLog
from scoreboard.models import Status, Team


logger = logging.getLogger(__name__)


def mark_solved(team: Team, index: int, time: int, penalty_per_wrong: int) -> None:
    """Apply the first acceptance of a problem to the team's score"""
    state = team.problems[index]
    state.solved = True
    state.first_accept_time = time
    team.solved_count += 1
    team.penalty_time += penalty_per_wrong * state.wrong_count + time


class FreezeController:
    """Decides how each submission changes team state"""

    def __init__(self, log: SubmissionLog, penalty_per_wrong: int = 20):
        self.log = log
        self.penalty_per_wrong = penalty_per_wrong
        self.problems: List[str] = []
        self.is_frozen = False
        # team name -> problems accepted while frozen, not yet revealed
        self._frozen_problems: Dict[str, Set[str]] = {}

    def freeze(self) -> None:
        if self.is_frozen:
            raise AlreadyFrozen()
        self.is_frozen = True
        logger.info("🧊 Scoreboard frozen")

    def apply(self, team: Team, problem: str, status: Status, time: int) -> None:
        """
        Record one submission

        Order of checks:
          1. frozen board and unsolved problem → frozen pending only;
             an acceptance queues the problem for the scroll
          2. already solved → counted, no ranking effect
          3. otherwise accepted solves, anything else is a wrong attempt
        """
        index = self.problems.index(problem)
        self.log.append(team.name, problem, status, time, frozen=self.is_frozen)

        state = team.problems[index]
        state.total_submissions += 1

        if self.is_frozen and not state.solved:
            state.frozen_pending_count += 1
            if status == Status.ACCEPTED:
                self._frozen_problems.setdefault(team.name, set()).add(problem)
            return

        if state.solved:
            return

        if status == Status.ACCEPTED:
            mark_solved(team, index, time, self.penalty_per_wrong)
            logger.debug(f"✅ {team.name} solved {problem} at {time} (wrong: {state.wrong_count})")
        else:
            state.wrong_count += 1

    def frozen_problems(self, team_name: str) -> Set[str]:
        return self._frozen_problems.get(team_name, set())

    def has_frozen(self, team_name: str) -> bool:
        return bool(self._frozen_problems.get(team_name))

    def is_pending(self, team_name: str, problem: str) -> bool:
        return problem in self._frozen_problems.get(team_name, ())

    def reveal(self, team: Team, problem: str) -> bool:
        """
        Unfreeze one problem of one team

        The earliest accepted submission received while frozen (if any)
        solves the problem. Wrong attempts received while frozen are dropped.

        Returns:
            True if the team's solved state changed
        """
        self._frozen_problems[team.name].discard(problem)
        index = self.problems.index(problem)
        state = team.problems[index]

        changed = False
        accepted = self.log.first_frozen_accept(team.name, problem)
        if accepted is not None and not state.solved:
            mark_solved(team, index, accepted.time, self.penalty_per_wrong)
            changed = True

        state.frozen_pending_count = 0
        logger.debug(f"🔓 Revealed {team.name}/{problem} (solved: {changed})")
        return changed

    def thaw(self, teams: Iterable[Team]) -> None:
        """Drop all frozen bookkeeping and unfreeze the board"""
        for team in teams:
            for state in team.problems:
                state.frozen_pending_count = 0
        self._frozen_problems.clear()
        self.is_frozen = False
