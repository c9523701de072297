"""Team registration and per-team problem state"""
import logging
from typing import Dict, Iterator, List

from scoreboard.core.errors import (
    CompetitionAlreadyStarted,
    DuplicateTeam,
    InvalidArgument,
    TeamNotFound,
)
from scoreboard.models import ProblemState, Team


logger = logging.getLogger(__name__)


class TeamRegistry:
    """Registered teams, kept in registration order"""

    def __init__(self):
        self._teams: Dict[str, Team] = {}
        self._order: List[str] = []
        self.sealed = False

    def register(self, name: str) -> Team:
        if self.sealed:
            raise CompetitionAlreadyStarted()
        clean_name = (name or "").strip()
        if not clean_name:
            raise InvalidArgument("Add failed: team name required.")
        if clean_name in self._teams:
            raise DuplicateTeam()

        team = Team(name=clean_name)
        self._teams[clean_name] = team
        self._order.append(clean_name)
        logger.debug(f"Registered team {clean_name} (#{len(self._order)})")
        return team

    def initialize_problems(self, count: int) -> None:
        """Give every team `count` empty problem slots and close registration"""
        for team in self._teams.values():
            team.problems = [ProblemState() for _ in range(count)]
        self.sealed = True

    def get(self, name: str) -> Team:
        team = self._teams.get(name)
        if team is None:
            raise TeamNotFound()
        return team

    def __contains__(self, name: str) -> bool:
        return name in self._teams

    def __iter__(self) -> Iterator[Team]:
        return (self._teams[name] for name in self._order)

    def __len__(self) -> int:
        return len(self._order)

    def names(self) -> List[str]:
        """Team names in registration order"""
        return list(self._order)
