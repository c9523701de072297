"""
Append-only submission log
"""
from typing import Iterator, List, Optional

from scoreboard.models import Status, Submission


class SubmissionLog:
    """Every submission ever received, in arrival order"""

    def __init__(self):
        self._entries: List[Submission] = []

    def append(self, team: str, problem: str, status: Status, time: int, frozen: bool) -> Submission:
        entry = Submission(
            seq=len(self._entries),
            team=team,
            problem=problem,
            status=status,
            time=time,
            frozen=frozen,
        )
        self._entries.append(entry)
        return entry

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Submission]:
        return iter(self._entries)

    def newest_first(self) -> Iterator[Submission]:
        return reversed(self._entries)

    def first_frozen_accept(self, team: str, problem: str) -> Optional[Submission]:
        """
        Earliest accepted submission received while frozen

        Ties on timestamp go to the earlier log position.
        """
        best = None
        for entry in self._entries:
            if (
                entry.frozen
                and entry.team == team
                and entry.problem == problem
                and entry.status == Status.ACCEPTED
                and (best is None or entry.time < best.time)
            ):
                best = entry
        return best

    def find_last(
        self,
        team: str,
        problem: Optional[str] = None,
        status: Optional[Status] = None,
    ) -> Optional[Submission]:
        """
        Newest submission of a team matching the filters

        Args:
            team: Team name
            problem: Problem name, None matches any problem
            status: Judge status, None matches any status

        Returns:
            Matching submission or None
        """
        for entry in self.newest_first():
            if entry.team != team:
                continue
            if problem is not None and entry.problem != problem:
                continue
            if status is not None and entry.status != status:
                continue
            return entry
        return None
