"""
Utility functions
"""
from typing import List, Optional

from scoreboard.models import Status


ALL = "ALL"

_STATUS_BY_LABEL = {status.value: status for status in Status}


def problem_names(count: int) -> List[str]:
    """
    Sequential problem names for a contest

    Example:
        >>> problem_names(3)
        ['A', 'B', 'C']
    """
    return [chr(ord("A") + i) for i in range(count)]


def parse_status(label: str) -> Status:
    """
    Parse a judge status token

    Unrecognized tokens count as a wrong answer.

    Example:
        >>> parse_status("Accepted")
        <Status.ACCEPTED: 'Accepted'>
        >>> parse_status("Compile_Error")
        <Status.WRONG_ANSWER: 'Wrong_Answer'>
    """
    return _STATUS_BY_LABEL.get((label or "").strip(), Status.WRONG_ANSWER)


def parse_filter(value: Optional[str]) -> Optional[str]:
    """Return None for an "ALL" / empty filter, the stripped value otherwise"""
    if value is None:
        return None
    value = value.strip()
    if not value or value == ALL:
        return None
    return value
