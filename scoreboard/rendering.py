"""
Text rendering of engine results for the command stream
"""
from typing import List

from scoreboard.models import EngineResult, RankingChange, Scoreboard


def render_status(result: EngineResult) -> List[str]:
    """[Info]/[Error] line followed by an optional [Warning] line"""
    if not result.success:
        return [f"[Error]{result.message}"]
    lines = [f"[Info]{result.message}"] if result.message else []
    if result.warning:
        lines.append(f"[Warning]{result.warning}")
    return lines


def render_scoreboard(board: Scoreboard) -> List[str]:
    """One line per team: name rank solved penalty cells..."""
    return [
        " ".join([row.team, str(row.rank), str(row.solved_count), str(row.penalty_time), *row.cells])
        for row in board.rows
    ]


def render_change(change: RankingChange) -> str:
    return f"{change.team} {change.displaced_team} {change.solved_count} {change.penalty_time}"


def render_result(command: str, result: EngineResult) -> List[str]:
    """
    Output lines for one command

    Args:
        command: Command keyword (FLUSH, SCROLL, ...)
        result: Result returned by the engine

    Returns:
        Lines to print, without trailing newlines
    """
    lines = render_status(result)
    if not result.success or result.value is None:
        return lines

    value = result.value
    if command == "FLUSH":
        lines.extend(render_scoreboard(value))
    elif command == "SCROLL":
        lines.extend(render_scoreboard(value.before))
        lines.extend(render_change(change) for change in value.changes)
        lines.extend(render_scoreboard(value.after))
    elif command == "QUERY_RANKING":
        lines.append(f"{value.team} NOW AT RANKING {value.rank}")
    elif command == "QUERY_SUBMISSION":
        if value.found:
            sub = value.submission
            lines.append(f"{sub.team} {sub.problem} {sub.status.value} {sub.time}")
        else:
            lines.append("Cannot find any submission.")
    return lines
