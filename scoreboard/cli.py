"""Command-stream driver for the scoreboard engine."""

import logging
import sys
from typing import Callable, Iterable, List, Optional

import click

from scoreboard.config import load_settings_or_default, setup_logging
from scoreboard.models import EngineResult
from scoreboard.rendering import render_result
from scoreboard.services.contest import ContestEngine


logger = logging.getLogger(__name__)


class CommandError(ValueError):
    """Malformed command line"""


def _strip_prefix(token: str, prefix: str) -> str:
    return token[len(prefix):] if token.startswith(prefix) else token


def _int(token: str, what: str) -> int:
    try:
        return int(token)
    except ValueError as e:
        raise CommandError(f"{what} must be an integer, got {token!r}") from e


def dispatch(engine: ContestEngine, line: str) -> Optional[EngineResult]:
    """
    Apply one command line to the engine

    Returns:
        The engine result, or None for a blank line

    Raises:
        CommandError: If the line cannot be parsed
    """
    parts = line.split()
    if not parts:
        return None
    command, args = parts[0], parts[1:]

    if command == "ADDTEAM":
        if len(args) != 1:
            raise CommandError("usage: ADDTEAM <team>")
        return engine.register_team(args[0])

    if command == "START":
        # START DURATION <minutes> PROBLEM <count>
        if len(args) != 4:
            raise CommandError("usage: START DURATION <minutes> PROBLEM <count>")
        return engine.start_contest(_int(args[1], "duration"), _int(args[3], "problem count"))

    if command == "SUBMIT":
        # SUBMIT <problem> BY <team> WITH <status> AT <time>
        if len(args) != 7:
            raise CommandError("usage: SUBMIT <problem> BY <team> WITH <status> AT <time>")
        return engine.submit(args[0], args[2], args[4], _int(args[6], "time"))

    if command == "FLUSH":
        return engine.flush()
    if command == "FREEZE":
        return engine.freeze()
    if command == "SCROLL":
        return engine.scroll()
    if command == "END":
        return engine.end_contest()

    if command == "QUERY_RANKING":
        if len(args) != 1:
            raise CommandError("usage: QUERY_RANKING <team>")
        return engine.query_rank(args[0])

    if command == "QUERY_SUBMISSION":
        # QUERY_SUBMISSION <team> WHERE PROBLEM=<p> AND STATUS=<s>
        if len(args) != 5 or args[1] != "WHERE" or args[3] != "AND":
            raise CommandError("usage: QUERY_SUBMISSION <team> WHERE PROBLEM=<p> AND STATUS=<s>")
        problem = _strip_prefix(args[2], "PROBLEM=")
        status = _strip_prefix(args[4], "STATUS=")
        return engine.query_submission(args[0], problem, status)

    raise CommandError(f"unknown command {command!r}")


def run_commands(
    lines: Iterable[str],
    engine: ContestEngine,
    emit: Callable[[str], None],
) -> int:
    """
    Drive the engine with a command stream until END or end of input

    SUBMIT produces no output; malformed lines are logged and skipped.

    Returns:
        Number of commands applied
    """
    applied = 0
    for raw in lines:
        line = raw.strip()
        if not line:
            continue
        try:
            result = dispatch(engine, line)
        except CommandError as e:
            logger.warning(f"⚠️ Skipping line {line!r}: {e}")
            continue

        applied += 1
        command = line.split()[0]
        if command != "SUBMIT":
            for out in render_result(command, result):
                emit(out)
        if command == "END":
            break
    return applied


def render_commands(lines: Iterable[str], engine: Optional[ContestEngine] = None) -> List[str]:
    """Run a command stream and collect its output lines"""
    output: List[str] = []
    run_commands(lines, engine or ContestEngine(), output.append)
    return output


@click.command()
@click.option("--input", "input_file", type=click.File("r"), default="-",
              help="Command stream to read (default: stdin).")
@click.option("--config", "config_path", type=click.Path(dir_okay=False), default=None,
              help="Contest settings YAML (default: config/contest.yaml).")
@click.version_option(version="1.0.0")
def main(input_file, config_path):
    """Replay a contest command stream and print the scoreboard output."""
    settings = load_settings_or_default(config_path)
    setup_logging(settings)
    engine = ContestEngine(settings)
    run_commands(input_file, engine, lambda out: sys.stdout.write(out + "\n"))


if __name__ == "__main__":
    main()
