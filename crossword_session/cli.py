"""Command-line front end for solving a crossword in the terminal."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

from .core.constants import LoadStatus
from .engine.controller import SessionController
from .io.puzzle_client import (
    ClientConfig,
    FilePuzzleFetcher,
    HttpPuzzleFetcher,
    PuzzleFetcher,
)
from .utils.logger import configure_logging
from .utils.pretty import format_clues, format_state

HELP_TEXT = """Commands:
  select ROW COL   select a cell (select the same cell again to switch direction)
  type TEXT        type letters into the active clue
  show             redraw the grid
  clues            list the clues
  quit             leave the puzzle
Anything else is typed into the grid as letters."""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Solve a crossword interactively in the terminal",
    )
    parser.add_argument("puzzle_id", help="Puzzle identifier to load")
    parser.add_argument(
        "--base-url",
        type=str,
        default=None,
        help="Puzzle API base URL (default: $CROSSWORD_API_BASE or http://localhost:8000/api)",
    )
    parser.add_argument(
        "--puzzle-dir",
        type=Path,
        default=None,
        help="Load <puzzle_id>.ipuz / .json from this directory instead of the API",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="HTTP timeout in seconds (default: $CROSSWORD_TIMEOUT_SECONDS or 10)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def build_fetcher(args: argparse.Namespace) -> PuzzleFetcher:
    if args.puzzle_dir is not None:
        return FilePuzzleFetcher(args.puzzle_dir)
    config = ClientConfig.from_env()
    if args.base_url:
        config.base_url = args.base_url
    if args.timeout is not None:
        config.timeout_seconds = args.timeout
    return HttpPuzzleFetcher(config)


def run_command(controller: SessionController, line: str, stream: TextIO) -> bool:
    """Apply one shell command; returns False when the user quits."""

    command, _, rest = line.strip().partition(" ")
    command = command.lower()
    if command in {"quit", "exit", "q"}:
        return False
    if command in {"help", "?"}:
        print(HELP_TEXT, file=stream)
        return True
    if command == "clues":
        if controller.session is not None:
            print(format_clues(controller.session.crossword), file=stream)
        return True
    if command == "select":
        parts = rest.split()
        if len(parts) != 2 or not all(part.lstrip("-").isdigit() for part in parts):
            print("usage: select ROW COL", file=stream)
            return True
        controller.select(int(parts[0]), int(parts[1]))
    elif command == "type":
        for char in rest.replace(" ", ""):
            controller.type_text(char)
    elif command != "show":
        for char in line.strip():
            controller.type_text(char)
    print(format_state(controller.state), file=stream)
    return True


def main(argv: list[str] | None = None, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.WARNING)
    configure_logging(level)
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    controller = SessionController(build_fetcher(args))
    state = controller.open(args.puzzle_id)
    if state.status == LoadStatus.FAILURE:
        print(format_state(state), file=stdout)
        return 1

    crossword = controller.session.crossword
    if crossword.title:
        print(f"{crossword.title}" + (f" by {crossword.author}" if crossword.author else ""), file=stdout)
    print(format_state(state), file=stdout)
    print("Type 'help' for commands.", file=stdout)

    for line in stdin:
        if not line.strip():
            continue
        if not run_command(controller, line, stdout):
            break
    return 0
