"""CLI entrypoint for solving a crossword in the terminal."""

import sys

from crossword_session.cli import main


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
