"""Puzzle fetch collaborators: HTTP and local directory sources."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Protocol, Sequence
from urllib.parse import quote

import requests

from ..core.exceptions import FetchError, PuzzleFormatError
from ..engine.crossword import Crossword
from ..utils.logger import get_logger
from .puzzle_format import parse_puzzle

LOGGER = get_logger(__name__)


class PuzzleFetcher(Protocol):
    def fetch_crossword(self, puzzle_id: str) -> Crossword:
        """Resolve a puzzle id to a crossword, raising :class:`FetchError` on failure."""


@dataclass
class ClientConfig:
    """Connection settings for :class:`HttpPuzzleFetcher`."""

    base_url: str = "http://localhost:8000/api"
    timeout_seconds: float = 10.0

    @classmethod
    def from_env(
        cls,
        env: Optional[Mapping[str, str]] = None,
        base_url_env: str = "CROSSWORD_API_BASE",
        timeout_env: str = "CROSSWORD_TIMEOUT_SECONDS",
    ) -> "ClientConfig":
        env = os.environ if env is None else env
        config = cls()
        if env.get(base_url_env):
            config.base_url = env[base_url_env]
        if env.get(timeout_env):
            try:
                config.timeout_seconds = float(env[timeout_env])
            except ValueError:
                LOGGER.warning("Ignoring invalid %s=%r", timeout_env, env[timeout_env])
        return config


class HttpPuzzleFetcher:
    """Fetch puzzle documents from ``{base_url}/puzzles/{puzzle_id}``."""

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config or ClientConfig.from_env()
        self._session = session or requests.Session()

    def puzzle_url(self, puzzle_id: str) -> str:
        return f"{self.config.base_url.rstrip('/')}/puzzles/{quote(puzzle_id, safe='')}"

    def fetch_crossword(self, puzzle_id: str) -> Crossword:
        url = self.puzzle_url(puzzle_id)
        LOGGER.debug("GET %s", url)
        try:
            response = self._session.get(url, timeout=self.config.timeout_seconds)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise FetchError(f"Puzzle request failed: {exc}") from exc

        try:
            document = response.json()
        except ValueError as exc:
            raise PuzzleFormatError(f"Puzzle {puzzle_id} response is not JSON") from exc
        return parse_puzzle(document)


class FilePuzzleFetcher:
    """Load puzzle documents stored as ``<puzzle_id>.ipuz`` or ``.json`` files."""

    def __init__(self, directory: Path | str, suffixes: Sequence[str] = (".ipuz", ".json")) -> None:
        self.directory = Path(directory)
        self.suffixes = tuple(suffixes)

    def find_path(self, puzzle_id: str) -> Optional[Path]:
        if not puzzle_id or Path(puzzle_id).name != puzzle_id:
            return None
        for suffix in self.suffixes:
            path = self.directory / f"{puzzle_id}{suffix}"
            if path.is_file():
                return path
        return None

    def fetch_crossword(self, puzzle_id: str) -> Crossword:
        path = self.find_path(puzzle_id)
        if path is None:
            raise FetchError(f"Puzzle {puzzle_id!r} not found in {self.directory}")
        try:
            document = json.loads(path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise FetchError(f"Error reading {path}: {exc}") from exc
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise PuzzleFormatError(f"Error parsing {path}: {exc}") from exc
        return parse_puzzle(document)

    def available_ids(self) -> list[str]:
        if not self.directory.is_dir():
            return []
        return sorted(
            path.stem for path in self.directory.iterdir() if path.suffix.lower() in self.suffixes
        )
