"""A persistent, bounded table of high scores stored as JSON."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from datetime import date
from pathlib import Path
from typing import Optional, Union

DEFAULT_MAX_SCORES = 10
TOP_TEN = 10


class HighScoreError(Exception):
    """Raised when the high-score file cannot be read, parsed or written."""


def _today() -> str:
    return date.today().isoformat()


@dataclass
class HighScore:
    score: int
    wave: int
    time: float
    date: str = field(default_factory=_today)
    player_name: str = "Player"


def _sort_key(entry: HighScore) -> tuple[int, int, float]:
    return (-entry.score, -entry.wave, entry.time)


def _read(path: Path) -> list[HighScore]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise HighScoreError(f"cannot read {path}: {exc}") from exc
    try:
        data = json.loads(text)
        if not isinstance(data, list):
            raise ValueError("expected a list of scores")
        return [
            HighScore(
                score=int(item["score"]),
                wave=int(item["wave"]),
                time=float(item["time"]),
                date=str(item["date"]),
                player_name=str(item.get("player_name", "Player")),
            )
            for item in data
        ]
    except (ValueError, KeyError, TypeError) as exc:
        raise HighScoreError(f"invalid high-score data in {path}: {exc}") from exc


def _write(path: Path, scores: list[HighScore]) -> None:
    try:
        path.write_text(json.dumps([asdict(s) for s in scores], indent=2), encoding="utf-8")
    except OSError as exc:
        raise HighScoreError(f"cannot write {path}: {exc}") from exc


class HighScoreTable:
    """The best scores, highest first, kept in a file and capped at ``max_scores``."""

    def __init__(self, path: Union[str, Path], max_scores: int = DEFAULT_MAX_SCORES) -> None:
        if max_scores < 1:
            raise ValueError("max_scores must be at least 1")
        self.path = Path(path)
        self.max_scores = max_scores
        self._cache: Optional[list[HighScore]] = None

    def _arrange(self, scores: list[HighScore]) -> list[HighScore]:
        return sorted(scores, key=_sort_key)[: self.max_scores]

    def _store(self, scores: list[HighScore]) -> None:
        _write(self.path, scores)
        self._cache = scores

    def load(self) -> list[HighScore]:
        """All stored scores, best first; empty if there is no file yet."""
        if self._cache is None:
            self._cache = self._arrange(_read(self.path)) if self.path.exists() else []
        return list(self._cache)

    def add(self, score: HighScore) -> bool:
        """Record a score; return whether it made it into the table."""
        scores = self._arrange(self.load() + [score])
        self._store(scores)
        return any(entry is score for entry in scores)

    def is_new_high_score(self, score: int) -> bool:
        scores = self.load()
        return len(scores) < self.max_scores or score > scores[-1].score

    def high_score(self) -> int:
        scores = self.load()
        return scores[0].score if scores else 0

    def lowest_high_score(self) -> int:
        scores = self.load()
        return scores[-1].score if scores else 0

    def top(self, count: int = TOP_TEN) -> list[HighScore]:
        if count < 0:
            raise ValueError("count must not be negative")
        return self.load()[:count]

    def rank(self, score: int) -> int:
        """One-based rank the score holds among the stored scores."""
        return 1 + sum(1 for entry in self.load() if entry.score > score)

    def in_top_ten(self, score: int) -> bool:
        return self.rank(score) <= TOP_TEN

    def clear(self) -> None:
        self._store([])

    def export(self, path: Union[str, Path]) -> None:
        _write(Path(path), self.load())

    def import_from(self, path: Union[str, Path]) -> list[HighScore]:
        """Replace the table with the scores in another file and return them."""
        scores = self._arrange(_read(Path(path)))
        self._store(scores)
        return list(scores)