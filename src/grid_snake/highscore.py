"""High score persistence in a plain text file."""

from __future__ import annotations

import logging
from pathlib import Path

from .config import HIGHSCORE_FILE
from .model import GameOverEvent

logger = logging.getLogger(__name__)


class HighScoreStore:
    def __init__(self, path: Path = HIGHSCORE_FILE) -> None:
        self.path = Path(path)

    def load(self) -> int:
        try:
            text = self.path.read_text(encoding="utf-8")
            return max(0, int(text.strip() or "0"))
        except FileNotFoundError:
            return 0
        except (OSError, ValueError) as exc:
            logger.warning("Could not read high score from %s: %s", self.path, exc)
            return 0

    def save(self, score: int) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(str(int(score)), encoding="utf-8")
        except OSError as exc:
            logger.warning("Could not save high score to %s: %s", self.path, exc)

    def on_game_over(self, event: GameOverEvent) -> None:
        """Game-over listener: persist only new records."""
        if event.new_high_score:
            self.save(event.score)
