# High score persistence collaborator. The engine itself never touches storage.
from __future__ import annotations

import json
import logging
import os
import tempfile

logger = logging.getLogger(__name__)

HOME_ENV = "GRID_SNAKE_HOME"


def default_high_score_path() -> str:
    base = os.environ.get(HOME_ENV) or os.path.join(os.path.expanduser("~"), ".grid_snake")
    return os.path.join(base, "high_score.json")


class HighScoreStore:
    """JSON-file backed best score: {"high_score": <int>}."""
    def __init__(self, path: str | None = None) -> None:
        self.path = path or default_high_score_path()
        self._value = 0

    @property
    def value(self) -> int:
        return self._value

    def load(self) -> int:
        """Read the stored value; anything missing or malformed counts as 0."""
        if not os.path.exists(self.path):
            self._value = 0
            return 0
        try:
            with open(self.path, "r", encoding="utf-8") as handle:
                payload = json.load(handle)
            value = int(payload["high_score"])
            if value < 0:
                raise ValueError(f"negative high score {value}")
        except (OSError, ValueError, TypeError, KeyError) as exc:
            logger.warning("Ignoring unreadable high score file %s: %s", self.path, exc)
            value = 0
        self._value = value
        return value

    def submit(self, score: int) -> bool:
        """Persist score if it beats the stored best. Returns True when saved."""
        if score <= self._value:
            return False
        self._value = score
        try:
            self._write(score)
        except OSError as exc:
            logger.warning("Could not save high score to %s: %s", self.path, exc)
            return False
        logger.info("New high score %d saved", score)
        return True

    def _write(self, score: int) -> None:
        directory = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(directory, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".high_score.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump({"high_score": score}, handle)
            os.replace(tmp_path, self.path)
        except OSError:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise
