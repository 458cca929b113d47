"""High score persistence.

The engine only needs two operations, ``load`` at start-up and ``save`` when a
run beats the stored best, so storage is hidden behind the small
:class:`ScoreStore` protocol. Storage problems never reach the player: a
malformed value loads as 0 and a failed write is logged and dropped.
"""

import json
import logging
import os
import tempfile
from typing import Any, Dict, Protocol

logger = logging.getLogger(__name__)

HIGHSCORE_KEY = "snake_highscore"


class ScoreStore(Protocol):
    def load(self) -> int: ...

    def save(self, score: int) -> None: ...


class MemoryScoreStore:
    """In-process store; useful for tests and headless runs."""

    def __init__(self, score: int = 0) -> None:
        self.score = score
        self.saves = 0

    def load(self) -> int:
        return self.score

    def save(self, score: int) -> None:
        self.score = score
        self.saves += 1


class JsonFileScoreStore:
    """Store the high score under ``key`` in a JSON object file.

    The file may hold other keys; they are preserved on save.

    Args:
        path: Location of the JSON file.
        key: Entry holding the high score.
    """

    def __init__(self, path: str, key: str = HIGHSCORE_KEY) -> None:
        self.path = path
        self.key = key

    def load(self) -> int:
        """Return the stored high score, or 0 if it is absent or malformed."""
        if not os.path.exists(self.path):
            return 0
        try:
            data = self._read()
            value = data.get(self.key, 0)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError(f"Invalid high score value: {value!r}")
            return value
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable high score in %s: %s", self.path, e)
            return 0

    def save(self, score: int) -> None:
        """Write ``score``; failures are logged and ignored."""
        try:
            data: Dict[str, Any] = {}
            if os.path.exists(self.path):
                try:
                    data = self._read()
                except ValueError:
                    logger.warning("Overwriting malformed high score file %s", self.path)
            data[self.key] = int(score)
            self._write(data)
        except (OSError, TypeError, ValueError):
            logger.exception("Failed to persist high score to %s", self.path)

    def _write(self, data: Dict[str, Any]) -> None:
        # Replace the file only once the new content is fully on disk.
        directory = os.path.dirname(os.path.abspath(self.path))
        tmp = tempfile.NamedTemporaryFile(
            "w", encoding="utf-8", dir=directory, suffix=".tmp", delete=False
        )
        try:
            with tmp:
                json.dump(data, tmp)
            os.replace(tmp.name, self.path)
        except BaseException:
            if os.path.exists(tmp.name):
                os.remove(tmp.name)
            raise

    def _read(self) -> Dict[str, Any]:
        with open(self.path, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError("High score file does not contain a JSON object")
        return data
