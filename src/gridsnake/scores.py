# scores.py
from __future__ import annotations

import json
import logging
from pathlib import Path

from .config import BEST_SCORE_KEY

logger = logging.getLogger(__name__)


class BestScoreStore:
    """
    The one piece of durable state: the best score, stored as
    {"highScore": n} in a small JSON file.
    Storage problems never reach the game; reads fall back to 0 and
    failed writes keep the in-memory value.
    """

    def __init__(self, path: Path | str, key: str = BEST_SCORE_KEY):
        self.path = Path(path)
        self.key = key
        self.value = 0

    def load(self) -> int:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            value = int(data.get(self.key, 0))
        except FileNotFoundError:
            value = 0
        except (OSError, ValueError, TypeError, AttributeError) as exc:
            logger.warning("Could not read best score from %s (%s); using 0", self.path, exc)
            value = 0
        self.value = max(value, 0)
        return self.value

    def save(self, value: int) -> bool:
        """Persist value if it beats the stored one. Returns True if written."""
        if value <= self.value:
            return False
        self.value = value
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps({self.key: value}), encoding="utf-8")
        except OSError as exc:
            logger.warning("Could not write best score to %s (%s)", self.path, exc)
            return False
        logger.debug("Best score %d saved to %s", value, self.path)
        return True
