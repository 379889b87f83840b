# storage/best_score.py
from __future__ import annotations
import json, os
from typing import Optional


class BestScoreStore:
    """Single best-score integer kept in a small JSON file."""
    def __init__(self, path: Optional[str]):
        self.path = path
        self.best = 0

    def load(self) -> int:
        """Read the stored best; a missing or unreadable file counts as 0."""
        self.best = 0
        if not self.path or not os.path.exists(self.path):
            return self.best
        try:
            with open(self.path, "r") as f:
                data = json.load(f)
            val = int(data.get("best_score", 0))
        except (OSError, ValueError, TypeError, AttributeError):
            return self.best
        self.best = max(0, val)
        return self.best

    def record(self, score: int) -> bool:
        """Persist ``score`` if it beats the best; returns True when it did."""
        if score <= self.best:
            return False
        self.best = int(score)
        if self.path:
            parent = os.path.dirname(self.path)
            if parent:
                os.makedirs(parent, exist_ok=True)
            with open(self.path, "w") as f:
                json.dump({"best_score": self.best}, f)
        return True
