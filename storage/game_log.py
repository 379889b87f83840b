# storage/game_log.py
from __future__ import annotations
import csv, os
from typing import Any, Dict, Optional

FIELDS = ["game", "score", "length", "ticks", "reason", "best"]


class GameLog:
    """Append-only CSV with one row per finished game. A None path disables it."""
    def __init__(self, path: Optional[str], fieldnames: list[str] | None = None):
        self.path = path
        self._fieldnames = fieldnames or FIELDS
        self._file = None
        self._writer = None
        if path:
            parent = os.path.dirname(path)
            if parent:
                os.makedirs(parent, exist_ok=True)
            self._file = open(path, "a", newline="")

    @property
    def enabled(self) -> bool:
        return self._file is not None

    def log(self, row: Dict[str, Any]) -> None:
        if self._file is None:
            return
        if self._writer is None:
            self._writer = csv.DictWriter(
                self._file,
                fieldnames=self._fieldnames,
                extrasaction="ignore",
            )
            if self._file.tell() == 0:
                self._writer.writeheader()
        self._writer.writerow(row)
        self._file.flush()

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None
            self._writer = None
