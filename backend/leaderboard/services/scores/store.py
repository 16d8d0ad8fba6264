import threading
from typing import List, Tuple

from leaderboard.models import ScoreEntry


class ScoreStore:
    """In-memory, insertion-ordered collection of accepted entries.

    Contents live only as long as the process. Writes go through append();
    all() hands out an immutable snapshot. A single lock serializes every
    operation so readers never see a half-applied append.
    """

    def __init__(self):
        self._entries: List[ScoreEntry] = []
        self._lock = threading.Lock()

    def append(self, entry: ScoreEntry) -> None:
        # Callers validate; nothing is checked here
        with self._lock:
            self._entries.append(entry)

    def all(self) -> Tuple[ScoreEntry, ...]:
        with self._lock:
            return tuple(self._entries)

    def reset(self) -> int:
        """Drop every entry. Returns how many were cleared."""
        with self._lock:
            cleared = len(self._entries)
            self._entries.clear()
        return cleared

    def __len__(self):
        with self._lock:
            return len(self._entries)
