# src/offdict/core/history.py
"""
Bounded query history with a recall cursor.

cursor == -1 means "not recalling"; cursor == 0 is the newest entry.
"""

HISTORY_LIMIT = 100


class QueryHistory:
    def __init__(self, limit: int = HISTORY_LIMIT):
        self.limit = limit
        self._entries: list[str] = []
        self.cursor = -1

    @property
    def entries(self) -> list[str]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def push(self, term: str) -> None:
        """Record a search. Only the immediately preceding entry is deduplicated."""
        if not term:
            return
        if not self._entries or self._entries[-1] != term:
            self._entries.append(term)
            if len(self._entries) > self.limit:
                self._entries.pop(0)
        self.cursor = -1

    def _at_cursor(self) -> str:
        return self._entries[len(self._entries) - 1 - self.cursor]

    def back(self) -> str | None:
        if not self._entries:
            return None
        if self.cursor < len(self._entries) - 1:
            self.cursor += 1
        return self._at_cursor()

    def forward(self) -> str | None:
        if not self._entries:
            return None
        if self.cursor > 0:
            self.cursor -= 1
            return self._at_cursor()
        self.cursor = -1
        return ""
