"""Operational utilities for lingotable."""

from __future__ import annotations

import json
from collections import deque
from datetime import datetime, timezone
from pathlib import Path


class StructuredLogger:
    """Write JSON lines log entries for load and flush events.

    Only the most recent ``max_entries`` entries are kept in memory. When the
    log file cannot be appended to, the entry is still kept in memory and
    ``write_failures`` is incremented.
    """

    def __init__(self, *, path: Path | None = None, max_entries: int = 1000) -> None:
        self.path = path
        self.write_failures = 0
        self._entries: deque[dict] = deque(maxlen=max_entries)

    def log(self, event_type: str, **fields: object) -> dict:
        entry = {"timestamp": datetime.now(timezone.utc).isoformat(), "event": event_type, **fields}
        self._entries.append(entry)
        if self.path:
            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                with self.path.open("a", encoding="utf-8", errors="backslashreplace") as handle:
                    handle.write(json.dumps(entry, ensure_ascii=False, default=str) + "\n")
            except OSError:
                self.write_failures += 1
        return entry

    def tail(self, limit: int = 50) -> tuple[dict, ...]:
        return tuple(list(self._entries)[-limit:])

    def events(self, event_type: str) -> tuple[dict, ...]:
        return tuple(entry for entry in self._entries if entry["event"] == event_type)


__all__ = ["StructuredLogger"]
