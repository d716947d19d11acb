"""
Report Cache - one generated report per user, kind and day
"""
from datetime import date
from typing import Any, Dict, Optional, Tuple


class ReportCache:
    """
    In-memory cache for AI output that should only be generated once a day.

    An entry stored on an earlier day is treated as missing.
    """

    def __init__(self):
        self._entries: Dict[Tuple[str, str], Tuple[date, Any]] = {}

    def get(self, user_id: str, kind: str, today: date) -> Optional[Any]:
        entry = self._entries.get((user_id, kind))
        if entry is None:
            return None
        cached_on, value = entry
        if cached_on != today:
            del self._entries[(user_id, kind)]
            return None
        return value

    def set(self, user_id: str, kind: str, today: date, value: Any) -> None:
        self._entries[(user_id, kind)] = (today, value)

    def clear(self, user_id: Optional[str] = None) -> int:
        """Drop every entry, or only one user's; returns the number removed"""
        keys = [key for key in self._entries if user_id is None or key[0] == user_id]
        for key in keys:
            del self._entries[key]
        return len(keys)


# Shared instance for the API
report_cache = ReportCache()
