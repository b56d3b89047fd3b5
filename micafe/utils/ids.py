# micafe/utils/ids.py
from collections import defaultdict
from datetime import datetime, timezone
from typing import Callable, Dict


class IdGenerator:
    """Per-prefix sequential identifiers: ``next("c") -> "c1", "c2", ...``."""

    def __init__(self, start: int = 1):
        self._start = start
        self._counters: Dict[str, int] = defaultdict(lambda: start - 1)

    def next(self, prefix: str) -> str:
        self._counters[prefix] += 1
        return f"{prefix}{self._counters[prefix]}"

    def skip_past(self, prefix: str, value: int) -> None:
        # Seeded records carry fixed ids; keep generated ones from colliding
        if self._counters[prefix] < value:
            self._counters[prefix] = value


class ReceiptGenerator:
    """Short zero-padded receipt codes, unique within one process."""

    def __init__(self, start: int = 1, digits: int = 6):
        self._next = start
        self._digits = digits

    def next(self) -> str:
        value = self._next
        self._next += 1
        return str(value).zfill(self._digits)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


Clock = Callable[[], datetime]
