"""Injectable time sources for latency measurement.

`performance_now` returns epoch milliseconds that never go backwards. Callers
that need deterministic timing (tests, reproducible CLI runs) pass their own
`Clock` instead of patching global state.

Clocks:
    WallClock: Wall time captured once, then advanced by time.monotonic()
    FixedClock: Always returns the same instant
    ManualClock: Starts at a given instant and moves only when advanced

Public Functions:
    performance_now: Read a clock (the shared default WallClock if none given)
    epoch_ms_to_dt: Convert epoch milliseconds to a timezone-aware UTC datetime

Design Invariant:
    All datetimes produced here are timezone-aware UTC. Naive datetimes are
    never returned.
"""
from __future__ import annotations

import time
from datetime import datetime, timezone
from typing import Optional, Protocol

__all__ = [
    "Clock",
    "WallClock",
    "FixedClock",
    "ManualClock",
    "performance_now",
    "epoch_ms_to_dt",
]


class Clock(Protocol):
    def now_ms(self) -> float:  # pragma: no cover - protocol
        ...


class WallClock:
    """Monotonic clock aligned with wall time at construction.

    Adjustments to the system clock after construction (NTP steps, manual
    changes) do not make readings decrease.
    """

    def __init__(self) -> None:
        self._anchor_ms = time.time() * 1000.0
        self._anchor_mono = time.monotonic()

    def now_ms(self) -> float:
        return self._anchor_ms + (time.monotonic() - self._anchor_mono) * 1000.0


class FixedClock:
    def __init__(self, at_ms: float) -> None:
        self._at_ms = float(at_ms)

    @classmethod
    def from_iso(cls, value: str) -> "FixedClock":
        """Build a clock frozen at an ISO-8601 instant.

        A trailing ``Z`` is accepted; naive values are interpreted as UTC.
        """
        dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return cls(dt.timestamp() * 1000.0)

    def now_ms(self) -> float:
        return self._at_ms


class ManualClock:
    def __init__(self, start_ms: float = 0.0) -> None:
        self._now_ms = float(start_ms)

    def advance(self, ms: float) -> None:
        """Move the clock forward by ``ms`` milliseconds (negative rejected)."""
        if ms < 0:
            raise ValueError("ManualClock cannot move backwards")
        self._now_ms += ms

    def now_ms(self) -> float:
        return self._now_ms


_default_clock = WallClock()


def performance_now(clock: Optional[Clock] = None) -> float:
    """Return the current time in epoch milliseconds.

    Args:
        clock: Time source to read. Defaults to a process-wide `WallClock`.
    """
    return (clock or _default_clock).now_ms()


def epoch_ms_to_dt(ms: float) -> datetime:
    """Convert epoch milliseconds to a timezone-aware UTC datetime."""
    return datetime.fromtimestamp(ms / 1000.0, tz=timezone.utc)
