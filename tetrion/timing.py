"""Game phases, lock-down bookkeeping and a simulated timer clock."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Optional

# Normal fall
NORMAL_FALL_LOOP = True
NORMAL_FALL_INITIAL_DELAY = -1.0

# Auto-repeat movement
AUTO_REPEAT_LOOP = True
AUTO_REPEAT_INITIAL_DELAY = 0.3
AUTO_REPEAT_INTERVAL = 0.05

# Soft drop
SOFT_DROP_LOOP = True
SOFT_DROP_INITIAL_DELAY = 0.0

# Lock down
LOCK_DOWN_LOOP = False
LOCK_DOWN_DELAY = 0.5

# Phase change
PHASE_CHANGE_LOOP = False
GENERATION_PHASE_DELAY = 0.2


class Phase(Enum):
    """The phases a turn of play passes through."""

    NONE = 0
    GENERATION = 1
    FALLING = 2
    LOCK = 3
    PATTERN = 4
    ITERATE = 5
    ANIMATE = 6
    ELIMINATE = 7
    COMPLETION = 8


_PHASE_NAMES = {
    Phase.NONE: "None",
    Phase.GENERATION: "Generation",
    Phase.FALLING: "Falling",
    Phase.LOCK: "Lock",
    Phase.PATTERN: "Pattern",
    Phase.ITERATE: "Iterate",
    Phase.ANIMATE: "Animate",
    Phase.ELIMINATE: "Elimate",
    Phase.COMPLETION: "Completion",
}


def phase_name(phase) -> str:
    """Return the display name of ``phase``; raise ValueError for an unknown phase."""
    try:
        return _PHASE_NAMES[Phase(phase)]
    except ValueError:
        raise ValueError(f"unknown phase: {phase!r}") from None


@dataclass
class ExtendedPlacement:
    """How many lock-down timer resets remain, and the lowest row reached so far."""

    MAX_TIMER_RESET_COUNT = 15

    timer_reset_count: int = field(default=MAX_TIMER_RESET_COUNT)
    lowest_row: int = 0

    def reset(self, row: int) -> None:
        """Start afresh with ``row`` as the lowest row and a full reset count."""
        self.lowest_row = row
        self.timer_reset_count = self.MAX_TIMER_RESET_COUNT


@dataclass(frozen=True)
class TimerHandle:
    """Identifies one timer set on a TimerManager."""

    id: int


@dataclass
class _Timer:
    callback: Callable[[], None]
    interval: float
    loop: bool
    next_fire: float


class TimerManager:
    """A clock that fires callbacks as simulated time is advanced."""

    def __init__(self) -> None:
        self._now = 0.0
        self._timers: Dict[TimerHandle, _Timer] = {}
        self._ids = itertools.count(1)

    @property
    def time(self) -> float:
        """Seconds of simulated time elapsed so far."""
        return self._now

    def set_timer(
        self,
        callback: Callable[[], None],
        interval: float,
        loop: bool = False,
        first_delay: float = -1.0,
    ) -> TimerHandle:
        """Schedule ``callback`` and return its handle.

        A negative ``first_delay`` waits one ``interval`` before the first call.
        A non-positive ``interval`` schedules nothing; the handle is then inactive.
        """
        handle = TimerHandle(next(self._ids))
        if interval <= 0:
            return handle
        delay = first_delay if first_delay >= 0 else interval
        self._timers[handle] = _Timer(callback, float(interval), bool(loop), self._now + delay)
        return handle

    def clear(self, handle: Optional[TimerHandle]) -> None:
        """Cancel the timer behind ``handle``, if it is still set."""
        if handle is not None:
            self._timers.pop(handle, None)

    def is_active(self, handle: Optional[TimerHandle]) -> bool:
        """Return True if ``handle`` names a timer that will still fire."""
        return handle is not None and handle in self._timers

    def advance(self, seconds: float) -> None:
        """Move the clock forward, firing every timer that falls due, in time order."""
        if seconds < 0:
            raise ValueError("cannot advance the clock backwards")
        target = self._now + seconds
        while True:
            due = [
                (timer.next_fire, handle.id, handle)
                for handle, timer in self._timers.items()
                if timer.next_fire <= target
            ]
            if not due:
                break
            fire_at, _, handle = min(due)
            timer = self._timers[handle]
            self._now = max(self._now, fire_at)
            if timer.loop:
                timer.next_fire = fire_at + timer.interval
            else:
                del self._timers[handle]
            timer.callback()
        self._now = target