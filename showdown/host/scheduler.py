"""
Place Value Showdown - Timer Scheduler

Named, cancellable one-shot timers for a single-threaded host.
Nothing runs in the background: the host calls ``run_due`` from its own
event loop (a Streamlit rerun, a UI tick, a test) and due callbacks fire
synchronously, earliest first.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable

logger = logging.getLogger(__name__)


@dataclass(order=True)
class _Timer:
    due_at: float
    sequence: int
    name: str = field(compare=False)
    callback: Callable[[], None] = field(compare=False)


class TimerScheduler:
    """Cooperative scheduler of named one-shot timers.

    Scheduling a name that is already pending replaces the old timer.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._timers: dict[str, _Timer] = {}
        self._sequence = 0

    def schedule(self, name: str, delay: float, callback: Callable[[], None]) -> None:
        """Fire *callback* once, *delay* seconds from now.

        Args:
            name: Timer name; replaces any pending timer with the same name.
            delay: Seconds to wait (negative values fire on the next run).
            callback: Zero-argument callable.
        """
        if name in self._timers:
            logger.debug("Replacing pending timer %s", name)
        self._sequence += 1
        self._timers[name] = _Timer(
            due_at=self._clock() + max(delay, 0.0),
            sequence=self._sequence,
            name=name,
            callback=callback,
        )

    def cancel(self, name: str) -> bool:
        """Cancel a pending timer. Returns True if one was pending."""
        return self._timers.pop(name, None) is not None

    def cancel_all(self) -> None:
        """Drop every pending timer."""
        if self._timers:
            logger.debug("Cancelling %d pending timers", len(self._timers))
        self._timers.clear()

    def is_pending(self, name: str) -> bool:
        """Whether a timer with this name is waiting to fire."""
        return name in self._timers

    @property
    def pending(self) -> list[str]:
        """Names of pending timers, earliest first."""
        return [timer.name for timer in sorted(self._timers.values())]

    def next_delay(self) -> float | None:
        """Seconds until the next timer is due, or None if nothing is pending."""
        if not self._timers:
            return None
        due_at = min(self._timers.values()).due_at
        return max(due_at - self._clock(), 0.0)

    def run_due(self, now: float | None = None) -> int:
        """Fire every timer that is due, earliest first.

        Callbacks may schedule or cancel timers; newly scheduled timers that
        are already due fire in the same call.

        Args:
            now: Time to run against (defaults to the scheduler clock).

        Returns:
            Number of callbacks fired.
        """
        fired = 0
        while True:
            current = self._clock() if now is None else now
            due = [timer for timer in self._timers.values() if timer.due_at <= current]
            if not due:
                return fired

            timer = min(due)
            del self._timers[timer.name]
            try:
                timer.callback()
            except Exception:
                logger.exception("Timer %s failed", timer.name)
                raise
            fired += 1
