"""
Module: core.stopwatch

Purpose:
    Arc-time stopwatch as a two-state machine (Idle, Running) with a
    manual-edit path while idle. Elapsed time accumulates from an explicit
    start reference; the host refresh loop only samples it.

Key Classes:
    - Stopwatch: Timing state machine with observer notification
    - StopwatchState: IDLE / RUNNING
    - StopwatchConfig: Display refresh cadence

Key Functions:
    - parse_time_text(text): Lenient, clamping parser for manual entries
    - format_elapsed(seconds): One-decimal display

Dependencies:
    - time (std)

Used By:
    - core.session.WeldSession: Writes params.time on every notification
    - gui.widgets.stopwatch_widget: QTimer-driven display
"""

from __future__ import annotations

import logging
import math
import re
import time
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, List, Optional

from .models.results import format_fixed

logger = logging.getLogger(__name__)

ElapsedObserver = Callable[[float], None]

# Leading decimal literal, the way a lenient number field reads "12.5 s"
_LEADING_NUMBER = re.compile(r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def parse_time_text(text: Optional[str]) -> float:
    """
    Parse a manually typed arc time.

    Accepts '.' or ',' as decimal separator and ignores trailing junk.
    Anything empty, non-numeric, negative or non-finite becomes 0.0.

    Example:
        >>> parse_time_text("12,5")
        12.5
        >>> parse_time_text("-5"), parse_time_text("abc"), parse_time_text("")
        (0.0, 0.0, 0.0)
    """
    if not text:
        return 0.0
    normalized = text.replace(",", ".", 1)
    match = _LEADING_NUMBER.match(normalized)
    if match is None:
        return 0.0
    value = float(match.group(0))
    if not math.isfinite(value) or value <= 0:
        return 0.0
    return value


def format_elapsed(seconds: float) -> str:
    return format_fixed(seconds, 1)


class StopwatchState(Enum):
    IDLE = auto()
    RUNNING = auto()


@dataclass(frozen=True)
class StopwatchConfig:
    """
    Display settings for the stopwatch.

    Attributes:
        refresh_interval_ms: Sampling cadence of the display loop
    """

    refresh_interval_ms: int = 16

    def __post_init__(self) -> None:
        if self.refresh_interval_ms <= 0:
            raise ValueError(f"refresh_interval_ms must be positive: {self.refresh_interval_ms}")


class Stopwatch:
    """
    Measures arc time.

    Idle: elapsed is the last committed value and may be edited.
    Running: elapsed = previous + (clock() - reference).

    Calls that are illegal in the current state (start while running,
    stop while idle, reset or edit while running) are ignored and return
    False. They never touch the reference instant.

    Observers are called synchronously with the new elapsed value after
    every state transition and every committed manual edit. Sampling
    while running does not notify.

    Example:
        >>> sw = Stopwatch(clock=lambda: 100.0)
        >>> sw.start()
        True
        >>> sw.start()
        False
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic, initial: float = 0.0) -> None:
        self._clock = clock
        self._state = StopwatchState.IDLE
        self._elapsed = max(0.0, float(initial))
        self._reference: Optional[float] = None
        self._edit_buffer: Optional[str] = None
        self._observers: List[ElapsedObserver] = []

    # ─────────────────────────────────────────────────────────────────────────
    # State
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def state(self) -> StopwatchState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state is StopwatchState.RUNNING

    @property
    def reference(self) -> Optional[float]:
        """Clock value captured by start(); None while idle."""
        return self._reference

    @property
    def elapsed(self) -> float:
        if self._reference is None:
            return self._elapsed
        return self._elapsed + max(0.0, self._clock() - self._reference)

    @property
    def edit_buffer(self) -> Optional[str]:
        """Pending manual entry, not yet committed."""
        return self._edit_buffer

    def sample(self) -> float:
        """Read elapsed time for one display frame. Never blocks or notifies."""
        return self.elapsed

    # ─────────────────────────────────────────────────────────────────────────
    # Transitions
    # ─────────────────────────────────────────────────────────────────────────

    def start(self) -> bool:
        if self.is_running:
            logger.debug("Stopwatch already running; start ignored")
            return False
        self._edit_buffer = None
        self._reference = self._clock()
        self._state = StopwatchState.RUNNING
        self._notify()
        return True

    def stop(self) -> bool:
        if not self.is_running:
            logger.debug("Stopwatch not running; stop ignored")
            return False
        self._elapsed = self.elapsed
        self._reference = None
        self._state = StopwatchState.IDLE
        self._notify()
        return True

    def reset(self) -> bool:
        if self.is_running:
            logger.debug("Stopwatch running; reset ignored")
            return False
        self._elapsed = 0.0
        self._edit_buffer = None
        self._notify()
        return True

    # ─────────────────────────────────────────────────────────────────────────
    # Manual edit (idle only)
    # ─────────────────────────────────────────────────────────────────────────

    def edit(self, text: str) -> bool:
        """Store a pending manual entry. Ignored while running."""
        if self.is_running:
            return False
        self._edit_buffer = text
        return True

    def commit_edit(self) -> bool:
        """Parse the pending entry (clamping bad input to 0) and apply it."""
        if self.is_running or self._edit_buffer is None:
            return False
        value = parse_time_text(self._edit_buffer)
        self._edit_buffer = None
        self._elapsed = value
        self._notify()
        return True

    def set_elapsed(self, seconds: float) -> bool:
        """
        Overwrite elapsed time while idle, e.g. when the owner resets it.

        Does not notify: the caller already knows the value.
        """
        if self.is_running:
            return False
        value = float(seconds)
        self._elapsed = value if math.isfinite(value) and value > 0 else 0.0
        self._edit_buffer = None
        return True

    # ─────────────────────────────────────────────────────────────────────────
    # Observers
    # ─────────────────────────────────────────────────────────────────────────

    def subscribe(self, observer: ElapsedObserver) -> None:
        if observer not in self._observers:
            self._observers.append(observer)

    def unsubscribe(self, observer: ElapsedObserver) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def _notify(self) -> None:
        value = self.elapsed
        for observer in list(self._observers):
            observer(value)
