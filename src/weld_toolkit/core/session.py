"""
Module: core.session

Purpose:
    The interactive session: owns the live WeldingParams, the stopwatch,
    the pass ledger and the current advisory text, and keeps the
    calculation in step with every edit.

Key Classes:
    - WeldSession: Single owner of all mutable session state

Used By:
    - gui.main_window: One session per window
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from .calculator import calculate
from .export.csv_report import write_report
from .ledger import PassLedger
from .models.params import WeldingParams
from .models.passes import WeldingPass
from .models.process import WeldingProcess, k_factor
from .models.results import CalculationResult
from .stopwatch import Stopwatch

logger = logging.getLogger(__name__)

SessionObserver = Callable[["WeldSession"], None]


class WeldSession:
    """
    Working state for one operator session.

    Every setter recomputes the result immediately, so `result` always
    reflects the latest params. The advisory text belongs to the result
    it was computed from and is dropped as soon as the result changes.

    Example:
        >>> session = WeldSession()
        >>> session.set_voltage(20); session.set_current(120)
        >>> session.set_length(150); session.set_time(10)
        >>> round(session.result.heat_input, 3)
        0.128
        >>> session.commit_pass() is not None
        True
    """

    def __init__(
        self,
        stopwatch: Optional[Stopwatch] = None,
        ledger: Optional[PassLedger] = None,
    ) -> None:
        self._params = WeldingParams()
        self._result: Optional[CalculationResult] = None
        self._advisory: Optional[str] = None
        self._advisory_result: Optional[CalculationResult] = None
        self._observers: List[SessionObserver] = []

        self.ledger = ledger or PassLedger()
        self.stopwatch = stopwatch or Stopwatch()
        self.stopwatch.subscribe(self._on_stopwatch)
        self._params.set_time(self.stopwatch.elapsed)
        self._recalculate()

    # ─────────────────────────────────────────────────────────────────────────
    # Read access
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def params(self) -> WeldingParams:
        """Copy of the current params; edit through the setters."""
        return self._params.snapshot()

    @property
    def result(self) -> Optional[CalculationResult]:
        return self._result

    @property
    def k_factor(self) -> float:
        return k_factor(self._params.process)

    @property
    def can_commit(self) -> bool:
        return self._result is not None and self._result.is_valid

    @property
    def advisory(self) -> Optional[str]:
        return self._advisory

    @property
    def passes(self) -> Tuple[WeldingPass, ...]:
        return self.ledger.list()

    # ─────────────────────────────────────────────────────────────────────────
    # Setters
    # ─────────────────────────────────────────────────────────────────────────

    def set_process(self, process: WeldingProcess) -> None:
        self._params.set_process(process)
        self._changed()

    def set_voltage(self, volts: float) -> None:
        self._params.set_voltage(volts)
        self._changed()

    def set_current(self, amps: float) -> None:
        self._params.set_current(amps)
        self._changed()

    def set_length(self, millimetres: float) -> None:
        self._params.set_length(millimetres)
        self._changed()

    def set_time(self, seconds: float) -> bool:
        """
        Set arc time directly and sync the idle stopwatch to it.

        Ignored while the stopwatch runs: it owns the time until stopped.
        """
        if self.stopwatch.is_running:
            logger.debug("Stopwatch running; manual time ignored")
            return False
        self._params.set_time(seconds)
        self.stopwatch.set_elapsed(self._params.time)
        self._changed()
        return True

    def set_project_name(self, name: str) -> None:
        self._params.set_project_name(name)
        self._changed()

    def set_welder_name(self, name: str) -> None:
        self._params.set_welder_name(name)
        self._changed()

    def set_weld_name(self, name: str) -> None:
        self._params.set_weld_name(name)
        self._changed()

    # ─────────────────────────────────────────────────────────────────────────
    # Ledger
    # ─────────────────────────────────────────────────────────────────────────

    def commit_pass(self) -> Optional[WeldingPass]:
        """Record the current params and result together as one pass."""
        welding_pass = self.ledger.commit(self._params.snapshot(), self._result)
        if welding_pass is not None:
            self._notify()
        return welding_pass

    def remove_pass(self, pass_id: str) -> bool:
        removed = self.ledger.remove(pass_id)
        if removed:
            self._notify()
        return removed

    def export_report(self, directory: Path) -> Optional[Path]:
        """Write the CSV report; None when there is nothing to export."""
        return write_report(self.ledger.list(), directory)

    # ─────────────────────────────────────────────────────────────────────────
    # Advisory
    # ─────────────────────────────────────────────────────────────────────────

    def set_advisory(self, text: str, for_result: Optional[CalculationResult]) -> bool:
        """
        Attach advisory text computed for a given result.

        Ignored if the result has changed since the request was made.
        """
        if for_result is None or for_result != self._result:
            logger.info("Discarding advisory for an outdated calculation")
            return False
        self._advisory = text
        self._advisory_result = for_result
        self._notify()
        return True

    def clear_advisory(self) -> None:
        self._advisory = None
        self._advisory_result = None

    # ─────────────────────────────────────────────────────────────────────────
    # Observers
    # ─────────────────────────────────────────────────────────────────────────

    def subscribe(self, observer: SessionObserver) -> None:
        if observer not in self._observers:
            self._observers.append(observer)

    def unsubscribe(self, observer: SessionObserver) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    # ─────────────────────────────────────────────────────────────────────────
    # Internals
    # ─────────────────────────────────────────────────────────────────────────

    def _on_stopwatch(self, elapsed: float) -> None:
        self._params.set_time(elapsed)
        self._changed()

    def _recalculate(self) -> None:
        self._result = calculate(self._params)
        if self._advisory_result is not None and self._advisory_result != self._result:
            self.clear_advisory()

    def _changed(self) -> None:
        self._recalculate()
        self._notify()

    def _notify(self) -> None:
        for observer in list(self._observers):
            observer(self)
