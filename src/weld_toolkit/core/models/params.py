"""
Module: core.models.params

Purpose:
    Provides WeldingParams - the live, editable parameter set of a session.
    One named setter per field, validated at the setter boundary.

Key Classes:
    - WeldingParams: Mutable working state owned by the session

Dependencies:
    - dataclasses (std)
    - math (std)
    - .process.WeldingProcess

Used By:
    - core.calculator: Input to calculate()
    - core.session.WeldSession: Owner of the live instance
    - core.models.passes.WeldingPass: Copied into each pass
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Optional

from .process import DEFAULT_PROCESS, WeldingProcess


def _require_quantity(name: str, value: float) -> float:
    """Validate a physical quantity: finite and non-negative."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be a number: {value!r}") from None
    if not math.isfinite(number):
        raise ValueError(f"{name} must be finite: {value!r}")
    if number < 0:
        raise ValueError(f"{name} cannot be negative: {value!r}")
    # -0.0 compares equal to 0 but would print as "-0.0"
    return number if number else 0.0


@dataclass
class WeldingParams:
    """
    Arc parameters and traceability fields for the pass being welded.

    Mutable on purpose: the form overwrites it in place as the operator
    edits fields. Anything that must outlive an edit (a committed pass)
    takes a snapshot() first.

    Attributes:
        process: Welding process (selects k)
        voltage: Arc voltage in volts
        current: Welding current in amps
        length: Weld length in millimetres
        time: Arc time in seconds
        project_name: Free text
        welder_name: Free text
        weld_name: Free text weld reference

    Invariants:
        - voltage, current, length, time are finite and >= 0
          (enforced by the setters)
    """

    process: WeldingProcess = DEFAULT_PROCESS
    voltage: float = 0.0
    current: float = 0.0
    length: float = 0.0
    time: float = 0.0
    project_name: str = ""
    welder_name: str = ""
    weld_name: str = ""

    # ─────────────────────────────────────────────────────────────────────────
    # Setters
    # ─────────────────────────────────────────────────────────────────────────

    def set_process(self, process: WeldingProcess) -> None:
        if not isinstance(process, WeldingProcess):
            raise ValueError(f"Unknown welding process: {process!r}")
        self.process = process

    def set_voltage(self, volts: float) -> None:
        self.voltage = _require_quantity("voltage", volts)

    def set_current(self, amps: float) -> None:
        self.current = _require_quantity("current", amps)

    def set_length(self, millimetres: float) -> None:
        self.length = _require_quantity("length", millimetres)

    def set_time(self, seconds: float) -> None:
        self.time = _require_quantity("time", seconds)

    def set_project_name(self, name: Optional[str]) -> None:
        self.project_name = name or ""

    def set_welder_name(self, name: Optional[str]) -> None:
        self.welder_name = name or ""

    def set_weld_name(self, name: Optional[str]) -> None:
        self.weld_name = name or ""

    def snapshot(self) -> WeldingParams:
        """Independent copy; later edits to self do not show through."""
        return replace(self)
