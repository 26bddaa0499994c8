"""
Module: core.models.passes

Purpose:
    Provides WeldingPass - the immutable record of one committed weld pass.

Key Functions:
    - WeldingPass.from_calculation(params, result): Snapshot a valid result

Dependencies:
    - dataclasses (std)
    - datetime (std)
    - uuid (std)

Used By:
    - core.ledger.PassLedger
    - core.export.csv_report
    - gui.widgets.history_panel
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Optional

from .params import WeldingParams
from .process import WeldingProcess, k_factor
from .results import CalculationResult


def new_pass_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class WeldingPass:
    """
    One recorded weld bead: parameters, derived energy and traceability.

    Values are copied at commit time, so later edits to the live
    WeldingParams never reach an existing pass.

    Attributes:
        process: Welding process used
        current: Amps
        voltage: Volts
        length: Millimetres
        time: Arc time in seconds
        heat_input: kJ/mm
        k_factor: Thermal efficiency applied
        project_name: Free text
        welder_name: Free text
        weld_name: Free text weld reference
        id: Unique identifier (uuid4 hex)
        timestamp: Local time of creation
    """

    process: WeldingProcess
    current: float
    voltage: float
    length: float
    time: float
    heat_input: float
    k_factor: float
    project_name: str = ""
    welder_name: str = ""
    weld_name: str = ""
    id: str = field(default_factory=new_pass_id)
    timestamp: datetime = field(default_factory=datetime.now)

    @classmethod
    def from_calculation(
        cls,
        params: WeldingParams,
        result: CalculationResult,
        *,
        now: Optional[Callable[[], datetime]] = None,
    ) -> WeldingPass:
        """
        Snapshot params and their valid result into a new pass.

        Args:
            params: Parameters that produced the result
            result: A valid calculation result
            now: Optional clock for the timestamp (tests)

        Raises:
            ValueError: If the result is not valid
        """
        if not result.is_valid:
            raise ValueError("Cannot record a pass from an invalid calculation")
        timestamp = (now or datetime.now)()
        return cls(
            process=params.process,
            current=params.current,
            voltage=params.voltage,
            length=params.length,
            time=params.time,
            heat_input=result.heat_input,
            k_factor=k_factor(params.process),
            project_name=params.project_name,
            welder_name=params.welder_name,
            weld_name=params.weld_name,
            timestamp=timestamp,
        )

    def display_name(self, ordinal: int) -> str:
        """History heading: the weld ref when set, otherwise 'Pass #n'."""
        if self.weld_name:
            return f"Ref: {self.weld_name}"
        return f"Pass #{ordinal}"
