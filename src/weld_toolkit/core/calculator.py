"""
Module: core.calculator

Purpose:
    Heat input calculation per EN 1011-1:

        Q = k * U * I * t / (L * 1000)      [kJ/mm]

    with U in volts, I in amps, t in seconds and L in millimetres.

Key Functions:
    - calculate(params): CalculationResult, or None when not yet computable

Used By:
    - core.session.WeldSession: Recomputed on every parameter change
"""

from __future__ import annotations

from typing import Optional

from .models.params import WeldingParams
from .models.process import k_factor
from .models.results import CalculationResult


def calculate(params: WeldingParams) -> Optional[CalculationResult]:
    """
    Derive heat input, travel speed and power from a parameter set.

    Pure function. Returns None (not zero, not an error) while time or
    length is not positive, i.e. before the operator has measured both.

    Args:
        params: Current welding parameters

    Returns:
        CalculationResult, or None if time <= 0 or length <= 0

    Example:
        >>> p = WeldingParams(voltage=20, current=120, length=150, time=10)
        >>> round(calculate(p).heat_input, 6)
        0.128
    """
    if not (params.time > 0 and params.length > 0):
        return None

    k = k_factor(params.process)
    power = params.voltage * params.current
    travel_speed = params.length / params.time
    heat_input = (k * params.voltage * params.current * params.time) / (params.length * 1000)

    return CalculationResult.from_values(
        heat_input=heat_input,
        travel_speed=travel_speed,
        power=power,
    )
