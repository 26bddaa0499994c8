"""
Module: core.models.results

Purpose:
    Provides CalculationResult - the derived heat input, travel speed and
    power for a parameter set - plus the display formatters applied at
    presentation and export boundaries.

Key Functions:
    - format_fixed(value, places): fixed precision, ties away from zero
    - format_heat_input(value): 3 decimals
    - format_time(value): 1 decimal
    - format_power_kw(watts): kilowatts, 1 decimal
    - format_decimal_comma(value, places): fixed precision with ',' separator

Used By:
    - core.calculator
    - core.export.csv_report
    - gui.widgets.result_card
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal
from dataclasses import dataclass

# Wide enough for any finite float quantized to a few places
_FIXED_CONTEXT = Context(prec=400)


@dataclass(frozen=True, slots=True)
class CalculationResult:
    """
    Derived values for one parameter set (immutable).

    Never rounded: formatting happens only where values are shown or
    exported.

    Attributes:
        heat_input: Heat input in kJ/mm
        travel_speed: Travel speed in mm/s
        power: Arc power in watts
        is_valid: False when heat_input is NaN or infinite

    Example:
        >>> r = CalculationResult.from_values(0.128, 15.0, 2400.0)
        >>> r.is_valid
        True
    """

    heat_input: float
    travel_speed: float
    power: float
    is_valid: bool

    @classmethod
    def from_values(cls, heat_input: float, travel_speed: float, power: float) -> CalculationResult:
        """Build a result, deriving is_valid from heat_input."""
        return cls(
            heat_input=heat_input,
            travel_speed=travel_speed,
            power=power,
            is_valid=math.isfinite(heat_input),
        )

    @property
    def travel_speed_cm_per_min(self) -> float:
        return self.travel_speed * 60 / 10

    @property
    def power_kw(self) -> float:
        return self.power / 1000


# ─────────────────────────────────────────────────────────────────────────────
# Formatting
# ─────────────────────────────────────────────────────────────────────────────

def format_fixed(value: float, places: int) -> str:
    """
    Fixed precision, ties rounded away from zero.

    Rounds the exact binary value, so 10.25 gives '10.3' and 0.0625
    gives '0.063', where format(value, ".Nf") would round half to even.

    Example:
        >>> format_fixed(10.25, 1), format_fixed(0.0625, 3)
        ('10.3', '0.063')
    """
    if not math.isfinite(value):
        return f"{value:.{places}f}"
    quantum = Decimal(10) ** -places
    rounded = Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP, context=_FIXED_CONTEXT)
    return f"{rounded:f}"


def format_heat_input(value: float) -> str:
    return format_fixed(value, 3)


def format_time(value: float) -> str:
    return format_fixed(value, 1)


def format_power_kw(watts: float) -> str:
    return format_fixed(watts / 1000, 1)


def format_decimal_comma(value: float, places: int) -> str:
    """Fixed precision with a comma decimal separator, e.g. 0.128 -> '0,128'."""
    return format_fixed(value, places).replace(".", ",")


def format_plain_number(value: float) -> str:
    """
    Shortest representation of a number, without a trailing '.0'.

    Example:
        >>> format_plain_number(20.0), format_plain_number(0.8), format_plain_number(12.5)
        ('20', '0.8', '12.5')
    """
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return repr(number)
