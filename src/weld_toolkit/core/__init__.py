"""
Weld Toolkit Core Package

Domain logic with no GUI dependency: process catalog, stopwatch,
heat-input calculation, pass ledger and CSV report. The GUI only
presents what this package computes.
"""

from .models import CalculationResult, WeldingParams, WeldingPass, WeldingProcess
from .calculator import calculate
from .ledger import PassLedger
from .session import WeldSession
from .stopwatch import Stopwatch, StopwatchState

__all__ = [
    "CalculationResult",
    "WeldingParams",
    "WeldingPass",
    "WeldingProcess",
    "calculate",
    "PassLedger",
    "WeldSession",
    "Stopwatch",
    "StopwatchState",
]
