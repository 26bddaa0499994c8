"""
Core Models Package

Data models shared by the calculator, ledger, exporter and GUI.

WeldingParams is the only mutable model: it is the form's working state.
CalculationResult and WeldingPass are frozen dataclasses, so a committed
pass can be handed around without copying.
"""

from .process import WeldingProcess, PROCESS_EFFICIENCY, k_factor
from .params import WeldingParams
from .results import CalculationResult
from .passes import WeldingPass

__all__ = [
    "WeldingProcess",
    "PROCESS_EFFICIENCY",
    "k_factor",
    "WeldingParams",
    "CalculationResult",
    "WeldingPass",
]
