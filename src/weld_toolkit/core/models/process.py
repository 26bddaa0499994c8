"""
Module: core.models.process

Purpose:
    Welding process tags and their thermal efficiency factors (k) as given
    by EN 1011-1. The catalog is total over the enum and read-only.

Key Classes:
    - WeldingProcess: Enum of supported arc welding processes

Key Functions:
    - k_factor(process): Look up the thermal efficiency of a process

Used By:
    - core.calculator: Heat input calculation
    - core.models.passes: k factor snapshot on each pass
    - gui.widgets.parameters_panel: Process selector
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping


class WeldingProcess(Enum):
    """
    Arc welding processes, valued by their display label.

    The label carries the ISO 4063 process number and is what the
    form shows and what the CSV report writes in the Process column.

    Example:
        >>> WeldingProcess.GAS_METAL_ARC.label
        'MIG/MAG (131/135)'
        >>> WeldingProcess.from_label("TIG (141)")
        <WeldingProcess.TUNGSTEN_INERT_GAS: 'TIG (141)'>
    """

    MANUAL_ARC = "MMA (111)"
    GAS_METAL_ARC = "MIG/MAG (131/135)"
    TUNGSTEN_INERT_GAS = "TIG (141)"
    SUBMERGED_ARC = "SAW (121)"
    FLUX_CORED_ARC = "FCAW (136)"

    @property
    def label(self) -> str:
        return self.value

    @property
    def short_name(self) -> str:
        """Label without the process number, e.g. 'MIG/MAG'."""
        return self.value.split("(")[0].strip()

    @classmethod
    def from_label(cls, label: str) -> WeldingProcess:
        """
        Resolve a process from its display label.

        Raises:
            ValueError: If no process has this label
        """
        return cls(label)


DEFAULT_PROCESS = WeldingProcess.GAS_METAL_ARC

PROCESS_EFFICIENCY: Mapping[WeldingProcess, float] = MappingProxyType({
    WeldingProcess.MANUAL_ARC: 0.8,
    WeldingProcess.GAS_METAL_ARC: 0.8,
    WeldingProcess.TUNGSTEN_INERT_GAS: 0.6,
    WeldingProcess.SUBMERGED_ARC: 1.0,
    WeldingProcess.FLUX_CORED_ARC: 0.8,
})

_missing = set(WeldingProcess) - set(PROCESS_EFFICIENCY)
if _missing:
    raise RuntimeError(f"No efficiency factor for processes: {sorted(p.name for p in _missing)}")
del _missing


def k_factor(process: WeldingProcess) -> float:
    """Thermal efficiency factor k for a welding process."""
    return PROCESS_EFFICIENCY[process]
