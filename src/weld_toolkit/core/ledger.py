"""
Module: core.ledger

Purpose:
    Session history of committed weld passes, newest first.

Key Classes:
    - PassLedger: Ordered collection with unique ids

Used By:
    - core.session.WeldSession
    - core.export.csv_report (via list())
"""

from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Tuple

from .models.params import WeldingParams
from .models.passes import WeldingPass
from .models.results import CalculationResult

logger = logging.getLogger(__name__)


class PassLedger:
    """
    Ordered record of passes committed during a session.

    Order is commit order, newest first; nothing re-sorts it.

    Invariants:
        - No two entries share an id
        - Entries are immutable WeldingPass snapshots

    Example:
        >>> ledger = PassLedger()
        >>> ledger.commit(params, result)   # valid result -> WeldingPass
        >>> len(ledger)
        1
    """

    def __init__(self) -> None:
        self._passes: List[WeldingPass] = []

    def commit(
        self,
        params: WeldingParams,
        result: Optional[CalculationResult],
    ) -> Optional[WeldingPass]:
        """
        Record the current calculation as a new pass.

        Args:
            params: Parameters that produced the result
            result: Current result, or None if not computable

        Returns:
            The new pass, or None if the result is absent or invalid
        """
        if result is None or not result.is_valid:
            logger.debug("Pass not recorded: no valid calculation")
            return None
        welding_pass = WeldingPass.from_calculation(params, result)
        self.add(welding_pass)
        return welding_pass

    def add(self, welding_pass: WeldingPass) -> None:
        """
        Prepend an existing pass.

        Raises:
            ValueError: If a pass with the same id is already recorded
        """
        if welding_pass.id in self:
            raise ValueError(f"Duplicate pass id: {welding_pass.id}")
        self._passes.insert(0, welding_pass)
        logger.info(
            f"Recorded pass {welding_pass.display_name(len(self._passes))}: "
            f"{welding_pass.heat_input:.3f} kJ/mm ({welding_pass.process.short_name})"
        )

    def remove(self, pass_id: str) -> bool:
        """Delete a pass by id. Returns False if no such pass (no-op)."""
        for index, welding_pass in enumerate(self._passes):
            if welding_pass.id == pass_id:
                del self._passes[index]
                logger.info(f"Removed pass {pass_id}")
                return True
        return False

    def get(self, pass_id: str) -> Optional[WeldingPass]:
        for welding_pass in self._passes:
            if welding_pass.id == pass_id:
                return welding_pass
        return None

    def list(self) -> Tuple[WeldingPass, ...]:
        """Snapshot of all passes, newest first."""
        return tuple(self._passes)

    def clear(self) -> None:
        self._passes.clear()

    def __len__(self) -> int:
        return len(self._passes)

    def __iter__(self) -> Iterator[WeldingPass]:
        return iter(self.list())

    def __contains__(self, pass_id: object) -> bool:
        return any(p.id == pass_id for p in self._passes)
