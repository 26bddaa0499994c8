"""
Unit Tests for the Process Catalog

Tests for WeldingProcess labels and EN 1011-1 efficiency factors.
"""

import pytest

from weld_toolkit.core.models.process import (
    DEFAULT_PROCESS,
    PROCESS_EFFICIENCY,
    WeldingProcess,
    k_factor,
)


class TestProcessCatalog:
    """Tests for the k factor table."""

    @pytest.mark.parametrize(
        "process, expected",
        [
            (WeldingProcess.MANUAL_ARC, 0.8),
            (WeldingProcess.GAS_METAL_ARC, 0.8),
            (WeldingProcess.TUNGSTEN_INERT_GAS, 0.6),
            (WeldingProcess.SUBMERGED_ARC, 1.0),
            (WeldingProcess.FLUX_CORED_ARC, 0.8),
        ],
    )
    def test_k_factor_when_looked_up_then_matches_standard(self, process, expected):
        assert k_factor(process) == expected

    def test_catalog_when_checked_then_covers_every_process(self):
        assert set(PROCESS_EFFICIENCY) == set(WeldingProcess)

    def test_catalog_when_mutated_then_raises(self):
        """The catalog is read-only at runtime."""
        with pytest.raises(TypeError):
            PROCESS_EFFICIENCY[WeldingProcess.TUNGSTEN_INERT_GAS] = 0.9  # type: ignore[index]

    def test_default_process_is_gas_metal_arc(self):
        assert DEFAULT_PROCESS is WeldingProcess.GAS_METAL_ARC


class TestWeldingProcess:
    """Tests for labels."""

    def test_label_when_gas_metal_arc_then_includes_process_numbers(self):
        assert WeldingProcess.GAS_METAL_ARC.label == "MIG/MAG (131/135)"

    def test_short_name_when_called_then_drops_process_number(self):
        assert WeldingProcess.TUNGSTEN_INERT_GAS.short_name == "TIG"

    def test_from_label_when_known_then_returns_member(self):
        assert WeldingProcess.from_label("SAW (121)") is WeldingProcess.SUBMERGED_ARC

    def test_from_label_when_unknown_then_raises(self):
        with pytest.raises(ValueError):
            WeldingProcess.from_label("Laser (52)")
