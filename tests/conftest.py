import os
import pytest
import sys
from datetime import datetime
from pathlib import Path

# Widgets are created without a display in CI
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add src to sys.path so we can import weld_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from weld_toolkit.core.models import WeldingParams, WeldingProcess


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


# Common test fixtures
@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def reference_params():
    """MIG/MAG pass: 20 V, 120 A, 150 mm in 10 s -> 0.128 kJ/mm."""
    return WeldingParams(
        process=WeldingProcess.GAS_METAL_ARC,
        voltage=20,
        current=120,
        length=150,
        time=10,
        project_name="Bridge B12",
        welder_name="J. Martin",
        weld_name="W-07",
    )


@pytest.fixture
def fixed_timestamp():
    return datetime(2026, 3, 14, 9, 5, 42)
