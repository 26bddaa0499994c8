"""Top-level package for the Weld Toolkit.

Provides subpackages:
- weld_toolkit.core: process catalog, stopwatch, heat-input calculation, pass ledger, CSV report
- weld_toolkit.advisory: optional LLM commentary on the current parameters
- weld_toolkit.gui: PySide6 GUI app
"""
from importlib.metadata import PackageNotFoundError, version as _pkg_version

try:
    __version__ = _pkg_version("weld-toolkit")
except PackageNotFoundError:
    # Running from a source checkout without `pip install -e .`
    __version__ = "0.0.0"

__all__: list[str] = ["__version__"]
