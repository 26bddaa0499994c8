"""
Path utilities for handling dev vs production (frozen) file locations.

Dev mode: Uses local workspace/ directory
Frozen mode: Uses the user's Documents folder
"""
from __future__ import annotations

import sys
from pathlib import Path

from PySide6.QtCore import QStandardPaths

APP_NAME = "Weld Toolkit"


def is_frozen() -> bool:
    """Check if running as a frozen (PyInstaller) application."""
    return getattr(sys, 'frozen', False) or hasattr(sys, '_MEIPASS')


def get_export_dir() -> Path:
    """
    Get the default folder for exported CSV reports.

    Frozen: ~/Documents/Weld Toolkit/Reports
    Dev: workspace/reports
    """
    if is_frozen():
        docs = Path(QStandardPaths.writableLocation(
            QStandardPaths.StandardLocation.DocumentsLocation
        ))
        return docs / APP_NAME / "Reports"
    return Path.cwd() / "workspace" / "reports"
