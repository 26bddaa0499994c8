"""Unit tests for export folder resolution."""

import sys
from pathlib import Path

from weld_toolkit.gui.utils import paths


class TestExportDir:
    def test_dev_mode_uses_workspace_reports(self, monkeypatch, tmp_path):
        monkeypatch.delattr(sys, "frozen", raising=False)
        monkeypatch.delattr(sys, "_MEIPASS", raising=False)
        monkeypatch.chdir(tmp_path)

        assert paths.is_frozen() is False
        assert paths.get_export_dir() == tmp_path / "workspace" / "reports"

    def test_frozen_mode_uses_documents(self, monkeypatch, tmp_path):
        monkeypatch.setattr(sys, "frozen", True, raising=False)
        monkeypatch.setattr(
            paths.QStandardPaths, "writableLocation", lambda location: str(tmp_path)
        )

        assert paths.is_frozen()
        assert paths.get_export_dir() == Path(tmp_path) / "Weld Toolkit" / "Reports"
