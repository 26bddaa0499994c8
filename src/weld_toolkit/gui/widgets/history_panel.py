"""
Pass history: one row per committed pass, newest first, with delete
buttons and the CSV export action.
"""
from typing import Sequence

from PySide6.QtCore import Signal
from PySide6.QtWidgets import (
    QFrame, QGridLayout, QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget,
)

from weld_toolkit.core.models.passes import WeldingPass
from weld_toolkit.core.models.results import format_heat_input, format_time
from weld_toolkit.gui.styles.theme import Colors, Styles


class PassRow(QFrame):
    """Summary of a single pass."""

    deleteRequested = Signal(str)

    def __init__(self, welding_pass: WeldingPass, ordinal: int, parent=None):
        super().__init__(parent)
        self.pass_id = welding_pass.id
        self.setStyleSheet(
            f"QFrame {{ background-color: {Colors.SURFACE_ALT}; border-radius: 12px; }}"
        )

        layout = QVBoxLayout(self)

        header = QHBoxLayout()
        heading = QLabel(
            f"{welding_pass.display_name(ordinal)}  "
            f"{welding_pass.timestamp:%d/%m - %H:%M}"
        )
        heading.setObjectName("subtitle")
        header.addWidget(heading)
        header.addStretch()
        energy = QLabel(f"{format_heat_input(welding_pass.heat_input)} kJ/mm")
        energy.setStyleSheet(f"color: {Colors.ACCENT}; font-weight: 700;")
        header.addWidget(energy)
        layout.addLayout(header)

        details = [welding_pass.process.short_name, f"k = {welding_pass.k_factor:g}"]
        if welding_pass.project_name:
            details.append(f"Project: {welding_pass.project_name}")
        if welding_pass.welder_name:
            details.append(f"Welder: {welding_pass.welder_name}")
        layout.addWidget(QLabel("  ·  ".join(details)))

        grid = QGridLayout()
        for column, (caption, value) in enumerate([
            ("I (A)", f"{welding_pass.current:g}"),
            ("U (V)", f"{welding_pass.voltage:g}"),
            ("L (mm)", f"{welding_pass.length:g}"),
            ("t (s)", format_time(welding_pass.time)),
        ]):
            caption_label = QLabel(caption)
            caption_label.setObjectName("subtitle")
            grid.addWidget(caption_label, 0, column)
            grid.addWidget(QLabel(value), 1, column)
        layout.addLayout(grid)

        self.delete_btn = QPushButton("Delete")
        self.delete_btn.setStyleSheet(Styles.BUTTON_DANGER_SMALL)
        self.delete_btn.clicked.connect(lambda: self.deleteRequested.emit(self.pass_id))
        footer = QHBoxLayout()
        footer.addStretch()
        footer.addWidget(self.delete_btn)
        layout.addLayout(footer)


class HistoryPanel(QFrame):
    """Session history card; hidden while no pass is recorded."""

    deleteRequested = Signal(str)
    exportRequested = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("card")
        self.rows: list[PassRow] = []
        self._ids: tuple = ()

        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 16, 20, 16)

        header = QHBoxLayout()
        self.title = QLabel("History (0)")
        self.title.setStyleSheet(Styles.SECTION_TITLE)
        header.addWidget(self.title)
        header.addStretch()
        self.export_btn = QPushButton("Export CSV")
        self.export_btn.setStyleSheet(Styles.BUTTON_SECONDARY)
        self.export_btn.clicked.connect(self.exportRequested.emit)
        header.addWidget(self.export_btn)
        layout.addLayout(header)

        self.rows_container = QWidget()
        self.rows_layout = QVBoxLayout(self.rows_container)
        self.rows_layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.rows_container)

        self.setVisible(False)

    def set_passes(self, passes: Sequence[WeldingPass]):
        ids = tuple(p.id for p in passes)
        if ids == self._ids:
            return
        self._ids = ids

        for row in self.rows:
            self.rows_layout.removeWidget(row)
            row.deleteLater()
        self.rows = []

        total = len(passes)
        for index, welding_pass in enumerate(passes):
            row = PassRow(welding_pass, ordinal=total - index)
            row.deleteRequested.connect(self.deleteRequested.emit)
            self.rows_layout.addWidget(row)
            self.rows.append(row)

        self.title.setText(f"History ({total})")
        self.setVisible(total > 0)
