"""
Result card: heat input, k factor and power, with the save/analyse
actions and the advisory text underneath.
"""
from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QFrame, QGridLayout, QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget,
)

from weld_toolkit.core.models.results import format_heat_input, format_power_kw
from weld_toolkit.core.models.process import PROCESS_EFFICIENCY
from weld_toolkit.core.session import WeldSession
from weld_toolkit.gui.styles.theme import Colors, Fonts, Styles

NO_VALUE = "---"


class ResultCard(QFrame):
    saveRequested = Signal()
    analyzeRequested = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("card")

        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 16, 20, 16)

        title = QLabel("Heat Input")
        title.setStyleSheet(Styles.SECTION_TITLE)
        layout.addWidget(title)

        value_row = QHBoxLayout()
        self.heat_input_label = QLabel(NO_VALUE)
        self.heat_input_label.setStyleSheet(
            f"font-size: {Fonts.RESULT}; font-weight: {Fonts.WEIGHT_BOLD};"
        )
        value_row.addWidget(self.heat_input_label)
        unit = QLabel("kJ/mm")
        unit.setStyleSheet(f"color: {Colors.TEXT_SECONDARY};")
        value_row.addWidget(unit, alignment=Qt.AlignmentFlag.AlignBottom)
        value_row.addStretch()
        layout.addLayout(value_row)

        stats = QGridLayout()
        stats.addWidget(self._caption("k factor"), 0, 0)
        stats.addWidget(self._caption("Power"), 0, 1)
        self.k_label = QLabel()
        self.power_label = QLabel("- kW")
        stats.addWidget(self.k_label, 1, 0)
        stats.addWidget(self.power_label, 1, 1)
        layout.addLayout(stats)

        # Actions, shown only for a valid result
        self.actions = QWidget()
        actions_layout = QHBoxLayout(self.actions)
        actions_layout.setContentsMargins(0, 8, 0, 0)
        self.save_btn = QPushButton("Save pass")
        self.save_btn.setStyleSheet(Styles.BUTTON_SECONDARY)
        self.save_btn.clicked.connect(self.saveRequested.emit)
        actions_layout.addWidget(self.save_btn)
        self.analyze_btn = QPushButton("AI analysis")
        self.analyze_btn.setStyleSheet(Styles.BUTTON_SECONDARY)
        self.analyze_btn.clicked.connect(self.analyzeRequested.emit)
        actions_layout.addWidget(self.analyze_btn)
        layout.addWidget(self.actions)

        self.advisory_label = QLabel()
        self.advisory_label.setTextFormat(Qt.TextFormat.MarkdownText)
        self.advisory_label.setWordWrap(True)
        self.advisory_label.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        self.advisory_label.setStyleSheet(
            f"border: 1px solid {Colors.ADVISORY}; border-radius: 12px; padding: 12px;"
        )
        layout.addWidget(self.advisory_label)

        self.actions.setVisible(False)
        self.advisory_label.setVisible(False)

    @staticmethod
    def _caption(text: str) -> QLabel:
        label = QLabel(text)
        label.setObjectName("subtitle")
        return label

    def update_from(self, session: WeldSession):
        result = session.result
        self.k_label.setText(f"{PROCESS_EFFICIENCY[session.params.process]:g}")
        if result is None:
            self.heat_input_label.setText(NO_VALUE)
            self.power_label.setText("- kW")
        else:
            self.heat_input_label.setText(format_heat_input(result.heat_input))
            self.power_label.setText(f"{format_power_kw(result.power)} kW")

        self.actions.setVisible(session.can_commit)
        advisory = session.advisory
        self.advisory_label.setText(advisory or "")
        self.advisory_label.setVisible(bool(advisory) and session.can_commit)

    def set_analyzing(self, busy: bool):
        self.analyze_btn.setEnabled(not busy)
        self.analyze_btn.setText("Analysing..." if busy else "AI analysis")
