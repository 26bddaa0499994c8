"""
Parameter form: traceability fields and electrical/geometric inputs.

Each field writes straight into the session through its named setter;
the session recomputes the result on every edit.
"""
from PySide6.QtWidgets import (
    QComboBox, QDoubleSpinBox, QFormLayout, QFrame, QGridLayout, QLabel, QLineEdit, QVBoxLayout,
)

from weld_toolkit.core.models.process import WeldingProcess
from weld_toolkit.core.session import WeldSession
from weld_toolkit.gui.styles.theme import Styles

# Upper bounds keep spin boxes usable; no real arc gets near them
MAX_VOLTAGE = 1000.0
MAX_CURRENT = 5000.0
MAX_LENGTH = 100000.0


def _quantity_box(maximum: float, suffix: str, decimals: int = 1) -> QDoubleSpinBox:
    box = QDoubleSpinBox()
    box.setRange(0.0, maximum)
    box.setDecimals(decimals)
    box.setSuffix(f" {suffix}")
    box.setSpecialValueText("0")
    box.setKeyboardTracking(True)
    return box


class TraceabilityPanel(QFrame):
    """Project, welder and weld reference."""

    def __init__(self, session: WeldSession, parent=None):
        super().__init__(parent)
        self.setObjectName("card")
        self.session = session

        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 16, 20, 16)
        title = QLabel("Traceability")
        title.setStyleSheet(Styles.SECTION_TITLE)
        layout.addWidget(title)

        self.project_edit = QLineEdit()
        self.project_edit.setPlaceholderText("Project name")
        self.project_edit.textChanged.connect(self.session.set_project_name)
        layout.addWidget(self.project_edit)

        row = QGridLayout()
        self.welder_edit = QLineEdit()
        self.welder_edit.setPlaceholderText("Welder")
        self.welder_edit.textChanged.connect(self.session.set_welder_name)
        row.addWidget(self.welder_edit, 0, 0)

        self.weld_edit = QLineEdit()
        self.weld_edit.setPlaceholderText("Weld ref.")
        self.weld_edit.textChanged.connect(self.session.set_weld_name)
        row.addWidget(self.weld_edit, 0, 1)
        layout.addLayout(row)


class ParametersPanel(QFrame):
    """Process selector, current, voltage and weld length."""

    def __init__(self, session: WeldSession, parent=None):
        super().__init__(parent)
        self.setObjectName("card")
        self.session = session

        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 16, 20, 16)
        title = QLabel("Parameters")
        title.setStyleSheet(Styles.SECTION_TITLE)
        layout.addWidget(title)

        form = QFormLayout()

        self._processes = list(WeldingProcess)
        self.process_combo = QComboBox()
        for process in self._processes:
            self.process_combo.addItem(process.label)
        self.process_combo.setCurrentIndex(self._processes.index(self.session.params.process))
        self.process_combo.currentIndexChanged.connect(self._on_process_changed)
        form.addRow("Welding process", self.process_combo)

        self.current_box = _quantity_box(MAX_CURRENT, "A")
        self.current_box.valueChanged.connect(self.session.set_current)
        form.addRow("Current (A)", self.current_box)

        self.voltage_box = _quantity_box(MAX_VOLTAGE, "V")
        self.voltage_box.valueChanged.connect(self.session.set_voltage)
        form.addRow("Voltage (V)", self.voltage_box)

        self.length_box = _quantity_box(MAX_LENGTH, "mm")
        self.length_box.valueChanged.connect(self.session.set_length)
        form.addRow("Weld length (mm)", self.length_box)

        layout.addLayout(form)

        hint = QLabel("Measure the bead length after stopping the stopwatch.")
        hint.setObjectName("hint")
        hint.setWordWrap(True)
        layout.addWidget(hint)

    def _on_process_changed(self, index: int):
        if 0 <= index < len(self._processes):
            self.session.set_process(self._processes[index])
