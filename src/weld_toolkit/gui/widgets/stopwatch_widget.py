"""
Stopwatch widget: big elapsed-time display with start/stop and reset.

The display is refreshed by a QTimer on the Qt event loop, so sampling
never blocks; stopping the stopwatch stops the timer.
"""
from typing import Optional

from PySide6.QtCore import Qt, QTimer, Signal
from PySide6.QtWidgets import (
    QFrame, QHBoxLayout, QLabel, QLineEdit, QPushButton, QStackedWidget, QVBoxLayout,
)

from weld_toolkit.core.stopwatch import Stopwatch, StopwatchConfig, format_elapsed
from weld_toolkit.gui.styles.theme import Colors, Fonts, Styles


class StopwatchWidget(QFrame):
    """
    Arc-time stopwatch card.

    While idle the value is an editable field (comma or dot decimals);
    while running it is a read-only label sampled every frame.
    """

    runningChanged = Signal(bool)

    def __init__(self, stopwatch: Stopwatch, config: Optional[StopwatchConfig] = None, parent=None):
        super().__init__(parent)
        self.setObjectName("card")
        self.stopwatch = stopwatch
        self.config = config or StopwatchConfig()

        self._timer = QTimer(self)
        self._timer.setInterval(self.config.refresh_interval_ms)
        self._timer.timeout.connect(self._on_frame)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(12)

        title = QLabel("Weld Stopwatch")
        title.setStyleSheet(Styles.SECTION_TITLE)
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(title)

        # Display: label while running, editor while idle
        display_style = f"font-family: {Fonts.MONO_FONT}; font-size: {Fonts.DISPLAY}; font-weight: {Fonts.WEIGHT_BOLD};"
        self.display = QStackedWidget()

        self.editor = QLineEdit(format_elapsed(self.stopwatch.elapsed))
        self.editor.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.editor.setPlaceholderText("0.0")
        self.editor.setToolTip("Tap the time to correct it")
        self.editor.setStyleSheet(f"QLineEdit {{ {display_style} border: none; background: transparent; }}")
        self.editor.textEdited.connect(self.stopwatch.edit)
        self.editor.editingFinished.connect(self._commit_edit)
        self.display.addWidget(self.editor)

        self.live_label = QLabel(format_elapsed(self.stopwatch.elapsed))
        self.live_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.live_label.setStyleSheet(f"{display_style} color: {Colors.ACCENT};")
        self.display.addWidget(self.live_label)

        display_row = QHBoxLayout()
        display_row.addWidget(self.display, 1)
        unit = QLabel("s")
        unit.setStyleSheet(f"color: {Colors.TEXT_SECONDARY}; font-size: 20pt;")
        display_row.addWidget(unit)
        layout.addLayout(display_row)

        controls = QHBoxLayout()
        self.reset_btn = QPushButton("Reset")
        self.reset_btn.setStyleSheet(Styles.BUTTON_SECONDARY)
        self.reset_btn.clicked.connect(self.reset)
        controls.addWidget(self.reset_btn)

        self.toggle_btn = QPushButton()
        self.toggle_btn.setMinimumHeight(48)
        self.toggle_btn.clicked.connect(self.toggle)
        controls.addWidget(self.toggle_btn, 1)
        layout.addLayout(controls)

        self.stopwatch.subscribe(self._on_elapsed)
        self._update_controls()

    # ─────────────────────────────────────────────────────────────────────────
    # Actions
    # ─────────────────────────────────────────────────────────────────────────

    def toggle(self):
        if self.stopwatch.is_running:
            self.stop()
        else:
            self.start()

    def start(self):
        if self.stopwatch.start():
            self._timer.start()
            self._update_controls()
            self.runningChanged.emit(True)

    def stop(self):
        self._timer.stop()
        if self.stopwatch.stop():
            self._update_controls()
            self.runningChanged.emit(False)

    def reset(self):
        self.stopwatch.reset()

    def refresh(self):
        """Re-read the stopwatch after its value was changed elsewhere."""
        if not self.stopwatch.is_running:
            self._show_value(self.stopwatch.elapsed)
            self._update_controls()

    def _commit_edit(self):
        if not self.stopwatch.commit_edit():
            # Nothing pending: restore the formatted value
            self._show_value(self.stopwatch.elapsed)

    # ─────────────────────────────────────────────────────────────────────────
    # Display
    # ─────────────────────────────────────────────────────────────────────────

    def _on_frame(self):
        self.live_label.setText(format_elapsed(self.stopwatch.sample()))

    def _on_elapsed(self, elapsed: float):
        self._show_value(elapsed)
        self._update_controls()

    def _show_value(self, elapsed: float):
        text = format_elapsed(elapsed)
        self.live_label.setText(text)
        self.editor.setText(text)

    def _update_controls(self):
        running = self.stopwatch.is_running
        self.display.setCurrentWidget(self.live_label if running else self.editor)
        self.reset_btn.setEnabled(not running)
        if running:
            self.toggle_btn.setText("STOP")
            self.toggle_btn.setStyleSheet(Styles.BUTTON_STOP)
        else:
            self.toggle_btn.setText("RESUME" if self.stopwatch.elapsed > 0 else "WELD")
            self.toggle_btn.setStyleSheet(Styles.BUTTON_PRIMARY)

    def closeEvent(self, event):
        self._timer.stop()
        self.stopwatch.unsubscribe(self._on_elapsed)
        super().closeEvent(event)
