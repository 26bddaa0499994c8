"""
Main Window for the Weld Toolkit GUI.
"""
import logging
import queue
from pathlib import Path
from typing import Optional

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QScrollArea, QMessageBox, QStatusBar,
)
from PySide6.QtCore import QTimer
from PySide6.QtGui import QAction, QKeySequence

from weld_toolkit import __version__
from weld_toolkit.advisory import AdvisoryConfig, WeldAdvisor
from weld_toolkit.core.export import ExportError
from weld_toolkit.core.session import WeldSession
from weld_toolkit.core.stopwatch import StopwatchConfig
from weld_toolkit.gui.styles.theme import apply_shadow
from weld_toolkit.gui.utils.logging_utils import attach_queue_handler, detach_queue_handler, drain_log_queue
from weld_toolkit.gui.utils.paths import get_export_dir
from weld_toolkit.gui.widgets.console_widget import ConsoleWidget
from weld_toolkit.gui.widgets.history_panel import HistoryPanel
from weld_toolkit.gui.widgets.parameters_panel import ParametersPanel, TraceabilityPanel
from weld_toolkit.gui.widgets.result_card import ResultCard
from weld_toolkit.gui.widgets.stopwatch_widget import StopwatchWidget
from weld_toolkit.gui.workers import AdvisoryWorker

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(
        self,
        session: Optional[WeldSession] = None,
        advisor: Optional[WeldAdvisor] = None,
        export_dir: Optional[Path] = None,
        stopwatch_config: Optional[StopwatchConfig] = None,
    ):
        super().__init__()
        self.session = session or WeldSession()
        self.advisor = advisor or WeldAdvisor(AdvisoryConfig.from_env())
        self.export_dir = export_dir or get_export_dir()
        self._advisory_worker: Optional[AdvisoryWorker] = None

        self.setWindowTitle("Weld Toolkit")
        self.resize(520, 900)
        self.setMinimumSize(420, 640)

        # --- Menu Bar ---
        file_menu = self.menuBar().addMenu("File")
        export_action = QAction("Export CSV...", self)
        export_action.setShortcut(QKeySequence("Ctrl+E"))
        export_action.triggered.connect(self.export_report)
        file_menu.addAction(export_action)
        file_menu.addSeparator()
        exit_action = QAction("Quit", self)
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

        help_menu = self.menuBar().addMenu("Help")
        about_action = QAction("About", self)
        about_action.triggered.connect(self._show_about)
        help_menu.addAction(about_action)

        # Logging into the console widget
        self.log_queue = queue.Queue()
        self._log_handler = attach_queue_handler(self.log_queue)
        self.log_timer = QTimer(self)
        self.log_timer.timeout.connect(self._drain_log_queue)
        self.log_timer.start(100)

        # --- Content ---
        central = QWidget()
        self.setCentralWidget(central)
        main_layout = QVBoxLayout(central)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        header = QWidget()
        header_layout = QHBoxLayout(header)
        header_layout.setContentsMargins(24, 12, 24, 12)
        title_box = QVBoxLayout()
        title = QLabel("Weld Toolkit")
        title.setObjectName("mainTitle")
        title_box.addWidget(title)
        subtitle = QLabel("Heat input per EN 1011-1")
        subtitle.setObjectName("subtitle")
        title_box.addWidget(subtitle)
        header_layout.addLayout(title_box)
        header_layout.addStretch()
        main_layout.addWidget(header)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        content = QWidget()
        content_layout = QVBoxLayout(content)
        content_layout.setContentsMargins(16, 8, 16, 16)
        content_layout.setSpacing(16)

        self.traceability_panel = TraceabilityPanel(self.session)
        content_layout.addWidget(self.traceability_panel)

        self.stopwatch_widget = StopwatchWidget(self.session.stopwatch, stopwatch_config)
        apply_shadow(self.stopwatch_widget)
        content_layout.addWidget(self.stopwatch_widget)

        self.parameters_panel = ParametersPanel(self.session)
        content_layout.addWidget(self.parameters_panel)

        self.result_card = ResultCard()
        self.result_card.saveRequested.connect(self.save_pass)
        self.result_card.analyzeRequested.connect(self.request_analysis)
        content_layout.addWidget(self.result_card)

        self.history_panel = HistoryPanel()
        self.history_panel.deleteRequested.connect(self.delete_pass)
        self.history_panel.exportRequested.connect(self.export_report)
        content_layout.addWidget(self.history_panel)
        content_layout.addStretch()

        scroll.setWidget(content)
        main_layout.addWidget(scroll, 1)

        self.console = ConsoleWidget()
        main_layout.addWidget(self.console)

        self.setStatusBar(QStatusBar())

        self.session.subscribe(self._on_session_changed)
        self._on_session_changed(self.session)

    # ─────────────────────────────────────────────────────────────────────────
    # Actions
    # ─────────────────────────────────────────────────────────────────────────

    def save_pass(self):
        welding_pass = self.session.commit_pass()
        if welding_pass is not None:
            self.statusBar().showMessage("Pass saved", 3000)

    def delete_pass(self, pass_id: str):
        self.session.remove_pass(pass_id)

    def export_report(self) -> Optional[Path]:
        try:
            path = self.session.export_report(self.export_dir)
        except ExportError as e:
            logger.error(str(e))
            QMessageBox.warning(self, "Export failed", str(e))
            return None
        if path is not None:
            self.statusBar().showMessage(f"Report saved to {path}", 5000)
        return path

    def request_analysis(self):
        result = self.session.result
        if result is None or self._advisory_worker is not None:
            return
        self.result_card.set_analyzing(True)
        worker = AdvisoryWorker(self.advisor, self.session.params, result, self)
        worker.analysisReady.connect(self._on_analysis_ready)
        worker.finished.connect(self._on_worker_finished)
        self._advisory_worker = worker
        worker.start()

    def _on_analysis_ready(self, text: str, result):
        self.session.set_advisory(text, result)

    def _on_worker_finished(self):
        if self._advisory_worker is not None:
            self._advisory_worker.deleteLater()
        self._advisory_worker = None
        self.result_card.set_analyzing(False)

    # ─────────────────────────────────────────────────────────────────────────
    # Refresh
    # ─────────────────────────────────────────────────────────────────────────

    def _on_session_changed(self, session: WeldSession):
        self.result_card.update_from(session)
        self.history_panel.set_passes(session.passes)

    def _drain_log_queue(self):
        drain_log_queue(self.log_queue, self.console.append_log)

    def _show_about(self):
        QMessageBox.about(
            self,
            "About Weld Toolkit",
            f"Weld Toolkit {__version__}\n\n"
            "Heat input Q = k × U × I × t / (L × 1000) [kJ/mm], EN 1011-1.",
        )

    def closeEvent(self, event):
        self.log_timer.stop()
        self.session.unsubscribe(self._on_session_changed)
        detach_queue_handler(self._log_handler)
        worker = self._advisory_worker
        if worker is not None:
            # The reply has no window to go to; the client timeout bounds the wait
            worker.analysisReady.disconnect(self._on_analysis_ready)
            if worker.isRunning():
                logger.info("Waiting for the advisory request to finish")
            worker.wait()
            worker.deleteLater()
            self._advisory_worker = None
        super().closeEvent(event)
