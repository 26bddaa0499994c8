"""
Console widget: the session log shown under the form (pass saved,
export written, advisory failures).
"""
from datetime import datetime
from typing import Dict, Set

from PySide6.QtCore import Slot
from PySide6.QtGui import QColor, QFont, QTextCharFormat, QTextCursor
from PySide6.QtWidgets import (
    QApplication, QFileDialog, QGroupBox, QMenu, QPlainTextEdit, QSizePolicy, QVBoxLayout,
)

from weld_toolkit.gui.styles.theme import Fonts, get_colors

# Levels hidden from the console, lower case
CONSOLE_SUPPRESSED_LEVELS: Set[str] = set()
MAX_LINES = 1000


def _char_format(color: str) -> QTextCharFormat:
    fmt = QTextCharFormat()
    fmt.setForeground(QColor(color))
    return fmt


class ConsoleWidget(QGroupBox):
    def __init__(self, parent=None):
        super().__init__("Session Log", parent)
        self.suppressed_levels: Set[str] = CONSOLE_SUPPRESSED_LEVELS.copy()

        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Preferred)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.text_edit = QPlainTextEdit()
        self.text_edit.setReadOnly(True)
        self.text_edit.setMaximumHeight(140)
        self.text_edit.setMaximumBlockCount(MAX_LINES)

        font = QFont(Fonts.MONO_FONT.split(",")[0].strip().strip("'\""))
        font.setPointSize(int(Fonts.CONSOLE.replace("pt", "")))
        self.text_edit.setFont(font)
        layout.addWidget(self.text_edit)

        colors = get_colors()
        self._default_format = _char_format(colors.TEXT_PRIMARY)
        self._formats: Dict[str, QTextCharFormat] = {
            "error": _char_format(colors.ERROR),
            "critical": _char_format(colors.ERROR),
            "warning": _char_format(colors.WARNING),
        }

    @Slot(str, str)
    def append_log(self, level: str, message: str):
        """Append one record, coloured by level."""
        key = level.lower()
        if key in self.suppressed_levels:
            return

        cursor = self.text_edit.textCursor()
        cursor.movePosition(QTextCursor.MoveOperation.End)
        stamp = datetime.now().strftime("%H:%M:%S")
        cursor.insertText(
            f"[{stamp}] [{level.upper()}] {message}\n",
            self._formats.get(key, self._default_format),
        )
        self.text_edit.setTextCursor(cursor)
        self.text_edit.ensureCursorVisible()

    def contextMenuEvent(self, event):
        menu = QMenu(self)
        copy_action = menu.addAction("Copy All")
        save_action = menu.addAction("Save to File...")
        menu.addSeparator()
        clear_action = menu.addAction("Clear")

        chosen = menu.exec(event.globalPos())
        if chosen == copy_action:
            QApplication.clipboard().setText(self.text_edit.toPlainText())
        elif chosen == save_action:
            self._save_to_file()
        elif chosen == clear_action:
            self.clear()

    def _save_to_file(self):
        filename, _ = QFileDialog.getSaveFileName(
            self, "Save Log", "weld_session_log.txt", "Text Files (*.txt);;All Files (*)"
        )
        if not filename:
            return
        try:
            with open(filename, "w", encoding="utf-8") as f:
                f.write(self.text_edit.toPlainText())
        except OSError as e:
            self.append_log("ERROR", f"Failed to save log: {e}")

    def clear(self):
        self.text_edit.clear()
