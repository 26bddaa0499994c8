"""
Theme definitions for the Weld Toolkit GUI.

A single dark "workshop" palette with an amber accent, readable on a
tablet next to the welding bench.
"""


class Colors:
    # Accent
    ACCENT = "#F59E0B"
    ACCENT_HOVER = "#FBBF24"
    ACCENT_PRESSED = "#D97706"

    # Backgrounds
    BACKGROUND = "#0F172A"
    SURFACE = "#1E293B"
    SURFACE_ALT = "#111827"
    HOVER = "#334155"
    DISABLED_BG = "#334155"

    # Text
    TEXT_PRIMARY = "#F1F5F9"
    TEXT_SECONDARY = "#94A3B8"
    TEXT_DISABLED = "#64748B"
    TEXT_ON_ACCENT = "#0F172A"

    # Borders
    BORDER = "#334155"
    BORDER_FOCUS = "#F59E0B"

    # Status
    ERROR = "#F87171"
    WARNING = "#FBBF24"

    # Advisory panel
    ADVISORY = "#818CF8"


class Fonts:
    UI_FONT = "'Segoe UI', Roboto, Helvetica, Arial, sans-serif"
    MONO_FONT = "Consolas, Menlo, 'Courier New', monospace"

    BODY = "13pt"
    SMALL = "11pt"
    CONSOLE = "11pt"
    DISPLAY = "40pt"
    RESULT = "32pt"

    WEIGHT_MEDIUM = "500"
    WEIGHT_BOLD = "700"


class Styles:
    BUTTON_PRIMARY = f"""
        QPushButton {{
            background-color: {Colors.ACCENT};
            color: {Colors.TEXT_ON_ACCENT};
            border-radius: 20px;
            padding: 10px 20px;
            font-weight: {Fonts.WEIGHT_BOLD};
            border: none;
        }}
        QPushButton:hover {{
            background-color: {Colors.ACCENT_HOVER};
        }}
        QPushButton:pressed {{
            background-color: {Colors.ACCENT_PRESSED};
        }}
        QPushButton:disabled {{
            background-color: {Colors.DISABLED_BG};
            color: {Colors.TEXT_DISABLED};
        }}
    """

    BUTTON_STOP = f"""
        QPushButton {{
            background-color: {Colors.ERROR};
            color: {Colors.TEXT_PRIMARY};
            border-radius: 20px;
            padding: 10px 20px;
            font-weight: {Fonts.WEIGHT_BOLD};
            border: none;
        }}
    """

    BUTTON_SECONDARY = f"""
        QPushButton {{
            background-color: {Colors.HOVER};
            color: {Colors.TEXT_PRIMARY};
            border-radius: 8px;
            padding: 8px 16px;
            font-weight: {Fonts.WEIGHT_MEDIUM};
            border: none;
        }}
        QPushButton:disabled {{
            color: {Colors.TEXT_DISABLED};
        }}
    """

    BUTTON_DANGER_SMALL = f"""
        QPushButton {{
            background: transparent;
            color: {Colors.ERROR};
            border: 1px solid {Colors.ERROR};
            border-radius: 6px;
            padding: 2px 8px;
        }}
    """

    CARD = f"""
        QFrame#card {{
            background-color: {Colors.SURFACE};
            border: 1px solid {Colors.BORDER};
            border-radius: 16px;
        }}
    """

    SECTION_TITLE = f"""
        color: {Colors.TEXT_SECONDARY};
        font-size: {Fonts.SMALL};
        font-weight: {Fonts.WEIGHT_BOLD};
        text-transform: uppercase;
    """


GLOBAL_STYLESHEET = f"""
    QMainWindow, QWidget {{
        background-color: {Colors.BACKGROUND};
        color: {Colors.TEXT_PRIMARY};
        font-size: {Fonts.BODY};
    }}
    QLineEdit, QDoubleSpinBox, QComboBox {{
        border: 1px solid {Colors.BORDER};
        border-radius: 8px;
        padding: 8px;
        background: {Colors.SURFACE_ALT};
        color: {Colors.TEXT_PRIMARY};
    }}
    QLineEdit:focus, QDoubleSpinBox:focus, QComboBox:focus {{
        border: 1px solid {Colors.BORDER_FOCUS};
    }}
    QLineEdit:disabled {{
        color: {Colors.TEXT_DISABLED};
    }}
    QLabel#mainTitle {{
        font-size: 18pt;
        font-weight: {Fonts.WEIGHT_BOLD};
    }}
    QLabel#subtitle, QLabel#hint {{
        color: {Colors.TEXT_SECONDARY};
        font-size: {Fonts.SMALL};
    }}
    QScrollArea {{
        border: none;
    }}
""" + Styles.CARD


def apply_theme(app) -> None:
    """Apply the stylesheet and default font to the QApplication."""
    from PySide6.QtGui import QFont

    font = QFont()
    font.setFamily(Fonts.UI_FONT.split(",")[0].strip(" '\""))
    font.setPointSize(int(Fonts.BODY.replace("pt", "")))
    app.setFont(font)
    app.setStyleSheet(GLOBAL_STYLESHEET)


def get_colors():
    return Colors


def apply_shadow(widget, blur_radius=20, x_offset=0, y_offset=4, color=None):
    """Apply a soft shadow to a widget."""
    from PySide6.QtWidgets import QGraphicsDropShadowEffect
    from PySide6.QtGui import QColor

    if color is None:
        color = QColor(0, 0, 0, 90)

    shadow = QGraphicsDropShadowEffect(widget)
    shadow.setBlurRadius(blur_radius)
    shadow.setXOffset(x_offset)
    shadow.setYOffset(y_offset)
    shadow.setColor(color)
    widget.setGraphicsEffect(shadow)
