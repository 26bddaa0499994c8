"""
Entry point for the PySide6 GUI.
"""
import logging
import sys


def configure_logging(level: int = logging.INFO) -> None:
    """Send log records to stderr; the main window adds its console handler."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def run():
    """
    Main entry point for the GUI application.
    """
    from PySide6.QtWidgets import QApplication
    from weld_toolkit.gui.main_window import MainWindow
    from weld_toolkit.gui.styles.theme import apply_theme

    configure_logging()

    app = QApplication(sys.argv)
    app.setApplicationName("Weld Toolkit")
    app.setApplicationDisplayName("Weld Toolkit")
    app.setOrganizationName("Weld Toolkit")

    apply_theme(app)

    window = MainWindow()
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    run()
