"""Unit tests for the stopwatch widget."""

import pytest
from PySide6.QtCore import Qt

from weld_toolkit.core.stopwatch import Stopwatch, StopwatchConfig
from weld_toolkit.gui.widgets.stopwatch_widget import StopwatchWidget


@pytest.fixture
def stopwatch(clock):
    return Stopwatch(clock=clock)


@pytest.fixture
def widget(qtbot, stopwatch):
    widget = StopwatchWidget(stopwatch, StopwatchConfig(refresh_interval_ms=20))
    qtbot.addWidget(widget)
    widget.show()
    return widget


class TestStopwatchWidgetControls:
    """Tests for the start/stop and reset buttons."""

    def test_init_shows_editor_and_weld_label(self, widget):
        assert widget.toggle_btn.text() == "WELD"
        assert widget.display.currentWidget() is widget.editor
        assert widget.editor.text() == "0.0"

    def test_toggle_click_starts_and_locks_reset(self, qtbot, widget, stopwatch):
        with qtbot.waitSignal(widget.runningChanged, timeout=1000) as blocker:
            qtbot.mouseClick(widget.toggle_btn, Qt.MouseButton.LeftButton)

        assert blocker.args == [True]
        assert stopwatch.is_running
        assert widget.toggle_btn.text() == "STOP"
        assert not widget.reset_btn.isEnabled()
        assert widget.display.currentWidget() is widget.live_label

    def test_frame_samples_running_stopwatch(self, widget, clock):
        widget.start()
        clock.advance(3.27)
        widget._on_frame()
        assert widget.live_label.text() == "3.3"

    def test_stop_freezes_value_and_offers_resume(self, widget, stopwatch, clock):
        widget.start()
        clock.advance(4.0)
        widget.toggle()

        assert not stopwatch.is_running
        assert not widget._timer.isActive()
        assert widget.editor.text() == "4.0"
        assert widget.toggle_btn.text() == "RESUME"
        assert widget.reset_btn.isEnabled()

    def test_refresh_interval_comes_from_config(self, widget):
        assert widget._timer.interval() == 20

    def test_reset_click_clears_value(self, qtbot, widget, stopwatch, clock):
        widget.start()
        clock.advance(2.0)
        widget.stop()

        qtbot.mouseClick(widget.reset_btn, Qt.MouseButton.LeftButton)

        assert stopwatch.elapsed == 0.0
        assert widget.editor.text() == "0.0"
        assert widget.toggle_btn.text() == "WELD"


class TestStopwatchWidgetEditing:
    """Tests for manual correction of the idle value."""

    def test_typed_value_with_comma_is_committed(self, qtbot, widget, stopwatch):
        widget.editor.clear()
        qtbot.keyClicks(widget.editor, "12,5")
        qtbot.keyClick(widget.editor, Qt.Key.Key_Return)

        assert stopwatch.elapsed == 12.5
        assert widget.editor.text() == "12.5"

    def test_typed_garbage_becomes_zero(self, qtbot, widget, stopwatch):
        stopwatch.set_elapsed(9.0)
        widget.refresh()
        widget.editor.clear()
        qtbot.keyClicks(widget.editor, "abc")
        qtbot.keyClick(widget.editor, Qt.Key.Key_Return)

        assert stopwatch.elapsed == 0.0
        assert widget.editor.text() == "0.0"

    def test_refresh_shows_externally_set_value(self, widget, stopwatch):
        stopwatch.set_elapsed(7.25)
        widget.refresh()
        assert widget.editor.text() == "7.3"
