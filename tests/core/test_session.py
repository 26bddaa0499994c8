"""
Unit Tests for WeldSession

Covers recomputation on every edit, the stopwatch -> params.time link,
commit decoupling and advisory lifetime.
"""

import pytest

from weld_toolkit.core.ledger import PassLedger
from weld_toolkit.core.models import WeldingProcess
from weld_toolkit.core.session import WeldSession
from weld_toolkit.core.stopwatch import Stopwatch


@pytest.fixture
def session(clock):
    return WeldSession(stopwatch=Stopwatch(clock=clock))


@pytest.fixture
def ready_session(session):
    """Session holding the reference pass: 0.128 kJ/mm."""
    session.set_process(WeldingProcess.GAS_METAL_ARC)
    session.set_voltage(20)
    session.set_current(120)
    session.set_length(150)
    session.set_time(10)
    return session


class TestSessionCalculation:
    def test_init_when_fresh_then_no_result(self, session):
        assert session.result is None
        assert session.can_commit is False
        assert session.passes == ()

    def test_setters_when_all_filled_then_result_available(self, ready_session):
        assert ready_session.result.heat_input == pytest.approx(0.128)
        assert ready_session.can_commit is True

    def test_set_process_when_changed_then_recomputed_with_new_k(self, ready_session):
        ready_session.set_process(WeldingProcess.SUBMERGED_ARC)
        assert ready_session.k_factor == 1.0
        assert ready_session.result.heat_input == pytest.approx(0.16)

    def test_set_length_when_zero_then_result_none(self, ready_session):
        ready_session.set_length(0)
        assert ready_session.result is None
        assert ready_session.can_commit is False

    def test_setter_when_invalid_then_raises_and_state_kept(self, ready_session):
        with pytest.raises(ValueError):
            ready_session.set_voltage(-1)
        assert ready_session.params.voltage == 20

    def test_params_when_returned_copy_mutated_then_session_unaffected(self, ready_session):
        copy = ready_session.params
        copy.set_voltage(99)
        assert ready_session.params.voltage == 20

    def test_set_time_when_idle_then_stopwatch_synced(self, session):
        session.set_time(7.5)
        assert session.stopwatch.elapsed == 7.5


class TestSessionStopwatch:
    def test_stopwatch_when_stopped_then_time_written_and_recomputed(self, session, clock):
        session.set_voltage(20)
        session.set_current(120)
        session.set_length(150)

        session.stopwatch.start()
        clock.advance(10.0)
        session.stopwatch.stop()

        assert session.params.time == pytest.approx(10.0)
        assert session.result.heat_input == pytest.approx(0.128)

    def test_stopwatch_when_edit_committed_then_time_written(self, session):
        session.stopwatch.edit("12,5")
        session.stopwatch.commit_edit()
        assert session.params.time == 12.5

    def test_stopwatch_when_reset_then_time_zero(self, ready_session):
        ready_session.stopwatch.reset()
        assert ready_session.params.time == 0.0
        assert ready_session.result is None

    def test_set_time_when_stopwatch_running_then_ignored(self, ready_session, clock):
        ready_session.stopwatch.reset()
        ready_session.stopwatch.start()
        clock.advance(2.0)

        assert ready_session.set_time(99) is False
        assert ready_session.params.time == 0.0

        ready_session.stopwatch.stop()
        assert ready_session.params.time == pytest.approx(2.0)


class TestSessionPasses:
    def test_commit_when_valid_then_recorded_with_current_values(self, ready_session):
        ready_session.set_project_name("Bridge B12")
        welding_pass = ready_session.commit_pass()

        assert ready_session.passes == (welding_pass,)
        assert welding_pass.project_name == "Bridge B12"
        assert welding_pass.heat_input == ready_session.result.heat_input

    def test_commit_when_no_result_then_nothing_recorded(self, session):
        assert session.commit_pass() is None
        assert session.passes == ()

    def test_commit_when_params_edited_later_then_pass_unchanged(self, ready_session):
        welding_pass = ready_session.commit_pass()
        ready_session.set_current(200)
        ready_session.set_welder_name("Someone else")

        stored = ready_session.passes[0]
        assert stored is welding_pass
        assert stored.current == 120
        assert stored.welder_name == ""

    def test_remove_when_present_then_gone(self, ready_session):
        welding_pass = ready_session.commit_pass()
        assert ready_session.remove_pass(welding_pass.id) is True
        assert ready_session.passes == ()

    def test_init_when_ledger_given_then_shared(self, clock):
        ledger = PassLedger()
        session = WeldSession(stopwatch=Stopwatch(clock=clock), ledger=ledger)
        assert session.ledger is ledger

    def test_export_when_passes_then_file_written(self, ready_session, tmp_path):
        ready_session.commit_pass()
        path = ready_session.export_report(tmp_path)
        assert path.parent == tmp_path
        assert path.name.startswith("Report_")

    def test_export_when_empty_then_none(self, session, tmp_path):
        assert session.export_report(tmp_path) is None


class TestSessionAdvisory:
    def test_set_advisory_when_result_current_then_stored(self, ready_session):
        assert ready_session.set_advisory("Looks fine.", ready_session.result) is True
        assert ready_session.advisory == "Looks fine."

    def test_set_advisory_when_result_outdated_then_ignored(self, ready_session):
        stale = ready_session.result
        ready_session.set_current(150)

        assert ready_session.set_advisory("Old text", stale) is False
        assert ready_session.advisory is None

    def test_advisory_when_input_changes_result_then_dropped(self, ready_session):
        ready_session.set_advisory("Looks fine.", ready_session.result)
        ready_session.set_voltage(22)
        assert ready_session.advisory is None

    def test_advisory_when_traceability_edited_then_kept(self, ready_session):
        ready_session.set_advisory("Looks fine.", ready_session.result)
        ready_session.set_weld_name("W-08")
        assert ready_session.advisory == "Looks fine."

    def test_advisory_when_process_changed_then_dropped(self, ready_session):
        ready_session.set_advisory("Looks fine.", ready_session.result)
        ready_session.set_process(WeldingProcess.TUNGSTEN_INERT_GAS)
        assert ready_session.advisory is None

    def test_clear_advisory_when_called_then_none(self, ready_session):
        ready_session.set_advisory("Looks fine.", ready_session.result)
        ready_session.clear_advisory()
        assert ready_session.advisory is None


class TestSessionObservers:
    def test_subscribe_when_setter_called_then_notified(self, session):
        seen = []
        session.subscribe(seen.append)
        session.set_voltage(20)
        assert seen == [session]

    def test_subscribe_when_stopwatch_transitions_then_notified(self, session, clock):
        seen = []
        session.subscribe(seen.append)
        session.stopwatch.start()
        clock.advance(1.0)
        session.stopwatch.stop()
        assert len(seen) == 2

    def test_unsubscribe_when_removed_then_silent(self, session):
        seen = []
        session.subscribe(seen.append)
        session.unsubscribe(seen.append)
        session.set_voltage(20)
        assert seen == []
