"""Tests for SelectionService."""

from unittest.mock import Mock

import pytest

from fretlab.models import AppConfig, ChordInversionView, Diagnostic, DiagnosticCode, ScaleView, SelectionConfig
from fretlab.protocols import DiagnosticObserver, PlaybackSink, SelectionEvent, SelectionObserver
from fretlab.services import SelectionService


@pytest.fixture
def service():
    """Service starting from an empty interval selection."""
    return SelectionService()


@pytest.fixture
def observer(service):
    """Registered selection observer mock."""
    observer = Mock(spec=SelectionObserver)
    service.register_observer(observer)
    return observer


class TestSelectionServiceEdits:
    """Test edits and emitted events."""

    @pytest.mark.unit
    def test_initial_state(self, service):
        """Test the default starting selection."""
        assert service.config.is_empty
        assert service.lowest_midi is None
        assert service.notes() == []

    @pytest.mark.unit
    def test_tap_notifies(self, service, observer):
        """Test that a tap updates the config and emits TAPPED."""
        config = service.tap(60)
        assert service.config == config
        assert config.selected_intervals == frozenset({0})
        observer.on_selection_event.assert_called_once_with(SelectionEvent.TAPPED, config)

    @pytest.mark.unit
    def test_tap_uses_lowest_midi(self):
        """Test that the instrument floor is passed to the state machine."""
        initial = SelectionConfig(root_note="C", selected_octaves={4}, selected_intervals={0})
        service = SelectionService(initial=initial, lowest_midi=50)
        config = service.tap(57)
        assert config.root_note == "A"

    @pytest.mark.unit
    def test_set_config(self, service, observer, c_major_scale):
        """Test replacing the whole selection."""
        service.set_config(c_major_scale)
        assert service.config == c_major_scale
        observer.on_selection_event.assert_called_once_with(SelectionEvent.CONFIG_REPLACED, c_major_scale)

    @pytest.mark.unit
    def test_select_root(self, service, observer):
        """Test changing the root."""
        config = service.select_root(62)
        assert config.root_note == "D"
        observer.on_selection_event.assert_called_once_with(SelectionEvent.ROOT_CHANGED, config)

    @pytest.mark.unit
    def test_octave_edits(self, c_major_scale):
        """Test replacing and toggling octaves."""
        service = SelectionService(initial=c_major_scale)
        observer = Mock(spec=SelectionObserver)
        service.register_observer(observer)

        service.change_octaves([2, 3])
        assert service.config.selected_octaves == frozenset({2, 3})
        service.toggle_octave(2)
        assert service.config.selected_octaves == frozenset({3})
        assert observer.on_selection_event.call_count == 2
        assert all(c.args[0] is SelectionEvent.OCTAVES_CHANGED for c in observer.on_selection_event.call_args_list)

    @pytest.mark.unit
    def test_set_view_mode(self, service, observer):
        """Test switching the view mode."""
        view = ChordInversionView(chord_type="minor")
        config = service.set_view_mode(view)
        assert config.view_mode == view
        observer.on_selection_event.assert_called_once_with(SelectionEvent.VIEW_CHANGED, config)

    @pytest.mark.unit
    def test_set_mode_index(self, c_major_scale):
        """Test selecting a mode of the current scale."""
        service = SelectionService(initial=c_major_scale)
        config = service.set_mode_index(1)
        assert isinstance(config.view_mode, ScaleView)
        assert config.view_mode.mode_index == 1
        assert service.notes()[0] == 50

    @pytest.mark.unit
    def test_set_mode_index_requires_scale_view(self, service, observer):
        """Test that modes need a scale view."""
        before = service.config
        with pytest.raises(ValueError):
            service.set_mode_index(1)
        assert service.config == before
        observer.on_selection_event.assert_not_called()

    @pytest.mark.unit
    def test_set_mode_index_reads_and_writes_in_one_step(self, c_major_scale):
        """Test that a view change landing right after the update is not overwritten."""
        service = SelectionService(initial=c_major_scale)
        real_lock = service._lock

        class ViewSwitchingLock:
            """Lock that applies another writer's view change after the first release."""

            switched = False

            def __enter__(self):
                real_lock.acquire()

            def __exit__(self, *exc):
                if not self.switched:
                    self.switched = True
                    service._config = service._config.model_copy(
                        update={"view_mode": ScaleView(scale="Harmonic Minor")}
                    )
                real_lock.release()
                return False

        service._lock = ViewSwitchingLock()
        config = service.set_mode_index(1)

        assert config.view_mode.scale == "Major"
        assert config.view_mode.mode_index == 1
        assert service.config.view_mode.scale == "Harmonic Minor"

    @pytest.mark.unit
    def test_clear(self, service, observer):
        """Test clearing keeps root and octaves."""
        service.tap(62)
        service.tap(66)
        config = service.clear()
        assert config.is_empty
        assert config.root_note == "D"
        assert config.selected_octaves == frozenset({4})
        assert observer.on_selection_event.call_args.args[0] is SelectionEvent.CLEARED

    @pytest.mark.unit
    def test_from_app_config(self):
        """Test building a service from application defaults."""
        service = SelectionService.from_app_config(AppConfig(default_root="G", default_octave=2))
        assert service.config.root_note == "G"
        assert service.config.selected_octaves == frozenset({2})
        assert isinstance(service.config.view_mode, ScaleView)
        assert service.notes()[0] == 43


class TestSelectionServiceObservers:
    """Test observer registration and isolation."""

    @pytest.mark.unit
    def test_unregister(self, service, observer):
        """Test that unregistered observers stop receiving events."""
        service.unregister_observer(observer)
        service.tap(60)
        observer.on_selection_event.assert_not_called()

    @pytest.mark.unit
    def test_failing_observer_does_not_block_others(self, service):
        """Test that one observer raising does not stop the others."""
        failing = Mock(spec=SelectionObserver)
        failing.on_selection_event.side_effect = RuntimeError("boom")
        healthy = Mock(spec=SelectionObserver)
        service.register_observer(failing)
        service.register_observer(healthy)

        config = service.tap(60)

        healthy.on_selection_event.assert_called_once_with(SelectionEvent.TAPPED, config)
        assert service.config == config

    @pytest.mark.unit
    def test_observer_may_read_service(self, service):
        """Test that an observer can query the service from its callback."""
        seen = []

        class Recorder:
            def on_selection_event(self, event, config):
                seen.append(service.notes())

        service.register_observer(Recorder())
        service.tap(60)
        assert seen == [[60]]

    @pytest.mark.unit
    def test_diagnostics_forwarded(self, service):
        """Test that soft failures reach diagnostic observers."""
        diagnostic_observer = Mock(spec=DiagnosticObserver)
        service.register_diagnostic_observer(diagnostic_observer)

        service.set_config(SelectionConfig.from_scale("C", "Unknown Scale"))

        diagnostic_observer.on_diagnostic.assert_called_once()
        diagnostic = diagnostic_observer.on_diagnostic.call_args.args[0]
        assert isinstance(diagnostic, Diagnostic)
        assert diagnostic.code == DiagnosticCode.UNKNOWN_SCALE
        assert service.diagnostics() == [diagnostic]
        assert service.highlight_map() == {}

    @pytest.mark.unit
    def test_no_diagnostics_for_clean_selection(self, service):
        """Test that clean selections notify no diagnostic observers."""
        diagnostic_observer = Mock(spec=DiagnosticObserver)
        service.register_diagnostic_observer(diagnostic_observer)
        service.tap(60)
        diagnostic_observer.on_diagnostic.assert_not_called()

        service.unregister_diagnostic_observer(diagnostic_observer)
        service.set_config(SelectionConfig.from_scale("C", "Unknown Scale"))
        diagnostic_observer.on_diagnostic.assert_not_called()


class TestSelectionServicePlayback:
    """Test handing notes to a playback sink."""

    @pytest.mark.unit
    def test_play(self, c_major_triad):
        """Test that highlighted notes are passed to the sink."""
        service = SelectionService(initial=c_major_triad)
        sink = Mock(spec=PlaybackSink)

        notes = service.play(sink)

        assert notes == [48, 52, 55]
        sink.play_notes.assert_called_once_with([48, 52, 55])

    @pytest.mark.unit
    def test_play_empty_selection(self, service):
        """Test that an empty selection does not call the sink."""
        sink = Mock(spec=PlaybackSink)
        assert service.play(sink) == []
        sink.play_notes.assert_not_called()

    @pytest.mark.unit
    def test_sink_error_propagates(self, c_major_triad):
        """Test that playback failures are logged and re-raised."""
        service = SelectionService(initial=c_major_triad)
        sink = Mock(spec=PlaybackSink)
        sink.play_notes.side_effect = RuntimeError("device unavailable")

        with pytest.raises(RuntimeError, match="device unavailable"):
            service.play(sink)
