"""Unit tests for utility classes."""

import logging
from unittest.mock import Mock

import pytest

from fretlab.protocols import SelectionEvent, SelectionObserver
from fretlab.utils import ObserverManager


@pytest.fixture
def manager():
    """Observer manager for selection observers."""
    return ObserverManager[SelectionObserver](observer_type_name="selection")


class TestObserverManager:
    """Test ObserverManager."""

    @pytest.mark.unit
    def test_register_once(self, manager):
        """Test that registering twice keeps one entry."""
        observer = Mock(spec=SelectionObserver)
        manager.register(observer)
        manager.register(observer)
        assert len(manager) == 1
        assert observer in manager
        assert manager

    @pytest.mark.unit
    def test_unregister_unknown(self, manager, caplog):
        """Test that unregistering an unknown observer only logs."""
        with caplog.at_level(logging.WARNING, logger="fretlab.utils.observer"):
            manager.unregister(Mock(spec=SelectionObserver))
        assert "unknown selection observer" in caplog.text
        assert not manager

    @pytest.mark.unit
    def test_notify(self, manager):
        """Test that every observer receives the callback."""
        first = Mock(spec=SelectionObserver)
        second = Mock(spec=SelectionObserver)
        manager.register(first)
        manager.register(second)

        manager.notify("on_selection_event", SelectionEvent.CLEARED, None)

        first.on_selection_event.assert_called_once_with(SelectionEvent.CLEARED, None)
        second.on_selection_event.assert_called_once_with(SelectionEvent.CLEARED, None)

    @pytest.mark.unit
    def test_notify_isolates_failures(self, manager, caplog):
        """Test that a raising observer is logged and skipped."""
        failing = Mock(spec=SelectionObserver)
        failing.on_selection_event.side_effect = RuntimeError("boom")
        healthy = Mock(spec=SelectionObserver)
        manager.register(failing)
        manager.register(healthy)

        with caplog.at_level(logging.ERROR, logger="fretlab.utils.observer"):
            manager.notify("on_selection_event", SelectionEvent.TAPPED, None)

        healthy.on_selection_event.assert_called_once()
        assert "boom" in caplog.text

    @pytest.mark.unit
    def test_notify_missing_method(self, manager, caplog):
        """Test that observers without the callback are skipped."""
        manager.register(object())
        with caplog.at_level(logging.ERROR, logger="fretlab.utils.observer"):
            manager.notify("on_selection_event", SelectionEvent.TAPPED, None)
        assert "has no method 'on_selection_event'" in caplog.text

    @pytest.mark.unit
    def test_unregister_during_notify(self, manager):
        """Test that an observer may unregister itself from its callback."""

        class OneShot:
            def __init__(self):
                self.calls = 0

            def on_selection_event(self, event, config):
                self.calls += 1
                manager.unregister(self)

        observer = OneShot()
        manager.register(observer)
        manager.notify("on_selection_event", SelectionEvent.TAPPED, None)
        manager.notify("on_selection_event", SelectionEvent.TAPPED, None)
        assert observer.calls == 1
        assert len(manager) == 0

    @pytest.mark.unit
    def test_clear(self, manager):
        """Test removing every observer."""
        manager.register(Mock(spec=SelectionObserver))
        manager.register(Mock(spec=SelectionObserver))
        manager.clear()
        assert len(manager) == 0
