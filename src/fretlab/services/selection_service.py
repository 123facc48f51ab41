"""Selection service: holds the current selection for one UI."""

import logging
from collections.abc import Callable, Iterable
from threading import Lock

from fretlab.core import (
    apply_tap,
    change_octaves,
    diagnose,
    get_highlight_map,
    get_notes_from_config,
    select_root,
    toggle_octave,
)
from fretlab.core.highlight import HighlightMap
from fretlab.exceptions import handle_errors
from fretlab.models import AppConfig, Diagnostic, SelectionConfig, ViewMode
from fretlab.models.view_mode import ScaleView
from fretlab.protocols import DiagnosticObserver, PlaybackSink, SelectionEvent, SelectionObserver
from fretlab.utils import ObserverManager

logger = logging.getLogger(__name__)


class SelectionService:
    """
    Applies edits to a selection and notifies observers.

    The engine functions in `fretlab.core` are pure; this service is the
    boundary that owns the one mutable reference to the current
    `SelectionConfig`, forwards soft-failure diagnostics and hands notes
    to a playback collaborator.

    Event-Driven Architecture:
        Every change emits a SelectionEvent to registered
        SelectionObservers, followed by any diagnostics for the new
        selection to DiagnosticObservers.

    Threading:
        The _lock guards the current config. It is released before
        observers are notified, so observers may call back into the
        service.

    Example:
        ```python
        service = SelectionService()
        service.register_observer(renderer)
        service.tap(60)
        service.tap(64)
        service.play(audio_backend)
        ```
    """

    def __init__(self, initial: SelectionConfig | None = None, lowest_midi: int | None = None):
        """
        Initialize the selection service.

        Args:
            initial: Starting selection (empty interval selection if None)
            lowest_midi: Lowest note the instrument can show; taps below the
                root re-root instead of moving the reference below it
        """
        self._lock = Lock()
        self._config = initial or SelectionConfig.empty()
        self._lowest_midi = lowest_midi

        self._observers = ObserverManager[SelectionObserver](observer_type_name="selection")
        self._diagnostic_observers = ObserverManager[DiagnosticObserver](observer_type_name="diagnostic")
        logger.info("SelectionService initialized")

    @classmethod
    def from_app_config(cls, app_config: AppConfig) -> "SelectionService":
        """Create a service starting from the configured root, octave and scale."""
        initial = SelectionConfig.from_scale(
            app_config.default_root,
            app_config.default_scale,
            octaves={app_config.default_octave},
        )
        return cls(initial=initial)

    @property
    def config(self) -> SelectionConfig:
        """Current selection."""
        with self._lock:
            return self._config

    @property
    def lowest_midi(self) -> int | None:
        return self._lowest_midi

    # =================================================================
    # Event System
    # =================================================================

    def register_observer(self, observer: SelectionObserver) -> None:
        """
        Register an observer to receive selection events.

        Args:
            observer: Object implementing SelectionObserver protocol
        """
        self._observers.register(observer)

    def unregister_observer(self, observer: SelectionObserver) -> None:
        """
        Unregister an observer.

        Args:
            observer: Previously registered observer
        """
        self._observers.unregister(observer)

    def register_diagnostic_observer(self, observer: DiagnosticObserver) -> None:
        """Register an observer to receive soft-failure diagnostics."""
        self._diagnostic_observers.register(observer)

    def unregister_diagnostic_observer(self, observer: DiagnosticObserver) -> None:
        self._diagnostic_observers.unregister(observer)

    def _update(
        self, transform: Callable[[SelectionConfig], SelectionConfig], event: SelectionEvent
    ) -> SelectionConfig:
        with self._lock:
            config = transform(self._config)
            self._config = config

        self._observers.notify("on_selection_event", event, config)
        self._report_diagnostics(config)
        return config

    def _report_diagnostics(self, config: SelectionConfig) -> None:
        diagnostics = diagnose(config)
        for diagnostic in diagnostics:
            logger.info(f"Selection diagnostic: {diagnostic}")
            self._diagnostic_observers.notify("on_diagnostic", diagnostic)

    # =================================================================
    # Edits
    # =================================================================

    def tap(self, midi: int) -> SelectionConfig:
        """
        Tap a note: add it, remove it or start a new selection.

        Args:
            midi: Tapped MIDI note

        Returns:
            The new selection
        """
        logger.debug(f"Tap on MIDI {midi}")
        return self._update(lambda c: apply_tap(c, midi, self._lowest_midi), SelectionEvent.TAPPED)

    def set_config(self, config: SelectionConfig) -> SelectionConfig:
        """Replace the whole selection (e.g., with a preset)."""
        return self._update(lambda _: config, SelectionEvent.CONFIG_REPLACED)

    def select_root(self, midi: int) -> SelectionConfig:
        """Make the tapped note's pitch class the root."""
        return self._update(lambda c: select_root(c, midi), SelectionEvent.ROOT_CHANGED)

    def change_octaves(self, octaves: Iterable[int]) -> SelectionConfig:
        """Replace the selected octave set."""
        octaves = frozenset(octaves)
        return self._update(lambda c: change_octaves(c, octaves), SelectionEvent.OCTAVES_CHANGED)

    def toggle_octave(self, octave: int) -> SelectionConfig:
        """Add or remove one octave."""
        return self._update(lambda c: toggle_octave(c, octave), SelectionEvent.OCTAVES_CHANGED)

    def set_view_mode(self, view_mode: ViewMode) -> SelectionConfig:
        """Switch how the selection is projected."""
        return self._update(
            lambda c: c.model_copy(update={"view_mode": view_mode}), SelectionEvent.VIEW_CHANGED
        )

    def set_mode_index(self, mode_index: int) -> SelectionConfig:
        """
        Select a mode of the current scale.

        Raises:
            ValueError: If the current view is not a scale view
        """
        def with_mode(config: SelectionConfig) -> SelectionConfig:
            view = config.view_mode
            if not isinstance(view, ScaleView):
                raise ValueError(f"Mode index needs a scale view, current view is {view.kind!r}")
            return config.model_copy(update={"view_mode": view.model_copy(update={"mode_index": mode_index})})

        return self._update(with_mode, SelectionEvent.VIEW_CHANGED)

    def clear(self) -> SelectionConfig:
        """Empty the interval selection, keeping root and view."""
        return self._update(
            lambda c: c.model_copy(update={"selected_intervals": frozenset()}), SelectionEvent.CLEARED
        )

    # =================================================================
    # Queries
    # =================================================================

    def highlight_map(self) -> HighlightMap:
        """Highlight map of the current selection."""
        return get_highlight_map(self.config)

    def notes(self) -> list[int]:
        """Highlighted MIDI notes, ascending."""
        return get_notes_from_config(self.config)

    def diagnostics(self) -> list[Diagnostic]:
        """Soft failures that apply to the current selection."""
        return diagnose(self.config)

    @handle_errors(operation_name="play selection")
    def play(self, sink: PlaybackSink) -> list[int]:
        """
        Hand the highlighted notes to a playback collaborator.

        Args:
            sink: Object implementing PlaybackSink

        Returns:
            The notes passed to the sink
        """
        notes = self.notes()
        if not notes:
            logger.debug("Nothing selected to play")
            return notes
        sink.play_notes(notes)
        return notes
