"""Observer and collaborator protocols.

- Selection observers: react to selection changes
- Diagnostic observers: receive soft-failure reports
- Playback sinks: play a list of MIDI notes
"""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from fretlab.models import Diagnostic, SelectionConfig

from .events import SelectionEvent


@runtime_checkable
class SelectionObserver(Protocol):
    """
    Observer that receives selection changes.

    Renderers implement this to redraw highlights whenever the selection
    changes.
    """

    def on_selection_event(self, event: SelectionEvent, config: "SelectionConfig") -> None:
        """
        Handle a selection change.

        Args:
            event: What changed
            config: The selection after the change

        Error Handling:
            Exceptions raised by observers are caught and logged by the
            service. They do not reach the caller and do not stop other
            observers from being notified.
        """
        ...


@runtime_checkable
class DiagnosticObserver(Protocol):
    """Observer that receives soft-failure diagnostics."""

    def on_diagnostic(self, diagnostic: "Diagnostic") -> None:
        """
        Handle a diagnostic.

        Args:
            diagnostic: The degradation that applies to the current selection
        """
        ...


@runtime_checkable
class PlaybackSink(Protocol):
    """
    Audio collaborator that sounds MIDI notes.

    fretlab never produces sound itself; callers pass a sink to
    `SelectionService.play`.
    """

    def play_notes(self, midi_notes: list[int]) -> None:
        """
        Play notes.

        Args:
            midi_notes: MIDI note numbers, ascending
        """
        ...
