"""Events and protocols connecting the engine to its collaborators.

- Events: selection changes
- Observers: components that react to selection changes and diagnostics
- Sinks: the playback collaborator
"""

from .events import SelectionEvent
from .observers import DiagnosticObserver, PlaybackSink, SelectionObserver

__all__ = [
    "DiagnosticObserver",
    "PlaybackSink",
    # Events
    "SelectionEvent",
    # Observers
    "SelectionObserver",
]
