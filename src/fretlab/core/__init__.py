"""Core engine: highlight generation, tap state machine and diagnostics."""

from .diagnostics import diagnose
from .highlight import HighlightMap, get_highlight_map, get_notes_from_config
from .state_machine import (
    absolute_pitches,
    apply_tap,
    change_octaves,
    select_root,
    toggle_octave,
)

__all__ = [
    "HighlightMap",
    "absolute_pitches",
    "apply_tap",
    "change_octaves",
    "diagnose",
    "get_highlight_map",
    "get_notes_from_config",
    "select_root",
    "toggle_octave",
]
