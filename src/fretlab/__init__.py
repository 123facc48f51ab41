"""fretlab: music theory engine for fretboard and keyboard visualizers."""

__version__ = "0.1.0"

# Data models
from .models import (
    AppConfig,
    Chord,
    ChordInversion,
    ChordInversionView,
    IntervalView,
    Note,
    Scale,
    ScaleView,
    SelectionConfig,
    UnimplementedChordView,
    parse_note,
)

# Core engine
from .colors import color_for_degree
from .core import apply_tap, diagnose, get_highlight_map, get_notes_from_config
from .theory.chords import build_voicing
from .services import SelectionService

__all__ = [
    "AppConfig",
    "Chord",
    "ChordInversion",
    "ChordInversionView",
    "IntervalView",
    "Note",
    "Scale",
    "ScaleView",
    "SelectionConfig",
    "SelectionService",
    "UnimplementedChordView",
    "apply_tap",
    "build_voicing",
    "color_for_degree",
    "diagnose",
    "get_highlight_map",
    "get_notes_from_config",
    "parse_note",
]
