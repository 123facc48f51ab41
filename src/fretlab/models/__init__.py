"""Data models for fretlab."""

from .chord import Chord
from .color import Color
from .config import AppConfig
from .enums import ChordInversion, ChordVariant, DiagnosticCode, IntervalQuality
from .highlight import Diagnostic, HighlightEntry
from .interval import Interval
from .note import Note, parse_note
from .scale import Scale
from .selection import SelectionConfig
from .view_mode import (
    ChordInversionView,
    IntervalView,
    ScaleView,
    UnimplementedChordView,
    ViewMode,
)

__all__ = [
    "AppConfig",
    # Models
    "Chord",
    # Enums
    "ChordInversion",
    # View modes
    "ChordInversionView",
    "ChordVariant",
    "Color",
    "Diagnostic",
    "DiagnosticCode",
    "HighlightEntry",
    "Interval",
    "IntervalQuality",
    "IntervalView",
    "Note",
    "Scale",
    "ScaleView",
    "SelectionConfig",
    "UnimplementedChordView",
    "ViewMode",
    "parse_note",
]
