"""CLI commands for fretlab."""

from .config import config
from .selection import highlight, tap
from .theory import analyze, chord, chords, note, scale, scales

__all__ = ["analyze", "chord", "chords", "config", "highlight", "note", "scale", "scales", "tap"]
