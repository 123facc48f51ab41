"""Enumerations for fretlab."""

from enum import Enum


class IntervalQuality(str, Enum):
    """Interval quality, valued by its chord-symbol abbreviation."""

    PERFECT = "P"
    MAJOR = "M"
    MINOR = "m"
    AUGMENTED = "+"
    DIMINISHED = "°"


class ChordInversion(Enum):
    """Which chord tone (by sorted index) sits in the bass."""

    ROOT = 0
    FIRST = 1
    SECOND = 2
    THIRD = 3
    FOURTH = 4
    FIFTH = 5
    SIXTH = 6

    @property
    def index(self) -> int:
        """Index into the sorted chord-tone list."""
        return self.value

    @property
    def display_name(self) -> str:
        """Human readable name ("Root Position", "1st Inversion" ...)."""
        if self is ChordInversion.ROOT:
            return "Root Position"
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(self.value, "th")
        return f"{self.value}{suffix} Inversion"

    @classmethod
    def for_tone_count(cls, tone_count: int) -> list["ChordInversion"]:
        """Inversions available to a chord with the given number of tones."""
        return list(cls)[: max(0, tone_count)]


class ChordVariant(str, Enum):
    """Chord-shape views that have no highlight rules yet."""

    OPEN = "open"
    BARRE = "barre"
    ADVANCED = "advanced"


class DiagnosticCode(str, Enum):
    """Kinds of soft failure reported instead of raising."""

    UNKNOWN_SCALE = "unknown_scale"            # Scale name not in the table
    UNKNOWN_CHORD = "unknown_chord"            # Chord type not in the table
    INVERSION_CLAMPED = "inversion_clamped"    # Inversion beyond the chord's tones
    LABEL_OUT_OF_RANGE = "label_out_of_range"  # Interval has no label, shown as root
    UNIMPLEMENTED_VIEW = "unimplemented_view"  # View mode highlights nothing
