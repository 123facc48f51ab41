"""Interval model."""

from pydantic import BaseModel, ConfigDict, Field

from fretlab.theory.intervals import (
    CONSONANT_STEPS,
    PERFECT_STEPS,
    get_interval_label,
    get_interval_name,
)

from .enums import IntervalQuality

_QUALITIES: dict[int, IntervalQuality] = {
    0: IntervalQuality.PERFECT,
    1: IntervalQuality.MINOR,
    2: IntervalQuality.MAJOR,
    3: IntervalQuality.MINOR,
    4: IntervalQuality.MAJOR,
    5: IntervalQuality.PERFECT,
    6: IntervalQuality.DIMINISHED,
    7: IntervalQuality.PERFECT,
    8: IntervalQuality.MINOR,
    9: IntervalQuality.MAJOR,
    10: IntervalQuality.MINOR,
    11: IntervalQuality.MAJOR,
}


class Interval(BaseModel):
    """A distance in semitones, possibly spanning several octaves."""

    model_config = ConfigDict(frozen=True)

    semitones: int = Field(ge=0, description="Size in semitones")

    def __str__(self) -> str:
        return f"{self.name} ({self.semitones} semitones)"

    def __add__(self, other: "Interval") -> "Interval":
        return Interval(semitones=self.semitones + other.semitones)

    def __sub__(self, other: "Interval") -> "Interval":
        return Interval(semitones=abs(self.semitones - other.semitones))

    @property
    def simple(self) -> int:
        """Size reduced to a single octave (0-11)."""
        return self.semitones % 12

    @property
    def name(self) -> str:
        """Descriptive name, e.g. 'Perfect 5th'."""
        return get_interval_name(self.semitones)

    @property
    def label(self) -> str:
        """Degree label, e.g. '♭3' or '9'."""
        return get_interval_label(self.semitones)

    @property
    def quality(self) -> IntervalQuality:
        return _QUALITIES[self.simple]

    @property
    def is_consonant(self) -> bool:
        return self.simple in CONSONANT_STEPS

    @property
    def is_perfect(self) -> bool:
        return self.simple in PERFECT_STEPS

    @property
    def inverted(self) -> "Interval":
        """Complement within the octave (a 3rd inverts to a 6th)."""
        return Interval(semitones=12 - self.simple)
