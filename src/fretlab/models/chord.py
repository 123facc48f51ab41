"""Chord model."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .enums import ChordInversion


class Chord(BaseModel):
    """
    A named chord as ascending semitone offsets from its root.

    Offsets may exceed 12 for extended chords (9ths, 11ths, 13ths).
    """

    model_config = ConfigDict(frozen=True)

    type: str = Field(description="Lookup key, e.g. 'minor7'")
    symbol: str = Field(description="Suffix after the root, e.g. 'm7'")
    display_name: str = Field(description="Human readable name")
    intervals: tuple[int, ...] = Field(min_length=1, description="Ascending offsets from the root")
    category: str = Field(description="Group, e.g. 'Seventh Chords'")

    @field_validator("intervals")
    @classmethod
    def validate_intervals(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Offsets are non-negative and ascending (repeated tones allowed)."""
        if any(i < 0 for i in v):
            raise ValueError("Chord intervals must be non-negative")
        if list(v) != sorted(v):
            raise ValueError("Chord intervals must be ascending")
        return v

    @property
    def tone_count(self) -> int:
        return len(self.intervals)

    @property
    def inversions(self) -> list[ChordInversion]:
        """Inversions this chord supports (one per tone)."""
        return ChordInversion.for_tone_count(self.tone_count)

    def __str__(self) -> str:
        return self.display_name
