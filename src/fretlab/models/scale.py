"""Scale model."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Scale(BaseModel):
    """
    A named scale as ascending semitone offsets from its root.

    ``mode_names`` holds one name per rotation when the modes are known.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Scale name")
    intervals: tuple[int, ...] = Field(min_length=1, description="Ascending offsets, starting at 0")
    mode_names: tuple[str, ...] | None = Field(default=None, description="Name of each mode")

    @field_validator("intervals")
    @classmethod
    def validate_intervals(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Intervals start at 0, ascend strictly and stay within [0, 11]."""
        if v[0] != 0:
            raise ValueError("Scale intervals must start at 0")
        if any(b <= a for a, b in zip(v, v[1:])):
            raise ValueError("Scale intervals must be strictly ascending")
        if v[-1] > 11:
            raise ValueError("Scale intervals must be within one octave (0-11)")
        return v

    def __len__(self) -> int:
        return len(self.intervals)

    def __str__(self) -> str:
        return self.name

    def contains_pitch_class(self, pitch_class: int, root_pitch_class: int) -> bool:
        """Check if a pitch class belongs to this scale built on a root."""
        return (pitch_class - root_pitch_class) % 12 in self.intervals

    def pitch_classes(self, root_pitch_class: int) -> list[int]:
        """Pitch classes of this scale built on a root, in scale order."""
        return [(root_pitch_class + i) % 12 for i in self.intervals]
