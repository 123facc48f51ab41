"""Piano keyboard projection of a highlight map."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fretlab.models.highlight import HighlightEntry
from fretlab.models.note import Note

BLACK_KEY_PITCH_CLASSES = frozenset({1, 3, 6, 8, 10})


class KeyInfo(BaseModel):
    """One key of a keyboard layout, with its highlight if any."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(ge=0, description="Position from the lowest key")
    midi: int = Field(description="MIDI note number")
    name: str = Field(description="Spelling with octave (e.g., 'C#3')")
    octave: int = Field(description="Octave number")
    is_black: bool = Field(description="True for sharps/flats")
    highlight: HighlightEntry | None = Field(default=None, description="Highlight for this key")


class KeyboardLayout(BaseModel):
    """
    A contiguous range of piano keys.

    Example:
        >>> layout = KeyboardLayout(start_note="C3", key_count=25)
        >>> layout.start_midi, layout.end_midi
        (48, 72)
    """

    model_config = ConfigDict(frozen=True)

    start_note: str = Field(default="C3", description="Lowest key (note with octave)")
    key_count: int = Field(default=25, ge=1, le=128, description="Number of keys")

    @field_validator("start_note")
    @classmethod
    def validate_start_note(cls, v: str) -> str:
        """Normalize to the ASCII spelling with octave."""
        return Note.parse(v).full_name

    @property
    def start_midi(self) -> int:
        return Note.parse(self.start_note).midi

    @property
    def end_midi(self) -> int:
        """Highest key (inclusive)."""
        return self.start_midi + self.key_count - 1

    @property
    def midi_range(self) -> range:
        return range(self.start_midi, self.end_midi + 1)

    @property
    def white_key_count(self) -> int:
        return sum(1 for m in self.midi_range if m % 12 not in BLACK_KEY_PITCH_CLASSES)

    def contains(self, midi: int) -> bool:
        """Check whether a MIDI note is on this keyboard."""
        return self.start_midi <= midi <= self.end_midi

    def filter_highlights(self, highlights: dict[int, HighlightEntry]) -> dict[int, HighlightEntry]:
        """Keep only highlights that fall on this keyboard."""
        return {midi: entry for midi, entry in highlights.items() if self.contains(midi)}

    def keys(
        self, highlights: dict[int, HighlightEntry] | None = None, prefer_flats: bool = False
    ) -> list[KeyInfo]:
        """
        Describe every key, attaching highlights where present.

        Args:
            highlights: Highlight map to project (optional)
            prefer_flats: Spell black keys with flats

        Returns:
            One KeyInfo per key, lowest first
        """
        highlights = highlights or {}
        keys = []
        for index, midi in enumerate(self.midi_range):
            note = Note.from_midi(midi, prefer_flats=prefer_flats)
            keys.append(
                KeyInfo(
                    index=index,
                    midi=midi,
                    name=note.full_name,
                    octave=note.octave,
                    is_black=note.pitch_class in BLACK_KEY_PITCH_CLASSES,
                    highlight=highlights.get(midi),
                )
            )
        return keys
