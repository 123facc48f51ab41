"""Note model: pitch class plus octave."""

from pydantic import BaseModel, ConfigDict, Field

from fretlab.theory.constants import A4_FREQUENCY, A4_MIDI, DEFAULT_OCTAVE, PITCH_CLASSES
from fretlab.theory.spelling import (
    normalize_note_name,
    prefers_flats,
    spell_pitch_class,
    split_note_text,
    to_display,
)


class Note(BaseModel):
    """
    A pitched note identified by pitch class and octave.

    MIDI number is derived as ``(octave + 1) * 12 + pitch_class``, so C4 is 60
    and C#3 is 49. Equality and hashing use ``(pitch_class, octave)`` only:
    ``prefer_flats`` is a display hint and two spellings of the same pitch
    compare equal.

    The model is frozen so notes can be used as dict keys and set members.

    Example:
        >>> Note.parse("Db3") == Note.parse("C#3")
        True
        >>> Note.parse("Bb-1").midi
        10
    """

    model_config = ConfigDict(frozen=True)

    pitch_class: int = Field(ge=0, le=11, description="Pitch class (0=C ... 11=B)")
    octave: int = Field(description="Octave number (C4 = middle C)")
    prefer_flats: bool = Field(default=False, description="Spell with flats when displayed")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Note):
            return NotImplemented
        return self.pitch_class == other.pitch_class and self.octave == other.octave

    def __hash__(self) -> int:
        return hash((self.pitch_class, self.octave))

    def __str__(self) -> str:
        return self.full_name

    @classmethod
    def parse(cls, text: str) -> "Note":
        """
        Parse note text such as "C#3", "f♯3" or "Bb-1".

        The octave may be omitted, in which case octave 3 is assumed.

        Raises:
            InvalidNoteName: If the spelling is not recognized
        """
        spelling, octave = split_note_text(text)
        return cls(
            pitch_class=PITCH_CLASSES[spelling],
            octave=DEFAULT_OCTAVE if octave is None else octave,
            prefer_flats=prefers_flats(spelling),
        )

    @classmethod
    def from_name(cls, name: str, octave: int) -> "Note":
        """Create a note from a bare spelling ("Bb") and an octave."""
        spelling = normalize_note_name(name)
        return cls(
            pitch_class=PITCH_CLASSES[spelling],
            octave=octave,
            prefer_flats=prefers_flats(spelling),
        )

    @classmethod
    def from_midi(cls, midi: int, prefer_flats: bool = False) -> "Note":
        """Create a note from a MIDI number (floor division keeps negatives consistent)."""
        return cls(pitch_class=midi % 12, octave=midi // 12 - 1, prefer_flats=prefer_flats)

    @property
    def midi(self) -> int:
        """MIDI note number."""
        return (self.octave + 1) * 12 + self.pitch_class

    @property
    def name(self) -> str:
        """ASCII spelling without octave (e.g., 'C#' or 'Db')."""
        return spell_pitch_class(self.pitch_class, self.prefer_flats)

    @property
    def display_name(self) -> str:
        """Spelling with unicode accidentals (e.g., 'C♯')."""
        return to_display(self.name)

    @property
    def full_name(self) -> str:
        """ASCII spelling with octave (e.g., 'C#3')."""
        return f"{self.name}{self.octave}"

    @property
    def frequency(self) -> float:
        """Frequency in Hz, equal temperament with A4 = 440 Hz."""
        return A4_FREQUENCY * 2 ** ((self.midi - A4_MIDI) / 12)

    @property
    def enharmonic(self) -> "Note":
        """Same pitch spelled the other way."""
        return self.model_copy(update={"prefer_flats": not self.prefer_flats})

    def transpose(self, semitones: int) -> "Note":
        """Shift by a number of semitones; there are no range limits."""
        return Note.from_midi(self.midi + semitones, prefer_flats=self.prefer_flats)

    def interval_to(self, other: "Note") -> int:
        """Distance to another note in semitones (always non-negative)."""
        return abs(other.midi - self.midi)

    def in_scale(self, root_pitch_class: int, intervals: list[int] | tuple[int, ...]) -> bool:
        """Check whether this note's pitch class belongs to a scale built on a root."""
        return (self.pitch_class - root_pitch_class) % 12 in {i % 12 for i in intervals}


def parse_note(text: str) -> Note:
    """
    Parse note text into a Note.

    Args:
        text: Note text such as "C#3" or "Bb-1"

    Returns:
        The parsed Note

    Raises:
        InvalidNoteName: If the letter/accidental combination is not one of
            the 17 recognized spellings
    """
    return Note.parse(text)
