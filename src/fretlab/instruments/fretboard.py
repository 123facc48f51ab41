"""Fretboard projection of a highlight map."""

import logging

from pydantic import BaseModel, ConfigDict, Field

from fretlab.models.highlight import HighlightEntry
from fretlab.models.note import Note
from fretlab.theory.constants import DOUBLE_FRET_MARKERS, FRET_MARKERS

from .tunings import TUNINGS, Tuning

logger = logging.getLogger(__name__)


class FretPosition(BaseModel):
    """A (string, fret) location and the note it sounds."""

    model_config = ConfigDict(frozen=True)

    string_index: int = Field(ge=0, description="String number, 0 = lowest-listed string")
    fret: int = Field(ge=0, description="Fret number, 0 = open string")
    midi: int = Field(description="MIDI note sounded")
    highlight: HighlightEntry | None = Field(default=None, description="Highlight at this position")

    @property
    def has_marker(self) -> bool:
        """Inlay marker on this fret."""
        return self.fret in FRET_MARKERS

    @property
    def has_double_marker(self) -> bool:
        return self.fret in DOUBLE_FRET_MARKERS


class FretboardLayout(BaseModel):
    """
    A tuned fretboard with a fixed number of frets.

    Example:
        >>> board = FretboardLayout(tuning=TUNINGS["Guitar (6-string)"], fret_count=12)
        >>> board.note_at(0, 5).full_name
        'A2'
    """

    model_config = ConfigDict(frozen=True)

    tuning: Tuning = Field(default_factory=lambda: TUNINGS["Guitar (6-string)"], description="String tuning")
    fret_count: int = Field(default=12, ge=1, le=24, description="Number of frets")

    @property
    def string_notes(self) -> list[Note]:
        return self.tuning.notes

    @property
    def lowest_midi(self) -> int:
        """Lowest note playable (lowest open string)."""
        return min(n.midi for n in self.string_notes)

    @property
    def highest_midi(self) -> int:
        """Highest note playable (highest open string at the last fret)."""
        return max(n.midi for n in self.string_notes) + self.fret_count

    def contains(self, midi: int) -> bool:
        """Check whether any string can sound a MIDI note."""
        return any(0 <= midi - n.midi <= self.fret_count for n in self.string_notes)

    def note_at(self, string_index: int, fret: int) -> Note:
        """
        Note sounded at a position.

        Raises:
            ValueError: If the string or fret is out of range
        """
        notes = self.string_notes
        if not 0 <= string_index < len(notes):
            raise ValueError(f"String {string_index} out of range (0-{len(notes) - 1})")
        if not 0 <= fret <= self.fret_count:
            raise ValueError(f"Fret {fret} out of range (0-{self.fret_count})")
        return notes[string_index].transpose(fret)

    def positions_for(self, midi: int) -> list[FretPosition]:
        """Every position that sounds a MIDI note, in string order."""
        positions = []
        for string_index, open_note in enumerate(self.string_notes):
            fret = midi - open_note.midi
            if 0 <= fret <= self.fret_count:
                positions.append(FretPosition(string_index=string_index, fret=fret, midi=midi))
        return positions

    def highlight_positions(self, highlights: dict[int, HighlightEntry]) -> list[FretPosition]:
        """
        Project a highlight map onto the fretboard.

        Notes outside the playable range are skipped.

        Returns:
            Highlighted positions ordered by string then fret
        """
        positions = []
        for string_index, open_note in enumerate(self.string_notes):
            for fret in range(self.fret_count + 1):
                entry = highlights.get(open_note.midi + fret)
                if entry is not None:
                    positions.append(
                        FretPosition(string_index=string_index, fret=fret, midi=entry.midi, highlight=entry)
                    )

        skipped = [m for m in highlights if not self.contains(m)]
        if skipped:
            logger.debug(f"{len(skipped)} highlighted note(s) outside the fretboard: {sorted(skipped)}")
        return positions
