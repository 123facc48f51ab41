"""Music-theory tables and pure functions.

- `constants`: note names, reference pitches, fret markers
- `spelling`: note-name normalization and flat preference
- `intervals`: interval labels
- `scales`: scale table and mode rotation
- `chords`: chord table and voicing construction

Only the leaf modules are imported here; `scales` and `chords` depend on
`fretlab.models` and are imported directly where needed.
"""

from .constants import DEFAULT_OCTAVE, SEMITONES_PER_OCTAVE
from .spelling import normalize_note_name, prefers_flats

__all__ = [
    "DEFAULT_OCTAVE",
    "SEMITONES_PER_OCTAVE",
    "normalize_note_name",
    "prefers_flats",
]
