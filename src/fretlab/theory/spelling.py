"""Note-name spelling: normalization, pitch-class lookup and flat preference.

Spellings are kept as plain ASCII internally ("C#", "Bb"); unicode
accidentals are accepted on input and produced only for display.
"""

import logging
import re

from fretlab.exceptions import InvalidNoteName

from .constants import (
    FLAT_NOTE_NAMES,
    FLAT_ROOTS,
    FLAT_SYMBOL,
    PITCH_CLASSES,
    SHARP_NOTE_NAMES,
    SHARP_SYMBOL,
)

logger = logging.getLogger(__name__)

_NOTE_PATTERN = re.compile(r"^([A-Ga-g])([#b]?)(-?\d+)?$")


def _ascii_accidentals(text: str) -> str:
    return text.replace(SHARP_SYMBOL, "#").replace(FLAT_SYMBOL, "b")


def split_note_text(text: str) -> tuple[str, int | None]:
    """
    Split note text into a normalized spelling and an optional octave.

    Args:
        text: Note text such as "f#3", "B♭-1" or "Eb"

    Returns:
        Tuple of (spelling, octave or None when no octave was given)

    Raises:
        InvalidNoteName: If the text is not letter + accidental + octave,
            or the spelling is not one of the recognized 17
    """
    cleaned = _ascii_accidentals(text.strip())
    match = _NOTE_PATTERN.match(cleaned)
    if match is None:
        raise InvalidNoteName(text, "expected <letter>[accidental][octave]")

    letter, accidental, octave_text = match.groups()
    spelling = letter.upper() + accidental
    if spelling not in PITCH_CLASSES:
        raise InvalidNoteName(text, f"unsupported spelling {spelling!r}")

    octave = int(octave_text) if octave_text is not None else None
    return spelling, octave


def normalize_note_name(name: str) -> str:
    """
    Return the canonical ASCII spelling of a bare note name.

    Example:
        >>> normalize_note_name("b♭")
        'Bb'
    """
    spelling, octave = split_note_text(name)
    if octave is not None:
        raise InvalidNoteName(name, "expected a note name without an octave")
    return spelling


def pitch_class_of(name: str) -> int:
    """Get the pitch class (0-11) of a bare note name."""
    return PITCH_CLASSES[normalize_note_name(name)]


def prefers_flats(name: str) -> bool:
    """
    Key-signature heuristic for display spelling.

    True for flat spellings and for keys on the flat side of the circle
    of fifths (F, Bb, Eb, Ab, Db, Gb).
    """
    cleaned = _ascii_accidentals(name.strip())
    if not cleaned:
        return False
    cleaned = cleaned[0].upper() + cleaned[1:]
    return cleaned in FLAT_ROOTS or cleaned.endswith("b")


def spell_pitch_class(pitch_class: int, prefer_flats: bool = False) -> str:
    """Spell a pitch class in ASCII, using flats when requested."""
    names = FLAT_NOTE_NAMES if prefer_flats else SHARP_NOTE_NAMES
    return names[pitch_class % 12]


def to_display(name: str) -> str:
    """Replace ASCII accidentals with unicode ones ("Bb" -> "B♭")."""
    if len(name) < 2:
        return name
    return name[0] + name[1:].replace("#", SHARP_SYMBOL).replace("b", FLAT_SYMBOL)
