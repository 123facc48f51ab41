"""Shared music-theory constants."""

SEMITONES_PER_OCTAVE = 12

# Octave assumed when a note name is given without one ("C" -> C3)
DEFAULT_OCTAVE = 3

A4_FREQUENCY = 440.0
A4_MIDI = 69

SHARP_NOTE_NAMES: tuple[str, ...] = (
    "C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B",
)
FLAT_NOTE_NAMES: tuple[str, ...] = (
    "C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B",
)

# The 17 recognized spellings and their pitch classes
PITCH_CLASSES: dict[str, int] = {
    "C": 0,
    "C#": 1,
    "Db": 1,
    "D": 2,
    "D#": 3,
    "Eb": 3,
    "E": 4,
    "F": 5,
    "F#": 6,
    "Gb": 6,
    "G": 7,
    "G#": 8,
    "Ab": 8,
    "A": 9,
    "A#": 10,
    "Bb": 10,
    "B": 11,
}

# Keys on the flat side of the circle of fifths
FLAT_ROOTS: frozenset[str] = frozenset({"F", "Bb", "Eb", "Ab", "Db", "Gb", "Cb"})

SHARP_SYMBOL = "♯"
FLAT_SYMBOL = "♭"

FRET_MARKERS: frozenset[int] = frozenset({3, 5, 7, 9, 12, 15, 17, 19, 21, 24})
DOUBLE_FRET_MARKERS: frozenset[int] = frozenset({12, 24})
