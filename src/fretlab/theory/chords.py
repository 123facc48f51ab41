"""Chord table and voicing construction."""

import logging
from collections.abc import Iterable

from fretlab.models.chord import Chord
from fretlab.models.enums import ChordInversion
from fretlab.models.note import Note
from fretlab.theory.spelling import to_display

logger = logging.getLogger(__name__)

# (type, symbol, display name, intervals, category)
_CHORD_ROWS: tuple[tuple[str, str, str, tuple[int, ...], str], ...] = (
    ("major", "", "Major", (0, 4, 7), "Basic Triads"),
    ("minor", "m", "Minor", (0, 3, 7), "Basic Triads"),
    ("diminished", "°", "Diminished", (0, 3, 6), "Basic Triads"),
    ("augmented", "+", "Augmented", (0, 4, 8), "Basic Triads"),
    ("sus2", "sus2", "Suspended 2nd", (0, 2, 7), "Suspended"),
    ("sus4", "sus4", "Suspended 4th", (0, 5, 7), "Suspended"),
    ("7sus2", "7sus2", "7 Suspended 2nd", (0, 2, 7, 10), "Suspended"),
    ("7sus4", "7sus4", "7 Suspended 4th", (0, 5, 7, 10), "Suspended"),
    ("major7", "maj7", "Major 7th", (0, 4, 7, 11), "Seventh Chords"),
    ("minor7", "m7", "Minor 7th", (0, 3, 7, 10), "Seventh Chords"),
    ("dominant7", "7", "Dominant 7th", (0, 4, 7, 10), "Seventh Chords"),
    ("diminished7", "°7", "Diminished 7th", (0, 3, 6, 9), "Seventh Chords"),
    ("half-diminished7", "ø7", "Half Diminished 7th", (0, 3, 6, 10), "Seventh Chords"),
    ("augmented7", "+7", "Augmented 7th", (0, 4, 8, 10), "Seventh Chords"),
    ("augmented-major7", "+maj7", "Augmented Major 7th", (0, 4, 8, 11), "Seventh Chords"),
    ("minor-major7", "m(maj7)", "Minor Major 7th", (0, 3, 7, 11), "Seventh Chords"),
    ("major6", "6", "Major 6th", (0, 4, 7, 9), "Sixth Chords"),
    ("minor6", "m6", "Minor 6th", (0, 3, 7, 9), "Sixth Chords"),
    ("6/9", "6/9", "6/9", (0, 4, 7, 9, 14), "Sixth Chords"),
    ("m6/9", "m6/9", "Minor 6/9", (0, 3, 7, 9, 14), "Sixth Chords"),
    ("add9", "add9", "Add 9th", (0, 4, 7, 14), "Add Chords"),
    ("add11", "add11", "Add 11th", (0, 4, 7, 17), "Add Chords"),
    ("add13", "add13", "Add 13th", (0, 4, 7, 21), "Add Chords"),
    ("madd9", "m(add9)", "Minor Add 9th", (0, 3, 7, 14), "Add Chords"),
    ("madd11", "m(add11)", "Minor Add 11th", (0, 3, 7, 17), "Add Chords"),
    ("add4", "add4", "Add 4th", (0, 4, 5, 7), "Add Chords"),
    ("major9", "maj9", "Major 9th", (0, 4, 7, 11, 14), "Extended (9ths)"),
    ("minor9", "m9", "Minor 9th", (0, 3, 7, 10, 14), "Extended (9ths)"),
    ("dominant9", "9", "Dominant 9th", (0, 4, 7, 10, 14), "Extended (9ths)"),
    ("9sus4", "9sus4", "9 Suspended 4th", (0, 5, 7, 10, 14), "Extended (9ths)"),
    ("7b9", "7♭9", "7 Flat 9", (0, 4, 7, 10, 13), "Extended (9ths)"),
    ("7#9", "7♯9", "7 Sharp 9", (0, 4, 7, 10, 15), "Extended (9ths)"),
    ("maj7#9", "maj7♯9", "Major 7 Sharp 9", (0, 4, 7, 11, 15), "Extended (9ths)"),
    ("major11", "maj11", "Major 11th", (0, 4, 7, 11, 14, 17), "Extended (11ths)"),
    ("minor11", "m11", "Minor 11th", (0, 3, 7, 10, 14, 17), "Extended (11ths)"),
    ("dominant11", "11", "Dominant 11th", (0, 4, 7, 10, 14, 17), "Extended (11ths)"),
    ("7#11", "7♯11", "7 Sharp 11", (0, 4, 7, 10, 18), "Extended (11ths)"),
    ("maj7#11", "maj7♯11", "Major 7 Sharp 11", (0, 4, 7, 11, 18), "Extended (11ths)"),
    ("m7b5add11", "m7♭5(add11)", "Minor 7 Flat 5 Add 11", (0, 3, 6, 10, 17), "Extended (11ths)"),
    ("major13", "maj13", "Major 13th", (0, 4, 7, 11, 14, 17, 21), "Extended (13ths)"),
    ("minor13", "m13", "Minor 13th", (0, 3, 7, 10, 14, 17, 21), "Extended (13ths)"),
    ("dominant13", "13", "Dominant 13th", (0, 4, 7, 10, 14, 17, 21), "Extended (13ths)"),
    ("7b13", "7♭13", "7 Flat 13", (0, 4, 7, 10, 20), "Extended (13ths)"),
    ("7#13", "7♯13", "7 Sharp 13", (0, 4, 7, 10, 22), "Extended (13ths)"),
    ("power-chord", "5", "Power Chord (5th)", (0, 7), "Power Chords"),
    ("power-chord-octave", "5(8)", "Power Chord + Octave", (0, 7, 12), "Power Chords"),
    ("power-sus2", "sus2(no5)", "Power Sus2", (0, 2), "Power Chords"),
    ("power-sus4", "5sus4", "Power Sus4", (0, 5, 7), "Power Chords"),
    ("7alt", "7alt", "7 Altered", (0, 4, 7, 10, 13, 15), "Altered Chords"),
    ("7b5", "7♭5", "7 Flat 5", (0, 4, 6, 10), "Altered Chords"),
    ("7#5", "7♯5", "7 Sharp 5", (0, 4, 8, 10), "Altered Chords"),
    ("maj7b5", "maj7♭5", "Major 7 Flat 5", (0, 4, 6, 11), "Altered Chords"),
    ("maj7#5", "maj7♯5", "Major 7 Sharp 5", (0, 4, 8, 11), "Altered Chords"),
    ("7b9b13", "7♭9♭13", "7 Flat 9 Flat 13", (0, 4, 7, 10, 13, 20), "Altered Chords"),
    ("7#9b13", "7♯9♭13", "7 Sharp 9 Flat 13", (0, 4, 7, 10, 15, 20), "Altered Chords"),
    ("maj7#5#11", "maj7♯5♯11", "Major 7 Sharp 5 Sharp 11", (0, 4, 8, 11, 18), "Jazz Chords"),
    ("m7b9", "m7♭9", "Minor 7 Flat 9", (0, 3, 7, 10, 13), "Jazz Chords"),
    ("dim7add9", "°7(add9)", "Diminished 7 Add 9", (0, 3, 6, 9, 14), "Jazz Chords"),
    ("maj9#11", "maj9♯11", "Major 9 Sharp 11", (0, 4, 7, 11, 14, 18), "Jazz Chords"),
    ("m11b5", "m11♭5", "Minor 11 Flat 5", (0, 3, 6, 10, 14, 17), "Jazz Chords"),
    ("13sus4", "13sus4", "13 Suspended 4th", (0, 5, 7, 10, 14, 17, 21), "Jazz Chords"),
    ("quartal3", "Q3", "Quartal Triad", (0, 5, 10), "Quartal Chords"),
    ("quartal4", "Q4", "Quartal 4-note", (0, 5, 10, 15), "Quartal Chords"),
    ("quartal5", "Q5", "Quartal 5-note", (0, 5, 10, 15, 20), "Quartal Chords"),
    ("so-what", "SW", "So What Chord", (0, 5, 10, 15, 19), "Quartal Chords"),
    ("cluster-maj", "CMaj", "Major Cluster", (0, 2, 4), "Cluster Chords"),
    ("cluster-min", "Cmin", "Minor Cluster", (0, 1, 3), "Cluster Chords"),
    ("cluster-chromatic", "CChr", "Chromatic Cluster", (0, 1, 2), "Cluster Chords"),
    ("major-over-major", "|Maj", "Major over Major", (0, 4, 7, 14, 18, 21), "Polychords"),
    ("minor-over-major", "m|Maj", "Minor over Major", (0, 4, 7, 15, 18, 22), "Polychords"),
    ("mystic", "Mys", "Mystic Chord", (0, 6, 10, 16, 21, 26), "Special/Exotic"),
    ("elektra", "Elek", "Elektra Chord", (0, 7, 9, 13, 16), "Special/Exotic"),
    ("dream", "Dream", "Dream Chord", (0, 5, 6, 7), "Special/Exotic"),
    ("farben", "Farb", "Farben Chord", (0, 8, 11, 16, 21), "Special/Exotic"),
    ("tristan", "Trist", "Tristan Chord", (0, 3, 6, 10), "Special/Exotic"),
    ("petrushka", "Petr", "Petrushka Chord", (0, 1, 4, 6, 7, 10), "Special/Exotic"),
    ("viennese-trichord", "VT", "Viennese Trichord", (0, 1, 6), "Special/Exotic"),
    ("major-no3", "(no3)", "Major (no 3rd)", (0, 7), "Omit Chords"),
    ("major7-no3", "maj7(no3)", "Major 7 (no 3rd)", (0, 7, 11), "Omit Chords"),
    ("major7-no5", "maj7(no5)", "Major 7 (no 5th)", (0, 4, 11), "Omit Chords"),
    ("7-no3", "7(no3)", "7 (no 3rd)", (0, 7, 10), "Omit Chords"),
    ("9-no3", "9(no3)", "9 (no 3rd)", (0, 7, 10, 14), "Omit Chords"),
    ("11-no5", "11(no5)", "11 (no 5th)", (0, 4, 10, 14, 17), "Omit Chords"),
    ("major-b3-bass", "/♭3", "Major/♭3 Bass", (0, 3, 4, 7), "Slash Chords"),
    ("major-5-bass", "/5", "Major/5 Bass", (0, 4, 7, 7), "Slash Chords"),
    ("minor-b7-bass", "m/♭7", "Minor/♭7 Bass", (0, 3, 7, 10), "Slash Chords"),
)

CHORDS: dict[str, Chord] = {
    row[0]: Chord(type=row[0], symbol=row[1], display_name=row[2], intervals=row[3], category=row[4])
    for row in _CHORD_ROWS
}


def chord_types() -> list[str]:
    """Types of all known chords, in table order."""
    return list(CHORDS)


def get_chord(chord_type: str) -> Chord | None:
    """
    Look up a chord by type.

    Unknown types are logged and return None rather than raising.
    """
    chord = CHORDS.get(chord_type)
    if chord is None:
        logger.warning(f"Unknown chord type: {chord_type!r}")
    return chord


def chords_by_category() -> dict[str, list[Chord]]:
    """Chords grouped by category, preserving table order."""
    grouped: dict[str, list[Chord]] = {}
    for chord in CHORDS.values():
        grouped.setdefault(chord.category, []).append(chord)
    return grouped


def clamp_inversion(chord: Chord, inversion: ChordInversion) -> int:
    """Bass-tone index for an inversion, clamped to the chord's tones."""
    return min(max(inversion.index, 0), chord.tone_count - 1)


def build_voicing(root: Note, chord_type: str, inversion: ChordInversion = ChordInversion.ROOT) -> list[int]:
    """
    Build the MIDI notes of a chord voicing.

    Tones below the inversion's bass tone are raised an octave, and by
    further octaves while still below the bass tone, so the requested tone
    is always lowest even for chords spanning more than an octave.

    Args:
        root: Chord root; its octave places the voicing
        chord_type: Key into the chord table (e.g., 'major7')
        inversion: Which chord tone sits in the bass; clamped to the chord

    Returns:
        MIDI numbers sorted ascending, one per chord tone, or an empty list
        for an unknown chord type

    Example:
        >>> build_voicing(Note.parse("C3"), "major", ChordInversion.FIRST)
        [52, 55, 60]
    """
    chord = get_chord(chord_type)
    if chord is None:
        return []

    tones = [root.midi + i for i in sorted(chord.intervals)]
    k = clamp_inversion(chord, inversion)
    if k != inversion.index:
        logger.warning(
            f"Inversion {inversion.name} out of range for {chord_type!r} "
            f"({chord.tone_count} tones), using index {k}"
        )

    bass = tones[k]
    for i in range(k):
        tones[i] += 12
        while tones[i] < bass:
            tones[i] += 12

    return sorted(tones)


def chord_symbol(root: Note | str, chord_type: str) -> str:
    """Chord symbol such as 'Cm7' or 'F♯°'; bare root for unknown types."""
    root_name = root.display_name if isinstance(root, Note) else to_display(root)
    chord = get_chord(chord_type)
    if chord is None:
        return root_name
    return f"{root_name}{chord.symbol}"


def chord_display_name(root: Note, chord_type: str, inversion: ChordInversion = ChordInversion.ROOT) -> str:
    """
    Chord name with slash bass for inversions ('C/E' for first inversion C major).
    """
    symbol = chord_symbol(root, chord_type)
    chord = get_chord(chord_type)
    if chord is None or inversion is ChordInversion.ROOT:
        return symbol

    k = clamp_inversion(chord, inversion)
    if k == 0:
        return symbol
    bass = root.transpose(sorted(chord.intervals)[k])
    return f"{symbol}/{bass.display_name}"


def analyze_chord(notes: Iterable[Note | int]) -> list[tuple[Note, Chord]]:
    """
    Name a set of notes.

    Every note is tried as a root; a chord matches when its pitch-class set
    equals the notes' pitch-class set. The lowest note is tried first, so
    root-position readings come before inversions.

    Args:
        notes: Notes or MIDI numbers

    Returns:
        (root, chord) pairs for every match
    """
    midis = sorted({n.midi if isinstance(n, Note) else n for n in notes})
    if not midis:
        return []

    pitch_classes = {m % 12 for m in midis}
    matches: list[tuple[Note, Chord]] = []
    seen_roots: set[int] = set()
    for midi in midis:
        root_pc = midi % 12
        if root_pc in seen_roots:
            continue
        seen_roots.add(root_pc)
        relative = {(pc - root_pc) % 12 for pc in pitch_classes}
        for chord in CHORDS.values():
            if {i % 12 for i in chord.intervals} == relative:
                matches.append((Note.from_midi(midi), chord))
    return matches
