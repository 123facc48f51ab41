"""Scale table and mode rotation."""

import logging

from fretlab.models.note import Note
from fretlab.models.scale import Scale

logger = logging.getLogger(__name__)


def _scale(name: str, intervals: tuple[int, ...], mode_names: tuple[str, ...] | None = None) -> Scale:
    return Scale(name=name, intervals=intervals, mode_names=mode_names)


SCALES: dict[str, Scale] = {
    s.name: s
    for s in (
        # Common scales
        _scale("Chromatic", (0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11)),
        _scale(
            "Major",
            (0, 2, 4, 5, 7, 9, 11),
            ("Ionian", "Dorian", "Phrygian", "Lydian", "Mixolydian", "Aeolian", "Locrian"),
        ),
        _scale(
            "Natural Minor",
            (0, 2, 3, 5, 7, 8, 10),
            ("Natural Minor", "Locrian", "Ionian", "Dorian", "Phrygian", "Lydian", "Mixolydian"),
        ),
        _scale(
            "Harmonic Minor",
            (0, 2, 3, 5, 7, 8, 11),
            (
                "Harmonic Minor",
                "Locrian ♯6",
                "Ionian ♯5",
                "Dorian ♯4",
                "Phrygian Dominant",
                "Lydian ♯9",
                "Altered Dominant",
            ),
        ),
        _scale(
            "Melodic Minor",
            (0, 2, 3, 5, 7, 9, 11),
            (
                "Melodic Minor",
                "Dorian ♭2",
                "Lydian Augmented",
                "Lydian Dominant",
                "Mixolydian ♭6",
                "Locrian ♯2",
                "Altered",
            ),
        ),
        # Pentatonic and blues
        _scale("Major Pentatonic", (0, 2, 4, 7, 9)),
        _scale("Minor Pentatonic", (0, 3, 5, 7, 10)),
        _scale("Blues", (0, 3, 5, 6, 7, 10)),
        # Church modes
        _scale("Dorian", (0, 2, 3, 5, 7, 9, 10)),
        _scale("Phrygian", (0, 1, 3, 5, 7, 8, 10)),
        _scale("Lydian", (0, 2, 4, 6, 7, 9, 11)),
        _scale("Mixolydian", (0, 2, 4, 5, 7, 9, 10)),
        _scale("Aeolian", (0, 2, 3, 5, 7, 8, 10)),
        _scale("Locrian", (0, 1, 3, 5, 6, 8, 10)),
        # Jazz
        _scale("Bebop Dominant", (0, 2, 4, 5, 7, 9, 10, 11)),
        _scale("Bebop Major", (0, 2, 4, 5, 7, 8, 9, 11)),
        _scale("Altered", (0, 1, 3, 4, 6, 8, 10)),
        _scale("Whole Tone", (0, 2, 4, 6, 8, 10)),
        _scale("Diminished", (0, 2, 3, 5, 6, 8, 9, 11)),
        # Ethnic
        _scale("Hungarian Minor", (0, 2, 3, 6, 7, 8, 11)),
        _scale("Japanese", (0, 1, 5, 7, 8)),
        _scale("Arabic", (0, 1, 4, 5, 7, 8, 11)),
        _scale("Gypsy", (0, 1, 4, 5, 7, 8, 10)),
        # Exotic
        _scale("Enigmatic", (0, 1, 4, 6, 8, 10, 11)),
        _scale("Double Harmonic", (0, 1, 4, 5, 7, 8, 11)),
        _scale("Neapolitan Major", (0, 1, 3, 5, 7, 9, 11)),
        _scale("Neapolitan Minor", (0, 1, 3, 5, 7, 8, 11)),
    )
}


def scale_names() -> list[str]:
    """Names of all known scales, in table order."""
    return list(SCALES)


def get_scale(name: str) -> Scale | None:
    """
    Look up a scale by name.

    Unknown names are logged and return None rather than raising.
    """
    scale = SCALES.get(name)
    if scale is None:
        logger.warning(f"Unknown scale: {name!r}")
    return scale


def get_mode_intervals(scale: Scale, mode_index: int) -> list[int]:
    """
    Intervals of a mode of a scale.

    The canonical intervals are rotated left by ``mode_index``; values that
    wrapped around get 12 added so the list keeps ascending, then the first
    value is subtracted so the mode starts at 0. ``mode_index`` is taken
    modulo the scale length.

    Example:
        >>> get_mode_intervals(SCALES["Major"], 1)
        [0, 2, 3, 5, 7, 9, 10]
    """
    intervals = list(scale.intervals)
    count = len(intervals)
    shift = mode_index % count

    rotated = intervals[shift:] + [i + 12 for i in intervals[:shift]]
    first = rotated[0]
    return [i - first for i in rotated]


def get_mode_root(scale: Scale, root: Note, mode_index: int) -> Note:
    """Note that becomes degree 1 of the mode (e.g. D for C major mode 1)."""
    return root.transpose(scale.intervals[mode_index % len(scale.intervals)])


def get_mode_name(scale: Scale, mode_index: int) -> str:
    """Name of a mode, or "Mode n" (1-based) when the scale has no mode names."""
    shift = mode_index % len(scale.intervals)
    if scale.mode_names and shift < len(scale.mode_names):
        return scale.mode_names[shift]
    return f"Mode {shift + 1}"


def available_modes(scale: Scale) -> list[str]:
    """Names of every mode of a scale, in rotation order."""
    return [get_mode_name(scale, i) for i in range(len(scale.intervals))]
