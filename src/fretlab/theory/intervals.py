"""Interval names and degree labels."""

import logging
import re

logger = logging.getLogger(__name__)

INTERVAL_LABELS: tuple[str, ...] = (
    "R", "♭2", "2", "♭3", "3", "4", "♭5", "5", "♭6", "6", "♭7", "7",
)

INTERVAL_NAMES: tuple[str, ...] = (
    "Unison",
    "Minor 2nd",
    "Major 2nd",
    "Minor 3rd",
    "Major 3rd",
    "Perfect 4th",
    "Tritone",
    "Perfect 5th",
    "Minor 6th",
    "Major 6th",
    "Minor 7th",
    "Major 7th",
)

CONSONANT_STEPS = frozenset({0, 3, 4, 5, 7, 8, 9, 12})
PERFECT_STEPS = frozenset({0, 5, 7, 12})

# Labels are defined for as many octaves as there are color bands
LABELED_OCTAVES = 9
MAX_LABELED_INTERVAL = LABELED_OCTAVES * 12 - 1

ROOT_LABEL = INTERVAL_LABELS[0]

_LABEL_PATTERN = re.compile(r"(♭?)(\d+)")


def is_label_in_range(interval: int) -> bool:
    """Check whether an extended interval has a defined label."""
    return 0 <= interval <= MAX_LABELED_INTERVAL


def get_interval_label(interval: int) -> str:
    """
    Get the degree label for an extended interval.

    Within the first octave the labels are R, ♭2, 2 ... 7. Whole octaves
    are marked O1, O2 ... and other intervals above the octave keep their
    accidental with the degree number extended by 7 per octave (14 -> 9,
    20 -> ♭13).

    Negative intervals and intervals beyond the last labeled octave are
    logged and labeled as the root.

    Example:
        >>> get_interval_label(7)
        '5'
        >>> get_interval_label(24)
        'O2'
        >>> get_interval_label(15)
        '♭10'
    """
    if not is_label_in_range(interval):
        logger.warning(f"No label for interval {interval}, defaulting to root")
        return ROOT_LABEL

    octaves, step = divmod(interval, 12)
    if octaves == 0:
        return INTERVAL_LABELS[step]
    if step == 0:
        return f"O{octaves}"

    match = _LABEL_PATTERN.fullmatch(INTERVAL_LABELS[step])
    if match is None:
        return INTERVAL_LABELS[step]
    accidental, number = match.groups()
    return f"{accidental}{int(number) + octaves * 7}"


def get_interval_name(interval: int) -> str:
    """Get a descriptive name ("Perfect 5th", "Octave", "Major 3rd + 1oct")."""
    octaves, step = divmod(interval, 12)
    if octaves == 0:
        return INTERVAL_NAMES[step]
    if octaves == 1 and step == 0:
        return "Octave"
    return f"{INTERVAL_NAMES[step]} + {octaves}oct"
