"""Selection state machine: turn note taps into new selection configs.

Every transition is a pure function returning a new `SelectionConfig`.

A tap changes the set of selected absolute pitches by exactly one note.
Whenever the root or the reference octave has to move (promoting a new
root, extending below the lowest octave), every other selected interval is
re-expressed so that its absolute pitch stays where it was.
"""

import logging
from collections.abc import Iterable

from fretlab.models.note import Note
from fretlab.models.selection import SelectionConfig
from fretlab.models.view_mode import ChordInversionView, IntervalView
from fretlab.theory.constants import DEFAULT_OCTAVE

logger = logging.getLogger(__name__)


def absolute_pitches(config: SelectionConfig) -> set[int]:
    """Absolute MIDI pitch of every selected interval."""
    return set(config.absolute_midis)


def _rebase(config: SelectionConfig, pitches: Iterable[int], root_midi: int) -> SelectionConfig:
    """Re-express absolute pitches relative to a new root at ``root_midi``."""
    pitches = set(pitches)
    root = Note.from_midi(root_midi, prefer_flats=config.prefer_flats)
    octaves = {root.octave} | {Note.from_midi(p).octave for p in pitches if p >= root_midi}
    return config.model_copy(
        update={
            "root_note": root.name,
            "selected_intervals": frozenset(p - root_midi for p in pitches),
            "selected_octaves": frozenset(octaves),
        }
    )


def _start(config: SelectionConfig, midi: int) -> SelectionConfig:
    tapped = Note.from_midi(midi, prefer_flats=config.prefer_flats)
    logger.debug(f"Starting selection at {tapped}")
    return config.model_copy(
        update={
            "root_note": tapped.name,
            "selected_intervals": frozenset({0}),
            "selected_octaves": frozenset({tapped.octave}),
        }
    )


def _remove(config: SelectionConfig, interval: int) -> SelectionConfig:
    remaining = config.selected_intervals - {interval}
    if not remaining:
        logger.debug("Removed last interval, selection is empty")
        return config.model_copy(update={"selected_intervals": frozenset()})

    single_non_root = len(remaining) == 1 and 0 not in remaining
    if interval == 0 or single_non_root:
        root_midi = config.root_midi
        promoted = min(remaining)
        logger.debug(f"Promoting interval {promoted} to root")
        return _rebase(config, {root_midi + i for i in remaining}, root_midi + promoted)

    return config.model_copy(update={"selected_intervals": remaining})


def _add(config: SelectionConfig, midi: int, interval: int, lowest_midi: int | None) -> SelectionConfig:
    reference_octave = config.reference_octave
    octaves = set(config.selected_octaves) or {reference_octave}

    if interval >= 0:
        return config.model_copy(
            update={
                "selected_intervals": config.selected_intervals | {interval},
                "selected_octaves": frozenset(octaves | {Note.from_midi(midi).octave}),
            }
        )

    octaves_down = (-interval + 11) // 12
    lowered_root = config.root_midi - 12 * octaves_down
    if lowest_midi is not None and lowered_root < lowest_midi:
        # The lower reference root would be off the instrument
        logger.debug(f"Reference root {lowered_root} below lowest note {lowest_midi}, re-rooting at {midi}")
        return _rebase(config, config.absolute_midis | {midi}, midi)

    shift = 12 * octaves_down
    octaves |= {reference_octave - k for k in range(1, octaves_down + 1)}
    return config.model_copy(
        update={
            "selected_intervals": frozenset(i + shift for i in config.selected_intervals) | {interval + shift},
            "selected_octaves": frozenset(octaves),
        }
    )


def apply_tap(config: SelectionConfig, midi: int, lowest_midi: int | None = None) -> SelectionConfig:
    """
    Apply a tap on an absolute MIDI note.

    - Empty selection: the tapped note becomes the root.
    - Tapped note selected: it is removed. Removing the root, or leaving a
      single non-root tone, promotes the lowest remaining tone to root.
    - Tapped note above the root: its interval is added, with its octave.
    - Tapped note below the root: the reference octave drops by as many
      octaves as needed and every interval shifts up to compensate. When
      ``lowest_midi`` is given and the lowered root would fall below it,
      the tapped note becomes the root instead.

    Args:
        config: Current selection
        midi: Tapped MIDI note
        lowest_midi: Lowest note the instrument can show, if bounded

    Returns:
        The new selection; all fields other than root, octaves and
        intervals are unchanged

    Example:
        >>> config = apply_tap(SelectionConfig.empty(), 60)
        >>> config.root_note, sorted(config.selected_octaves), sorted(config.selected_intervals)
        ('C', [4], [0])
    """
    if config.is_empty:
        return _start(config, midi)

    interval = midi - config.root_midi
    if interval in config.selected_intervals:
        return _remove(config, interval)
    return _add(config, midi, interval, lowest_midi)


def change_octaves(config: SelectionConfig, octaves: Iterable[int]) -> SelectionConfig:
    """
    Replace the selected octave set.

    In interval view the intervals are re-expressed against the new
    reference octave so the selected pitches do not move. Other views use
    the octave set directly.
    """
    new_octaves = frozenset(octaves)
    update: dict[str, object] = {"selected_octaves": new_octaves}

    if isinstance(config.view_mode, IntervalView) and config.selected_intervals:
        new_reference = min(new_octaves) if new_octaves else DEFAULT_OCTAVE
        shift = (config.reference_octave - new_reference) * 12
        update["selected_intervals"] = frozenset(i + shift for i in config.selected_intervals)

    return config.model_copy(update=update)


def toggle_octave(config: SelectionConfig, octave: int) -> SelectionConfig:
    """Add an octave to the selection, or remove it if already selected."""
    octaves = set(config.selected_octaves)
    octaves ^= {octave}
    return change_octaves(config, octaves)


def select_root(config: SelectionConfig, midi: int) -> SelectionConfig:
    """
    Make the tapped note's pitch class the root.

    Used by scale and chord views. In chord view the chord octave follows
    the tapped note. Intervals are kept, so an interval selection is
    transposed to the new root.
    """
    tapped = Note.from_midi(midi, prefer_flats=config.prefer_flats)
    update: dict[str, object] = {"root_note": tapped.name}
    if isinstance(config.view_mode, ChordInversionView):
        update["view_mode"] = config.view_mode.model_copy(update={"chord_octave": tapped.octave})
    return config.model_copy(update=update)
