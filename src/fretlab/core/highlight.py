"""Highlight map generation: project a selection onto MIDI notes."""

import logging
from typing import assert_never

from fretlab.models.highlight import HighlightEntry
from fretlab.models.note import Note
from fretlab.models.selection import SelectionConfig
from fretlab.models.view_mode import (
    ChordInversionView,
    IntervalView,
    ScaleView,
    UnimplementedChordView,
)
from fretlab.theory.chords import build_voicing
from fretlab.theory.intervals import get_interval_label
from fretlab.theory.scales import get_mode_intervals, get_mode_root, get_scale

logger = logging.getLogger(__name__)

HighlightMap = dict[int, HighlightEntry]


def _entry(midi: int, degree: int) -> HighlightEntry:
    return HighlightEntry(midi=midi, color_degree=degree, label=get_interval_label(degree))


def _scale_highlights(config: SelectionConfig, view: ScaleView) -> HighlightMap:
    scale = get_scale(view.scale)
    if scale is None:
        return {}

    intervals = get_mode_intervals(scale, view.mode_index)
    if view.show_octave and 12 not in intervals:
        intervals.append(12)

    octaves = sorted(config.selected_octaves) or [config.reference_octave]
    highlights: HighlightMap = {}
    for octave in octaves:
        mode_root = get_mode_root(scale, Note.from_name(config.root_note, octave), view.mode_index)
        for interval in intervals:
            degree = interval % 12
            midi = mode_root.midi + interval
            highlights[midi] = _entry(midi, degree)
    return highlights


def _interval_highlights(config: SelectionConfig) -> HighlightMap:
    root_midi = config.root_midi
    return {
        root_midi + interval: _entry(root_midi + interval, interval)
        for interval in sorted(config.selected_intervals)
    }


def _chord_highlights(config: SelectionConfig, view: ChordInversionView) -> HighlightMap:
    root = Note.from_name(config.root_note, view.chord_octave)
    voicing = build_voicing(root, view.chord_type, view.inversion)

    highlights: HighlightMap = {}
    for midi in voicing:
        highlights[midi] = _entry(midi, midi - root.midi)

    if view.show_additional_octaves:
        for offset in (-12, 12):
            for midi in voicing:
                source = highlights[midi]
                highlights.setdefault(
                    midi + offset,
                    source.model_copy(update={"midi": midi + offset}),
                )
    return highlights


def get_highlight_map(config: SelectionConfig) -> HighlightMap:
    """
    Build the note -> display metadata map for a selection.

    | view | root | color degree |
    |------|------|--------------|
    | scale | mode root in each selected octave | interval mod 12 |
    | interval | root at the reference octave | raw extended interval |
    | chord inversion | root at the chord octave | midi - root midi |
    | unimplemented | none | none |

    Unknown scale or chord names produce an empty map; they are logged and
    reported by `fretlab.core.diagnostics.diagnose`.

    Args:
        config: The selection to project

    Returns:
        Mapping of MIDI note number to HighlightEntry
    """
    view = config.view_mode
    match view:
        case ScaleView():
            return _scale_highlights(config, view)
        case IntervalView():
            return _interval_highlights(config)
        case ChordInversionView():
            return _chord_highlights(config, view)
        case UnimplementedChordView():
            logger.debug(f"No highlights for {view.variant.value} chord view")
            return {}
        case _:
            assert_never(view)


def get_notes_from_config(config: SelectionConfig) -> list[int]:
    """All highlighted MIDI notes, ascending, for playback."""
    return sorted(get_highlight_map(config))
