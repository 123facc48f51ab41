"""Soft-failure diagnostics.

The highlight generator never raises for bad lookups: unknown scales and
chords give an empty map, out-of-range interval labels fall back to the
root label, and inversions beyond a chord's tones are clamped. `diagnose`
reports which of those degradations apply to a selection so a caller can
surface them without interrupting the session.
"""

import logging
from typing import assert_never

from fretlab.models.enums import DiagnosticCode
from fretlab.models.highlight import Diagnostic
from fretlab.models.selection import SelectionConfig
from fretlab.models.view_mode import (
    ChordInversionView,
    IntervalView,
    ScaleView,
    UnimplementedChordView,
)
from fretlab.theory.chords import CHORDS
from fretlab.theory.intervals import MAX_LABELED_INTERVAL, is_label_in_range
from fretlab.theory.scales import SCALES

logger = logging.getLogger(__name__)


def _label_diagnostics(intervals: list[int]) -> list[Diagnostic]:
    return [
        Diagnostic(
            code=DiagnosticCode.LABEL_OUT_OF_RANGE,
            message=f"Interval {interval} has no label (valid range 0-{MAX_LABELED_INTERVAL}), shown as root",
            context={"interval": interval},
        )
        for interval in intervals
        if not is_label_in_range(interval)
    ]


def diagnose(config: SelectionConfig) -> list[Diagnostic]:
    """
    List the soft failures that apply to a selection.

    Args:
        config: Selection to check

    Returns:
        Diagnostics in a stable order; empty when the selection projects cleanly
    """
    diagnostics: list[Diagnostic] = []
    view = config.view_mode

    match view:
        case ScaleView():
            if view.scale not in SCALES:
                diagnostics.append(
                    Diagnostic(
                        code=DiagnosticCode.UNKNOWN_SCALE,
                        message=f"Unknown scale {view.scale!r}, nothing highlighted",
                        context={"scale": view.scale},
                    )
                )
        case IntervalView():
            diagnostics.extend(_label_diagnostics(sorted(config.selected_intervals)))
        case ChordInversionView():
            chord = CHORDS.get(view.chord_type)
            if chord is None:
                diagnostics.append(
                    Diagnostic(
                        code=DiagnosticCode.UNKNOWN_CHORD,
                        message=f"Unknown chord type {view.chord_type!r}, nothing highlighted",
                        context={"chord_type": view.chord_type},
                    )
                )
            elif view.inversion.index >= chord.tone_count:
                diagnostics.append(
                    Diagnostic(
                        code=DiagnosticCode.INVERSION_CLAMPED,
                        message=(
                            f"{view.inversion.display_name} needs more than "
                            f"{chord.tone_count} tones, using {chord.inversions[-1].display_name}"
                        ),
                        context={
                            "chord_type": view.chord_type,
                            "inversion": view.inversion.index,
                            "tone_count": chord.tone_count,
                        },
                    )
                )
        case UnimplementedChordView():
            diagnostics.append(
                Diagnostic(
                    code=DiagnosticCode.UNIMPLEMENTED_VIEW,
                    message=f"The {view.variant.value} chord view has no highlights",
                    context={"variant": view.variant.value},
                )
            )
        case _:
            assert_never(view)

    if diagnostics:
        logger.debug(f"{len(diagnostics)} diagnostic(s) for selection rooted at {config.root_note}")
    return diagnostics
