"""View modes: how a selection is projected onto the instrument.

ViewMode is a closed union discriminated on ``kind``. Code that dispatches
on it uses ``match`` with ``assert_never`` so a new variant cannot be
silently ignored.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from fretlab.theory.constants import DEFAULT_OCTAVE

from .enums import ChordInversion, ChordVariant


class ScaleView(BaseModel):
    """Highlight a scale mode across every selected octave."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["scale"] = "scale"
    scale: str = Field(default="Major", description="Scale name")
    mode_index: int = Field(default=0, ge=0, description="Mode (rotation) index")
    show_octave: bool = Field(default=False, description="Also highlight the octave above each mode root")


class IntervalView(BaseModel):
    """Highlight the individually selected intervals."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["interval"] = "interval"


class ChordInversionView(BaseModel):
    """Highlight one voicing of a chord."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["chord_inversion"] = "chord_inversion"
    chord_type: str = Field(default="major", description="Chord type key")
    inversion: ChordInversion = Field(default=ChordInversion.ROOT, description="Bass tone")
    chord_octave: int = Field(default=DEFAULT_OCTAVE, description="Octave of the chord root")
    show_additional_octaves: bool = Field(
        default=False, description="Repeat the voicing an octave below and above"
    )


class UnimplementedChordView(BaseModel):
    """Chord-shape views without highlight rules; they highlight nothing."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["unimplemented_chord"] = "unimplemented_chord"
    variant: ChordVariant = Field(default=ChordVariant.OPEN, description="Chord-shape family")


ViewMode = Annotated[
    Union[ScaleView, IntervalView, ChordInversionView, UnimplementedChordView],
    Field(discriminator="kind"),
]
