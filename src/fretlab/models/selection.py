"""Selection configuration: the state edited by note taps."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fretlab.theory.constants import DEFAULT_OCTAVE
from fretlab.theory.spelling import normalize_note_name, prefers_flats

from .enums import ChordInversion
from .note import Note
from .view_mode import ChordInversionView, IntervalView, ScaleView, ViewMode


class SelectionConfig(BaseModel):
    """
    Root, octave set and interval set describing what is highlighted.

    ``selected_intervals`` are extended, signed semitone offsets relative to
    ``root_note`` at the reference octave (the lowest selected octave, or
    octave 3 when none is selected). Changing the root or the octave set
    without re-expressing the intervals would move every selected pitch,
    so edits go through ``fretlab.core.state_machine``.

    The model is frozen; transitions return new instances.

    Example:
        >>> config = SelectionConfig(root_note="C", selected_octaves={4}, selected_intervals={0, 7})
        >>> sorted(config.absolute_midis)
        [60, 67]
    """

    model_config = ConfigDict(frozen=True)

    root_note: str = Field(default="C", description="Root spelling without octave (e.g., 'C', 'Bb')")
    selected_octaves: frozenset[int] = Field(default_factory=frozenset, description="Selected octaves")
    selected_intervals: frozenset[int] = Field(
        default_factory=frozenset, description="Extended intervals relative to the reference root"
    )
    view_mode: ViewMode = Field(default_factory=IntervalView, description="Projection rules")

    @field_validator("root_note")
    @classmethod
    def validate_root_note(cls, v: str) -> str:
        """Normalize to the canonical ASCII spelling."""
        return normalize_note_name(v)

    @property
    def is_empty(self) -> bool:
        """True when no interval is selected."""
        return not self.selected_intervals

    @property
    def reference_octave(self) -> int:
        """Lowest selected octave; intervals are measured from the root here."""
        return min(self.selected_octaves) if self.selected_octaves else DEFAULT_OCTAVE

    @property
    def prefer_flats(self) -> bool:
        """Spell derived notes with flats when the root does."""
        return prefers_flats(self.root_note)

    @property
    def root(self) -> Note:
        """Root note at the reference octave."""
        return Note.from_name(self.root_note, self.reference_octave)

    @property
    def root_midi(self) -> int:
        return self.root.midi

    @property
    def absolute_midis(self) -> frozenset[int]:
        """Absolute MIDI pitch of every selected interval."""
        root_midi = self.root_midi
        return frozenset(root_midi + i for i in self.selected_intervals)

    @classmethod
    def empty(cls, root_note: str = "C", view_mode: ViewMode | None = None) -> "SelectionConfig":
        """Create a selection with nothing selected."""
        return cls(root_note=root_note, view_mode=view_mode or IntervalView())

    @classmethod
    def from_scale(
        cls,
        root_note: str,
        scale: str = "Major",
        mode_index: int = 0,
        octaves: set[int] | frozenset[int] | None = None,
        show_octave: bool = False,
    ) -> "SelectionConfig":
        """Create a scale-view selection over the given octaves."""
        return cls(
            root_note=root_note,
            selected_octaves=frozenset(octaves) if octaves else frozenset({DEFAULT_OCTAVE}),
            view_mode=ScaleView(scale=scale, mode_index=mode_index, show_octave=show_octave),
        )

    @classmethod
    def from_chord(
        cls,
        root_note: str,
        chord_type: str = "major",
        inversion: ChordInversion = ChordInversion.ROOT,
        chord_octave: int = DEFAULT_OCTAVE,
        show_additional_octaves: bool = False,
    ) -> "SelectionConfig":
        """Create a chord-inversion selection."""
        return cls(
            root_note=root_note,
            selected_octaves=frozenset({chord_octave}),
            view_mode=ChordInversionView(
                chord_type=chord_type,
                inversion=inversion,
                chord_octave=chord_octave,
                show_additional_octaves=show_additional_octaves,
            ),
        )
