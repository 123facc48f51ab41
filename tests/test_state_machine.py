"""Tests for the selection state machine."""

import random

import pytest

from fretlab.core import absolute_pitches, apply_tap, change_octaves, select_root, toggle_octave
from fretlab.models import ChordInversionView, ScaleView, SelectionConfig


def _c4_root() -> SelectionConfig:
    return SelectionConfig(root_note="C", selected_octaves={4}, selected_intervals={0})


class TestApplyTap:
    """Test single tap transitions."""

    @pytest.mark.unit
    def test_first_tap_sets_root(self, empty_selection):
        """Test that tapping an empty selection starts at the tapped note."""
        config = apply_tap(empty_selection, 60)
        assert config.root_note == "C"
        assert config.selected_octaves == frozenset({4})
        assert config.selected_intervals == frozenset({0})

    @pytest.mark.unit
    def test_first_tap_spelled_from_root(self):
        """Test that the new root follows the existing flat preference."""
        config = apply_tap(SelectionConfig.empty(root_note="F"), 70)
        assert config.root_note == "Bb"
        assert config.selected_octaves == frozenset({4})

    @pytest.mark.unit
    def test_add_above_root(self):
        """Test adding a note above the root in the same octave."""
        config = apply_tap(_c4_root(), 67)
        assert config.selected_intervals == frozenset({0, 7})
        assert config.selected_octaves == frozenset({4})

    @pytest.mark.unit
    def test_add_in_higher_octave(self):
        """Test that a note in a higher octave adds that octave."""
        config = apply_tap(_c4_root(), 76)
        assert config.selected_intervals == frozenset({0, 16})
        assert config.selected_octaves == frozenset({4, 5})
        assert config.reference_octave == 4

    @pytest.mark.unit
    def test_add_below_root_shifts_reference(self):
        """Test that a note below the root lowers the reference octave."""
        config = apply_tap(_c4_root(), 57)
        assert config.root_note == "C"
        assert config.selected_octaves == frozenset({3, 4})
        assert config.selected_intervals == frozenset({9, 12})
        assert absolute_pitches(config) == {57, 60}

    @pytest.mark.unit
    def test_add_several_octaves_below(self):
        """Test a note more than an octave below the root."""
        config = apply_tap(_c4_root(), 35)
        assert config.reference_octave == 1
        assert config.selected_intervals == frozenset({11, 36})
        assert absolute_pitches(config) == {35, 60}

    @pytest.mark.unit
    def test_add_below_lowest_note_reroots(self):
        """Test that a lowered root off the instrument re-roots at the tap."""
        config = apply_tap(_c4_root(), 57, lowest_midi=50)
        assert config.root_note == "A"
        assert config.selected_intervals == frozenset({0, 3})
        assert config.selected_octaves == frozenset({3, 4})
        assert absolute_pitches(config) == {57, 60}

    @pytest.mark.unit
    def test_lowest_note_not_reached(self):
        """Test that a reachable lowered root shifts as usual."""
        config = apply_tap(_c4_root(), 57, lowest_midi=40)
        assert config.root_note == "C"
        assert config.selected_intervals == frozenset({9, 12})

    @pytest.mark.unit
    def test_remove_non_root(self):
        """Test removing a tone that is not the root."""
        config = SelectionConfig(root_note="C", selected_octaves={4}, selected_intervals={0, 4, 7})
        config = apply_tap(config, 64)
        assert config.selected_intervals == frozenset({0, 7})
        assert config.root_note == "C"

    @pytest.mark.unit
    def test_remove_root_promotes_lowest(self):
        """Test that removing the root promotes the lowest remaining tone."""
        config = SelectionConfig(root_note="C", selected_octaves={4}, selected_intervals={0, 4, 7})
        config = apply_tap(config, 60)
        assert config.root_note == "E"
        assert config.selected_intervals == frozenset({0, 3})
        assert absolute_pitches(config) == {64, 67}

    @pytest.mark.unit
    def test_single_non_root_left_becomes_root(self):
        """Test that a lone remaining non-root tone becomes the root."""
        config = SelectionConfig(root_note="C", selected_octaves={4}, selected_intervals={4, 7})
        config = apply_tap(config, 64)
        assert config.root_note == "G"
        assert config.selected_intervals == frozenset({0})
        assert config.selected_octaves == frozenset({4})

    @pytest.mark.unit
    def test_remove_last_interval(self):
        """Test that removing the only tone empties the selection."""
        config = apply_tap(_c4_root(), 60)
        assert config.is_empty
        assert config.root_note == "C"
        assert config.selected_octaves == frozenset({4})

    @pytest.mark.unit
    def test_tap_after_clearing_starts_over(self):
        """Test that the next tap after emptying starts a new selection."""
        config = apply_tap(apply_tap(_c4_root(), 60), 62)
        assert config.root_note == "D"
        assert config.selected_intervals == frozenset({0})

    @pytest.mark.unit
    def test_view_mode_preserved(self):
        """Test that taps leave the view mode untouched."""
        view = ChordInversionView(chord_type="minor7")
        config = SelectionConfig(root_note="C", selected_octaves={4}, selected_intervals={0}, view_mode=view)
        assert apply_tap(config, 67).view_mode == view


@pytest.mark.integration
class TestTapSequences:
    """Test sequences of taps."""

    def test_root_removed_after_fifth(self, empty_selection):
        """Test C4, G4, C4 leaves G4 as the root."""
        config = empty_selection
        for midi in (60, 67, 60):
            config = apply_tap(config, midi)
        assert config.root_note == "G"
        assert config.selected_octaves == frozenset({4})
        assert config.selected_intervals == frozenset({0})

    def test_tapping_twice_restores_pitches(self, empty_selection):
        """Test that tapping the same note twice restores the pitch set."""
        config = empty_selection
        for midi in (60, 64, 67):
            config = apply_tap(config, midi)
        before = absolute_pitches(config)
        config = apply_tap(apply_tap(config, 52), 52)
        assert absolute_pitches(config) == before

    @pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
    @pytest.mark.parametrize("lowest_midi", [None, 40])
    def test_each_tap_toggles_exactly_one_pitch(self, seed, lowest_midi):
        """Test that every tap adds or removes only the tapped pitch."""
        rng = random.Random(seed)
        config = SelectionConfig.empty()
        for _ in range(200):
            midi = rng.randint(36, 84)
            before = absolute_pitches(config)
            config = apply_tap(config, midi, lowest_midi=lowest_midi)
            assert absolute_pitches(config) == before ^ {midi}
            assert all(i >= 0 for i in config.selected_intervals)
            if not config.is_empty:
                assert config.reference_octave == min(config.selected_octaves)
                assert config.root_midi <= min(absolute_pitches(config))


class TestOctaveEdits:
    """Test octave set edits."""

    @pytest.mark.unit
    def test_change_octaves_keeps_interval_pitches(self, c4_fifth):
        """Test that interval pitches stay put when the reference octave drops."""
        config = change_octaves(c4_fifth, {3})
        assert config.selected_intervals == frozenset({12, 19})
        assert absolute_pitches(config) == {60, 67}

    @pytest.mark.unit
    def test_change_octaves_to_empty(self, c4_fifth):
        """Test that clearing octaves falls back to the default reference."""
        config = change_octaves(c4_fifth, set())
        assert config.selected_octaves == frozenset()
        assert absolute_pitches(config) == {60, 67}

    @pytest.mark.unit
    def test_change_octaves_scale_view(self, c_major_scale):
        """Test that scale view uses the octave set directly."""
        config = change_octaves(c_major_scale, {2, 5})
        assert config.selected_octaves == frozenset({2, 5})
        assert config.selected_intervals == frozenset()

    @pytest.mark.unit
    def test_toggle_octave(self, c_major_scale):
        """Test adding and removing an octave."""
        config = toggle_octave(c_major_scale, 4)
        assert config.selected_octaves == frozenset({3, 4})
        config = toggle_octave(config, 3)
        assert config.selected_octaves == frozenset({4})


class TestSelectRoot:
    """Test root selection."""

    @pytest.mark.unit
    def test_scale_view(self, c_major_scale):
        """Test selecting a root keeps the scale view."""
        config = select_root(c_major_scale, 62)
        assert config.root_note == "D"
        assert isinstance(config.view_mode, ScaleView)
        assert config.selected_octaves == frozenset({3})

    @pytest.mark.unit
    def test_chord_view_moves_chord_octave(self, c_major_triad):
        """Test that the chord octave follows the tapped note."""
        config = select_root(c_major_triad, 62)
        assert config.root_note == "D"
        assert config.view_mode.chord_octave == 4

    @pytest.mark.unit
    def test_interval_view_transposes(self, c4_fifth):
        """Test that an interval selection moves with the root."""
        config = select_root(c4_fifth, 62)
        assert absolute_pitches(config) == {62, 69}

    @pytest.mark.unit
    def test_flat_spelling(self):
        """Test that a flat-side root spells the new root with flats."""
        config = select_root(SelectionConfig.from_scale("F"), 61)
        assert config.root_note == "Db"
