"""Pytest fixtures for tests."""

from pathlib import Path
from tempfile import TemporaryDirectory

import pytest

from fretlab.models import AppConfig, ChordInversion, SelectionConfig


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def config_path(temp_dir):
    """Path for a config file that does not exist yet."""
    return temp_dir / "config.json"


@pytest.fixture
def app_config():
    """Default application config."""
    return AppConfig()


@pytest.fixture
def empty_selection():
    """Empty interval selection rooted at C."""
    return SelectionConfig.empty()


@pytest.fixture
def c_major_scale():
    """C major scale view over octave 3."""
    return SelectionConfig.from_scale("C", "Major", octaves={3})


@pytest.fixture
def c_major_triad():
    """C3 major chord, root position."""
    return SelectionConfig.from_chord("C", "major", ChordInversion.ROOT, chord_octave=3)


@pytest.fixture
def c4_fifth():
    """Interval selection C4 + G4."""
    return SelectionConfig(root_note="C", selected_octaves={4}, selected_intervals={0, 7})
