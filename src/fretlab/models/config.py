"""Application configuration model."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from fretlab.theory.spelling import normalize_note_name
from fretlab.utils.persistence import PydanticPersistence

from .note import Note


def default_config_dir() -> Path:
    """Directory holding the config file and logs (~/.fretlab)."""
    return Path.home() / ".fretlab"


def default_config_path() -> Path:
    return default_config_dir() / "config.json"


class AppConfig(BaseModel):
    """Application defaults: starting selection and instrument layout."""

    # Selection defaults
    default_root: str = Field(default="C", description="Root note for new selections")
    default_octave: int = Field(default=3, ge=-1, le=9, description="Octave for new selections")
    default_chord_octave: int = Field(default=3, ge=-1, le=9, description="Octave for chord voicings")
    default_scale: str = Field(default="Major", description="Scale shown in scale view")
    default_chord: str = Field(default="major", description="Chord type shown in chord view")

    # Keyboard
    keyboard_start_note: str = Field(default="C3", description="Lowest key of the keyboard")
    keyboard_key_count: int = Field(default=25, ge=1, le=128, description="Number of keyboard keys")

    # Fretboard
    tuning: str = Field(default="Guitar (6-string)", description="Fretboard tuning preset")
    fret_count: int = Field(default=12, ge=1, le=24, description="Number of frets")

    @field_validator("default_root")
    @classmethod
    def validate_default_root(cls, v: str) -> str:
        """Root must be a bare note name."""
        return normalize_note_name(v)

    @field_validator("keyboard_start_note")
    @classmethod
    def validate_keyboard_start_note(cls, v: str) -> str:
        """Start note must parse; stored as ASCII spelling with octave."""
        return Note.parse(v).full_name

    @field_validator("default_scale")
    @classmethod
    def validate_default_scale(cls, v: str) -> str:
        """Scale must be in the scale table."""
        from fretlab.theory.scales import SCALES

        if v not in SCALES:
            raise ValueError(f"unknown scale {v!r}")
        return v

    @field_validator("default_chord")
    @classmethod
    def validate_default_chord(cls, v: str) -> str:
        """Chord type must be in the chord table."""
        from fretlab.theory.chords import CHORDS

        if v not in CHORDS:
            raise ValueError(f"unknown chord type {v!r}")
        return v

    @field_validator("tuning")
    @classmethod
    def validate_tuning(cls, v: str) -> str:
        """Tuning must be a known preset."""
        from fretlab.instruments.tunings import TUNINGS

        if v not in TUNINGS:
            raise ValueError(f"unknown tuning {v!r}")
        return v

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "AppConfig":
        """
        Load config from file or return defaults.

        Args:
            path: Config file; defaults to ~/.fretlab/config.json

        Raises:
            ConfigFileInvalidError: If the file has invalid JSON syntax
            ConfigValidationError: If values fail validation
        """
        return PydanticPersistence.load_json_or_default(path or default_config_path(), cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file (defaults to ~/.fretlab/config.json)."""
        PydanticPersistence.save_json(self, path or default_config_path())
