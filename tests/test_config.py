"""Tests for AppConfig and JSON persistence."""

import json
from pathlib import Path

import pytest
from pydantic import BaseModel, ValidationError

from fretlab.exceptions import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from fretlab.models import AppConfig
from fretlab.utils import PydanticPersistence


class SampleModel(BaseModel):
    """Simple model for testing."""

    name: str = "test"
    value: int = 42


class TestAppConfig:
    """Test AppConfig validation."""

    @pytest.mark.unit
    def test_defaults(self, app_config):
        """Test default values."""
        assert app_config.default_root == "C"
        assert app_config.default_octave == 3
        assert app_config.default_scale == "Major"
        assert app_config.default_chord == "major"
        assert app_config.keyboard_start_note == "C3"
        assert app_config.keyboard_key_count == 25
        assert app_config.tuning == "Guitar (6-string)"
        assert app_config.fret_count == 12

    @pytest.mark.unit
    def test_note_fields_normalized(self):
        """Test that note fields are stored in canonical ASCII."""
        config = AppConfig(default_root="f♯", keyboard_start_note="b♭2")
        assert config.default_root == "F#"
        assert config.keyboard_start_note == "Bb2"

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "field, value",
        [
            ("default_root", "C4"),
            ("default_root", "H"),
            ("default_scale", "Nope"),
            ("default_chord", "nope"),
            ("tuning", "Banjo (12-string)"),
            ("fret_count", 30),
            ("default_octave", 12),
        ],
    )
    def test_invalid_values(self, field, value):
        """Test that invalid values fail validation."""
        with pytest.raises(ValidationError):
            AppConfig(**{field: value})


class TestAppConfigPersistence:
    """Test loading and saving AppConfig."""

    @pytest.mark.unit
    def test_missing_file_gives_defaults(self, config_path):
        """Test that a missing file loads defaults without writing."""
        config = AppConfig.load_or_default(config_path)
        assert config == AppConfig()
        assert not config_path.exists()

    @pytest.mark.unit
    def test_save_and_load(self, config_path):
        """Test a saved config loads back."""
        original = AppConfig(default_root="Bb", default_scale="Blues", fret_count=22)
        original.save(config_path)
        assert config_path.exists()
        assert AppConfig.load_or_default(config_path) == original

    @pytest.mark.unit
    def test_partial_file_fills_defaults(self, config_path):
        """Test that missing keys take their defaults."""
        config_path.write_text(json.dumps({"default_root": "D"}))
        config = AppConfig.load_or_default(config_path)
        assert config.default_root == "D"
        assert config.default_scale == "Major"

    @pytest.mark.unit
    def test_invalid_json(self, config_path):
        """Test that broken JSON raises ConfigFileInvalidError."""
        config_path.write_text('{"default_root": "C"')
        with pytest.raises(ConfigFileInvalidError) as exc_info:
            AppConfig.load_or_default(config_path)
        assert exc_info.value.file_path == str(config_path)
        assert exc_info.value.recoverable

    @pytest.mark.unit
    def test_empty_file(self, config_path):
        """Test that an empty file is reported as empty."""
        config_path.write_text("   ")
        with pytest.raises(ConfigFileInvalidError) as exc_info:
            AppConfig.load_or_default(config_path)
        assert exc_info.value.user_message == "Configuration file is empty"
        assert "fretlab config init" in exc_info.value.recovery_hint

    @pytest.mark.unit
    def test_invalid_value_points_to_listing(self, config_path):
        """Test that an unknown scale suggests the scales command."""
        config_path.write_text(json.dumps({"default_scale": "Nope"}))
        with pytest.raises(ConfigValidationError) as exc_info:
            AppConfig.load_or_default(config_path)
        error = exc_info.value
        assert error.field == "default_scale"
        assert error.value == "Nope"
        assert "fretlab scales" in error.recovery_hint
        assert str(config_path) in error.recovery_hint

    @pytest.mark.unit
    def test_multiple_invalid_values(self, config_path):
        """Test that several failures are combined into one error."""
        config_path.write_text(json.dumps({"default_scale": "Nope", "fret_count": 99}))
        with pytest.raises(ConfigValidationError) as exc_info:
            AppConfig.load_or_default(config_path)
        assert exc_info.value.field == "multiple fields"
        assert "2 validation errors" in exc_info.value.user_message


class TestPersistenceSafety:
    """Test safety features of PydanticPersistence."""

    @pytest.mark.unit
    def test_save_creates_backup(self, tmp_path: Path):
        """Test that save_json creates a .bak file before overwriting."""
        path = tmp_path / "config.json"
        PydanticPersistence.save_json(SampleModel(name="original", value=1), path, backup=False)
        PydanticPersistence.save_json(SampleModel(name="modified", value=2), path)

        backup_path = path.with_suffix(".json.bak")
        assert backup_path.exists()
        assert PydanticPersistence.load_json(backup_path, SampleModel).name == "original"
        assert PydanticPersistence.load_json(path, SampleModel).name == "modified"

    @pytest.mark.unit
    def test_no_temp_file_left(self, tmp_path: Path):
        """Test that the temp file is renamed away."""
        path = tmp_path / "nested" / "config.json"
        PydanticPersistence.save_json(SampleModel(), path)
        assert path.exists()
        assert not path.with_suffix(".json.tmp").exists()

    @pytest.mark.unit
    def test_load_missing_raises(self, tmp_path: Path):
        """Test that load_json does not invent defaults."""
        with pytest.raises(FileNotFoundError):
            PydanticPersistence.load_json(tmp_path / "missing.json", SampleModel)

    @pytest.mark.unit
    def test_load_or_default_factory(self, tmp_path: Path):
        """Test a custom default factory."""
        model = PydanticPersistence.load_json_or_default(
            tmp_path / "missing.json", SampleModel, lambda: SampleModel(name="factory")
        )
        assert model.name == "factory"

    @pytest.mark.unit
    def test_validate_json(self, tmp_path: Path):
        """Test validation without loading."""
        good = tmp_path / "good.json"
        bad = tmp_path / "bad.json"
        good.write_text(json.dumps({"name": "x", "value": 1}))
        bad.write_text(json.dumps({"value": "not a number"}))

        assert PydanticPersistence.validate_json(good, SampleModel) == (True, None)
        valid, message = PydanticPersistence.validate_json(bad, SampleModel)
        assert not valid
        assert "value" in message
        valid, message = PydanticPersistence.validate_json(tmp_path / "missing.json", SampleModel)
        assert not valid
        assert "not found" in message

    @pytest.mark.unit
    def test_errors_are_configuration_errors(self, tmp_path: Path):
        """Test that load errors share a base class."""
        path = tmp_path / "broken.json"
        path.write_text("{nope")
        with pytest.raises(ConfigurationError):
            PydanticPersistence.load_json(path, SampleModel)
