"""Tests for the exception hierarchy and error handling helpers."""

import logging
from unittest.mock import Mock

import pytest

from fretlab.exceptions import (
    ConfigValidationError,
    ErrorContext,
    FretlabError,
    InvalidNoteName,
    MusicTheoryError,
    format_error_for_display,
    handle_errors,
)


class TestExceptions:
    """Test exception attributes."""

    @pytest.mark.unit
    def test_full_message_includes_hint(self):
        """Test that the recovery hint is appended."""
        error = FretlabError("Something failed", recovery_hint="Try again")
        assert str(error) == "Something failed"
        assert error.technical_message == "Something failed"
        assert error.get_full_message() == "Something failed\n\nSuggestion: Try again"

    @pytest.mark.unit
    def test_invalid_note_name(self):
        """Test InvalidNoteName details and hierarchy."""
        error = InvalidNoteName("H3", "unsupported spelling")
        assert isinstance(error, MusicTheoryError)
        assert isinstance(error, ValueError)
        assert error.text == "H3"
        assert error.user_message == "Invalid note name: 'H3'"
        assert "unsupported spelling" in error.technical_message
        assert error.recoverable

    @pytest.mark.unit
    def test_validation_error_hints(self):
        """Test listing-command hints per field."""
        assert "fretlab chords" in ConfigValidationError("default_chord", "x", "bad").recovery_hint
        assert "fretlab chords" not in ConfigValidationError("default_chord_octave", 99, "bad").recovery_hint
        assert "fretlab config tunings" in ConfigValidationError("tuning", "x", "bad").recovery_hint

    @pytest.mark.unit
    def test_format_error_for_display(self):
        """Test formatting app and generic errors."""
        message, hint = format_error_for_display(InvalidNoteName("Q"))
        assert message == "Invalid note name: 'Q'"
        assert hint is not None

        message, hint = format_error_for_display(KeyError("x"))
        assert message.startswith("KeyError")
        assert hint is None


class TestHandleErrors:
    """Test the handle_errors decorator."""

    @pytest.mark.unit
    def test_fallback_without_reraise(self):
        """Test that errors are reported and the fallback returned."""
        notify = Mock()

        @handle_errors(operation_name="parse", user_notification=notify, fallback_value="none", re_raise=False)
        def parse():
            raise InvalidNoteName("Z9")

        assert parse() == "none"
        notify.assert_called_once()
        assert "Invalid note name" in notify.call_args.args[0]

    @pytest.mark.unit
    def test_reraise(self, caplog):
        """Test that errors are logged and re-raised."""

        @handle_errors(operation_name="compute")
        def compute():
            raise RuntimeError("bad")

        with caplog.at_level(logging.ERROR, logger="fretlab.exceptions.handlers"):
            with pytest.raises(RuntimeError):
                compute()
        assert "Unexpected error during compute" in caplog.text

    @pytest.mark.unit
    def test_success_passthrough(self):
        """Test that return values pass through unchanged."""

        @handle_errors(operation_name="add")
        def add(a, b):
            return a + b

        assert add(2, 3) == 5
        assert add.__name__ == "add"


class TestErrorContext:
    """Test the ErrorContext context manager."""

    @pytest.mark.unit
    def test_suppresses_when_not_reraising(self):
        """Test that the error is recorded and suppressed."""
        with ErrorContext("load", re_raise=False) as ctx:
            raise InvalidNoteName("Q")
        assert isinstance(ctx.error, InvalidNoteName)

    @pytest.mark.unit
    def test_reraises_by_default(self):
        """Test that errors propagate by default."""
        with pytest.raises(ValueError):
            with ErrorContext("load"):
                raise ValueError("bad")

    @pytest.mark.unit
    def test_no_error(self):
        """Test a clean block."""
        with ErrorContext("noop") as ctx:
            pass
        assert ctx.error is None
