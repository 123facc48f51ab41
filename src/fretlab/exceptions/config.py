"""Errors raised while reading or validating the configuration file."""

from typing import Any

from .base import FretlabError

# Field-name fragment -> listing command that prints the accepted values.
# Checked in order; the octave exclusion keeps 'default_chord_octave' out of
# the chord hint.
_LISTING_HINTS = (
    ("scale", None, "Run 'fretlab scales' to see valid scale names"),
    ("chord", "octave", "Run 'fretlab chords' to see valid chord types"),
    ("tuning", None, "Run 'fretlab config tunings' to see valid tunings"),
    ("root", None, "Note names look like 'C', 'F#' or 'Bb'"),
)

_JSON_CHECKLIST = (
    "Common JSON mistakes:\n"
    "  - a comma after the last item\n"
    "  - strings without double quotes\n"
    "  - a brace or bracket left open"
)


class ConfigurationError(FretlabError):
    """The configuration could not be loaded or saved."""


class ConfigFileInvalidError(ConfigurationError):
    """The configuration file is not parseable JSON."""

    def __init__(self, file_path: str, parse_error: str):
        lowered = parse_error.lower()
        if "empty" in lowered:
            summary = "Configuration file is empty"
            hint = f"Delete {file_path} or run 'fretlab config init' to write the defaults"
        elif "trailing comma" in lowered:
            summary = "Configuration file has a trailing comma"
            hint = f"Remove the comma after the last item in {file_path}"
        else:
            summary = "Configuration file has invalid syntax"
            hint = f"{_JSON_CHECKLIST}\nFix {file_path} or run 'fretlab config init' after deleting it"

        super().__init__(
            user_message=summary,
            technical_message=f"Cannot parse {file_path}: {parse_error}",
            recoverable=True,
            recovery_hint=hint,
        )
        self.file_path = file_path
        self.parse_error = parse_error


class ConfigValidationError(ConfigurationError):
    """A configuration value was rejected by the model."""

    def __init__(self, field: str, value: Any, error_msg: str, file_path: str | None = None):
        lines = [f"Change '{field}' in your configuration"]
        if file_path:
            lines.append(f"Config file: {file_path}")

        lowered = field.lower()
        for fragment, unless, hint in _LISTING_HINTS:
            if fragment in lowered and not (unless and unless in lowered):
                lines.append(hint)
                break

        super().__init__(
            user_message=f"Invalid configuration value for '{field}': {error_msg}",
            technical_message=f"{field}={value!r} rejected: {error_msg}",
            recoverable=True,
            recovery_hint="\n".join(lines),
        )
        self.field = field
        self.value = value
        self.file_path = file_path
