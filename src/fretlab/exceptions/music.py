"""Music-theory exceptions.

Only malformed input that cannot be interpreted raises. Lookups by name
(scales, chords) and out-of-range label requests degrade softly instead;
see `fretlab.core.diagnostics`.
"""

from .base import FretlabError

RECOGNIZED_SPELLINGS_HINT = (
    "Use a letter A-G with an optional '#' or 'b' and an octave number, "
    "e.g. 'C4', 'F#3', 'Bb-1'"
)


class MusicTheoryError(FretlabError):
    """Input could not be interpreted as music-theory data."""
    pass


class InvalidNoteName(MusicTheoryError, ValueError):
    """Note text is not one of the recognized spellings."""

    def __init__(self, text: str, reason: str | None = None):
        """
        Initialize invalid note name error.

        Args:
            text: The text that failed to parse
            reason: Optional detail about why parsing failed
        """
        technical = f"Cannot parse note {text!r}"
        if reason:
            technical += f": {reason}"

        super().__init__(
            user_message=f"Invalid note name: {text!r}",
            technical_message=technical,
            recoverable=True,
            recovery_hint=RECOGNIZED_SPELLINGS_HINT,
        )
        self.text = text
        self.reason = reason
