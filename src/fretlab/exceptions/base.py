"""Root of the fretlab exception tree."""

from typing import Optional


class FretlabError(Exception):
    """
    Error raised by fretlab itself.

    Carries two messages: ``user_message`` is what a terminal shows and what
    ``str()`` returns, ``technical_message`` is what goes to the log. An
    optional ``recovery_hint`` tells the user what to change.
    """

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recoverable: bool = False,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message if technical_message else user_message
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message

    def get_full_message(self) -> str:
        """User message followed by the hint, if there is one."""
        if not self.recovery_hint:
            return self.user_message
        return f"{self.user_message}\n\nSuggestion: {self.recovery_hint}"
