"""Click parameter types and error reporting shared by the commands."""

import logging
import sys

import click

from fretlab.exceptions import FretlabError, InvalidNoteName, format_error_for_display
from fretlab.models import AppConfig, Note
from fretlab.theory import normalize_note_name

logger = logging.getLogger(__name__)


class NoteParamType(click.ParamType):
    """Accept a MIDI number ("60") or a note name with octave ("C4")."""

    name = "note"

    def convert(self, value, param, ctx) -> int:
        if isinstance(value, int):
            return value
        text = str(value).strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            return Note.parse(text).midi
        except InvalidNoteName as e:
            self.fail(f"{e.user_message}. {e.recovery_hint}", param, ctx)


class NoteNameParamType(click.ParamType):
    """Accept a bare note name ("C", "f#", "B♭") and normalize it."""

    name = "note_name"

    def convert(self, value, param, ctx) -> str:
        try:
            return normalize_note_name(str(value))
        except InvalidNoteName as e:
            self.fail(f"{e.user_message}. Use a bare note name such as 'C', 'F#' or 'Bb'", param, ctx)


NOTE = NoteParamType()
NOTE_NAME = NoteNameParamType()


def parse_int_list(text: str | None) -> list[int]:
    """Parse "0,4,7" (or "0 4 7") into integers."""
    if not text:
        return []
    try:
        return [int(part) for part in text.replace(",", " ").split()]
    except ValueError as e:
        raise click.BadParameter(f"expected integers separated by commas, got {text!r}") from e


def load_app_config(ctx: click.Context) -> AppConfig:
    """Load the AppConfig named by the group's --config option (or the default)."""
    obj = ctx.find_root().obj or {}
    try:
        return AppConfig.load_or_default(obj.get("config_path"))
    except FretlabError as e:
        report_error(e)
        raise


def report_error(error: Exception) -> None:
    """Show an error without a traceback and exit with status 1."""
    logger.error(f"Command failed: {error}")
    user_message, recovery_hint = format_error_for_display(error)
    click.echo(f"ERROR: {user_message}", err=True)
    if recovery_hint:
        click.echo(f"\n{recovery_hint}", err=True)
    sys.exit(1)
