"""The ``fretlab`` command group and its logging setup."""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

import click

from fretlab import __version__
from fretlab.models.config import default_config_dir

from .commands import analyze, chord, chords, config, highlight, note, scale, scales, tap

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
LOG_MAX_BYTES = 10 * 1024 * 1024
LOG_BACKUPS = 5


def _log_level(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> int:
    # An explicit log file takes its level from --log-level
    if log_file:
        return logging.getLevelName(log_level.upper())
    if debug or verbose > 1:
        return logging.DEBUG
    return logging.INFO if verbose == 1 else logging.WARNING


def _log_path(debug: bool, log_file: Optional[Path]) -> Path:
    if log_file:
        return log_file
    if debug:
        return Path.cwd() / "fretlab-debug.log"
    logs = default_config_dir() / "logs"
    logs.mkdir(parents=True, exist_ok=True)
    return logs / "fretlab.log"


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> None:
    """
    Send log records to a rotating file.

    Modules under ``fretlab`` only create loggers; this is the one place that
    attaches a handler. Calling it again (as the test runner does) replaces
    the previous file handler instead of stacking another.
    """
    level = _log_level(verbose, debug, log_file, log_level)
    path = _log_path(debug, log_file)

    handler = logging.handlers.RotatingFileHandler(
        path, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8"
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    handler.setLevel(level)

    root = logging.getLogger()
    for stale in [h for h in root.handlers if isinstance(h, logging.handlers.RotatingFileHandler)]:
        root.removeHandler(stale)
        stale.close()
    root.setLevel(level)
    root.addHandler(handler)

    logger.info(f"Logging at {logging.getLevelName(level)} to {path}")


@click.group()
@click.version_option(version=__version__, prog_name="fretlab")
@click.option('--config', 'config_path', type=click.Path(dir_okay=False, path_type=Path),
              help='Configuration file to use instead of ~/.fretlab/config.json')
@click.option('-v', '--verbose', count=True, help='Log more (-v info, -vv debug)')
@click.option('--debug', is_flag=True, help='Log everything to ./fretlab-debug.log')
@click.option('--log-file', type=click.Path(dir_okay=False, path_type=Path),
              help='Write the log here')
@click.option('--log-level', default='INFO',
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              help='Level used together with --log-file')
@click.pass_context
def cli(ctx, config_path: Optional[Path], verbose: int, debug: bool,
        log_file: Optional[Path], log_level: str):
    """
    fretlab - music theory for fretboards and keyboards.

    Look up notes, scales and chord voicings, and replay note taps through
    the selection editor to see what gets highlighted.

    \b
    Examples:
      fretlab scale C Major --mode 1           # D Dorian
      fretlab chord C major7 --inversion 1     # Cmaj7/E
      fretlab tap C4 G4 C4                     # G becomes the root
      fretlab highlight --view scale --root A --scale "Minor Pentatonic" --instrument fretboard
      fretlab --log-file ./session.log chords
    """
    setup_logging(verbose, debug, log_file, log_level)
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


for _command in (note, scale, scales, chord, chords, analyze, tap, highlight, config):
    cli.add_command(_command)

if __name__ == "__main__":
    cli()
