"""Configuration commands.

Commands:
    - config show      # Display configuration values
    - config path      # Print the config file location
    - config init      # Write a default config file
    - config tunings   # List fretboard tuning presets
"""

from pathlib import Path

import click

from fretlab.cli.params import load_app_config, report_error
from fretlab.exceptions import FretlabError
from fretlab.instruments import TUNINGS
from fretlab.models import AppConfig
from fretlab.models.config import default_config_path


def _config_path(ctx: click.Context) -> Path:
    obj = ctx.find_root().obj or {}
    return obj.get("config_path") or default_config_path()


@click.group(name="config")
def config():
    """Configure fretlab defaults."""
    pass


@config.command(name="show")
@click.option("--field", "-f", default=None, help="Show a single field")
@click.pass_context
def show(ctx, field: str | None):
    """Display configuration values."""
    app_config = load_app_config(ctx)
    values = app_config.model_dump()

    if field is not None:
        if field not in values:
            raise click.BadParameter(
                f"unknown field {field!r}; valid fields: {', '.join(values)}", param_hint="--field"
            )
        click.echo(values[field])
        return

    for name, value in values.items():
        description = AppConfig.model_fields[name].description or ""
        click.echo(f"{name:<22} {value!s:<20} {description}")


@config.command(name="path")
@click.pass_context
def path(ctx):
    """Print the config file location."""
    click.echo(str(_config_path(ctx)))


@config.command(name="init")
@click.option("--force", is_flag=True, help="Overwrite an existing config file")
@click.pass_context
def init(ctx, force: bool):
    """Write a config file with default values."""
    config_path = _config_path(ctx)
    if config_path.exists() and not force:
        click.echo(f"Config file already exists: {config_path}")
        click.echo("Use --force to overwrite it")
        return

    try:
        AppConfig().save(config_path)
    except (FretlabError, OSError) as e:
        report_error(e)
    click.echo(f"Wrote default config to {config_path}")


@config.command(name="tunings")
def tunings():
    """List fretboard tuning presets."""
    for name, tuning in TUNINGS.items():
        click.echo(f"{name:<20} {' '.join(tuning.strings)}")
