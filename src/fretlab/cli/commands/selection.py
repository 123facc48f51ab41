"""Selection commands: replay taps and print highlight maps."""

import click

from fretlab.cli.params import NOTE, NOTE_NAME, load_app_config, parse_int_list
from fretlab.core import apply_tap, diagnose, get_highlight_map
from fretlab.instruments import FretboardLayout, KeyboardLayout, get_tuning
from fretlab.models import (
    AppConfig,
    ChordInversion,
    ChordInversionView,
    ChordVariant,
    IntervalView,
    Note,
    ScaleView,
    SelectionConfig,
    UnimplementedChordView,
    ViewMode,
)

VIEW_CHOICES = ["scale", "interval", "chord"] + [v.value for v in ChordVariant]


def _echo_selection(config: SelectionConfig) -> None:
    intervals = ", ".join(str(i) for i in sorted(config.selected_intervals)) or "-"
    octaves = ", ".join(str(o) for o in sorted(config.selected_octaves)) or "-"
    click.echo(f"Root:      {config.root_note}")
    click.echo(f"Octaves:   {octaves}")
    click.echo(f"Intervals: {intervals}")


def _echo_highlights(config: SelectionConfig, instrument: str, app_config: AppConfig) -> None:
    highlights = get_highlight_map(config)

    if instrument == "keyboard":
        layout = KeyboardLayout(
            start_note=app_config.keyboard_start_note, key_count=app_config.keyboard_key_count
        )
        highlights = layout.filter_highlights(highlights)
    elif instrument == "fretboard":
        board = FretboardLayout(tuning=get_tuning(app_config.tuning), fret_count=app_config.fret_count)
        for position in board.highlight_positions(highlights):
            entry = position.highlight
            click.echo(
                f"  string {position.string_index} fret {position.fret:>2}  "
                f"{entry.label:>4}  {entry.color.to_hex()}"
            )
        _echo_diagnostics(config)
        return

    if not highlights:
        click.echo("Nothing highlighted")
    for midi in sorted(highlights):
        entry = highlights[midi]
        name = Note.from_midi(midi, prefer_flats=config.prefer_flats)
        click.echo(f"  {midi:>4}  {name.display_name}{name.octave:<4} {entry.label:>4}  {entry.color.to_hex()}")
    _echo_diagnostics(config)


def _echo_diagnostics(config: SelectionConfig) -> None:
    for diagnostic in diagnose(config):
        click.echo(f"warning: {diagnostic.message}", err=True)


@click.command(name="tap")
@click.argument("notes", nargs=-1, required=True, type=NOTE)
@click.option("--lowest", type=NOTE, default=None, help="Lowest note the instrument can show")
@click.option("--verbose-steps", "-s", is_flag=True, help="Print the selection after every tap")
@click.pass_context
def tap(ctx, notes: tuple[int, ...], lowest: int | None, verbose_steps: bool):
    """
    Replay note taps on an empty interval selection.

    \b
    Example:
      fretlab tap C4 G4 C4     # root C, add G, remove C -> root G
    """
    app_config = load_app_config(ctx)
    config = SelectionConfig.empty(root_note=app_config.default_root)

    for midi in notes:
        config = apply_tap(config, midi, lowest_midi=lowest)
        if verbose_steps:
            click.echo(f"tap {midi}:")
            _echo_selection(config)
            click.echo()

    _echo_selection(config)
    click.echo("Notes:")
    _echo_highlights(config, "none", app_config)


def _build_view(
    view: str,
    scale: str,
    mode: int,
    show_octave: bool,
    chord: str,
    inversion: int,
    chord_octave: int,
    additional_octaves: bool,
) -> ViewMode:
    if view == "scale":
        return ScaleView(scale=scale, mode_index=mode, show_octave=show_octave)
    if view == "interval":
        return IntervalView()
    if view == "chord":
        return ChordInversionView(
            chord_type=chord,
            inversion=ChordInversion(inversion),
            chord_octave=chord_octave,
            show_additional_octaves=additional_octaves,
        )
    return UnimplementedChordView(variant=ChordVariant(view))


@click.command(name="highlight")
@click.option("--view", type=click.Choice(VIEW_CHOICES), default="scale", show_default=True, help="View mode")
@click.option("--root", "-r", type=NOTE_NAME, default=None, help="Root note (default from config)")
@click.option("--octaves", default=None, help="Selected octaves, e.g. '3,4'")
@click.option("--intervals", default=None, help="Selected intervals for interval view, e.g. '0,4,7,14'")
@click.option("--scale", default=None, help="Scale name (default from config)")
@click.option("--mode", "-m", type=int, default=0, show_default=True, help="Mode index")
@click.option("--show-octave", is_flag=True, help="Also highlight the octave above each mode root")
@click.option("--chord", default=None, help="Chord type (default from config)")
@click.option("--inversion", "-i", type=click.IntRange(0, 6), default=0, show_default=True, help="Inversion")
@click.option("--chord-octave", type=int, default=None, help="Octave of the chord root")
@click.option("--additional-octaves", is_flag=True, help="Repeat the voicing an octave below and above")
@click.option(
    "--instrument",
    type=click.Choice(["none", "keyboard", "fretboard"]),
    default="none",
    show_default=True,
    help="Project onto the configured instrument",
)
@click.pass_context
def highlight(
    ctx,
    view: str,
    root: str | None,
    octaves: str | None,
    intervals: str | None,
    scale: str | None,
    mode: int,
    show_octave: bool,
    chord: str | None,
    inversion: int,
    chord_octave: int | None,
    additional_octaves: bool,
    instrument: str,
):
    """Print the highlighted notes for a selection."""
    app_config = load_app_config(ctx)

    view_mode = _build_view(
        view,
        scale or app_config.default_scale,
        mode,
        show_octave,
        chord or app_config.default_chord,
        inversion,
        app_config.default_chord_octave if chord_octave is None else chord_octave,
        additional_octaves,
    )
    config = SelectionConfig(
        root_note=root or app_config.default_root,
        selected_octaves=frozenset(parse_int_list(octaves) or [app_config.default_octave]),
        selected_intervals=frozenset(parse_int_list(intervals)),
        view_mode=view_mode,
    )
    _echo_highlights(config, instrument, app_config)
