"""Music-theory lookup commands: notes, scales and chords."""

import sys

import click

from fretlab.cli.params import NOTE, NOTE_NAME, report_error
from fretlab.exceptions import InvalidNoteName
from fretlab.models import ChordInversion, Note
from fretlab.theory.chords import (
    CHORDS,
    analyze_chord,
    build_voicing,
    chord_display_name,
    chords_by_category,
)
from fretlab.theory.intervals import get_interval_label
from fretlab.theory.scales import (
    SCALES,
    available_modes,
    get_mode_intervals,
    get_mode_name,
    get_mode_root,
)


@click.command(name="note")
@click.argument("text")
def note(text: str):
    """Show details of a note (e.g. C#3, Bb-1, or a MIDI number)."""
    try:
        parsed = Note.from_midi(int(text)) if text.lstrip("-").isdigit() else Note.parse(text)
    except InvalidNoteName as e:
        report_error(e)
        return

    click.echo(f"Note:        {parsed.display_name}{parsed.octave}")
    click.echo(f"MIDI:        {parsed.midi}")
    click.echo(f"Pitch class: {parsed.pitch_class}")
    click.echo(f"Frequency:   {parsed.frequency:.2f} Hz")
    enharmonic = parsed.enharmonic
    if enharmonic.name != parsed.name:
        click.echo(f"Enharmonic:  {enharmonic.display_name}{enharmonic.octave}")


@click.command(name="scales")
def scales():
    """List available scales and their modes."""
    for scale in SCALES.values():
        intervals = " ".join(str(i) for i in scale.intervals)
        click.echo(f"{scale.name:<18} [{intervals}]")
        if scale.mode_names:
            click.echo(f"{'':<18} modes: {', '.join(available_modes(scale))}")


@click.command(name="scale")
@click.argument("root", type=NOTE_NAME)
@click.argument("name", default="Major")
@click.option("--mode", "-m", "mode_index", type=int, default=0, show_default=True, help="Mode index")
@click.option("--octave", "-o", type=int, default=3, show_default=True, help="Octave of the root")
def scale(root: str, name: str, mode_index: int, octave: int):
    """Show the notes of a scale mode, e.g. 'fretlab scale C Major -m 1' for D Dorian."""
    found = SCALES.get(name)
    if found is None:
        click.echo(f"Unknown scale: {name}", err=True)
        click.echo("Run 'fretlab scales' to see valid scale names", err=True)
        sys.exit(1)

    mode_root = get_mode_root(found, Note.from_name(root, octave), mode_index)
    intervals = get_mode_intervals(found, mode_index)

    click.echo(f"{mode_root.display_name} {get_mode_name(found, mode_index)} ({found.name}, mode {mode_index})")
    for interval in intervals:
        n = mode_root.transpose(interval)
        click.echo(f"  {get_interval_label(interval):>3}  {n.display_name}{n.octave:<3} midi {n.midi}")


@click.command(name="chords")
def chords():
    """List available chord types by category."""
    for category, members in chords_by_category().items():
        click.echo(f"{category}:")
        for chord in members:
            intervals = " ".join(str(i) for i in chord.intervals)
            click.echo(f"  {chord.type:<20} {chord.symbol or '(major)':<12} [{intervals}]")
        click.echo()


@click.command(name="chord")
@click.argument("root", type=NOTE_NAME)
@click.argument("chord_type", default="major")
@click.option("--inversion", "-i", type=click.IntRange(0, 6), default=0, show_default=True,
              help="Chord tone in the bass (0 = root position)")
@click.option("--octave", "-o", type=int, default=3, show_default=True, help="Octave of the root")
def chord(root: str, chord_type: str, inversion: int, octave: int):
    """Show a chord voicing, e.g. 'fretlab chord C major7 -i 1'."""
    if chord_type not in CHORDS:
        click.echo(f"Unknown chord type: {chord_type}", err=True)
        click.echo("Run 'fretlab chords' to see valid chord types", err=True)
        sys.exit(1)

    root_note = Note.from_name(root, octave)
    inv = ChordInversion(inversion)
    voicing = build_voicing(root_note, chord_type, inv)

    title = chord_display_name(root_note, chord_type, inv)
    click.echo(f"{title} ({CHORDS[chord_type].display_name}, {inv.display_name})")
    for midi in voicing:
        n = Note.from_midi(midi, prefer_flats=root_note.prefer_flats)
        click.echo(f"  {get_interval_label(midi - root_note.midi):>3}  {n.display_name}{n.octave:<3} midi {midi}")


@click.command(name="analyze")
@click.argument("notes", nargs=-1, required=True, type=NOTE)
def analyze(notes: tuple[int, ...]):
    """Name the chord formed by notes, e.g. 'fretlab analyze E3 G3 C4'."""
    matches = analyze_chord(notes)
    if not matches:
        click.echo("No matching chord")
        return
    for root_note, match in matches:
        click.echo(f"{root_note.display_name}{match.symbol}  ({root_note.display_name} {match.display_name})")
