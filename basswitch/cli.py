"""Command-line interface for Bass Switch.

Provides commands for:
- detect: Print bass note switches of a WAV file
- info: Show audio file information
"""

import logging
import typer
from pathlib import Path
from typing import Optional
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .core import DetectorConfig

app = typer.Typer(
    name="bass-switch",
    help="Bass root note switch detection for mono WAV recordings",
    rich_markup_mode="markdown",
)
console = Console()


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _build_config(
    config_file: Optional[Path],
    window_size: Optional[int],
    overlap: Optional[int],
    cutoff: Optional[float],
    debounce: Optional[int],
) -> DetectorConfig:
    """Merge a JSON config file with command-line overrides."""
    config = (
        DetectorConfig.from_json_file(str(config_file))
        if config_file is not None
        else DetectorConfig()
    )
    if window_size is not None:
        config.window_size = window_size
    if overlap is not None:
        config.overlap_divisor = overlap
    if cutoff is not None:
        config.bass_cutoff = cutoff
    if debounce is not None:
        config.debounce_frames = debounce
    return config.validate()


@app.command()
def detect(
    input_file: Path = typer.Argument(..., help="Input WAV file (16-bit PCM, mono)"),
    window_size: Optional[int] = typer.Option(
        None, "-w", "--window-size", help="Frame size in samples (default 16384)"
    ),
    overlap: Optional[int] = typer.Option(
        None, "--overlap", help="Overlap divisor, hop = window / overlap (default 4)"
    ),
    cutoff: Optional[float] = typer.Option(
        None, "-c", "--cutoff", help="Bass cutoff frequency in Hz (default 80)"
    ),
    debounce: Optional[int] = typer.Option(
        None, "-d", "--debounce", help="Stable detections required per switch (default 10)"
    ),
    config_file: Optional[Path] = typer.Option(
        None, "--config", help="JSON file with detector settings"
    ),
    midi_output: Optional[Path] = typer.Option(
        None, "-m", "--midi", help="Write the switches as a MIDI bass line"
    ),
    show_table: bool = typer.Option(
        False, "-t", "--table", help="Show switches in a table"
    ),
    json_output: bool = typer.Option(
        False, "--json", help="Output results as JSON (for scripting)"
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose", help="Verbose output"
    ),
):
    """Detect bass note switches in a WAV file.

    **Examples:**

        bass-switch detect bassline.wav

        bass-switch detect bassline.wav --cutoff 120 --debounce 6 -m bass.mid
    """
    from .input import WavLoader
    from .detection import NoteSwitchDetector
    from .output import MIDIExporter, format_event, events_to_json

    _setup_logging(verbose)

    try:
        config = _build_config(config_file, window_size, overlap, cutoff, debounce)

        loader = WavLoader()
        audio, sr = loader.load(str(input_file))
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    duration = loader.get_duration(audio, sr)
    if verbose and not json_output:
        console.print(f"[blue]Loaded:[/blue] {input_file}")
        console.print(f"  Duration: {duration:.2f}s, Sample rate: {sr}Hz")
        console.print(
            f"  Window: {config.window_size}, hop: {config.hop_size}, "
            f"cutoff: {config.bass_cutoff:.1f} Hz, debounce: {config.debounce_frames}"
        )

    detector = NoteSwitchDetector(config)
    events = detector.detect(audio, sr)

    if midi_output is not None:
        MIDIExporter().export(events, str(midi_output), duration=duration)

    if json_output:
        result = events_to_json(events, config=config, sample_rate=sr, duration=duration)
        result["input_file"] = str(input_file)
        if midi_output is not None:
            result["midi_file"] = str(midi_output)
        console.print_json(data=result)
        return

    if show_table:
        _show_events_table(events)
    else:
        for event in events:
            console.print(format_event(event), highlight=False)

    if not events:
        console.print("[yellow]No bass note switches detected[/yellow]")

    if midi_output is not None:
        console.print(f"[green]MIDI written to:[/green] {midi_output}")


@app.command()
def info(
    input_file: Path = typer.Argument(..., help="Input WAV file"),
    window_size: Optional[int] = typer.Option(
        None, "-w", "--window-size", help="Frame size in samples (default 16384)"
    ),
    overlap: Optional[int] = typer.Option(
        None, "--overlap", help="Overlap divisor (default 4)"
    ),
):
    """Show information about an audio file."""
    from .input import WavLoader
    from .detection import NoteSwitchDetector

    try:
        config = _build_config(None, window_size, overlap, None, None)
        loader = WavLoader()
        audio, sr = loader.load(str(input_file))
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    detector = NoteSwitchDetector(config)

    console.print(f"\n[bold]Audio Info:[/bold] {input_file.name}")
    console.print(f"  Duration: {loader.get_duration(audio, sr):.2f} seconds")
    console.print(f"  Sample rate: {sr} Hz")
    console.print(f"  Samples: {len(audio):,}")
    console.print(f"  Frequency resolution: {sr / config.window_size:.2f} Hz/bin")
    console.print(f"  Frames: {detector.count_frames(len(audio))}")


def _show_events_table(events):
    """Display note switches in a table."""
    table = Table(title="Bass Note Switches")
    table.add_column("Note", style="cyan")
    table.add_column("Frequency (Hz)", style="green")
    table.add_column("Time (s)", style="yellow")
    table.add_column("Frame", style="magenta")

    for event in events:
        table.add_row(
            event.name,
            f"{event.frequency:.2f}",
            f"{event.time:.3f}",
            str(event.frame_index),
        )

    console.print(table)


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
