"""Main CLI entry point for Hebrew Tones."""

import json
import logging
import time
from dataclasses import asdict
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from hebrew_tones import __version__
from hebrew_tones.config import get_settings
from hebrew_tones.letters import all_letters
from hebrew_tones.models.playback import PlaybackControls
from hebrew_tones.models.tones import ToneDescriptor

console = Console()

DEFAULT_TEXT = "בְּרֵאשִׁית בָּרָא אֱלֹהִים אֵת הַשָּׁמַיִם וְאֵת הָאָרֶץ"


def playback_options(func):
    """Speed, amplitude and volume options, bounded like the sliders."""
    func = click.option(
        "--volume",
        type=click.FloatRange(*PlaybackControls.VOLUME_BOUNDS),
        default=None,
        help="Output volume 0-2.0 (shown as 0-100%), snapped to 0.01",
    )(func)
    func = click.option(
        "--amplitude",
        type=click.FloatRange(*PlaybackControls.AMPLITUDE_BOUNDS),
        default=None,
        help="Per-tone amplitude multiplier 0.1-2.0, snapped to 0.1",
    )(func)
    func = click.option(
        "--speed",
        type=click.FloatRange(*PlaybackControls.SPEED_BOUNDS),
        default=None,
        help="Playback speed multiplier 0.5-2.0, snapped to 0.1",
    )(func)
    return func


def _controls(
    speed: float | None, amplitude: float | None, volume: float | None
) -> PlaybackControls:
    settings = get_settings()
    return PlaybackControls.from_sliders(
        speed=settings.default_speed if speed is None else speed,
        amplitude=settings.default_amplitude if amplitude is None else amplitude,
        volume=settings.default_volume if volume is None else volume,
    )


def _read_text(text: str | None) -> str:
    if text is None:
        return DEFAULT_TEXT
    if text == "-":
        return click.get_text_stream("stdin").read()
    return text


def _process(text: str):
    """Run the pipeline through a session, exiting on failure."""
    from hebrew_tones.pipeline import ConverterSession

    session = ConverterSession()
    if not session.update(text):
        console.print(f"[red]Error: {session.error}[/red]")
        raise SystemExit(1)
    return session


def _descriptor_table(descriptors: list[ToneDescriptor]) -> Table:
    table = Table(title="Sound Properties")
    table.add_column("Letter", justify="center")
    table.add_column("Name")
    table.add_column("Value", justify="right")
    table.add_column("Meaning")
    table.add_column("Freq (Hz)", justify="right", style="cyan")
    table.add_column("Dur (s)", justify="right", style="magenta")
    table.add_column("Amplitude", justify="right", style="green")

    for d in descriptors:
        table.add_row(
            d.symbol,
            d.display_name,
            str(d.numeric_value),
            d.meaning,
            f"{d.frequency:.0f}",
            f"{d.duration:.2f}",
            f"{d.amplitude:.4f}",
        )
    return table


@click.group()
@click.version_option(version=__version__, prog_name="hebrew-tones")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def main(verbose: bool) -> None:
    """Hebrew Tones - convert Hebrew text to sound.

    Each letter becomes a tone whose pitch follows how often the letter
    occurs in the text and whose length follows its numeric value.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@main.command()
@click.argument("text", required=False)
@click.option("--json", "as_json", is_flag=True, help="Print the full analysis as JSON")
@click.option(
    "-o",
    "--output",
    type=click.Path(path_type=Path),
    help="Write analysis.json to this directory",
)
def analyze(text: str | None, as_json: bool, output: Path | None) -> None:
    """Analyze TEXT and show its tone sequence and statistics.

    TEXT defaults to the opening verse of Genesis; pass "-" to read stdin.
    """
    from hebrew_tones.pipeline import create_default_pipeline
    from hebrew_tones.stages import ExportStage

    text = _read_text(text)
    settings = get_settings()

    pipeline = create_default_pipeline(settings, export=output is not None)
    result = pipeline.run(text, output_dir=output)

    if not result.success or result.context is None:
        console.print("[bold red]Processing failed![/bold red]")
        for error in result.errors:
            console.print(f"[red]Error: {error}[/red]")
        raise SystemExit(1)

    context = result.context

    if as_json:
        click.echo(json.dumps(ExportStage().build_document(context), indent=2, ensure_ascii=False))
        return

    if context.descriptors:
        console.print(_descriptor_table(context.descriptors))
    else:
        console.print("[yellow]No Hebrew letters found in text.[/yellow]")

    console.print("[bold]Statistical Analysis[/bold]")
    console.print_json(data=asdict(context.statistics))

    if context.analysis_path:
        console.print(f"Output: [green]{context.analysis_path}[/green]")


@main.command()
@click.argument("text", required=False)
@playback_options
def play(
    text: str | None,
    speed: float | None,
    amplitude: float | None,
    volume: float | None,
) -> None:
    """Play the tone sequence of TEXT."""
    from hebrew_tones.playback import PlaybackScheduler

    session = _process(_read_text(text))
    if not session.descriptors:
        console.print("[yellow]No Hebrew letters found in text.[/yellow]")
        return

    controls = _controls(speed, amplitude, volume)
    scheduler = PlaybackScheduler()
    if not scheduler.output.available:
        console.print(
            f"[red]Error: audio output unavailable ({scheduler.output.unavailable_reason})[/red]"
        )
        raise SystemExit(1)

    batch = scheduler.play_sequence(session.descriptors, controls)
    console.print(
        f"Playing {len(batch.schedule)} tones "
        f"({batch.schedule.total_duration:.2f}s, speed {controls.speed}x, "
        f"volume {controls.volume_percent:.0f}%)"
    )
    try:
        batch.wait()
        # let the last callback buffer drain
        time.sleep(2 * get_settings().frames_per_buffer / get_settings().sample_rate)
    except KeyboardInterrupt:
        cancelled = scheduler.cancel_all()
        console.print(f"[yellow]Stopped ({cancelled} tones cancelled)[/yellow]")


@main.command("play-letter")
@click.argument("letter")
@click.argument("text", required=False)
@playback_options
def play_letter(
    letter: str,
    text: str | None,
    speed: float | None,
    amplitude: float | None,
    volume: float | None,
) -> None:
    """Play the tone LETTER has within TEXT.

    TEXT defaults to the opening verse of Genesis, so the letter sounds the
    way it does there. A text made of one letter alone maps it to silence.
    """
    from hebrew_tones.playback import PlaybackScheduler

    session = _process(_read_text(text))
    descriptor = next((d for d in session.descriptors if d.symbol == letter), None)
    if descriptor is None:
        console.print(f"[red]Error: '{letter}' is not a Hebrew letter in the text[/red]")
        raise SystemExit(1)

    controls = _controls(speed, amplitude, volume)
    scheduler = PlaybackScheduler()
    if not scheduler.play_letter(descriptor, controls):
        console.print(
            f"[red]Error: audio output unavailable ({scheduler.output.unavailable_reason})[/red]"
        )
        raise SystemExit(1)

    console.print(
        f"{descriptor.symbol} {descriptor.display_name}: "
        f"{descriptor.frequency:.0f} Hz for {descriptor.duration / controls.speed:.2f}s"
    )
    time.sleep(descriptor.duration / controls.speed)


@main.command()
@click.argument("text", required=False)
@click.option(
    "-o",
    "--output",
    type=click.Path(path_type=Path),
    help="Output audio file (default: <output_dir>/tones.<format>)",
)
@playback_options
def render(
    text: str | None,
    output: Path | None,
    speed: float | None,
    amplitude: float | None,
    volume: float | None,
) -> None:
    """Render the tone sequence of TEXT to an audio file."""
    from hebrew_tones.playback import build_schedule, render_schedule, write_audio

    settings = get_settings()
    session = _process(_read_text(text))
    if not session.descriptors:
        console.print("[red]Error: No Hebrew letters found in text[/red]")
        raise SystemExit(1)

    controls = _controls(speed, amplitude, volume)
    schedule = build_schedule(session.descriptors, controls)
    samples = render_schedule(schedule, controls.volume, settings)

    if output is None:
        output = settings.output_dir / f"tones.{settings.output_format}"
    write_audio(output, samples, settings.sample_rate)

    console.print(
        f"[bold green]Rendered {len(schedule)} tones[/bold green] "
        f"({len(samples) / settings.sample_rate:.2f}s) to {output}"
    )


@main.command()
def letters() -> None:
    """List the Hebrew letters with their names, values and meanings."""
    table = Table(title="Hebrew Letters")
    table.add_column("Letter", justify="center")
    table.add_column("Name")
    table.add_column("Value", justify="right")
    table.add_column("Meaning")
    for letter in all_letters():
        table.add_row(letter.symbol, letter.display_name, str(letter.numeric_value), letter.meaning)
    console.print(table)


@main.command()
def info() -> None:
    """Show current configuration and audio availability."""
    from hebrew_tones.playback import get_audio_output

    settings = get_settings()
    defaults = PlaybackControls(
        speed=settings.default_speed,
        amplitude=settings.default_amplitude,
        volume=settings.default_volume,
    )

    console.print("[bold]Configuration[/bold]")
    console.print(f"  Output directory: {settings.output_dir}")
    console.print(f"  Sample rate: {settings.sample_rate}")
    console.print(f"  Output format: {settings.output_format}")
    console.print(f"  Speed: {defaults.speed}x")
    console.print(f"  Amplitude: {defaults.amplitude}x")
    console.print(f"  Volume: {defaults.volume_percent:.0f}%")
    console.print(f"  Cancel on retrigger: {settings.cancel_on_retrigger}")
    console.print()

    console.print("[bold]Audio output[/bold]")
    output = get_audio_output(settings)
    if output.available:
        console.print("  [green]pyaudio[/green]: available")
    else:
        console.print(f"  [red]pyaudio[/red]: {output.unavailable_reason}")


if __name__ == "__main__":
    main()
