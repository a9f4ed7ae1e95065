"""Command Line Interface for langsense."""

from __future__ import annotations

import json
import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from langsense.core.config import settings
from langsense.core.exceptions import InvalidInputError, LangSenseError
from langsense.core.models import DetectionResult
from langsense.core.structured_logging import temporary_context
from langsense.detection.detector import LanguageDetector
from langsense.utils.language_mapper import LanguageMapper
from langsense.utils.logger import get_logger, set_log_level
from langsense.utils.voice_selector import VoiceSelector

logger = get_logger(__name__)
console = Console()


def _read_text(text: str | None) -> str:
    """Use the argument, or read from stdin when it is missing."""
    if text is None:
        text = sys.stdin.read()
    if not text.strip():
        raise InvalidInputError(
            "No text given", input_type="text", validation_rule="non_blank"
        )
    return text


def display_detections(text: str, results: list[DetectionResult]) -> None:
    """Display ranked detection results as a table."""
    if not results:
        console.print("🤷 No language detected", style="yellow")
        return

    table = Table(title=f"Language detection: {escape(text.strip()[:40])}")
    table.add_column("Rank", style="cyan")
    table.add_column("Code", style="cyan")
    table.add_column("Language", style="white")
    table.add_column("Confidence", style="green", justify="right")

    for rank, result in enumerate(results, start=1):
        table.add_row(
            str(rank),
            result.code,
            f"{result.flag} {result.display_name}".strip(),
            f"{result.confidence}%",
        )
    console.print(table)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.version_option(version="0.1.0")
def cli(verbose: bool) -> None:
    """langsense - guess the language of a word or sentence for TTS."""
    if verbose:
        set_log_level("DEBUG")


@cli.command()
@click.option(
    "--top",
    "-n",
    type=click.IntRange(1, 12),
    default=None,
    help="Number of results to show",
)
@click.option("--json", "as_json", is_flag=True, help="Print results as JSON")
@click.argument("text", required=False)
def detect(top: int | None, as_json: bool, text: str | None) -> None:
    """Rank the likely languages of TEXT (or stdin)."""
    try:
        text = _read_text(text)
    except InvalidInputError as e:
        console.print(f"❌ Error: {e.message}", style="red")
        sys.exit(1)

    with temporary_context(command="detect"):
        detector = LanguageDetector(max_results=top)
        results = detector.detect_all(text)

    if as_json:
        click.echo(json.dumps([result.model_dump() for result in results]))
    else:
        display_detections(text, results)


@cli.command()
@click.option(
    "--min-confidence",
    type=click.IntRange(0, 100),
    default=None,
    help="Minimum confidence to trust the detection",
)
@click.argument("text", required=False)
def voice(min_confidence: int | None, text: str | None) -> None:
    """Pick a TTS voice and locale for TEXT (or stdin)."""
    try:
        text = _read_text(text)
    except InvalidInputError as e:
        console.print(f"❌ Error: {e.message}", style="red")
        sys.exit(1)

    with temporary_context(command="voice"):
        selection = VoiceSelector(min_confidence=min_confidence).select(text)

    detected = (
        selection.detection.label if selection.detection else "nothing detected"
    )
    status = "⚠️  Default voice (fallback)" if selection.is_fallback else "✅ Detected"
    filename = LanguageMapper.audio_filename(text, selection.locale)
    console.print(
        Panel(
            f"🗣️  Text: {escape(text.strip())}\n"
            f"🔍 Detected: {detected}\n"
            f"🎙️  Voice: {selection.voice} ({selection.locale})\n"
            f"{status}\n"
            f"💾 Audio file: {filename}",
            title="Voice Selection",
            border_style="yellow" if selection.is_fallback else "green",
        )
    )


@cli.command()
@click.option("--code", "-c", help="Only show this language; fail if it has no voice")
def languages(code: str | None) -> None:
    """List supported languages with their TTS voices and locales."""
    mapper = LanguageMapper()
    codes = list(mapper.get_supported_languages())
    if code:
        try:
            codes = [mapper.require_supported(code)]
        except LangSenseError as e:
            console.print(f"❌ {e}", style="red")
            sys.exit(1)

    names = mapper.get_supported_languages()
    table = Table(title="Supported Languages")
    table.add_column("Code", style="cyan")
    table.add_column("Language", style="white")
    table.add_column("Voice", style="green")
    table.add_column("Locales", style="dim")

    for lang_code in codes:
        info = mapper.get_voice_info(lang_code)
        table.add_row(lang_code, names[lang_code], info.voice, ", ".join(info.locales))
    console.print(table)


@cli.command()
def config() -> None:
    """Show current configuration."""
    table = Table(title="langsense Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="white")
    table.add_column("Description", style="dim")

    table.add_row("Max Results", str(settings.max_results), "Ranked results returned")
    table.add_row(
        "Min Confidence", f"{settings.min_confidence}%", "Threshold for voice selection"
    )
    table.add_row(
        "Default Language", settings.default_language, "Used when nothing is detected"
    )
    table.add_row("Default Voice", settings.default_voice, "Fallback TTS voice")
    table.add_row("Default Locale", settings.default_locale, "Fallback TTS locale")
    table.add_row("Log Level", settings.log_level, "Logging level")
    table.add_row("Log Format", settings.log_format, "Log output style")

    console.print(table)


def main() -> None:
    """Main CLI entry point."""
    try:
        cli()
    except KeyboardInterrupt:
        console.print("\n👋 Goodbye!")
        sys.exit(0)
    except LangSenseError as e:
        logger.error("Command failed", **e.to_dict())
        console.print(f"💥 {e}", style="red")
        sys.exit(1)


if __name__ == "__main__":
    main()
