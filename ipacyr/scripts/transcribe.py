"""Transcription CLI entry point."""

import argparse
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from ipacyr.config import IpaCyrConfig, load_config
from ipacyr.exceptions import IpaCyrError
from ipacyr.logging import setup_logger_from_config
from ipacyr.phonemes import format_phonemes
from ipacyr.transcriber import RussianTranscriber

console = Console()
err_console = Console(stderr=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ipacyr",
        description="Transcribe IPA notation into Russian Cyrillic",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "text",
        nargs="*",
        help="IPA notation to transcribe",
    )
    parser.add_argument(
        "--file",
        type=Path,
        default=None,
        help="File containing IPA notation (one utterance per line)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to JSON or YAML configuration file",
    )
    parser.add_argument(
        "--phonemes",
        action="store_true",
        help="Also print the reduced phoneme sequence",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Override the configured logging level",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for transcription CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.text and args.file is None:
        err_console.print("[red]Error:[/red] Either TEXT or --file is required")
        return 2

    try:
        config = load_config(args.config) if args.config else IpaCyrConfig()
    except IpaCyrError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        return 1

    if args.log_level:
        config.logging.level = args.log_level
    setup_logger_from_config(config.logging)

    utterances = list(args.text)
    if args.file is not None:
        if not args.file.exists():
            err_console.print(f"[red]Error:[/red] File not found: {args.file}")
            return 1
        try:
            with open(args.file, encoding="utf-8") as f:
                utterances.extend(line.strip() for line in f if line.strip())
        except UnicodeDecodeError as e:
            err_console.print(f"[red]Error:[/red] Not valid UTF-8: {args.file} ({escape(str(e))})")
            return 1

    transcriber = RussianTranscriber(config.transcriber)
    status = 0
    for utterance in utterances:
        try:
            if args.phonemes:
                phonemes = transcriber.to_phonemes(utterance)
                console.print(format_phonemes(phonemes), markup=False, highlight=False, soft_wrap=True)
            result = transcriber.transcribe(utterance)
        except IpaCyrError as e:
            err_console.print(f"[red]Transcription failed:[/red] {escape(str(e))}")
            status = 1
            continue
        console.print(result, markup=False, highlight=False, soft_wrap=True)

    return status


if __name__ == "__main__":
    sys.exit(main())
