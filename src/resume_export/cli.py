from __future__ import annotations

import argparse
import asyncio
import sys
from collections.abc import Sequence
from dataclasses import replace
from pathlib import Path

from pydantic import ValidationError

from resume_export.config import load_settings
from resume_export.errors import ConfigError, ExportError
from resume_export.logging_config import configure_logging
from resume_export.models import EXPORT_FORMATS, PRINT_FORMATS, ExportFormat, Resume
from resume_export.services import DirectorySaveSink, ExportCoordinator

_CLI_FORMATS = [fmt.value for fmt in ExportFormat if fmt not in PRINT_FORMATS]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="resume-export",
        description="Export a resume JSON document to another format.",
    )
    parser.add_argument("resume", type=Path, help="Path to a resume JSON export")
    parser.add_argument(
        "-f",
        "--format",
        choices=_CLI_FORMATS,
        default=ExportFormat.MARKDOWN.value,
        help="Output format (default: markdown)",
    )
    parser.add_argument("-o", "--output-dir", type=Path, help="Directory to save into")
    parser.add_argument(
        "--no-prompt",
        action="store_true",
        help="Use the default filename without asking",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def run_cli(argv: Sequence[str] | None = None) -> int:
    """Run the export workflow: load resume → resolve filename → encode → save.

    Returns:
        Exit code (0 for success or cancellation, 1 for failure).
    """
    args = _build_parser().parse_args(argv)

    try:
        settings = load_settings()
    except ConfigError as exc:
        print(f"❌ Configuration error: {exc}")
        return 1

    configure_logging("DEBUG" if args.verbose else settings.log_level)
    if args.no_prompt:
        settings = replace(settings, prompt_export_filename=False)
    if args.output_dir is not None:
        settings = replace(settings, output_dir=args.output_dir)

    try:
        resume = Resume.model_validate_json(args.resume.read_text(encoding="utf-8"))
    except OSError as exc:
        print(f"❌ Could not read {args.resume}: {exc}")
        return 1
    except ValidationError as exc:
        print(f"❌ {args.resume} is not a valid resume export:\n{exc}")
        return 1

    sink = DirectorySaveSink(settings.output_dir)
    coordinator = ExportCoordinator(settings, sink)
    label = EXPORT_FORMATS[ExportFormat(args.format)].label

    try:
        result = asyncio.run(coordinator.export(resume, args.format))
    except ExportError as exc:
        print(f"❌ Failed to export resume as {label}: {exc}")
        return 1

    if result.cancelled:
        print("Export cancelled.")
        return 0

    print(f"✅ Resume exported as {label}: {sink.saved[-1]}")
    return 0


def main() -> int:
    """Entry point for the CLI application."""
    try:
        return run_cli()
    except KeyboardInterrupt:
        print("\n\n⚠️  Interrupted by user. Exiting.")
        return 130
    except Exception as exc:
        print(f"\n❌ Unexpected error: {exc}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
