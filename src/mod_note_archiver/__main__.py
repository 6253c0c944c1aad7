# ABOUTME: CLI entry point for the mod note link archiver.
# ABOUTME: Provides subcommands: extract, archive.

import argparse
import logging
import sys
from pathlib import Path

import structlog
from structlog.types import Processor

from mod_note_archiver.config import Settings, get_settings


def configure_logging(settings: Settings | None = None) -> None:
    """Configure structlog to write console or JSON lines to stderr.

    stdout is reserved for command output such as extracted URLs.
    """
    settings = settings or get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    processors: list[Processor]
    if settings.log_format == "json":
        processors = [
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.add_log_level,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S"),
            structlog.processors.add_log_level,
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
    )


def _read_text(path: str | None) -> str:
    if path:
        return Path(path).read_text(encoding="utf-8")
    return sys.stdin.read()


def cmd_extract(args: argparse.Namespace) -> int:
    """Print the URLs found in the note text, one per line."""
    from mod_note_archiver.extraction import extract_urls

    for url in extract_urls(_read_text(args.file)):
        print(url)
    return 0


def cmd_archive(args: argparse.Namespace) -> int:
    """Run the archiving job on the note text."""
    from mod_note_archiver.jobs import ArchiveModNoteLinksJob
    from mod_note_archiver.models import ModNote

    log = structlog.get_logger()
    log.info("cmd_archive_start")

    mod_note = ModNote(id=args.id, note=_read_text(args.file))

    try:
        with ArchiveModNoteLinksJob() as job:
            job.perform(mod_note)

        log.info("cmd_archive_complete")
        return 0

    except Exception:
        log.exception("cmd_archive_failed")
        return 1


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog="mod_note_archiver",
        description="Archive links found in moderator notes to the Wayback Machine",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # extract command
    extract_parser = subparsers.add_parser(
        "extract",
        help="List URLs found in note text (no network access)",
    )
    extract_parser.add_argument(
        "--file",
        type=str,
        help="File containing the note text. Defaults to stdin.",
    )

    # archive command
    archive_parser = subparsers.add_parser(
        "archive",
        help="Submit URLs found in note text to the Wayback Machine",
    )
    archive_parser.add_argument(
        "--file",
        type=str,
        help="File containing the note text. Defaults to stdin.",
    )
    archive_parser.add_argument(
        "--id",
        type=str,
        default="cli",
        help="Identifier of the note, used in log lines (default: cli)",
    )

    return parser


def main() -> int:
    """Main entry point."""
    configure_logging()

    parser = create_parser()
    args = parser.parse_args()

    commands = {
        "extract": cmd_extract,
        "archive": cmd_archive,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
