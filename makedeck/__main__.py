"""
Command-line entry point.

    makedeck create <output-path> <json-descriptor>

The descriptor may be given inline, as ``-`` to read it from stdin, or as
``@path`` to read it from a file.
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import LOG_LEVELS, load_settings
from .errors import InputShapeError, MakeDeckError, UsageError
from .exporters.pptx_exporter import export_to_pptx
from .models import load_descriptor
from .utils import log, setup_logging


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting."""

    def error(self, message):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    p = _ArgumentParser(
        prog="makedeck",
        description="Generate a PowerPoint deck from a JSON presentation descriptor",
    )
    p.add_argument("--log-level", default=None, type=str.upper, choices=LOG_LEVELS)
    p.add_argument("--log-file", default=None, help="Write logs to file as well")
    p.add_argument("--config", type=Path, default=None, help="YAML file with default_author / font_face / log_level")

    commands = p.add_subparsers(dest="command", metavar="command")
    commands.required = True

    create = commands.add_parser("create", help="Render a descriptor to a .pptx file")
    create.add_argument("output", help="Output .pptx path")
    create.add_argument("descriptor", help="Descriptor JSON, '-' for stdin, or @file")
    return p


def read_payload(arg: str) -> str:
    """Resolve the descriptor argument to JSON text."""
    if arg == "-":
        return sys.stdin.read()
    if arg.startswith("@"):
        path = Path(arg[1:])
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise InputShapeError(f"Cannot read descriptor file {path}: {exc}") from exc
    return arg


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except UsageError as exc:
        parser.print_usage(sys.stderr)
        print(f"Error: {exc}", file=sys.stderr)
        return exc.exit_code

    try:
        settings = load_settings(args.config)
        setup_logging(args.log_level or settings.log_level, args.log_file)

        descriptor = load_descriptor(read_payload(args.descriptor))
        export_to_pptx(descriptor, Path(args.output), settings)
    except MakeDeckError as exc:
        log.debug("%s failed", args.command, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return exc.exit_code

    print(f"Presentation created: {args.output}")
    return 0


def cli_entry() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli_entry()
