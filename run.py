"""Entry point for the Makinilya manuscript generator."""

import argparse
import logging
import sys
from pathlib import Path

from makinilya.config import ConfigError, load_config
from makinilya.ingestion.context_loader import ContextError
from makinilya.interpolation.parser import TextParseError
from makinilya.project import CONFIG_FILENAME, build_project, check_project, new_project

LOG_FORMAT = "%(asctime)s | %(levelname)-5s | %(name)s | %(message)s"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="makinilya", description="An austere manuscript generator")
    subcommands = parser.add_subparsers(dest="command", required=True)

    build = subcommands.add_parser("build", help="Build the manuscript")
    build.add_argument("path", nargs="?", default=".", help="Project directory")

    check = subcommands.add_parser("check", help="List every placeholder in the draft")
    check.add_argument("path", nargs="?", default=".", help="Project directory")

    new = subcommands.add_parser("new", help="Create a new project")
    new.add_argument("path", help="Directory to create the project in")

    return parser


def _format_error(exc: Exception) -> str:
    if isinstance(exc, TextParseError) and exc.title:
        return f"[Parser Error] {exc.title}: {exc}"
    if isinstance(exc, TextParseError):
        return f"[Parser Error] {exc}"
    if isinstance(exc, ContextError):
        return f"[Context Error] {exc}"
    if isinstance(exc, ConfigError):
        return f"[Config Error] {exc}"
    return f"[File Error] {exc}"


def main(argv: list[str] | None = None) -> int:
    """Run a Makinilya command and return the process exit status."""
    args = _build_parser().parse_args(argv)

    try:
        config = load_config(Path(args.path) / CONFIG_FILENAME)
    except ConfigError as exc:
        print(_format_error(exc), file=sys.stderr)
        return 1

    logging.basicConfig(
        level=getattr(logging, config.logging.level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )

    try:
        if args.command == "build":
            output = build_project(args.path)
            print(f"Manuscript created: {output}")
        elif args.command == "check":
            identifiers = check_project(args.path)
            for identifier in identifiers:
                print(identifier)
            print(f"{len(identifiers)} placeholder(s) referenced")
        else:
            root = new_project(args.path)
            print(f"Project created: {root}")
    except (TextParseError, ContextError, ConfigError, OSError) as exc:
        print(_format_error(exc), file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
