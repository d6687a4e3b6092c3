"""Command line interface for thing."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from . import __version__
from .config import Settings
from .errors import ThingError
from .pipeline import ScaffoldPipeline

LOGGER = logging.getLogger("thing")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="thing", description="Create projects from templates")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    create_parser = subparsers.add_parser("create", help="create a new project from a template")
    create_parser.add_argument("name", help="Name of the new project, also its directory")
    create_parser.add_argument(
        "template",
        help="Path to a local template directory or a GitHub 'owner/repo' reference",
    )

    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        stream=sys.stderr,
    )


def _handle_create(args: argparse.Namespace) -> int:
    pipeline = ScaffoldPipeline(Settings.from_env())
    result = pipeline.run(args.name, args.template)
    failed = [hook for hook in result.hooks if not hook.ok]
    if failed:
        LOGGER.warning("%d of %d hook(s) exited with a non-zero status", len(failed), len(result.hooks))
    print(f"Project created at {result.project_dir}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)
    try:
        if args.command == "create":
            return _handle_create(args)
    except (ThingError, ValueError) as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 1
    parser.error("no command provided")
    return 2


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
