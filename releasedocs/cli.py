"""CLI entrypoint for releasedocs."""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from .config import ConfigError, load_config
from .logging import configure_logging, log_failure
from .orchestrator import Orchestrator


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="releasedocs",
        description="Build versioned docs content and data files from release checkouts.",
    )
    parser.add_argument("source", type=Path, help="Folder holding one checkout per version tag.")
    parser.add_argument("dest", type=Path, help="Website folder receiving content/ and data/.")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to .releasedocs.yml, or a folder containing it (defaults to the current directory).",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for releasedocs."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    logger = configure_logging(verbose=bool(args.verbose))

    try:
        config = load_config(args.config)
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    orchestrator = Orchestrator(args.source, args.dest, config)
    try:
        asyncio.run(orchestrator.run())
    except Exception as exc:
        log_failure(logger, "Releases processing failed", exc)
        sys.exit(1)


if __name__ == "__main__":
    main(sys.argv[1:])
