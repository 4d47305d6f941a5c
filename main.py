# main.py

"""Entry point for the arz price snapshot."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from arz.config.logging_config import setup_logging
from arz.config.settings import Settings

logger = logging.getLogger("arz.main")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    labels = ", ".join(s["label"] for s in Settings.SOURCES)

    parser = argparse.ArgumentParser(
        prog="arz",
        description=(
            "Scrape currency, gold and crypto prices into one "
            "JSON snapshot."
        ),
        epilog=f"Sources: {labels}",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        dest="output_path",
        help=f"Snapshot file to write (default: {Settings.OUTPUT_PATH.name}).",
    )
    parser.add_argument(
        "-l",
        "--lookup",
        type=Path,
        default=None,
        dest="lookup_path",
        help="Country to English name JSON file.",
    )
    parser.add_argument(
        "--table",
        action="store_true",
        default=False,
        dest="show_table",
        help="Also render the snapshot as a table.",
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        default=False,
        dest="to_stdout",
        help="Also print the snapshot JSON to stdout.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Show per-source progress on stderr, not only warnings.",
    )
    return parser


def main() -> None:
    """Parse arguments, run one snapshot and exit with its status."""
    args = _build_parser().parse_args()

    log_file = setup_logging(
        logging.INFO if args.verbose else logging.WARNING
    )
    logger.info("arz starting, log file: %s", log_file)

    from arz.cli.runner import run_snapshot

    exit_code = asyncio.run(
        run_snapshot(
            output_path=args.output_path,
            lookup_path=args.lookup_path,
            show_table=args.show_table,
            to_stdout=args.to_stdout,
        )
    )
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
