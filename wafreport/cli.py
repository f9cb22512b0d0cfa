"""CLI entry point for wafreport."""

import argparse
import io
import logging
import sys

from . import __version__
from .accumulator import accumulate
from .report import format_report


def main(argv: list[str] | None = None) -> None:
    """wafreport: summarize ModSecurity inbound/outbound anomaly scores read from stdin."""
    parser = argparse.ArgumentParser(
        prog="wafreport",
        description=(
            "Print a statistics table of inbound and outbound anomaly scores. "
            "Reads one 'INBOUND OUTBOUND' pair per line from stdin, e.g. "
            "grep -E -o \"[0-9-]+ [0-9-]+$\" my_waf.log | wafreport"
        ),
    )
    parser.add_argument("--verbose", action="store_true", default=False, help="Log parsing details to stderr.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    args = parser.parse_args(argv)

    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    _cmd_report()


def _cmd_report() -> None:
    """Read scores from stdin and print the report to stdout."""
    if sys.stdin is None:
        print("Error: No standard input to read scores from", file=sys.stderr)
        sys.exit(2)

    try:
        # Undecodable bytes must not abort the run
        if isinstance(sys.stdin, io.TextIOWrapper):
            sys.stdin.reconfigure(encoding="utf-8", errors="replace")
        aggregate = accumulate(sys.stdin)
    except OSError as exc:
        print(f"Error: Could not read standard input: {exc}", file=sys.stderr)
        sys.exit(2)

    sys.stdout.write(format_report(aggregate))
