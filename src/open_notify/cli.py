"""Command line entry point for the open-notify client.

Usage:
    open-notify astros
    open-notify iss-now
    open-notify passes 51.0 13.5 --altitude 440 --count 10
"""

import argparse
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Optional, Sequence

from open_notify.container import create_container
from open_notify.errors import OpenNotifyError

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    # Reduce noise from third-party libraries
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def _format_time(unix_seconds: int) -> str:
    return datetime.fromtimestamp(unix_seconds, tz=timezone.utc).isoformat()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="open-notify",
        description="Query the open-notify.org spaceflight API.",
    )
    parser.add_argument("--base-url", help="API base URL")
    parser.add_argument(
        "--json",
        action="store_true",
        help="print the validated response as JSON",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("astros", help="list people currently in space")
    sub.add_parser("iss-now", help="show the current ISS position")

    passes = sub.add_parser("passes", help="predict ISS passes over a location")
    passes.add_argument("latitude", type=float, help="degrees, -80..80")
    passes.add_argument("longitude", type=float, help="degrees, -180..180")
    passes.add_argument(
        "--altitude", type=float, default=100.0, help="meters, 0..10000"
    )
    passes.add_argument(
        "--count", type=int, default=5, help="number of passes, 1..100"
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the CLI.

    Returns:
        Process exit status: 0 on success, 1 on any OpenNotifyError or
        a query value that cannot be sent (NaN, infinity).
    """
    args = build_parser().parse_args(argv)
    _configure_logging()

    with create_container(base_url=args.base_url) as container:
        service = container.resolve("open_notify_service")
        processor = container.resolve("processor")
        try:
            if args.command == "astros":
                result = service.fetch_astronauts()
                lines = [f"{p.name} ({p.craft})" for p in result.people]
            elif args.command == "iss-now":
                result = service.fetch_iss_position()
                lines = [
                    f"{_format_time(result.timestamp)}: "
                    f"latitude {result.latitude}, longitude {result.longitude}"
                ]
            else:
                result = service.fetch_pass_predictions(
                    args.latitude, args.longitude, args.altitude, args.count
                )
                lines = ["ISS passes:"] + [
                    f"- at {_format_time(p.rise_time)} "
                    f"for {p.duration_seconds} seconds"
                    for p in result.passes
                ]
        except (OpenNotifyError, ValueError) as e:
            logger.debug("Command %s failed", args.command, exc_info=True)
            print(str(e), file=sys.stderr)
            return 1

        if args.json:
            print(processor.to_json(result, indent=2))
        else:
            print("\n".join(lines))
    return 0


if __name__ == "__main__":
    sys.exit(main())
