"""Main entry point for the live score display."""

import argparse

from pydantic import ValidationError

from .models.config import (
    DEFAULT_POLL_INTERVAL,
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_URL,
    PollerConfig,
)
from .ui import run_live_display
from .utils.logging import DEFAULT_LOG_FILE, debug, log, set_log_file


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Snooker live score board")
    parser.add_argument("--url", default=DEFAULT_URL, help="Live results page URL")
    parser.add_argument(
        "--interval",
        type=float,
        default=DEFAULT_POLL_INTERVAL,
        help="Seconds between refreshes",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_REQUEST_TIMEOUT,
        help="Seconds before a page fetch is abandoned",
    )
    parser.add_argument(
        "--demo", action="store_true", help="Render a bundled sample page"
    )
    parser.add_argument(
        "--once", action="store_true", help="Render a single refresh and exit"
    )
    parser.add_argument(
        "--log-file", default=DEFAULT_LOG_FILE, help="Debug log file path"
    )
    return parser


def main() -> int:
    """Main entry point"""
    parser = build_parser()
    args = parser.parse_args()

    set_log_file(args.log_file)

    try:
        config = PollerConfig(
            url=args.url,
            poll_interval=args.interval,
            request_timeout=args.timeout,
            demo=args.demo,
            once=args.once,
        )
    except ValidationError as e:
        parser.error(f"invalid configuration: {e}")

    debug("🔍 Command line args:")
    debug(f"   URL: {config.url}")
    debug(f"   Interval: {config.poll_interval}")
    debug(f"   Timeout: {config.request_timeout}")
    debug(f"   Demo: {config.demo}")
    debug(f"   Once: {config.once}")

    if config.demo:
        log("🏆 Running in DEMO mode with a sample results page")
        log("   Press Ctrl+C to exit\n")

    return run_live_display(config)


if __name__ == "__main__":
    main()
