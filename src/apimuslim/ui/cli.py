from __future__ import annotations

import argparse
import json
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from apimuslim.adapters.calendar_formatter import IndonesianCalendarFormatter
from apimuslim.common.logging import configure_logging
from apimuslim.config import get_app_config
from apimuslim.domain.calendar import CalendarService

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from apimuslim.config import AppConfig
    from apimuslim.domain.calendar import CalendarResult

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="API Muslim server and calendar tools")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the HTTP API with uvicorn")
    serve.add_argument("--host", type=str, help="Bind address (defaults to HOST)")
    serve.add_argument("--port", type=int, help="Bind port (defaults to PORT)")

    cal = subparsers.add_parser("cal", help="Print a calendar conversion as JSON")
    cal_sub = cal.add_subparsers(dest="cal_command", required=True)
    today = cal_sub.add_parser("today", help="Describe today")
    hijr = cal_sub.add_parser("hijr", help="Convert a Gregorian date to Hijri")
    hijr.add_argument("date", type=str, help="Gregorian date as YYYY-MM-DD")
    ce = cal_sub.add_parser("ce", help="Convert a Hijri date to Gregorian")
    ce.add_argument("date", type=str, help="Hijri date as YYYY-MM-DD")
    for sub in (today, hijr, ce):
        sub.add_argument(
            "--method",
            type=str,
            help="standar, islamic-umalqura or islamic-civil (default: %(default)s)",
            default="standar",
        )
        sub.add_argument("--tz", type=str, help="IANA time zone (defaults to TIMEZONE)")
        sub.add_argument("--adj", type=str, help="Day adjustment applied to the result")

    return parser.parse_args(list(argv))


def _run_calendar(args: argparse.Namespace, config: AppConfig) -> CalendarResult:
    service = CalendarService(
        formatter=IndonesianCalendarFormatter(),
        default_time_zone=config.timezone,
    )
    request = service.build_request(method=args.method, time_zone=args.tz, adjustment=args.adj)
    if args.cal_command == "hijr":
        return service.gregorian_to_hijri(args.date, request)
    if args.cal_command == "ce":
        return service.hijri_to_gregorian(args.date, request)
    return service.today(request)


def _serve(args: argparse.Namespace, config: AppConfig) -> None:
    import uvicorn  # noqa: PLC0415

    uvicorn.run(
        "apimuslim.app:build_application",
        factory=True,
        host=args.host or config.host,
        port=args.port or config.port,
        log_config=None,
    )


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    configure_logging()
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
        config = get_app_config()
        if parsed_args.command == "cal":
            result = _run_calendar(parsed_args, config)
            print(json.dumps(result.to_payload(), ensure_ascii=False, indent=2))  # noqa: T201
            return
    except ValueError as exc:
        log.error("CLI validation error: %s", exc)  # noqa: TRY400
        sys.exit(2)

    try:
        if parsed_args.command == "serve":
            _serve(parsed_args, config)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301
    except Exception:
        log.exception("Fatal error")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
