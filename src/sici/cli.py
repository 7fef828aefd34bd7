"""Command line interface for parsing and assembling SICIs."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import configure_logging, default_mode
from .errors import InvalidModeError, SiciParseError
from .identifier import Sici
from .models import Mode
from .report import render_report

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_ERROR = 2

ITEM_OPTIONS = ("issn", "chronology", "enumeration", "volume", "issue", "suppl_or_idx")
CONTRIBUTION_OPTIONS = ("location", "title_code", "local_number")
CONTROL_OPTIONS = ("csi", "dpi", "mfi")


def _build_result(sici: Sici, round_trip: Optional[bool]) -> Dict[str, Any]:
    result = sici.to_dict()
    result["round_trip"] = round_trip
    result["issues"] = [
        {
            "code": issue.code,
            "message": issue.message,
            "context": issue.context,
            "severity": issue.severity,
        }
        for issue in sici.issues()
    ]
    return result


def _write_json(path: Optional[Path], result: Dict[str, Any]) -> None:
    if path:
        path.write_text(json.dumps(result, indent=2))


def _run_parse(args: argparse.Namespace) -> int:
    sici = Sici(mode=args.mode)
    try:
        valid, round_trip = sici.parse(args.sici)
    except SiciParseError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_ERROR

    print(render_report(sici, round_trip=round_trip))
    _write_json(args.json_output, _build_result(sici, round_trip))
    return EXIT_OK if valid and round_trip else EXIT_INVALID


def _run_build(args: argparse.Namespace) -> int:
    sici = Sici(mode=args.mode)
    for segment_name, options in (
        ("item", ITEM_OPTIONS),
        ("contribution", CONTRIBUTION_OPTIONS),
        ("control", CONTROL_OPTIONS),
    ):
        segment = getattr(sici, segment_name)
        for option in options:
            value = getattr(args, option)
            if value is not None:
                logger.debug("Setting %s.%s = %r", segment_name, option, value)
                setattr(segment, option, value)

    print(sici.to_string())
    print(render_report(sici))
    _write_json(args.json_output, _build_result(sici, None))
    return EXIT_OK if sici.is_valid() else EXIT_INVALID


def _add_common_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--mode",
        default=None,
        help="Operating mode: strict or lax (default: $SICI_MODE or lax)",
    )
    parser.add_argument(
        "--json-output",
        type=Path,
        help="Write structured results to a JSON file",
    )


def main(argv: List[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Parse and assemble SICIs (ANSI/NISO Z39.56)")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_parser = subparsers.add_parser("parse", help="Validate a SICI string")
    parse_parser.add_argument("sici", help="The SICI to parse")
    _add_common_options(parse_parser)
    parse_parser.set_defaults(handler=_run_parse)

    build_parser = subparsers.add_parser("build", help="Assemble a SICI from its parts")
    for option in ITEM_OPTIONS + CONTRIBUTION_OPTIONS + CONTROL_OPTIONS:
        build_parser.add_argument(f"--{option.replace('_', '-')}", dest=option)
    _add_common_options(build_parser)
    build_parser.set_defaults(handler=_run_build)

    args = parser.parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else None)

    if args.mode is None:
        args.mode = default_mode()
    try:
        Sici(mode=args.mode)
    except InvalidModeError as exc:
        parser.error(f"{exc} (choose from {', '.join(Mode.ALL)})")

    return args.handler(args)


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    raise SystemExit(main())
