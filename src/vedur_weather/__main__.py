#!/usr/bin/env python3
"""vedur-weather command line entry point."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Sequence

from .domain.catalog import SUPPORTED_LANGUAGES
from .domain.errors import WeatherError
from .service import usecase
from .version import get_version


def _add_station_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--stations", required=True, help="station ids, e.g. '1,422'")
    parser.add_argument("--lang", choices=SUPPORTED_LANGUAGES, default="is")
    parser.add_argument(
        "--descriptions",
        action="store_true",
        help="include the measurement labels in the output",
    )


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="vedur-weather",
        description="Icelandic weather data from vedur.is as JSON",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {get_version()}")
    parser.add_argument("--compact", action="store_true", help="print JSON on one line")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("info", help="describe the available operations")
    subparsers.add_parser("stations", help="list automatic weather stations")

    forecast_parser = subparsers.add_parser("forecasts", help="station forecasts")
    _add_station_options(forecast_parser)

    observation_parser = subparsers.add_parser("observations", help="latest observations")
    _add_station_options(observation_parser)
    observation_parser.add_argument("--time", choices=("1h", "3h"))
    observation_parser.add_argument("--anytime", choices=("0", "1"))

    text_parser = subparsers.add_parser("texts", help="text bulletins")
    text_parser.add_argument("--types", required=True, help="bulletin type ids, e.g. '5,6'")
    text_parser.add_argument("--lang", choices=SUPPORTED_LANGUAGES, default="is")

    return parser


def _execute(args: argparse.Namespace):
    if args.command == "info":
        return usecase.info()
    if args.command == "stations":
        return usecase.available_stations()
    if args.command == "forecasts":
        return usecase.forecasts(
            stations=args.stations, lang=args.lang, descriptions=args.descriptions
        )
    if args.command == "observations":
        return usecase.observations(
            stations=args.stations,
            lang=args.lang,
            descriptions=args.descriptions,
            time=args.time,
            anytime=args.anytime,
        )
    return usecase.texts(types=args.types, lang=args.lang)


def run(argv: Sequence[str] | None = None) -> int:
    """Parse ``argv``, run the command and print its JSON. Returns the exit code."""
    args = _build_parser().parse_args(argv)
    try:
        envelope = _execute(args)
    except WeatherError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    indent = None if args.compact else 2
    print(json.dumps(envelope.to_dict(), indent=indent, ensure_ascii=False))
    return 0


def main() -> None:
    """Script entry point."""
    sys.exit(run(sys.argv[1:]))


if __name__ == "__main__":
    main()
