"""Command line interface for the Rainy Day planting service.

Usage examples (after `pip install -e .`):

  planting-risk soils
  planting-risk assess --rainfall 45 --soil sand
  planting-risk weather --location Nairobi
  planting-risk advise --soil clay --location Nairobi --rainfall 12

Exit codes: 0 success, 1 domain error (message on stderr), 2 usage error.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List

from planting_risk.auth.config import settings
from planting_risk.domain import (
    Assessment,
    PlantingRiskError,
    assess,
    list_soils,
    parse_rainfall,
)
from planting_risk.ingestion.weather_client import WeatherAPIClient, WeatherReport
from planting_risk.logging_utils import setup_logging
from planting_risk.services.advisor import PlantingAdvisor

logger = logging.getLogger(__name__)


def _print_weather(report: WeatherReport) -> None:
    print(f"Location:    {report.location}")
    print(f"Temperature: {report.temperature_c:.1f}°C")
    print(f"Humidity:    {report.humidity_pct:.0f}%")
    print(f"Conditions:  {report.description}")
    print(f"Rainfall:    {report.rainfall_mm:.1f} mm (estimate)")


def _print_assessment(a: Assessment) -> None:
    print(a.verdict)
    print(a.message)
    print(f"Risk level:  {a.risk_level.value}")
    print(f"Risk score:  {a.risk_score:.1f}")
    print(f"Rainfall:    {a.rainfall_mm:g} mm")
    print(f"Soil type:   {a.soil_name}")


def _cmd_soils(_: argparse.Namespace) -> int:
    for soil in list_soils():
        print(f"{soil.id:<11} {soil.drainage_coefficient:>4g}  {soil.label}")
    return 0


def _cmd_assess(args: argparse.Namespace) -> int:
    result = assess(parse_rainfall(args.rainfall), args.soil)
    _print_assessment(result)
    return 0


def _cmd_weather(args: argparse.Namespace) -> int:
    report = WeatherAPIClient().lookup(args.location)
    _print_weather(report)
    return 0


def _cmd_advise(args: argparse.Namespace) -> int:
    advice = PlantingAdvisor().advise(
        args.soil, rainfall_text=args.rainfall, location=args.location)
    if advice.fallback_reason:
        print(f"Weather lookup failed ({advice.fallback_reason}); "
              "using manual rainfall.")
    if advice.weather:
        _print_weather(advice.weather)
        print()
    _print_assessment(advice.assessment)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="planting-risk",
        description="Rainy Day flood-risk assessment for smart planting",
    )
    parser.add_argument("--log-level", default=settings.LOG_LEVEL,
                        help="Logging level (DEBUG, INFO, WARNING, ...)")
    sub = parser.add_subparsers(dest="command", required=True)

    p_soils = sub.add_parser("soils", help="List soil types and drainage")
    p_soils.set_defaults(func=_cmd_soils)

    p_assess = sub.add_parser(
        "assess", help="Assess flood risk for a rainfall amount and soil")
    p_assess.add_argument("--rainfall", required=True,
                          help="Rainfall over 24 hours (mm)")
    p_assess.add_argument("--soil", required=True,
                          help="Soil type id (see `soils`)")
    p_assess.set_defaults(func=_cmd_assess)

    p_weather = sub.add_parser(
        "weather", help="Look up current weather for a location")
    p_weather.add_argument("--location", required=True,
                           help="City name, e.g. Nairobi")
    p_weather.set_defaults(func=_cmd_weather)

    p_advise = sub.add_parser(
        "advise", help="Weather lookup or manual rainfall, then assess")
    p_advise.add_argument("--soil", required=True,
                          help="Soil type id (see `soils`)")
    p_advise.add_argument("--location", help="City name for weather lookup")
    p_advise.add_argument("--rainfall",
                          help="Manual rainfall (mm); fallback if lookup fails")
    p_advise.set_defaults(func=_cmd_advise)

    return parser


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)
    try:
        return args.func(args)
    except PlantingRiskError as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
