"""Command-line interface for activity recommendations."""

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from activity_recommender.config import get_settings
from activity_recommender.models.air_quality import aqi_percentage, describe_aqi
from activity_recommender.models.preferences import PreferredTimeOfDay, UserPreferences
from activity_recommender.models.weather import WeatherPayloadError, WeatherSnapshot
from activity_recommender.service import get_engine

logger = logging.getLogger(__name__)


def _unit_interval(value: str) -> float:
    number = float(value)
    if not 0 <= number <= 1:
        raise argparse.ArgumentTypeError(f"{value} is not between 0 and 1")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="activity-recommender",
        description="Activity Recommender - Suggest activities for the current weather",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s 0.1.0",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Activities command
    subparsers.add_parser("activities", help="List every activity in the catalog")

    # Recommend command
    recommend_parser = subparsers.add_parser(
        "recommend", help="Recommend activities for a One Call weather file"
    )
    recommend_parser.add_argument(
        "weather",
        type=Path,
        help="Path to an OpenWeather One Call JSON response",
    )
    recommend_parser.add_argument(
        "--outdoor", type=_unit_interval, help="Outdoor preference (0-1)"
    )
    recommend_parser.add_argument(
        "--physical", type=_unit_interval, help="Physical level (0-1)"
    )
    recommend_parser.add_argument(
        "--favorite", action="append", default=[], metavar="TAG", help="Favorite tag"
    )
    recommend_parser.add_argument(
        "--dislike", action="append", default=[], metavar="TAG", help="Disliked tag"
    )
    recommend_parser.add_argument(
        "--time-of-day",
        choices=[t.value for t in PreferredTimeOfDay],
        default=None,
        help="Time of day to plan for",
    )
    recommend_parser.add_argument(
        "--limit", type=int, default=None, help="Max activities to show"
    )

    # AQI command
    aqi_parser = subparsers.add_parser("aqi", help="Describe an air quality index value")
    aqi_parser.add_argument("aqi", type=int, help="AQI value (1-5)")

    # Serve command
    subparsers.add_parser("serve", help="Run the HTTP API")

    return parser


def _has_preferences(args: argparse.Namespace) -> bool:
    return (
        args.outdoor is not None
        or args.physical is not None
        or bool(args.favorite)
        or bool(args.dislike)
        or args.time_of_day is not None
    )


def _cmd_activities() -> int:
    for activity in get_engine().catalog:
        s = activity.suitability
        times = ", ".join(t.value for t in s.time_of_day)
        print(
            f"{activity.name:<24} {activity.category.value:<8} "
            f"{s.temp_min_c:g}..{s.temp_max_c:g}°C  [{times}]  "
            f"tags: {', '.join(activity.tags)}"
        )
    return 0


def _cmd_recommend(args: argparse.Namespace) -> int:
    settings = get_settings()

    try:
        payload = json.loads(args.weather.read_text(encoding="utf-8"))
        weather = WeatherSnapshot.from_onecall(payload)
    except (OSError, json.JSONDecodeError, WeatherPayloadError, ValidationError) as e:
        print(f"Cannot read weather from {args.weather}: {e}", file=sys.stderr)
        return 1

    preferences = None
    if _has_preferences(args):
        preferences = UserPreferences(
            outdoor_preference=args.outdoor,
            physical_level=args.physical,
            favorite_activities=args.favorite,
            disliked_activities=args.dislike,
            time_of_day=args.time_of_day,
        )

    ranking = get_engine().rank(weather, preferences)
    limit = args.limit or settings.recommendation_limit

    print(
        f"{weather.temperature_c:g}°C, {weather.condition or 'unknown'} "
        f"({weather.time_of_day().value}, {weather.season().value})"
    )
    if not ranking:
        print("No activities suit the current weather.")
        return 0

    for position, item in enumerate(ranking[:limit], start=1):
        print(f"{position:>2}. {item.activity.name:<24} {item.score:.3f}")
    return 0


def _cmd_aqi(args: argparse.Namespace) -> int:
    description = describe_aqi(args.aqi)
    print(f"AQI {args.aqi}: {description.level} ({aqi_percentage(args.aqi):.0f}%)")
    print(description.message)
    print(description.caution)
    return 0


def _cmd_serve() -> int:
    import uvicorn

    from activity_recommender.api import create_app

    settings = get_settings()
    uvicorn.run(create_app(), host=settings.host, port=settings.port)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 0
    if args.command == "activities":
        return _cmd_activities()
    if args.command == "recommend":
        return _cmd_recommend(args)
    if args.command == "aqi":
        return _cmd_aqi(args)
    if args.command == "serve":
        return _cmd_serve()

    logger.error(f"Unknown command: {args.command}")
    return 1


if __name__ == "__main__":
    sys.exit(main())
