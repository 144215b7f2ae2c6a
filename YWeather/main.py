"""Print current Yahoo! Weather conditions for a location."""
import argparse
import logging
import os
import sys
from typing import List, Optional, Tuple

from dotenv import load_dotenv

from weather_report import WeatherReport
from yahoo_weather_provider import YahooWeatherProvider
from weather_provider import WeatherProviderError

DEFAULT_TIMEOUT = 10


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser("yweather", description="Current weather from Yahoo! Weather")
    parser.add_argument("location", nargs="?", help="City name, postal code, ... (default: $WEATHER_LOCATION)")
    parser.add_argument("--timeout", type=int, default=None, help="HTTP timeout in seconds")
    parser.add_argument("--log-file", default=None)
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


def setup_logging(log_file: Optional[str], verbose: bool) -> None:
    log_level = logging.DEBUG if verbose else logging.WARNING
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


def load_config(args: argparse.Namespace) -> Tuple[str, int]:
    load_dotenv()
    location = args.location or os.getenv("WEATHER_LOCATION")
    timeout = args.timeout if args.timeout is not None else os.getenv("WEATHER_TIMEOUT", DEFAULT_TIMEOUT)

    if not location:
        raise SystemExit("No location given and WEATHER_LOCATION is not set")

    try:
        timeout_val = int(timeout)
    except ValueError as exc:
        raise SystemExit(f"Invalid timeout: {exc}") from exc
    if timeout_val <= 0:
        raise SystemExit(f"Invalid timeout: {timeout_val}")

    logging.info("Configuration loaded: location=%s timeout=%s", location, timeout_val)
    return location, timeout_val


def format_report_lines(report: WeatherReport) -> List[str]:
    wind = report.wind_speed
    if report.wind_direction:
        wind = f"{wind}, {report.wind_direction}"
    lines = [
        f"Weather for {report.location}",
        f"  Conditions:  {report.conditions}",
        f"  Temperature: {report.temperature}",
        f"  Wind:        {wind}",
        f"  Wind chill:  {report.wind_chill}",
        f"  Pressure:    {report.pressure}",
        f"  Humidity:    {report.humidity}",
        f"  Visibility:  {report.visibility}",
        f"  Sunrise:     {report.sunrise}",
        f"  Sunset:      {report.sunset}",
        f"  Updated:     {report.time_updated}",
    ]
    if not report.is_complete:
        lines.append("(Some values were missing from Yahoo! Weather's response.)")
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_file, args.verbose)
    location, timeout = load_config(args)

    provider = YahooWeatherProvider(timeout=timeout)
    try:
        report = provider.get_current(location)
    except WeatherProviderError as err:
        logging.error("Weather fetch failed: %s", err)
        print(err, file=sys.stderr)
        return 1

    print("\n".join(format_report_lines(report)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
