"""Display formatting for raw Yahoo! Weather values."""
import re

NO_WIND_DIRECTION = "-999"

# ASCII digits only; int() alone would also take "4_5" or non-ASCII digits
_BEARING_PATTERN = re.compile(r"\s*[+-]?[0-9]+\s*")

_DUE_DIRECTIONS = {
    0: "Due North",
    45: "Due Northeast",
    90: "Due East",
    135: "Due Southeast",
    180: "Due South",
    225: "Due Southwest",
    270: "Due West",
    315: "Due Northwest",
    360: "Due North",
}

# (lower, upper, phrase) for bearings strictly between two points;
# the reported offset is measured back from the upper bound
_BETWEEN_DIRECTIONS = [
    (0, 45, "North of Northeast"),
    (45, 90, "East of Northeast"),
    (90, 135, "East of Southeast"),
    (135, 180, "South of Southeast"),
    (180, 225, "South of Southwest"),
    (225, 270, "West of Southwest"),
    (270, 315, "West of Northwest"),
    (315, 360, "North of Northwest"),
]

_PRESSURE_TRENDS = {
    "0": "stable",
    "1": "rising",
    "2": "falling",
}


def pretty_location_name(city: str, region: str, country: str) -> str:
    """Join city, region and country without leaving stray commas behind."""
    name = city
    for part in (region, country):
        if name and part:
            name += ", " + part
        else:
            name += part
    return name


def format_temperature(value: str, units: str) -> str:
    return f"{value}° {units}"


def format_wind_speed(speed: str, units: str) -> str:
    """Returns "Still" instead of 0 mph or 0 km/h."""
    if speed == "0":
        return "Still"
    return f"{speed} {units}"


def describe_wind_direction(raw: str) -> str:
    """
    Describe a wind bearing in compass terms.

    Args:
        raw: Bearing in degrees as sent by the provider

    Returns:
        e.g. "Due East" or "35° North of Northeast"; empty string when the
        bearing is missing, not an integer, or outside 0-360
    """
    if raw is None or not _BEARING_PATTERN.fullmatch(raw):
        return ""
    bearing = int(raw)

    if bearing in _DUE_DIRECTIONS:
        return _DUE_DIRECTIONS[bearing]
    for lower, upper, phrase in _BETWEEN_DIRECTIONS:
        if lower < bearing < upper:
            return f"{upper - bearing}° {phrase}"
    # Includes the NO_WIND_DIRECTION sentinel
    return ""


def describe_pressure_trend(code: str) -> str:
    return _PRESSURE_TRENDS.get(code, code)


def format_pressure(value: str, units: str, trend_code: str) -> str:
    return f"{value} {units}. and {describe_pressure_trend(trend_code)}"


def format_humidity(value: str) -> str:
    return f"{value}%"


def format_visibility(value: str, units: str) -> str:
    return f"{value} {units}"
