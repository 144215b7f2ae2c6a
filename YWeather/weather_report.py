"""Weather report - immutable, display-ready view of current conditions."""
from dataclasses import dataclass


@dataclass(frozen=True)
class WeatherReport:
    """Human-readable current conditions for one location."""
    location: str  # e.g., "Paris, Texas, United States"
    conditions: str  # e.g., "Partly Cloudy"
    temperature: str  # e.g., "72° F"
    wind_speed: str  # e.g., "12 mph" or "Still"
    wind_direction: str  # e.g., "35° North of Northeast", "" if unknown
    wind_chill: str
    pressure: str  # e.g., "29.92 in. and rising"
    humidity: str  # e.g., "65%"
    visibility: str
    sunrise: str
    sunset: str
    time_updated: str

    # False as soon as any value had to be replaced by its fallback text
    is_complete: bool = True
