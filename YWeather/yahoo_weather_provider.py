"""Yahoo! Weather (YQL) provider implementation."""
import logging
import requests
from weather_provider import WeatherProviderBase, TransportError
from weather_report import WeatherReport
from xml_lookup import AttributeReader, FieldLookup, ParsedResponse, find_attribute, parse_response
from formatting import (
    NO_WIND_DIRECTION,
    describe_wind_direction,
    format_humidity,
    format_pressure,
    format_temperature,
    format_visibility,
    format_wind_speed,
    pretty_location_name,
)

REQUEST_BUILD_MESSAGE = (
    "It seems that I can't prepare a Yahoo! Weather request for the location you gave me. "
    "It probably has a special character that HTTP doesn't like. Try again with a substitute."
)
NOT_RESPONDING_MESSAGE = (
    "Yahoo! Weather is either not responding, or ignoring you because you've made too many "
    "requests recently. In either case, it should work again in a little while."
)

DOMESTIC_COUNTRY = "United States"

COUNTRY_LOOKUP = FieldLookup("channel", "location", "country", "")

# One entry per raw value a WeatherReport is built from
REPORT_FIELDS = {
    "city": FieldLookup("channel", "location", "city", "Unknown City"),
    "region": FieldLookup("channel", "location", "region", "Unknown Region"),
    "country": FieldLookup("channel", "location", "country", "Unknown Country"),
    "conditions": FieldLookup("item", "condition", "text", "Unknown Conditions"),
    "temperature": FieldLookup("item", "condition", "temp", "Unknown"),
    "temperature_units": FieldLookup("channel", "units", "temperature", "Unknown Units"),
    "wind_speed": FieldLookup("channel", "wind", "speed", "Unknown Speed"),
    "speed_units": FieldLookup("channel", "units", "speed", "Unknown Units"),
    "wind_direction": FieldLookup("channel", "wind", "direction", NO_WIND_DIRECTION),
    "wind_chill": FieldLookup("channel", "wind", "chill", "Unknown"),
    "pressure": FieldLookup("channel", "atmosphere", "pressure", "Unknown Pressure"),
    "pressure_units": FieldLookup("channel", "units", "pressure", "Unknown Units"),
    "pressure_trend": FieldLookup("channel", "atmosphere", "rising", "Unknown Stability"),
    "humidity": FieldLookup("channel", "atmosphere", "humidity", "?"),
    "visibility": FieldLookup("channel", "atmosphere", "visibility", "?"),
    "distance_units": FieldLookup("channel", "units", "distance", "Unknown Units"),
    "sunrise": FieldLookup("channel", "astronomy", "sunrise", "Unknown Time"),
    "sunset": FieldLookup("channel", "astronomy", "sunset", "Unknown Time"),
    "time_updated": FieldLookup("item", "condition", "date", "Unknown Time"),
}


def _place_filter(location: str) -> str:
    literal = location.replace("\\", "\\\\").replace('"', '\\"')
    return f'woeid in (select woeid from geo.places(1) where text="{literal}")'


def build_locale_query(location: str) -> str:
    """YQL query selecting only the resolved location of `location`."""
    return f"select location from weather.forecast where {_place_filter(location)}"


def build_weather_query(location: str, metric: bool = False) -> str:
    """YQL query for full conditions; imperial units unless `metric`."""
    query = f"select * from weather.forecast where {_place_filter(location)}"
    if metric:
        query += ' AND u="c"'
    return query


def build_report(parsed: ParsedResponse) -> WeatherReport:
    """Build a WeatherReport from a parsed weather.forecast response."""
    reader = AttributeReader(parsed)
    raw = reader.read_all(REPORT_FIELDS)

    return WeatherReport(
        location=pretty_location_name(raw["city"], raw["region"], raw["country"]),
        conditions=raw["conditions"],
        temperature=format_temperature(raw["temperature"], raw["temperature_units"]),
        wind_speed=format_wind_speed(raw["wind_speed"], raw["speed_units"]),
        wind_direction=describe_wind_direction(raw["wind_direction"]),
        wind_chill=format_temperature(raw["wind_chill"], raw["temperature_units"]),
        pressure=format_pressure(raw["pressure"], raw["pressure_units"], raw["pressure_trend"]),
        humidity=format_humidity(raw["humidity"]),
        visibility=format_visibility(raw["visibility"], raw["distance_units"]),
        sunrise=raw["sunrise"],
        sunset=raw["sunset"],
        time_updated=raw["time_updated"],
        is_complete=reader.is_complete,
    )


class YahooWeatherProvider(WeatherProviderBase):
    """
    Weather provider using the Yahoo! Weather YQL endpoint.

    Every lookup costs two requests: one to find out whether the location
    is in the United States (imperial units) or elsewhere (metric), then
    one for the conditions themselves.
    """

    BASE_URL = "https://query.yahooapis.com/v1/public/yql"

    def __init__(self, timeout: int = 10, base_url: str = BASE_URL):
        """
        Initialize Yahoo! Weather provider.

        Args:
            timeout: HTTP request timeout in seconds
            base_url: YQL endpoint
        """
        self.timeout = timeout
        self.base_url = base_url

    def is_location_domestic(self, location: str) -> bool:
        """
        Determine whether a location resolves to the United States.

        Raises:
            TransportError: If the request fails
            FormatError: If the response is not XML
        """
        parsed = self._query(build_locale_query(location))
        country = find_attribute(parsed, COUNTRY_LOOKUP)
        logging.debug(f"Resolved country for '{location}': {country}")
        return country == DOMESTIC_COUNTRY

    def get_current(self, location: str) -> WeatherReport:
        """
        Fetch current weather for a location.

        Returns:
            WeatherReport: Current conditions; is_complete is False if any
            value was missing from the response

        Raises:
            TransportError: If either request fails
            FormatError: If either response is not XML
        """
        domestic = self.is_location_domestic(location)
        logging.info(f"Requesting {'imperial' if domestic else 'metric'} units for '{location}'")

        parsed = self._query(build_weather_query(location, metric=not domestic))
        report = build_report(parsed)

        if report.is_complete:
            logging.info(f"Successfully parsed weather data: {report.temperature}, {report.conditions}")
        else:
            logging.warning(f"Incomplete weather data for '{location}', fallbacks were used")
        return report

    def _query(self, query: str) -> ParsedResponse:
        """Run a YQL query and parse the XML it returns."""
        try:
            logging.info(f"Making Yahoo! Weather request: {self.base_url}")
            logging.debug(f"YQL query: {query}")

            response = requests.get(self.base_url, params={"q": query}, timeout=self.timeout)

            logging.info(f"API response status: {response.status_code}")

            if not response.ok:
                logging.error(f"API request failed with status {response.status_code}")
                raise TransportError(f"{NOT_RESPONDING_MESSAGE} (HTTP {response.status_code})")

            body = response.content
        except (requests.exceptions.InvalidURL, UnicodeError) as e:
            logging.error(f"Could not build request: {e}")
            raise TransportError(REQUEST_BUILD_MESSAGE) from e
        except requests.exceptions.RequestException as e:
            logging.error(f"Network error during API request: {e}")
            raise TransportError(NOT_RESPONDING_MESSAGE) from e

        if not body:
            logging.error("API response has an empty body")
            raise TransportError(NOT_RESPONDING_MESSAGE)

        logging.debug(f"API response size: {len(body)} bytes")
        return parse_response(body)


def probe_is_domestic(location: str, timeout: int = 10) -> bool:
    """Whether `location` resolves to the United States."""
    return YahooWeatherProvider(timeout=timeout).is_location_domestic(location)


def fetch_weather(location: str, timeout: int = 10) -> WeatherReport:
    """Fetch current weather for `location`."""
    return YahooWeatherProvider(timeout=timeout).get_current(location)
