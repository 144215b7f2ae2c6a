"""Weather provider abstraction and the errors a provider may raise."""
from abc import ABC, abstractmethod
from weather_report import WeatherReport


class WeatherProviderBase(ABC):
    """Abstract base class for weather data providers."""

    @abstractmethod
    def get_current(self, location: str) -> WeatherReport:
        """
        Fetch current weather conditions for a location.

        Args:
            location: Free-text location (city name, postal code, ...)

        Returns:
            WeatherReport: Current weather information

        Raises:
            TransportError: If the provider could not be reached
            FormatError: If the provider answered with unparseable data
        """
        pass


class WeatherProviderError(Exception):
    """Exception raised when a weather provider fails."""
    pass


class TransportError(WeatherProviderError):
    """The request could not be sent or the response could not be read."""
    pass


class FormatError(WeatherProviderError):
    """The provider's response body is not well-formed XML."""
    pass
