"""Exception hierarchy for provider lookups and favorites storage."""


class WeatherError(Exception):
    """Base class for every failure while fetching weather for a city."""


class NotFound(WeatherError):
    """The provider could not resolve the requested city."""


class MalformedResponse(WeatherError):
    """A provider response is missing fields we depend on."""


class ProviderError(WeatherError):
    """Raised for non-404 HTTP errors and transport failures."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class StorageCorrupt(Exception):
    """Stored favorites could not be decoded."""
