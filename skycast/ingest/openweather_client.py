"""OpenWeatherMap current-conditions and forecast API client."""

import logging

import httpx

from skycast.config.defaults import DEFAULT_BASE_URL
from skycast.config.schema import ProviderConfig
from skycast.errors import MalformedResponse, NotFound, ProviderError

logger = logging.getLogger(__name__)


class OpenWeatherClient:
    """Async wrapper around the two OpenWeatherMap 2.5 endpoints we read.

    No retries and no caching: a failed request surfaces immediately.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        units: str = "metric",
        timeout: float = 10.0,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.units = units
        self.timeout = timeout

    @classmethod
    def from_config(cls, config: ProviderConfig) -> "OpenWeatherClient":
        return cls(
            api_key=config.api_key,
            base_url=config.base_url,
            units=config.units,
            timeout=config.timeout_seconds,
        )

    async def get_current(self, city: str) -> dict:
        """Fetch current conditions. Raises NotFound for unknown cities."""
        return await self._get("/weather", city)

    async def get_forecast(self, city: str) -> dict:
        """Fetch the 5-day / 3-hour forecast series."""
        return await self._get("/forecast", city)

    async def _get(self, endpoint: str, city: str) -> dict:
        if not self.api_key:
            raise ProviderError("OpenWeatherMap API key is not configured")

        url = f"{self.base_url}{endpoint}"
        params = {"q": city, "appid": self.api_key, "units": self.units}
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as http:
                resp = await http.get(url, params=params)
        except httpx.RequestError as e:
            logger.error("OpenWeather request failed: %s q=%s -> %s", endpoint, city, e)
            raise ProviderError(f"Request failed: {e}") from e

        if resp.status_code == 404:
            logger.info("OpenWeather %s could not resolve city=%s", endpoint, city)
            raise NotFound(f"City not found: {city}")
        if resp.status_code >= 400:
            logger.error(
                "OpenWeather %d: %s q=%s -> %s",
                resp.status_code, endpoint, city, resp.text,
            )
            raise ProviderError(f"HTTP {resp.status_code}", resp.status_code)

        try:
            data = resp.json()
        except ValueError as e:
            raise MalformedResponse(f"{endpoint} returned invalid JSON") from e
        if not isinstance(data, dict):
            raise MalformedResponse(f"{endpoint} returned {type(data).__name__}, expected object")
        return data
