"""Weather fetcher: combines current conditions and forecast into one snapshot."""

import asyncio
import logging

from skycast.config.defaults import MAX_FORECAST_DAYS
from skycast.errors import MalformedResponse, NotFound
from skycast.ingest.forecast_sampler import sample_daily_forecast
from skycast.ingest.openweather_client import OpenWeatherClient
from skycast.models.common import round_half_away, utc_now_iso
from skycast.models.weather import CurrentConditions, WeatherSnapshot

logger = logging.getLogger(__name__)


class WeatherFetcher:
    def __init__(self, client: OpenWeatherClient, max_days: int = MAX_FORECAST_DAYS):
        self.client = client
        self.max_days = max_days

    async def fetch(self, city_name: str) -> WeatherSnapshot:
        """Fetch and normalize weather for a city.

        Both provider requests run concurrently. If both fail, the
        current-conditions error wins so an unknown city reports NotFound.
        """
        city = city_name.strip()
        if not city:
            raise NotFound("Empty city name")

        current_raw, forecast_raw = await asyncio.gather(
            self.client.get_current(city),
            self.client.get_forecast(city),
            return_exceptions=True,
        )
        if isinstance(current_raw, BaseException):
            raise current_raw
        if isinstance(forecast_raw, BaseException):
            raise forecast_raw

        name, current = _extract_current(current_raw)
        forecast = sample_daily_forecast(forecast_raw, max_days=self.max_days)

        logger.info(
            "Fetched weather for %s: %d°C, %d forecast days",
            name, current.temperature_c, len(forecast),
        )
        return WeatherSnapshot(
            city=name,
            current=current,
            forecast=forecast,
            fetched_at=utc_now_iso(),
        )


def _extract_current(raw: dict) -> tuple[str, CurrentConditions]:
    """Normalize the current-conditions payload. Returns (city name, conditions)."""
    try:
        name = raw["name"]
        main = raw["main"]
        condition = raw["weather"][0]
        current = CurrentConditions(
            temperature_c=round_half_away(float(main["temp"])),
            humidity_pct=int(main["humidity"]),
            wind_speed_ms=round_half_away(float(raw["wind"]["speed"])),
            description=condition["description"],
            icon_id=condition["icon"],
        )
    except (KeyError, IndexError, TypeError, ValueError, OverflowError) as e:
        raise MalformedResponse(f"malformed current conditions: {e!r}") from e

    if not isinstance(name, str) or not name:
        raise MalformedResponse("current conditions missing city name")
    return name, current
