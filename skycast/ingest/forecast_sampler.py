"""Forecast sampler: reduces the 3-hourly provider series to one reading per day."""

import logging
from datetime import UTC, datetime, timedelta, timezone

from skycast.config.defaults import FORECAST_STRIDE, MAX_FORECAST_DAYS
from skycast.errors import MalformedResponse
from skycast.models.common import round_half_away
from skycast.models.weather import DayForecast

logger = logging.getLogger(__name__)


def sample_daily_forecast(
    raw: dict,
    max_days: int = MAX_FORECAST_DAYS,
    stride: int = FORECAST_STRIDE,
) -> list[DayForecast]:
    """Pick entries 0, 8, 16, ... from the forecast list, up to max_days.

    Only the selected entries are inspected. Raises MalformedResponse when
    the list itself or a selected entry is missing required fields.
    """
    entries = raw.get("list") if isinstance(raw, dict) else None
    if not isinstance(entries, list):
        raise MalformedResponse("forecast response has no 'list' array")

    tz = _response_timezone(raw)
    selected = entries[::stride][:max_days]
    days = [_to_day_forecast(entry, tz) for entry in selected]

    logger.debug(
        "Sampled %d of %d forecast entries (stride=%d)",
        len(days), len(entries), stride,
    )
    return days


def format_day(timestamp: int, tz: timezone = UTC) -> str:
    """Human-readable calendar day, e.g. 'Sat, Jun 1'."""
    moment = datetime.fromtimestamp(timestamp, tz=tz)
    return f"{moment:%a, %b} {moment.day}"


def _to_day_forecast(entry: dict, tz: timezone) -> DayForecast:
    try:
        timestamp = int(entry["dt"])
        temp = float(entry["main"]["temp"])
        condition = entry["weather"][0]
        return DayForecast(
            date=format_day(timestamp, tz),
            temperature_c=round_half_away(temp),
            description=condition["description"],
            icon_id=condition["icon"],
            timestamp=timestamp,
        )
    except (KeyError, IndexError, TypeError, ValueError, OverflowError, OSError) as e:
        raise MalformedResponse(f"malformed forecast entry: {e!r}") from e


def _response_timezone(raw: dict) -> timezone:
    """Use the city's UTC offset (seconds) when the provider sends one."""
    city = raw.get("city")
    offset = city.get("timezone") if isinstance(city, dict) else None
    if isinstance(offset, int) and not isinstance(offset, bool):
        return timezone(timedelta(seconds=offset))
    return UTC
