"""Output formatters for weather snapshots and favorites."""

import json

from skycast.config.defaults import ICON_BASE_URL
from skycast.models.favorites import FavoriteLocation
from skycast.models.weather import WeatherSnapshot


def icon_url(icon_id: str, large: bool = False) -> str:
    """Provider-hosted icon image. Large for current conditions, small for forecast tiles."""
    suffix = "@2x" if large else ""
    return f"{ICON_BASE_URL}/{icon_id}{suffix}.png"


def format_snapshot_text(s: WeatherSnapshot, favorite: bool = False) -> str:
    """Plain text rendering for the terminal."""
    marker = " ♥" if favorite else ""
    c = s.current
    lines = [
        f"=== {s.city}{marker} ===",
        f"{c.temperature_c}°C, {c.description}",
        f"Wind: {c.wind_speed_ms} m/s | Humidity: {c.humidity_pct}%",
    ]
    if s.forecast:
        lines.append("")
        lines.append(f"{len(s.forecast)}-Day Forecast")
        for day in s.forecast:
            lines.append(f"  {day.date:<12} {day.temperature_c:>4}°C  {day.description}")
    return "\n".join(lines)


def format_snapshot_json(s: WeatherSnapshot) -> str:
    """JSON rendering with icon URLs resolved."""
    data = s.to_dict()
    data["current"]["icon_url"] = icon_url(s.current.icon_id, large=True)
    for day, out in zip(s.forecast, data["forecast"]):
        out["icon_url"] = icon_url(day.icon_id)
    return json.dumps(data, indent=2, ensure_ascii=False)


def format_favorites_text(favorites: tuple[FavoriteLocation, ...] | list[FavoriteLocation]) -> str:
    if not favorites:
        return "No favorite locations yet."
    lines = ["Favorite Locations"]
    lines.extend(f"  - {fav.name}" for fav in favorites)
    return "\n".join(lines)
