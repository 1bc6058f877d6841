"""Tests for snapshot and favorites formatters."""

import json

from skycast.models.favorites import FavoriteLocation
from skycast.models.weather import CurrentConditions, DayForecast, WeatherSnapshot
from skycast.reporting.formatters import (
    format_favorites_text,
    format_snapshot_json,
    format_snapshot_text,
    icon_url,
)


def _snapshot() -> WeatherSnapshot:
    return WeatherSnapshot(
        city="Paris",
        current=CurrentConditions(
            temperature_c=18, humidity_pct=60, wind_speed_ms=3,
            description="clear sky", icon_id="01d",
        ),
        forecast=[
            DayForecast("Sat, Jun 1", 18, "clear sky", "01d", 1717243200),
            DayForecast("Sun, Jun 2", 22, "few clouds", "02d", 1717329600),
        ],
        fetched_at="2024-06-01T12:00:00+00:00",
    )


class TestIconUrl:
    def test_small(self):
        assert icon_url("10d") == "https://openweathermap.org/img/wn/10d.png"

    def test_large(self):
        assert icon_url("10d", large=True) == "https://openweathermap.org/img/wn/10d@2x.png"


class TestSnapshotText:
    def test_contents(self):
        text = format_snapshot_text(_snapshot())
        assert "Paris" in text
        assert "18°C, clear sky" in text
        assert "Wind: 3 m/s | Humidity: 60%" in text
        assert "2-Day Forecast" in text
        assert "Sun, Jun 2" in text
        assert "♥" not in text

    def test_favorite_marker(self):
        assert "Paris ♥" in format_snapshot_text(_snapshot(), favorite=True)


class TestSnapshotJson:
    def test_structure(self):
        data = json.loads(format_snapshot_json(_snapshot()))
        assert data["city"] == "Paris"
        assert data["current"]["temperature_c"] == 18
        assert data["current"]["icon_url"].endswith("01d@2x.png")
        assert [d["date"] for d in data["forecast"]] == ["Sat, Jun 1", "Sun, Jun 2"]
        assert data["forecast"][1]["icon_url"].endswith("02d.png")


class TestFavoritesText:
    def test_empty(self):
        assert "No favorite" in format_favorites_text([])

    def test_lists_names(self):
        text = format_favorites_text((FavoriteLocation("a", "Paris"), FavoriteLocation("b", "Tokyo")))
        assert "- Paris" in text
        assert "- Tokyo" in text
