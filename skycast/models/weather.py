"""Normalized weather data models."""

from dataclasses import asdict, dataclass, field


@dataclass(frozen=True)
class CurrentConditions:
    temperature_c: int
    humidity_pct: int
    wind_speed_ms: int
    description: str
    icon_id: str


@dataclass(frozen=True)
class DayForecast:
    date: str  # e.g. "Sat, Jun 1"
    temperature_c: int
    description: str
    icon_id: str
    timestamp: int = 0  # source Unix time


@dataclass(frozen=True)
class WeatherSnapshot:
    city: str
    current: CurrentConditions
    forecast: list[DayForecast] = field(default_factory=list)
    fetched_at: str = ""

    def to_dict(self) -> dict:
        return asdict(self)
