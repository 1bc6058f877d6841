"""Transient search session state owned by the controller."""

from dataclasses import dataclass
from enum import StrEnum

from skycast.models.weather import WeatherSnapshot


class SearchStatus(StrEnum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass
class SessionState:
    query: str = ""
    snapshot: WeatherSnapshot | None = None
    error: str | None = None
    status: SearchStatus = SearchStatus.IDLE

    @property
    def loading(self) -> bool:
        return self.status == SearchStatus.LOADING
