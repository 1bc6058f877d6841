"""Application controller: search session state plus the favorites list."""

import logging

from skycast.config.defaults import FETCH_ERROR_MESSAGE
from skycast.errors import WeatherError
from skycast.ingest.weather_fetcher import WeatherFetcher
from skycast.models.favorites import FavoriteLocation
from skycast.models.session import SearchStatus, SessionState
from skycast.storage.favorites_repo import FavoritesStore, toggle

logger = logging.getLogger(__name__)


class WeatherController:
    """Wires user actions (search, favorite toggle, favorite select) to the app.

    Overlapping searches are allowed; each one takes a generation number and
    only the most recently started search may write the session state.
    """

    def __init__(self, fetcher: WeatherFetcher, store: FavoritesStore):
        self.fetcher = fetcher
        self.store = store
        self.state = SessionState()
        self._favorites: list[FavoriteLocation] = store.load()
        self._generation = 0

    @property
    def favorites(self) -> tuple[FavoriteLocation, ...]:
        return tuple(self._favorites)

    def set_query(self, text: str) -> None:
        self.state.query = text

    async def search(self, city_name: str) -> SessionState:
        self._generation += 1
        generation = self._generation
        self.state.status = SearchStatus.LOADING
        self.state.error = None

        status = SearchStatus.FAILED
        try:
            snapshot = await self.fetcher.fetch(city_name)
        except WeatherError as e:
            logger.warning("Weather lookup failed for %r: %s", city_name, e)
            self._fail(generation)
        except Exception:
            logger.exception("Unexpected error fetching weather for %r", city_name)
            self._fail(generation)
        else:
            status = SearchStatus.SUCCESS
            if generation == self._generation:
                self.state.snapshot = snapshot
                self.state.error = None
        finally:
            if generation == self._generation:
                self.state.status = status
            else:
                logger.debug("Discarding stale result for %r", city_name)

        return self.state

    def _fail(self, generation: int) -> None:
        if generation == self._generation:
            self.state.snapshot = None
            self.state.error = FETCH_ERROR_MESSAGE

    def toggle_favorite(self, city_name: str) -> tuple[FavoriteLocation, ...]:
        self._favorites = toggle(city_name, self._favorites)
        self.store.persist(self._favorites)
        return self.favorites

    def is_favorite(self, city_name: str) -> bool:
        return any(fav.name == city_name for fav in self._favorites)

    async def select_favorite(self, name: str) -> SessionState:
        self.set_query(name)
        return await self.search(name)
