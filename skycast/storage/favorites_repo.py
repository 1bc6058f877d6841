"""Favorites store: JSON list of bookmarked cities persisted under one key."""

import json
import logging
import sqlite3

from skycast.config.defaults import DEFAULT_FAVORITES_KEY
from skycast.errors import StorageCorrupt
from skycast.models.common import new_favorite_id
from skycast.models.favorites import FavoriteLocation
from skycast.storage import kv_repo

logger = logging.getLogger(__name__)


def toggle(name: str, favorites: list[FavoriteLocation]) -> list[FavoriteLocation]:
    """Remove the favorite named `name`, or append a new one if absent.

    Returns a new list; the input is not modified. All mutation should go
    through here, since it is the only place that keeps names unique.
    """
    if any(fav.name == name for fav in favorites):
        return [fav for fav in favorites if fav.name != name]
    return [*favorites, FavoriteLocation(id=new_favorite_id(), name=name)]


def decode_favorites(raw: str) -> list[FavoriteLocation]:
    """Parse the stored JSON form. Raises StorageCorrupt on any shape problem."""
    try:
        data = json.loads(raw)
    except ValueError as e:
        raise StorageCorrupt(f"favorites are not valid JSON: {e}") from e
    if not isinstance(data, list):
        raise StorageCorrupt(f"favorites must be a list, got {type(data).__name__}")

    result: list[FavoriteLocation] = []
    seen: set[str] = set()
    for item in data:
        try:
            fav = FavoriteLocation.from_dict(item)
        except (KeyError, TypeError) as e:
            raise StorageCorrupt(f"bad favorite entry {item!r}") from e
        if fav.name in seen:
            continue
        seen.add(fav.name)
        result.append(fav)
    return result


def encode_favorites(favorites: list[FavoriteLocation]) -> str:
    return json.dumps([fav.to_dict() for fav in favorites])


class FavoritesStore:
    """Loads the favorites list once and rewrites it in full on every change."""

    def __init__(self, conn: sqlite3.Connection, key: str = DEFAULT_FAVORITES_KEY):
        self.conn = conn
        self.key = key

    def load(self) -> list[FavoriteLocation]:
        """Read saved favorites. Absent or unreadable data yields an empty list."""
        try:
            raw = kv_repo.get_value(self.conn, self.key)
        except sqlite3.Error as e:
            logger.warning("Could not read favorites under key=%s: %s", self.key, e)
            return []
        if raw is None:
            return []
        try:
            favorites = decode_favorites(raw)
        except StorageCorrupt as e:
            logger.warning("Ignoring corrupt favorites under key=%s: %s", self.key, e)
            return []
        logger.debug("Loaded %d favorites", len(favorites))
        return favorites

    def persist(self, favorites: list[FavoriteLocation]) -> None:
        """Overwrite the stored list with a full snapshot."""
        kv_repo.set_value(self.conn, self.key, encode_favorites(favorites))
        logger.debug("Persisted %d favorites", len(favorites))
