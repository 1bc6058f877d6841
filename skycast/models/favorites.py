"""Bookmarked city model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FavoriteLocation:
    id: str
    name: str

    def to_dict(self) -> dict[str, str]:
        return {"id": self.id, "name": self.name}

    @classmethod
    def from_dict(cls, data: dict) -> "FavoriteLocation":
        """Build from the stored form. Raises KeyError/TypeError on bad shape."""
        fav_id = data["id"]
        name = data["name"]
        if not isinstance(fav_id, str) or not isinstance(name, str):
            raise TypeError("favorite id and name must be strings")
        return cls(id=fav_id, name=name)
