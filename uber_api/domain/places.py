# (c) Nelen & Schuurmans

from enum import Enum

from .exceptions import BadRequest
from .value_object import ValueObject

__all__ = ["Place", "PlaceName", "PlaceParams"]


class PlaceName(str, Enum):
    HOME = "home"
    WORK = "work"

    @classmethod
    def parse(cls, value: "PlaceName | str | None") -> "PlaceName":
        try:
            return cls(value)
        except ValueError:
            raise BadRequest(f"unknown place {value!r}, expecting 'home' or 'work'")


class Place(ValueObject):
    address: str | None = None
    latitude: float | None = None
    longitude: float | None = None


class PlaceParams(ValueObject):
    place: PlaceName | None = None
    address: str | None = None

    def check(self) -> None:
        if self.place is None:
            raise BadRequest("expecting a place name")
        if not (self.address or "").strip():
            raise BadRequest("expecting a non-empty address")
