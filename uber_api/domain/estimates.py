# (c) Nelen & Schuurmans

from datetime import datetime

from .exceptions import BadRequest
from .places import PlaceName
from .value_object import ValueObject

__all__ = [
    "EstimateRequest",
    "Fare",
    "FareBreakdown",
    "PriceEstimate",
    "PriceEstimateListing",
    "TimeEstimate",
    "TimeEstimateListing",
    "TripEstimate",
    "UpfrontFare",
]


class EstimateRequest(ValueObject):
    start_latitude: float | None = None
    start_longitude: float | None = None
    start_place_id: PlaceName | None = None
    end_latitude: float | None = None
    end_longitude: float | None = None
    end_place_id: PlaceName | None = None
    product_id: str | None = None
    seat_count: int | None = None

    @property
    def has_start_coordinates(self) -> bool:
        return self.start_latitude is not None and self.start_longitude is not None

    @property
    def has_end_coordinates(self) -> bool:
        return self.end_latitude is not None and self.end_longitude is not None

    def price_params(self) -> dict[str, float | int]:
        if not (self.has_start_coordinates and self.has_end_coordinates):
            raise BadRequest("price estimates need start and end coordinates")
        params = {
            "start_latitude": self.start_latitude,
            "start_longitude": self.start_longitude,
            "end_latitude": self.end_latitude,
            "end_longitude": self.end_longitude,
        }
        if self.seat_count is not None:
            params["seat_count"] = self.seat_count
        return params

    def time_params(self) -> dict[str, float | str]:
        if not self.has_start_coordinates:
            raise BadRequest("time estimates need start coordinates")
        params = {
            "start_latitude": self.start_latitude,
            "start_longitude": self.start_longitude,
        }
        if self.product_id:
            params["product_id"] = self.product_id
        return params

    def check_route(self) -> None:
        """Upfront fares need both ends of the trip, as a place or as coordinates"""
        if self.start_place_id is None and not self.has_start_coordinates:
            raise BadRequest("expecting a start place or start coordinates")
        if self.end_place_id is None and not self.has_end_coordinates:
            raise BadRequest("expecting an end place or end coordinates")


class PriceEstimate(ValueObject):
    product_id: str
    display_name: str | None = None
    localized_display_name: str | None = None
    currency_code: str | None = None
    estimate: str | None = None
    minimum: float | None = None
    low_estimate: float | None = None
    high_estimate: float | None = None
    surge_multiplier: float | None = None
    duration: int | None = None
    distance: float | None = None


class PriceEstimateListing(ValueObject):
    prices: list[PriceEstimate] = []


class TimeEstimate(ValueObject):
    product_id: str
    display_name: str | None = None
    localized_display_name: str | None = None
    estimate: int | None = None  # in seconds


class TimeEstimateListing(ValueObject):
    times: list[TimeEstimate] = []


class FareBreakdown(ValueObject):
    type: str | None = None
    name: str | None = None
    value: float | None = None


class Fare(ValueObject):
    fare_id: str
    value: float | None = None
    display: str | None = None
    currency_code: str | None = None
    expires_at: datetime | None = None
    breakdown: list[FareBreakdown] = []


class TripEstimate(ValueObject):
    distance_unit: str | None = None
    duration_estimate: int | None = None
    distance_estimate: float | None = None


class UpfrontFare(ValueObject):
    fare: Fare
    trip: TripEstimate | None = None
    pickup_estimate: int | None = None
