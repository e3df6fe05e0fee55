# (c) Nelen & Schuurmans

from collections.abc import Callable

from pydantic import Field

from .estimates import EstimateRequest
from .estimates import UpfrontFare
from .exceptions import BadRequest
from .places import PlaceName
from .trips import Driver
from .trips import Location
from .trips import Vehicle
from .value_object import ValueObject

__all__ = ["Map", "Receipt", "Ride", "RideRequest"]


class RideRequest(ValueObject):
    """A ride to request.

    Without a ``fare_id``, an upfront fare is fetched first and handed to
    ``prompt_on_fare``, which declines the fare by raising.
    """

    fare_id: str | None = None
    product_id: str | None = None
    start_latitude: float | None = None
    start_longitude: float | None = None
    start_place_id: PlaceName | None = None
    start_nickname: str | None = None
    end_latitude: float | None = None
    end_longitude: float | None = None
    end_place_id: PlaceName | None = None
    end_nickname: str | None = None
    seat_count: int | None = None
    payment_method_id: str | None = None
    surge_confirmation_id: str | None = None
    prompt_on_fare: Callable[[UpfrontFare], None] | None = Field(
        default=None, exclude=True
    )

    def check(self) -> None:
        has_coordinates = (
            self.start_latitude is not None and self.start_longitude is not None
        )
        if self.start_place_id is None and not has_coordinates:
            raise BadRequest("expecting a start place or start coordinates")
        if not self.fare_id and self.prompt_on_fare is None:
            raise BadRequest("expecting a fare_id or a prompt_on_fare callback")

    def to_estimate_request(self) -> EstimateRequest:
        return EstimateRequest(
            start_latitude=self.start_latitude,
            start_longitude=self.start_longitude,
            start_place_id=self.start_place_id,
            end_latitude=self.end_latitude,
            end_longitude=self.end_longitude,
            end_place_id=self.end_place_id,
            product_id=self.product_id,
            seat_count=self.seat_count,
        )


class Ride(ValueObject):
    request_id: str
    product_id: str | None = None
    status: str | None = None
    eta: int | None = None
    surge_multiplier: float | None = None
    driver: Driver | None = None
    vehicle: Vehicle | None = None
    location: Location | None = None


class Receipt(ValueObject):
    request_id: str
    subtotal: str | None = None
    total_charged: str | None = None
    total_owed: float | None = None
    total_fare: str | None = None
    currency_code: str | None = None
    duration: str | None = None
    distance: str | None = None
    distance_label: str | None = None


class Map(ValueObject):
    request_id: str
    href: str
