# (c) Nelen & Schuurmans

from datetime import datetime

from .value_object import ValueObject

__all__ = [
    "City",
    "Driver",
    "HistoryListing",
    "HistoryTrip",
    "Location",
    "Trip",
    "Vehicle",
]


class Location(ValueObject):
    latitude: float | None = None
    longitude: float | None = None
    bearing: int | None = None
    eta: int | None = None
    alias: str | None = None
    name: str | None = None
    address: str | None = None


class Driver(ValueObject):
    name: str | None = None
    phone_number: str | None = None
    sms_number: str | None = None
    picture_url: str | None = None
    rating: float | None = None


class Vehicle(ValueObject):
    make: str | None = None
    model: str | None = None
    license_plate: str | None = None
    picture_url: str | None = None


class Trip(ValueObject):
    request_id: str
    product_id: str | None = None
    status: str | None = None
    surge_multiplier: float | None = None
    shared: bool = False
    driver: Driver | None = None
    vehicle: Vehicle | None = None
    location: Location | None = None
    pickup: Location | None = None
    destination: Location | None = None
    waypoints: list[Location] = []


class City(ValueObject):
    display_name: str | None = None
    latitude: float | None = None
    longitude: float | None = None


class HistoryTrip(ValueObject):
    request_id: str
    product_id: str | None = None
    status: str | None = None
    distance: float | None = None
    request_time: datetime | None = None
    start_time: datetime | None = None
    end_time: datetime | None = None
    start_city: City | None = None


class HistoryListing(ValueObject):
    count: int = 0
    limit: int | None = None
    offset: int | None = None
    history: list[HistoryTrip] = []
