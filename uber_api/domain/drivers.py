# (c) Nelen & Schuurmans

from datetime import datetime

from .trips import City
from .value_object import ValueObject

__all__ = [
    "DriverPayment",
    "DriverPaymentListing",
    "DriverTrip",
    "DriverTripListing",
    "PaymentBreakdown",
    "StatusChange",
]


class PaymentBreakdown(ValueObject):
    other: float | None = None
    toll: float | None = None
    service_fee: float | None = None


class DriverPayment(ValueObject):
    payment_id: str
    category: str | None = None
    event_time: datetime | None = None
    trip_id: str | None = None
    driver_id: str | None = None
    partner_id: str | None = None
    cash_collected: float | None = None
    amount: float | None = None
    currency_code: str | None = None
    breakdown: PaymentBreakdown | None = None


class DriverPaymentListing(ValueObject):
    count: int = 0
    limit: int | None = None
    offset: int | None = None
    payments: list[DriverPayment] = []


class StatusChange(ValueObject):
    status: str
    timestamp: datetime | None = None


class DriverTrip(ValueObject):
    trip_id: str
    driver_id: str | None = None
    vehicle_id: str | None = None
    status: str | None = None
    distance: float | None = None
    duration: int | None = None
    fare: float | None = None
    currency_code: str | None = None
    start_city: City | None = None
    status_changes: list[StatusChange] = []


class DriverTripListing(ValueObject):
    count: int = 0
    limit: int | None = None
    offset: int | None = None
    trips: list[DriverTrip] = []
