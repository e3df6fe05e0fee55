# (c) Nelen & Schuurmans

from datetime import datetime

from .exceptions import BadRequest
from .value_object import ValueObject

__all__ = [
    "Contact",
    "Courier",
    "Delivery",
    "DeliveryListing",
    "DeliveryLocation",
    "DeliveryRequest",
    "Endpoint",
    "Item",
    "Phone",
]


class Phone(ValueObject):
    number: str
    sms_enabled: bool = False


class Contact(ValueObject):
    first_name: str | None = None
    last_name: str | None = None
    company_name: str | None = None
    email: str | None = None
    phone: Phone | None = None
    send_email_notifications: bool | None = None
    send_sms_notifications: bool | None = None


class DeliveryLocation(ValueObject):
    address: str | None = None
    address_2: str | None = None
    city: str | None = None
    state: str | None = None
    postal_code: str | None = None
    country: str | None = None


class Endpoint(ValueObject):
    contact: Contact | None = None
    location: DeliveryLocation | None = None
    special_instructions: str | None = None
    signature_required: bool | None = None
    eta: int | None = None
    timestamp: datetime | None = None

    def check(self, name: str) -> None:
        if self.contact is None:
            raise BadRequest(f"{name}: expecting a contact")
        if not (self.contact.first_name or self.contact.company_name):
            raise BadRequest(f"{name}: contact needs a first name or a company name")
        if self.location is None:
            raise BadRequest(f"{name}: expecting a location")
        if not (self.location.address or "").strip():
            raise BadRequest(f"{name}: location needs an address")
        if not (self.location.country or "").strip():
            raise BadRequest(f"{name}: location needs a country")


class Item(ValueObject):
    title: str
    quantity: int = 1
    is_fragile: bool = False
    price: float | None = None
    currency_code: str | None = None
    width: float | None = None
    height: float | None = None
    length: float | None = None


class DeliveryRequest(ValueObject):
    quote_id: str | None = None
    order_reference_id: str | None = None
    pickup: Endpoint | None = None
    dropoff: Endpoint | None = None
    items: list[Item] = []

    def check(self) -> None:
        if self.pickup is None:
            raise BadRequest("expecting a pickup endpoint")
        self.pickup.check("pickup")
        if self.dropoff is None:
            raise BadRequest("expecting a dropoff endpoint")
        self.dropoff.check("dropoff")
        if not self.items:
            raise BadRequest("expecting at least one item")
        for item in self.items:
            if not item.title.strip():
                raise BadRequest("every item needs a title")
            if item.quantity < 1:
                raise BadRequest(f"item {item.title!r}: quantity must be at least 1")


class Courier(ValueObject):
    name: str | None = None
    phone: str | None = None
    vehicle_type: str | None = None
    location: DeliveryLocation | None = None


class Delivery(ValueObject):
    delivery_id: str
    quote_id: str | None = None
    order_reference_id: str | None = None
    status: str | None = None
    fee: float | None = None
    currency_code: str | None = None
    tracking_url: str | None = None
    created_at: datetime | None = None
    pickup: Endpoint | None = None
    dropoff: Endpoint | None = None
    items: list[Item] = []
    courier: Courier | None = None


class DeliveryListing(ValueObject):
    count: int = 0
    next_page: str | None = None
    previous_page: str | None = None
    deliveries: list[Delivery] = []
