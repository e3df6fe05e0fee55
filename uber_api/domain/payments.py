# (c) Nelen & Schuurmans

from .value_object import ValueObject

__all__ = ["PaymentListing", "PaymentMethod"]


class PaymentMethod(ValueObject):
    payment_method_id: str
    type: str | None = None
    description: str | None = None


class PaymentListing(ValueObject):
    payment_methods: list[PaymentMethod] = []
    last_used: str | None = None
