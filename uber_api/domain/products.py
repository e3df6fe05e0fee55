# (c) Nelen & Schuurmans

from .value_object import ValueObject

__all__ = ["PriceDetails", "Product", "ProductListing"]


class PriceDetails(ValueObject):
    base: float | None = None
    minimum: float | None = None
    cost_per_minute: float | None = None
    cost_per_distance: float | None = None
    distance_unit: str | None = None
    cancellation_fee: float | None = None
    currency_code: str | None = None


class Product(ValueObject):
    product_id: str
    display_name: str | None = None
    description: str | None = None
    short_description: str | None = None
    product_group: str | None = None
    capacity: int | None = None
    image: str | None = None
    shared: bool = False
    cash_enabled: bool = False
    upfront_fare_enabled: bool = False
    price_details: PriceDetails | None = None


class ProductListing(ValueObject):
    products: list[Product] = []
