# (c) Nelen & Schuurmans

from .value_object import ValueObject

__all__ = ["DriverProfile", "Profile", "PromoCode"]


class Profile(ValueObject):
    """The rider profile (``/me``)"""

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    picture: str | None = None
    promo_code: str | None = None
    mobile_verified: bool | None = None
    uuid: str | None = None
    rider_id: str | None = None


class DriverProfile(ValueObject):
    """The driver profile (``/partners/me``)"""

    driver_id: str
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    phone_number: str | None = None
    picture: str | None = None
    promo_code: str | None = None
    rating: float | None = None
    activation_status: str | None = None


class PromoCode(ValueObject):
    promotion_code: str | None = None
    description: str | None = None
