import logging
from urllib.parse import quote

from .api_client import AiohttpTransport
from .api_client import ApiProvider
from .api_client import Transport
from .domain import BadRequest
from .domain import Delivery
from .domain import DeliveryListing
from .domain import DeliveryListQuery
from .domain import DeliveryRequest
from .domain import DriverPayment
from .domain import DriverPaymentListing
from .domain import DriverProfile
from .domain import DriverTrip
from .domain import DriverTripListing
from .domain import EstimateRequest
from .domain import HistoryListing
from .domain import HistoryTrip
from .domain import Map
from .domain import PageQuery
from .domain import PaymentListing
from .domain import Place
from .domain import PlaceName
from .domain import PlaceParams
from .domain import PriceEstimate
from .domain import PriceEstimateListing
from .domain import Product
from .domain import ProductListing
from .domain import Profile
from .domain import PromoCode
from .domain import Receipt
from .domain import Ride
from .domain import RideRequest
from .domain import TimeEstimate
from .domain import TimeEstimateListing
from .domain import Trip
from .domain import UpfrontFare
from .pagination import PageStream
from .pagination import paginate
from .pagination import stream_once
from .settings import ClientSettings

__all__ = ["UberClient"]


logger = logging.getLogger(__name__)


def non_blank(value: str | None, name: str) -> str:
    if value is None or not value.strip():
        raise BadRequest(f"expecting a non-blank {name}")
    return value.strip()


def path_segment(value: str | None, name: str) -> str:
    """An identifier escaped as a single URL path segment"""
    value = non_blank(value, name)
    if value in (".", ".."):
        raise BadRequest(f"invalid {name} {value!r}")
    return quote(value, safe="")


class UberClient:
    """Client for the Uber rides, drivers and deliveries API.

    The bearer token, sandbox mode and transport can be replaced between calls.
    Each call takes a snapshot of them when its request is built, so a running
    PageStream keeps the host and token it started with. Changing them while a
    call is being set up from another task is not supported.

    Args:
        bearer_token: Sent as "Authorization: Bearer <token>". Overrides the token
            in settings. Leave empty when the transport authorizes requests.
        transport: Defaults to an AiohttpTransport.
        settings: Hosts, timeout and the initial sandbox mode.
    """

    def __init__(
        self,
        bearer_token: str | None = None,
        transport: Transport | None = None,
        settings: ClientSettings | None = None,
    ):
        self.settings = settings or ClientSettings()
        self.bearer_token = (
            bearer_token if bearer_token is not None else self.settings.bearer_token
        )
        self.sandbox = self.settings.sandbox
        self.transport = transport if transport is not None else AiohttpTransport()

    def set_bearer_token(self, bearer_token: str | None) -> None:
        self.bearer_token = bearer_token

    def set_sandbox_mode(self, sandbox: bool) -> None:
        if sandbox != self.sandbox:
            logger.info("sandbox mode %s", "enabled" if sandbox else "disabled")
        self.sandbox = sandbox

    def set_transport(self, transport: Transport) -> None:
        self.transport = transport

    async def connect(self) -> None:
        await self.transport.connect()

    async def disconnect(self) -> None:
        await self.transport.disconnect()

    async def __aenter__(self) -> "UberClient":
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.disconnect()

    @property
    def base_url(self) -> str:
        if self.sandbox:
            return str(self.settings.sandbox_url)
        return str(self.settings.production_url)

    def _provider(self) -> ApiProvider:
        headers = {"User-Agent": self.settings.user_agent}
        if self.bearer_token:
            headers["Authorization"] = f"Bearer {self.bearer_token}"
        return ApiProvider(
            url=self.base_url,
            transport=self.transport,
            headers=headers,
            timeout=self.settings.timeout,
        )

    # Rides

    async def current_trip(self) -> Trip:
        return await self._provider().request_model(
            Trip, "GET", "v1.2/requests/current"
        )

    async def trip_by_id(self, trip_id: str) -> Trip:
        trip_id = path_segment(trip_id, "trip id")
        return await self._provider().request_model(
            Trip, "GET", f"v1.2/requests/{trip_id}"
        )

    async def list_payment_methods(self) -> PaymentListing:
        return await self._provider().request_model(
            PaymentListing, "GET", "v1.2/payment-methods"
        )

    async def list_products(self, place: Place | None) -> list[Product]:
        if place is None or place.latitude is None or place.longitude is None:
            raise BadRequest("expecting a place with coordinates")
        listing = await self._provider().request_model(
            ProductListing,
            "GET",
            "v1.2/products",
            params={"latitude": place.latitude, "longitude": place.longitude},
        )
        return listing.products

    async def product_by_id(self, product_id: str) -> Product:
        product_id = path_segment(product_id, "product id")
        return await self._provider().request_model(
            Product, "GET", f"v1.2/products/{product_id}"
        )

    async def estimate_price(
        self, request: EstimateRequest | None
    ) -> PageStream[PriceEstimate]:
        """Price estimates per product, as a stream of a single page"""
        if request is None:
            raise BadRequest("expecting an estimate request")
        params = request.price_params()
        provider = self._provider()

        async def fetch() -> list[PriceEstimate]:
            listing = await provider.request_model(
                PriceEstimateListing, "GET", "v1.2/estimates/price", params=params
            )
            return listing.prices

        return stream_once(fetch)

    async def estimate_time(
        self, request: EstimateRequest | None
    ) -> PageStream[TimeEstimate]:
        """Pickup time estimates per product, as a stream of a single page"""
        if request is None:
            raise BadRequest("expecting an estimate request")
        params = request.time_params()
        provider = self._provider()

        async def fetch() -> list[TimeEstimate]:
            listing = await provider.request_model(
                TimeEstimateListing, "GET", "v1.2/estimates/time", params=params
            )
            return listing.times

        return stream_once(fetch)

    async def upfront_fare(self, request: EstimateRequest | None) -> UpfrontFare:
        if request is None:
            raise BadRequest("expecting an estimate request")
        request.check_route()
        return await self._provider().request_model(
            UpfrontFare, "POST", "v1.2/requests/estimate", json=request.to_json()
        )

    async def request_ride(self, request: RideRequest | None) -> Ride:
        if request is None:
            raise BadRequest("expecting a ride request")
        request.check()
        if not request.fare_id:
            prompt_on_fare = request.prompt_on_fare
            if prompt_on_fare is None:
                raise BadRequest("expecting a fare_id or a prompt_on_fare callback")
            fare = await self.upfront_fare(request.to_estimate_request())
            prompt_on_fare(fare)
            request = request.update(fare_id=fare.fare.fare_id)
        return await self._provider().request_model(
            Ride, "POST", "v1.2/requests", json=request.to_json()
        )

    async def request_receipt(self, request_id: str) -> Receipt:
        request_id = path_segment(request_id, "request id")
        return await self._provider().request_model(
            Receipt, "GET", f"v1.2/requests/{request_id}/receipt"
        )

    async def request_map(self, request_id: str) -> Map:
        request_id = path_segment(request_id, "request id")
        return await self._provider().request_model(
            Map, "GET", f"v1.2/requests/{request_id}/map"
        )

    async def list_history(
        self, query: PageQuery | None = None
    ) -> PageStream[HistoryTrip]:
        provider = self._provider()

        async def fetch(offset: int, limit: int) -> list[HistoryTrip]:
            listing = await provider.request_model(
                HistoryListing,
                "GET",
                "v1.2/history",
                params={"offset": offset, "limit": limit},
            )
            return listing.history

        return paginate(fetch, query)

    # Places and profile

    async def place(self, name: PlaceName | str) -> Place:
        place_name = PlaceName.parse(name)
        return await self._provider().request_model(
            Place, "GET", f"v1.2/places/{place_name.value}"
        )

    async def update_place(self, params: PlaceParams | None) -> Place:
        if params is None:
            raise BadRequest("expecting place parameters")
        params.check()
        place_name = PlaceName.parse(params.place)
        return await self._provider().request_model(
            Place,
            "PUT",
            f"v1.2/places/{place_name.value}",
            json={"address": params.address},
        )

    async def apply_promo_code(self, code: str) -> PromoCode:
        code = non_blank(code, "promo code")
        return await self._provider().request_model(
            PromoCode, "PATCH", "v1.2/me", json={"applied_promotion_codes": code}
        )

    async def retrieve_my_profile(self) -> Profile:
        return await self._provider().request_model(Profile, "GET", "v1.2/me")

    # Drivers

    async def driver_profile(self) -> DriverProfile:
        return await self._provider().request_model(
            DriverProfile, "GET", "v1/partners/me"
        )

    async def list_driver_payments(
        self, query: PageQuery | None = None
    ) -> PageStream[DriverPayment]:
        provider = self._provider()

        async def fetch(offset: int, limit: int) -> list[DriverPayment]:
            listing = await provider.request_model(
                DriverPaymentListing,
                "GET",
                "v1/partners/payments",
                params={"offset": offset, "limit": limit},
            )
            return listing.payments

        return paginate(fetch, query)

    async def list_driver_trips(
        self, query: PageQuery | None = None
    ) -> PageStream[DriverTrip]:
        provider = self._provider()

        async def fetch(offset: int, limit: int) -> list[DriverTrip]:
            listing = await provider.request_model(
                DriverTripListing,
                "GET",
                "v1/partners/trips",
                params={"offset": offset, "limit": limit},
            )
            return listing.trips

        return paginate(fetch, query)

    # Deliveries

    async def request_delivery(self, request: DeliveryRequest | None) -> Delivery:
        if request is None:
            raise BadRequest("expecting a delivery request")
        request.check()
        return await self._provider().request_model(
            Delivery, "POST", "v1/deliveries", json=request.to_json()
        )

    async def cancel_delivery(self, delivery_id: str) -> None:
        delivery_id = path_segment(delivery_id, "delivery id")
        await self._provider().request("POST", f"v1/deliveries/{delivery_id}/cancel")

    async def list_deliveries(
        self, query: DeliveryListQuery | PageQuery | None = None
    ) -> PageStream[Delivery]:
        provider = self._provider()
        status = query.status if isinstance(query, DeliveryListQuery) else None

        async def fetch(offset: int, limit: int) -> list[Delivery]:
            params: dict[str, int | str] = {"offset": offset, "limit": limit}
            if status:
                params["status"] = status
            listing = await provider.request_model(
                DeliveryListing, "GET", "v1/deliveries", params=params
            )
            return listing.deliveries

        return paginate(fetch, query)
