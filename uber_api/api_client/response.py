from uber_api.domain import ValueObject

__all__ = ["Request", "Response"]


class Request(ValueObject):
    method: str
    url: str
    headers: dict[str, str] = {}
    body: bytes | None = None
    timeout: float = 5.0


class Response(ValueObject):
    # may be a code unknown to HTTPStatus, e.g. 520 from a CDN
    status: int
    data: bytes = b""
    content_type: str | None = None
    reason: str = ""
