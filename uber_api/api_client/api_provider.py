import json as json_lib
import logging
import re
from http import HTTPStatus
from typing import Any
from typing import TypeVar
from urllib.parse import quote
from urllib.parse import urlencode
from urllib.parse import urljoin

from pydantic import AnyHttpUrl
from pydantic import BaseModel
from pydantic import ValidationError

from uber_api.domain import DoesNotExist
from uber_api.domain import Json
from uber_api.domain import MissingToken
from uber_api.domain import TokenRejected

from .exceptions import ApiException
from .exceptions import DecodeError
from .response import Request
from .response import Response
from .transport import Transport

__all__ = ["ApiProvider", "check_exception", "decode_body", "decode_model"]


logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


JSON_CONTENT_TYPE_REGEX = re.compile(r"^application\/[^+]*[+]?(json);?.*$")
# The API answers 401 both for absent and for rejected tokens; only the message
# tells them apart.
MISSING_TOKEN_REGEX = re.compile(
    r"missing|no authentication|not provided", re.IGNORECASE
)


def is_success(status: int) -> bool:
    """Returns True on 2xx status"""
    return (int(status) // 100) == 2


def status_phrase(status: int) -> str:
    try:
        return HTTPStatus(status).phrase
    except ValueError:
        return f"HTTP {status}"


def is_json_content_type(content_type: str | None) -> bool:
    if not content_type:
        return False
    return bool(JSON_CONTENT_TYPE_REGEX.match(content_type))


def join(url: str, path: str, trailing_slash: bool = False) -> str:
    """Results in a full url without trailing slash"""
    assert url.endswith("/")
    assert not path.startswith("/")
    result = urljoin(url, path)
    if trailing_slash and not result.endswith("/"):
        result = result + "/"
    elif not trailing_slash and result.endswith("/"):
        result = result[:-1]
    return result


def add_query_params(url: str, params: Json | None) -> str:
    if not params:
        return url
    return url + "?" + urlencode(params, doseq=True)


def get_message(response: Response) -> str:
    """Best-effort error message: the JSON 'message', the body text or the reason"""
    if response.data and is_json_content_type(response.content_type):
        try:
            body = json_lib.loads(response.data)
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])
    text = response.data.decode(errors="replace").strip()
    return text or response.reason or status_phrase(response.status)


def check_exception(response: Response, path: str = "") -> None:
    status = response.status
    if is_success(status):
        return
    message = get_message(response)
    if status == HTTPStatus.UNAUTHORIZED:
        if MISSING_TOKEN_REGEX.search(message):
            raise MissingToken(message)
        raise TokenRejected(message)
    elif status == HTTPStatus.NOT_FOUND:
        raise DoesNotExist(path or "resource")
    raise ApiException(message, status=status)


def decode_body(response: Response) -> Any:
    """Decode the JSON body of a successful response; None if there is no body"""
    if response.status == HTTPStatus.NO_CONTENT or not response.data.strip():
        return None
    if not is_json_content_type(response.content_type):
        raise DecodeError(
            f"Unexpected content type '{response.content_type}'",
            status=response.status,
        )
    try:
        return json_lib.loads(response.data)
    except ValueError as e:
        raise DecodeError(f"Invalid JSON: {e}", status=response.status)


def decode_model(model: type[M], body: Any, status: int) -> M:
    if body is None:
        raise DecodeError(f"Expected a {model.__name__}, got no content", status)
    try:
        return model.model_validate(body)
    except ValidationError as e:
        details = e.errors()[0]
        loc = ".".join(str(x) for x in details["loc"])
        raise DecodeError(
            f"Invalid {model.__name__}: '{loc}' {details['msg']}", status
        )


class ApiProvider:
    """JSON API provider for a single host.

    The provider is a snapshot: host, headers and timeout are fixed at construction.
    No retries are done; errors are raised to the caller.

    Args:
        url: The url of the API (with trailing slash)
        transport: Performs the actual HTTP exchange
        headers: Sent with every request (for e.g. authorization)
        timeout: Default timeout per request, in seconds
        trailing_slash: Wether to automatically add or remove trailing slashes.
    """

    def __init__(
        self,
        url: AnyHttpUrl | str,
        transport: Transport,
        headers: dict[str, str] | None = None,
        timeout: float = 5.0,
        trailing_slash: bool = False,
    ):
        self._url = str(url)
        if not self._url.endswith("/"):
            self._url += "/"
        self._transport = transport
        self._headers = dict(headers or {})
        self._timeout = timeout
        self._trailing_slash = trailing_slash

    @property
    def url(self) -> str:
        return self._url

    def build(
        self,
        method: str,
        path: str,
        params: Json | None = None,
        json: Any = None,
        fields: Json | None = None,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> Request:
        actual_headers = {"Accept": "application/json", **self._headers}
        body = None
        if json is not None and fields is not None:
            raise ValueError("Cannot both specify 'json' and 'fields'")
        elif json is not None:
            body = json_lib.dumps(json).encode()
            actual_headers["Content-Type"] = "application/json"
        elif fields is not None:
            body = urlencode(fields, doseq=True).encode()
            actual_headers["Content-Type"] = "application/x-www-form-urlencoded"
        if headers:
            actual_headers.update(headers)
        return Request(
            method=method,
            url=add_query_params(
                join(self._url, quote(path, safe="/%"), self._trailing_slash),
                params,
            ),
            headers=actual_headers,
            body=body,
            timeout=self._timeout if timeout is None else timeout,
        )

    async def _exchange(self, method: str, path: str, **kwargs) -> Response:
        request = self.build(method, path, **kwargs)
        logger.debug("%s %s", request.method, request.url)
        response = await self._transport.send(request)
        check_exception(response, path)
        return response

    async def request(
        self,
        method: str,
        path: str,
        params: Json | None = None,
        json: Any = None,
        fields: Json | None = None,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> Any:
        response = await self._exchange(
            method,
            path,
            params=params,
            json=json,
            fields=fields,
            headers=headers,
            timeout=timeout,
        )
        return decode_body(response)

    async def request_model(
        self,
        model: type[M],
        method: str,
        path: str,
        params: Json | None = None,
        json: Any = None,
        fields: Json | None = None,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> M:
        response = await self._exchange(
            method,
            path,
            params=params,
            json=json,
            fields=fields,
            headers=headers,
            timeout=timeout,
        )
        return decode_model(model, decode_body(response), response.status)
