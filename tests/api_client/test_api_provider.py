import json
from http import HTTPStatus
from unittest import mock

import pytest
from pydantic import BaseModel

from uber_api import DoesNotExist
from uber_api import MissingToken
from uber_api import TokenRejected
from uber_api.api_client import ApiException
from uber_api.api_client import ApiProvider
from uber_api.api_client import DecodeError
from uber_api.api_client import Response
from uber_api.api_client import Transport
from uber_api.api_client.api_provider import check_exception
from uber_api.api_client.api_provider import decode_body
from uber_api.api_client.api_provider import decode_model
from uber_api.testing import json_response
from uber_api.testing import text_response


class Foo(BaseModel):
    foo: int


@pytest.fixture
def transport() -> mock.AsyncMock:
    transport = mock.AsyncMock(spec=Transport)
    transport.send.return_value = json_response({"foo": 2})
    return transport


@pytest.fixture
def api_provider(transport) -> ApiProvider:
    return ApiProvider(
        url="http://testserver/foo/",
        transport=transport,
        headers={"Authorization": "Bearer abc"},
    )


def sent(transport):
    assert transport.send.await_count == 1
    return transport.send.call_args[0][0]


async def test_get(api_provider: ApiProvider, transport):
    actual = await api_provider.request("GET", "")

    request = sent(transport)
    assert request.method == "GET"
    assert request.url == "http://testserver/foo"
    assert request.headers == {
        "Accept": "application/json",
        "Authorization": "Bearer abc",
    }
    assert request.body is None
    assert request.timeout == 5.0
    assert actual == {"foo": 2}


async def test_post_json(api_provider: ApiProvider, transport):
    transport.send.return_value = json_response({"foo": 2}, HTTPStatus.CREATED)

    actual = await api_provider.request("POST", "bar", json={"foo": 2})

    request = sent(transport)
    assert request.url == "http://testserver/foo/bar"
    assert json.loads(request.body) == {"foo": 2}
    assert request.headers["Content-Type"] == "application/json"
    assert actual == {"foo": 2}


async def test_post_fields(api_provider: ApiProvider, transport):
    await api_provider.request("POST", "bar", fields={"a": "b", "c": 1})

    request = sent(transport)
    assert request.body == b"a=b&c=1"
    assert request.headers["Content-Type"] == "application/x-www-form-urlencoded"


async def test_json_and_fields(api_provider: ApiProvider, transport):
    with pytest.raises(ValueError):
        await api_provider.request("POST", "bar", json={}, fields={})

    assert not transport.send.called


@pytest.mark.parametrize(
    "path,params,expected_url",
    [
        ("", None, "http://testserver/foo"),
        ("bar", None, "http://testserver/foo/bar"),
        ("bar/", None, "http://testserver/foo/bar"),
        ("", {"a": 2}, "http://testserver/foo?a=2"),
        ("bar", {"a": 2}, "http://testserver/foo/bar?a=2"),
        ("", {"a": [1, 2]}, "http://testserver/foo?a=1&a=2"),
        ("", {"a": 1, "b": "foo"}, "http://testserver/foo?a=1&b=foo"),
        ("", {}, "http://testserver/foo"),
        ("bar baz", None, "http://testserver/foo/bar%20baz"),
        ("requests/..%2Fme", None, "http://testserver/foo/requests/..%2Fme"),
    ],
)
async def test_url(api_provider: ApiProvider, path, params, expected_url, transport):
    await api_provider.request("GET", path, params=params)

    assert sent(transport).url == expected_url


async def test_url_without_trailing_slash(transport):
    api_provider = ApiProvider(url="http://testserver/foo", transport=transport)

    await api_provider.request("GET", "bar")

    assert sent(transport).url == "http://testserver/foo/bar"


async def test_trailing_slash(transport):
    api_provider = ApiProvider(
        url="http://testserver/foo/", transport=transport, trailing_slash=True
    )

    await api_provider.request("GET", "bar")

    assert sent(transport).url == "http://testserver/foo/bar/"


async def test_headers_and_timeout_override(api_provider: ApiProvider, transport):
    await api_provider.request("GET", "", headers={"X-Foo": "bar"}, timeout=2.5)

    request = sent(transport)
    assert request.headers["X-Foo"] == "bar"
    assert request.headers["Authorization"] == "Bearer abc"
    assert request.timeout == 2.5


async def test_no_content(api_provider: ApiProvider, transport):
    transport.send.return_value = Response(status=HTTPStatus.NO_CONTENT)

    assert await api_provider.request("DELETE", "bar") is None


async def test_request_model(api_provider: ApiProvider):
    actual = await api_provider.request_model(Foo, "GET", "bar")

    assert actual == Foo(foo=2)


async def test_request_model_invalid(api_provider: ApiProvider, transport):
    transport.send.return_value = json_response({"foo": "not-a-number"})

    with pytest.raises(DecodeError) as e:
        await api_provider.request_model(Foo, "GET", "bar")

    assert e.value.status == HTTPStatus.OK
    assert "Invalid Foo: 'foo'" in str(e.value)


async def test_request_model_no_content(api_provider: ApiProvider, transport):
    transport.send.return_value = Response(status=HTTPStatus.NO_CONTENT)

    with pytest.raises(DecodeError):
        await api_provider.request_model(Foo, "GET", "bar")


async def test_not_found(api_provider: ApiProvider, transport):
    transport.send.return_value = text_response("Not Found", HTTPStatus.NOT_FOUND)

    with pytest.raises(DoesNotExist) as e:
        await api_provider.request("GET", "bar/12")

    assert e.value.name == "bar/12"


async def test_error_response(api_provider: ApiProvider, transport):
    transport.send.return_value = json_response(
        {"message": "Something went wrong", "code": "internal"},
        HTTPStatus.INTERNAL_SERVER_ERROR,
    )

    with pytest.raises(ApiException) as e:
        await api_provider.request("GET", "bar")

    assert e.value.status == HTTPStatus.INTERNAL_SERVER_ERROR
    assert str(e.value) == "500: Something went wrong"


@pytest.mark.parametrize(
    "message,expected",
    [
        ('Unauthorized: "Bearer" token missing', MissingToken),
        ("No authentication provided.", MissingToken),
        ("Unauthorized token", TokenRejected),
        ("Invalid OAuth 2.0 credentials provided.", TokenRejected),
    ],
)
def test_unauthorized(message, expected):
    response = text_response(message, HTTPStatus.UNAUTHORIZED)

    with pytest.raises(expected) as e:
        check_exception(response, "v1.2/me")

    assert str(e.value) == message


def test_check_exception_success():
    assert check_exception(json_response({}, HTTPStatus.CREATED)) is None


def test_error_message_falls_back_to_reason():
    response = Response(status=HTTPStatus.BAD_GATEWAY, reason="Bad Gateway")

    with pytest.raises(ApiException) as e:
        check_exception(response)

    assert str(e.value) == "502: Bad Gateway"


@pytest.mark.parametrize(
    "data,content_type",
    [
        (b"{invalid", "application/json"),
        (b"<html></html>", "text/html"),
        (b'{"foo": 2}', None),
    ],
)
def test_decode_body_error(data, content_type):
    response = Response(status=HTTPStatus.OK, data=data, content_type=content_type)

    with pytest.raises(DecodeError):
        decode_body(response)


@pytest.mark.parametrize(
    "content_type",
    ["application/json", "application/json; charset=utf-8", "application/ld+json"],
)
def test_decode_body_json(content_type):
    response = Response(
        status=HTTPStatus.OK, data=b'{"foo": 2}', content_type=content_type
    )

    assert decode_body(response) == {"foo": 2}


def test_decode_body_empty():
    response = Response(status=HTTPStatus.OK, data=b"  ", content_type="text/plain")

    assert decode_body(response) is None


def test_decode_model_not_an_object():
    with pytest.raises(DecodeError):
        decode_model(Foo, [1, 2], HTTPStatus.OK)


async def test_unknown_error_status(api_provider: ApiProvider, transport):
    transport.send.return_value = Response(status=520, data=b"oops")

    with pytest.raises(ApiException) as e:
        await api_provider.request("GET", "bar")

    assert e.value.status == 520
    assert str(e.value) == "520: oops"


def test_unknown_status_without_message():
    with pytest.raises(ApiException) as e:
        check_exception(Response(status=499))

    assert str(e.value) == "499: HTTP 499"
