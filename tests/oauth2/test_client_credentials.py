import time
from unittest import mock
from urllib.parse import parse_qs

import pytest

from uber_api import UberClient
from uber_api.oauth2 import AccessToken
from uber_api.oauth2 import CCTokenGateway
from uber_api.oauth2 import OAuth2CCSettings
from uber_api.testing import FakeTransport
from uber_api.testing import json_response

MODULE = "uber_api.oauth2.client_credentials"


@pytest.fixture
def settings() -> OAuth2CCSettings:
    return OAuth2CCSettings(
        client_id="cid",
        client_secret="secret",
        token_url="https://authserver/token",
        scope="all",
    )


@pytest.fixture
def gateway(settings) -> CCTokenGateway:
    with mock.patch(MODULE + ".ApiProvider", autospec=True):
        yield CCTokenGateway(settings, transport=FakeTransport())


@pytest.mark.parametrize(
    "expires_in,leeway,expected",
    [
        (3600, 0, True),
        (-10, 0, False),
        (60, 300, False),
    ],
)
def test_is_usable(expires_in, leeway, expected):
    token = AccessToken(access_token="foo", expires_at=time.time() + expires_in)
    assert token.is_usable(leeway) is expected


async def test_fetch_token(gateway: CCTokenGateway):
    gateway.provider.request.return_value = {
        "access_token": "foo",
        "expires_in": 3600,
    }

    token = await gateway._fetch_token()

    assert token.access_token == "foo"
    assert token.expires_at > time.time() + 3500

    gateway.provider.request.assert_awaited_once_with(
        method="POST",
        path="",
        fields={
            "client_id": "cid",
            "client_secret": "secret",
            "grant_type": "client_credentials",
            "scope": "all",
        },
    )


async def test_fetch_token_cache(gateway: CCTokenGateway):
    # empty cache: provider gets called
    gateway.provider.request.return_value = {
        "access_token": "foo",
        "expires_in": 3600,
    }
    actual = await gateway.fetch_token()
    assert actual == "foo"
    assert gateway.provider.request.called

    gateway.provider.request.reset_mock()

    # cache is filled: provider is not called
    actual = await gateway.fetch_token()
    assert actual == "foo"
    assert not gateway.provider.request.called

    gateway.provider.request.reset_mock()

    # token is not usable so it is refreshed:
    with mock.patch.object(AccessToken, "is_usable", side_effect=(False, True)):
        actual = await gateway.fetch_token()
        assert actual == "foo"
        assert gateway.provider.request.called


async def test_fetch_headers(gateway: CCTokenGateway):
    gateway.provider.request.return_value = {
        "access_token": "foo",
        "expires_in": 3600,
    }

    assert await gateway.fetch_headers() == {"Authorization": "Bearer foo"}


async def test_authorize(settings):
    auth_server = FakeTransport()
    auth_server.add(
        "POST", "/token", json_response({"access_token": "foo", "expires_in": 3600})
    )
    api_server = FakeTransport(authorized_tokens=["foo"])
    api_server.add("GET", "/v1.2/me", json_response({"first_name": "Uber"}))
    gateway = CCTokenGateway(settings, auth_server)
    client = UberClient(transport=gateway.authorize(api_server))

    profile = await client.retrieve_my_profile()
    await client.retrieve_my_profile()

    assert profile.first_name == "Uber"
    assert api_server.call_count == 2
    assert auth_server.call_count == 1
    assert auth_server.requests[0].url == "https://authserver/token"
    assert parse_qs(auth_server.requests[0].body.decode()) == {
        "client_id": ["cid"],
        "client_secret": ["secret"],
        "grant_type": ["client_credentials"],
        "scope": ["all"],
    }
