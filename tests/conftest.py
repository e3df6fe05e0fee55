from pathlib import Path

import pytest

from uber_api import UberClient
from uber_api.testing import FakeTransport

TEST_TOKEN = "TEST_TOKEN-1"


@pytest.fixture
def testdata() -> Path:
    return Path(__file__).parent / "testdata"


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport(authorized_tokens=[TEST_TOKEN])


@pytest.fixture
def client(transport) -> UberClient:
    return UberClient(TEST_TOKEN, transport=transport)
