from collections.abc import Iterator

import pytest
import structlog

from filelocker.api.http_client import HttpClient
from filelocker.client import FilelockerClient
from filelocker.config import FilelockerConfig
from filelocker.tests.utils.mock_transport import MockTransport, xml_body

BASE_URL = "https://files.example.edu"
TEST_USER = "testuser"
TEST_KEY = "secretsecret"
ORIGIN = "123requestorigin321"
SESSION_COOKIE = "filelocker=123sessiontoken321; Path=/"


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    yield
    structlog.reset_defaults()


@pytest.fixture
def config() -> FilelockerConfig:
    return FilelockerConfig(base_url=BASE_URL)


@pytest.fixture
def mock_transport() -> MockTransport:
    return MockTransport()


@pytest.fixture
def http(config: FilelockerConfig, mock_transport: MockTransport) -> Iterator[HttpClient]:
    """HTTP client with an origin already set, as after a login."""
    with HttpClient(config, transport=mock_transport) as client:
        client.set_origin(ORIGIN)
        yield client


@pytest.fixture
def client(config: FilelockerConfig, mock_transport: MockTransport) -> Iterator[FilelockerClient]:
    """Client logged in through a stubbed login response (request 0)."""
    mock_transport.add_response(xml_body(info=(ORIGIN,)), headers={"Set-Cookie": SESSION_COOKIE})
    with FilelockerClient.login(TEST_USER, TEST_KEY, config, transport=mock_transport) as c:
        yield c
