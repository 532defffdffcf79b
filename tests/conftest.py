"""Shared fixtures for proxy tests."""

import io

import httpx
import pytest
from fastapi.testclient import TestClient
from rich.console import Console

from app import create_app
from core.config import Config
from helpers import UPSTREAM, upstream_reply
from ui.console import ConsoleLogger


@pytest.fixture
def config():
    return Config(
        proxy_target=UPSTREAM,
        log_level="debug",
        auth_usernames="a,b",
        auth_passwords="p1,p2",
    )


@pytest.fixture
def console_output():
    return io.StringIO()


@pytest.fixture
def logger(config, console_output, tmp_path):
    console = Console(file=console_output, force_terminal=False, width=200)
    return ConsoleLogger(config, console=console, log_file=tmp_path / "proxy.log")


@pytest.fixture
def upstream_requests():
    """Requests received by the mock upstream."""
    return []


@pytest.fixture
def upstream_response():
    """Holder for the mock upstream's response factory; tests may replace it."""
    return {
        "factory": lambda request: upstream_reply(
            200, {"Content-Type": "application/json"}, b'{"shortCode": "abc123"}'
        )
    }


@pytest.fixture
def transport(upstream_requests, upstream_response):
    def handler(request: httpx.Request) -> httpx.Response:
        upstream_requests.append(request)
        return upstream_response["factory"](request)

    return httpx.MockTransport(handler)


@pytest.fixture
def make_client(logger, transport):
    def _make(config: Config) -> TestClient:
        return TestClient(create_app(config, logger, transport=transport))

    return _make


@pytest.fixture
def client(make_client, config):
    with make_client(config) as test_client:
        yield test_client
