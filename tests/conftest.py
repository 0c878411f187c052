"""Test fixtures for persian_sms tests."""

from collections.abc import Generator

import httpx
import pytest

from persian_sms.channels.ippanel import IPPanelChannel

from tests.helpers import API_KEY, DEFAULT_SENDER, FakeIPPanel


@pytest.fixture()
def fake_ippanel() -> FakeIPPanel:
    return FakeIPPanel()


@pytest.fixture()
def http_client(fake_ippanel: FakeIPPanel) -> Generator[httpx.Client, None, None]:
    """httpx client whose transport is the fake IPPanel API."""
    client = httpx.Client(transport=httpx.MockTransport(fake_ippanel.handler))
    yield client
    client.close()


@pytest.fixture()
def channel(http_client: httpx.Client) -> IPPanelChannel:
    return IPPanelChannel(http_client, API_KEY, DEFAULT_SENDER)
