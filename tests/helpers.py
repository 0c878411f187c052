"""Fake notification targets and a fake IPPanel API for tests."""

import json
from typing import Any

import httpx

API_KEY = "test_api_key"
DEFAULT_SENDER = "+983000123"


class FakeNotifiable:
    """Notification target that routes channels through a dict.

    Extra keyword arguments become plain attributes, e.g.
    ``FakeNotifiable(phone_number="+98912...")``.
    """

    def __init__(self, routes: dict[Any, Any] | None = None, **fields: Any) -> None:
        self.routes = routes or {}
        for name, value in fields.items():
            setattr(self, name, value)

    def route_notification_for(self, channel: Any) -> Any:
        return self.routes.get(channel)


class FakeIPPanel:
    """Stand-in for the IPPanel API behind an httpx.MockTransport.

    Every request is recorded; the reply is whatever was last configured
    with ``respond`` or ``fail_with``.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body: Any = {"status": "OK", "data": {"message_id": "12345"}}
        self.error: Exception | None = None

    def respond(self, status_code: int, body: Any) -> None:
        self.status_code = status_code
        self.body = body

    def fail_with(self, error: Exception) -> None:
        self.error = error

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if isinstance(self.body, (str, bytes)):
            return httpx.Response(self.status_code, content=self.body)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_payload(self) -> Any:
        return json.loads(self.last_request.content)
