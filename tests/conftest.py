from __future__ import annotations

from typing import Any, Callable, List, Optional

import httpx
import pytest

from core.client import RequestExecutor

BASE_URL = "https://mock.interzoid.test"


class FakeInterzoidApi:
    """Stands in for api.interzoid.com behind an httpx.MockTransport.

    Every request is recorded; the reply is whatever `status` / `body` /
    `json_body` currently say, or the result of `handler` when one is set.
    """

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.status: int = 200
        self.body: Optional[str] = None
        self.json_body: Any = {"Code": "Success"}
        self.handler: Optional[Callable[[httpx.Request], httpx.Response]] = None

    def reply(self, status: int, *, json_body: Any = None, body: Optional[str] = None) -> None:
        self.status = status
        self.json_body = json_body
        self.body = body

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.handler is not None:
            return self.handler(request)
        if self.body is not None:
            return httpx.Response(self.status, text=self.body)
        return httpx.Response(self.status, json=self.json_body)

    def executor(self) -> RequestExecutor:
        client = httpx.AsyncClient(transport=httpx.MockTransport(self._handle), timeout=30.0)
        return RequestExecutor(BASE_URL, client=client)

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "no request reached the fake API"
        return self.requests[-1]


@pytest.fixture()
def fake_api() -> FakeInterzoidApi:
    return FakeInterzoidApi()
