"""
Shared builders for the test suite.
"""
import json
from typing import Any, Callable, Dict, List, Optional

import httpx

from sendamatic import Message, SendamaticClient, with_base_url, with_http_client

TEST_BASE_URL = "https://api.test.sendamatic.local"


class MessageFactory:
    """Builds messages in a known-good state; tweak the result to break one rule."""

    @staticmethod
    def create_valid_message(**overrides: Any) -> Message:
        data: Dict[str, Any] = {
            "to": ["recipient@example.com"],
            "sender": "sender@example.com",
            "subject": "Test",
            "text_body": "Body",
        }
        data.update(overrides)
        return Message(**data)

    @staticmethod
    def recipients(count: int) -> List[str]:
        return [f"user{i}@example.com" for i in range(count)]


class RecordingHandler:
    """
    httpx.MockTransport handler that records requests and replays one canned
    response (or raises a canned exception).
    """

    def __init__(
            self,
            status_code: int = 200,
            body: Any = None,
            raw: Optional[bytes] = None,
            exc: Optional[Exception] = None,
    ) -> None:
        self.status_code = status_code
        self.body = {} if body is None else body
        self.raw = raw
        self.exc = exc
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        if self.raw is not None:
            return httpx.Response(self.status_code, content=self.raw)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last_json(self) -> Dict[str, Any]:
        return json.loads(self.requests[-1].content)


def make_client(handler: Callable[[httpx.Request], Any], *extra_options) -> SendamaticClient:
    transport = httpx.MockTransport(handler)
    return SendamaticClient(
        "user",
        "pass",
        with_base_url(TEST_BASE_URL),
        with_http_client(httpx.AsyncClient(transport=transport)),
        *extra_options,
    )
