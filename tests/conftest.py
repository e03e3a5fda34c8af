import json
from typing import Any, Callable, List, Optional

import httpx
import pytest

from tokenchannel import TokenChannel


API_KEY = "test-api-key"


class Recorder:
    """Answers every request with a canned response and keeps what was sent."""

    def __init__(self, status_code: int = 200, body: Any = None, content: Optional[bytes] = None):
        self.status_code = status_code
        self.body = body
        self.content = content
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture
def make_client() -> Callable[..., TokenChannel]:
    def factory(handler: Callable[[httpx.Request], httpx.Response], **kwargs) -> TokenChannel:
        kwargs.setdefault("api_key", API_KEY)
        return TokenChannel(transport=httpx.MockTransport(handler), **kwargs)

    return factory
