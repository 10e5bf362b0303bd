"""Recording webhook backed by ``httpx.MockTransport``."""

from __future__ import annotations

import dataclasses
import json
import typing as typ

import httpx

WEBHOOK_URL = "https://discord.test/api/webhooks/123/token"


@dataclasses.dataclass(slots=True)
class RecordingWebhook:
    """Capture POSTed payloads and reply with a fixed status.

    Attributes
    ----------
    status_code
        Status returned for every request.
    response_body
        Body returned for every request.
    requests
        Requests received, in order.

    """

    status_code: int = 204
    response_body: str = ""
    requests: list[httpx.Request] = dataclasses.field(default_factory=list)

    def _handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, text=self.response_body)

    def client(self) -> httpx.Client:
        """Return an ``httpx.Client`` routed to this recorder."""
        return httpx.Client(transport=httpx.MockTransport(self._handler))

    @property
    def payloads(self) -> list[dict[str, typ.Any]]:
        """Return the decoded JSON bodies of recorded requests."""
        return [json.loads(request.content) for request in self.requests]


class FailingTransport(httpx.BaseTransport):
    """Transport that raises a connection error for every request."""

    def __init__(self) -> None:
        """Initialise the attempt counter."""
        self.attempts = 0

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        """Count the attempt and raise ``httpx.ConnectError``."""
        self.attempts += 1
        msg = "connection refused"
        raise httpx.ConnectError(msg, request=request)
