"""Synchronous webhook client.

Each message is delivered with exactly one POST. There is no retry: a non-2xx
response or a transport failure surfaces as :class:`DeliveryFailedError` and
the caller decides what to do with it.
"""

from __future__ import annotations

import dataclasses
import typing as typ

import httpx

from herald import __version__
from herald.errors import HeraldConfigError

from .errors import DeliveryFailedError
from .models import encode_message

if typ.TYPE_CHECKING:
    from types import TracebackType

    from .models import Message

_HTTP_SUCCESS_MIN = 200
_HTTP_SUCCESS_MAX = 300
_USER_AGENT = f"herald/{__version__}"


@dataclasses.dataclass(frozen=True, slots=True)
class DeliveryResult:
    """Status and body captured from a webhook response."""

    status_code: int
    body: str

    @property
    def ok(self) -> bool:
        """Return True for 2xx responses."""
        return _HTTP_SUCCESS_MIN <= self.status_code < _HTTP_SUCCESS_MAX


class WebhookClient:
    """POST messages to a single webhook URL.

    Parameters
    ----------
    webhook_url
        Destination endpoint. Must be non-empty.
    http_client
        Optional ``httpx.Client`` for testing. When omitted the instance
        creates and owns one using the library's default timeout.

    Examples
    --------
    >>> with WebhookClient("https://discord.test/api/webhooks/1/x") as client:
    ...     result = client.send(message)  # doctest: +SKIP

    """

    def __init__(
        self,
        webhook_url: str,
        *,
        http_client: httpx.Client | None = None,
    ) -> None:
        """Initialise the client for ``webhook_url``."""
        if not webhook_url.strip():
            raise HeraldConfigError.missing_webhook_url()
        self._webhook_url = webhook_url.strip()
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(
            headers={"User-Agent": _USER_AGENT},
        )

    def __enter__(self) -> typ.Self:
        """Return the client for use in a ``with`` block."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        """Close owned HTTP resources."""
        self.close()

    def close(self) -> None:
        """Close the HTTP client when this instance created it."""
        if self._owns_client:
            self._client.close()

    def send(self, message: Message) -> DeliveryResult:
        """Deliver ``message`` with a single POST.

        Returns
        -------
        DeliveryResult
            Status code and body of the 2xx response.

        Raises
        ------
        DeliveryFailedError
            If the response status is outside 2xx or the request could not
            be completed.

        """
        try:
            response = self._client.post(
                self._webhook_url,
                content=encode_message(message),
                headers={"Content-Type": "application/json"},
            )
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            reason = str(exc) or type(exc).__name__
            raise DeliveryFailedError.transport(reason) from exc

        result = DeliveryResult(status_code=response.status_code, body=response.text)
        if not result.ok:
            raise DeliveryFailedError.http_error(result.status_code, result.body)
        return result


def send(
    message: Message,
    webhook_url: str,
    *,
    http_client: httpx.Client | None = None,
) -> DeliveryResult:
    """Deliver ``message`` to ``webhook_url`` using a short-lived client."""
    with WebhookClient(webhook_url, http_client=http_client) as client:
        return client.send(message)
