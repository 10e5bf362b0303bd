"""Webhook delivery errors."""

from __future__ import annotations

from herald.errors import HeraldError

# Response body preview length for error messages
_BODY_PREVIEW_LIMIT = 200


class DeliveryFailedError(HeraldError):
    """Raised when the webhook rejects a message or cannot be reached.

    Attributes
    ----------
    status_code
        HTTP status returned by the webhook, or ``None`` for transport
        failures.
    body
        Full response body, kept for diagnostics.

    """

    def __init__(
        self, message: str, *, status_code: int | None = None, body: str = ""
    ) -> None:
        """Initialise with a message, optional status code and body."""
        self.status_code = status_code
        self.body = body
        super().__init__(message)

    @classmethod
    def http_error(cls, status_code: int, body: str) -> DeliveryFailedError:
        """Return an error for a non-2xx webhook response."""
        preview = body[:_BODY_PREVIEW_LIMIT]
        if len(body) > _BODY_PREVIEW_LIMIT:
            preview += "..."
        return cls(
            f"webhook returned HTTP {status_code}: {preview}",
            status_code=status_code,
            body=body,
        )

    @classmethod
    def transport(cls, reason: str) -> DeliveryFailedError:
        """Return an error for network or timeout failures."""
        return cls(f"webhook request failed: {reason}")
