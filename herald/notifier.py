"""Top-level notification workflow.

``Notifier.run`` performs one invocation: decide whether to send, build and
truncate the message, then deliver it exactly once. Only delivery failures
are errors; a missing webhook or a skip marker are ordinary outcomes.
"""

from __future__ import annotations

import enum
import typing as typ

from herald.discord import (
    SKIP,
    DeliveryFailedError,
    WebhookClient,
    build_message,
    truncate_message,
)
from herald.logging import (
    get_logger,
    log_debug,
    log_error,
    log_exception,
    log_info,
    log_warning,
)

if typ.TYPE_CHECKING:
    import httpx

    from herald.config import NotifierConfig
    from herald.discord import BuildOutcome, Message
    from herald.events import EventContext

logger = get_logger(__name__)


class RunOutcome(enum.StrEnum):
    """How a notifier invocation ended without error."""

    SENT = "sent"
    SKIPPED = "skipped"
    NOT_CONFIGURED = "not_configured"


def _describe(ctx: EventContext) -> str:
    return f"{ctx.kind} on {ctx.repository}"


class Notifier:
    """Announce a single CI event to the configured webhook.

    Parameters
    ----------
    config
        Explicit configuration; the notifier never reads the environment.
    http_client
        Optional ``httpx.Client`` injected into the webhook client, mainly
        for tests.

    """

    def __init__(
        self,
        config: NotifierConfig,
        *,
        http_client: httpx.Client | None = None,
    ) -> None:
        """Initialise with configuration and an optional HTTP client."""
        self._config = config
        self._http_client = http_client

    @property
    def config(self) -> NotifierConfig:
        """Read-only access to the notifier configuration."""
        return self._config

    def prepare(self, ctx: EventContext) -> Message | typ.Literal[BuildOutcome.SKIP]:
        """Build and truncate the message for ``ctx`` without sending it."""
        built = build_message(ctx, self._config)
        if built is SKIP:
            return SKIP
        return truncate_message(built, self._config.field_char_limit)

    def run(self, ctx: EventContext) -> RunOutcome:
        """Deliver the notification for ``ctx`` at most once.

        Returns
        -------
        RunOutcome
            ``NOT_CONFIGURED`` when no webhook is set, ``SKIPPED`` when the
            event carries the skip marker, ``SENT`` after a 2xx delivery.

        Raises
        ------
        DeliveryFailedError
            If the webhook responds outside 2xx or cannot be reached. HTTP
            failures log status and body; transport failures log the
            exception itself. Either way the error is re-raised.

        """
        if not self._config.enabled:
            log_warning(
                logger,
                "Webhook not configured; skipping notification for %s",
                _describe(ctx),
            )
            return RunOutcome.NOT_CONFIGURED

        message = self.prepare(ctx)
        if message is SKIP:
            log_info(
                logger,
                "Skip marker %r present; not notifying for %s",
                self._config.skip_token,
                _describe(ctx),
            )
            return RunOutcome.SKIPPED

        with WebhookClient(
            self._config.webhook_url, http_client=self._http_client
        ) as client:
            log_debug(logger, "Posting notification for %s", _describe(ctx))
            try:
                result = client.send(message)
            except DeliveryFailedError as exc:
                if exc.status_code is None:
                    log_exception(
                        logger,
                        f"Notification for {_describe(ctx)} could not be delivered",
                        exc,
                    )
                else:
                    log_error(
                        logger,
                        "Notification for %s failed (status=%s): %s",
                        _describe(ctx),
                        exc.status_code,
                        exc.body or exc,
                    )
                raise

        log_info(
            logger,
            "Delivered notification for %s (HTTP %d)",
            _describe(ctx),
            result.status_code,
        )
        return RunOutcome.SENT
