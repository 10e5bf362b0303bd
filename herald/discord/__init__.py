"""Webhook message construction and delivery.

Public API
----------
build_message
    Pure function rendering an event context into a :class:`Message`, or
    :data:`SKIP` when the event asked not to be announced.
truncate_message
    Caps oversized ``Commits`` fields before delivery.
WebhookClient
    Synchronous single-POST client; raises ``DeliveryFailedError`` on
    non-2xx responses.
"""

from __future__ import annotations

from .builder import (
    SKIP,
    BuildOutcome,
    build_message,
    flatten_commit_message,
    pull_request_headline,
    render_commit_lines,
)
from .client import DeliveryResult, WebhookClient, send
from .errors import DeliveryFailedError
from .models import (
    AllowedMentions,
    Embed,
    EmbedAuthor,
    EmbedColor,
    EmbedField,
    EmbedFooter,
    Message,
    encode_message,
)
from .truncate import truncate_message, truncate_value

__all__ = [
    "SKIP",
    "AllowedMentions",
    "BuildOutcome",
    "DeliveryFailedError",
    "DeliveryResult",
    "Embed",
    "EmbedAuthor",
    "EmbedColor",
    "EmbedField",
    "EmbedFooter",
    "Message",
    "WebhookClient",
    "build_message",
    "encode_message",
    "flatten_commit_message",
    "pull_request_headline",
    "render_commit_lines",
    "send",
    "truncate_message",
    "truncate_value",
]
