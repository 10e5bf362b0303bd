"""Field truncation applied between building and sending a message."""

from __future__ import annotations

import msgspec

from herald.config import DEFAULT_FIELD_CHAR_LIMIT

from .builder import COMMITS_FIELD
from .models import Embed, EmbedField, Message

ELLIPSIS = "…"
TRUNCATED_FIELDS = frozenset({COMMITS_FIELD})


def truncate_value(value: str, limit: int) -> str:
    """Cut ``value`` to ``limit`` characters plus an ellipsis when too long.

    Re-applying to an already truncated value returns it unchanged: the first
    ``limit`` characters are preserved, so the cut lands in the same place.
    """
    if len(value) <= limit:
        return value
    return value[:limit] + ELLIPSIS


def _truncate_field(field: EmbedField, limit: int) -> EmbedField:
    if field.name not in TRUNCATED_FIELDS:
        return field
    value = truncate_value(field.value, limit)
    if value == field.value:
        return field
    return msgspec.structs.replace(field, value=value)


def _truncate_embed(embed: Embed, limit: int) -> Embed:
    fields = tuple(_truncate_field(field, limit) for field in embed.fields)
    return msgspec.structs.replace(embed, fields=fields)


def truncate_message(
    message: Message, limit: int = DEFAULT_FIELD_CHAR_LIMIT
) -> Message:
    """Return ``message`` with oversized ``Commits`` fields cut to ``limit``."""
    embeds = tuple(_truncate_embed(embed, limit) for embed in message.embeds)
    return msgspec.structs.replace(message, embeds=embeds)
