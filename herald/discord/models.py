"""Typed webhook payload structures.

The structs mirror the webhook JSON schema field-for-field, so
``msgspec.json.encode(message)`` yields the wire payload directly:

.. code-block:: json

    {
      "username": "GitHub",
      "avatar_url": "https://...",
      "allowed_mentions": {"parse": []},
      "embeds": [{"title": "...", "url": "...", "color": 3447003, ...}]
    }

"""

from __future__ import annotations

import enum

import msgspec


class EmbedColor(enum.IntEnum):
    """Severity colours available to an embed."""

    INFO = 3447003
    SUCCESS = 3066993
    WARNING = 15105570


class EmbedField(msgspec.Struct, kw_only=True, frozen=True):
    """Named value rendered inside an embed."""

    name: str
    value: str
    inline: bool = False


class EmbedAuthor(msgspec.Struct, kw_only=True, frozen=True):
    """Author block shown above the embed title."""

    name: str
    icon_url: str


class EmbedFooter(msgspec.Struct, kw_only=True, frozen=True):
    """Footer line shown under the embed fields."""

    text: str


class Embed(msgspec.Struct, kw_only=True, frozen=True):
    """Rich message block.

    Attributes
    ----------
    title
        Headline, including the event emoji.
    url
        Link opened when the title is clicked.
    color
        Severity colour.
    timestamp
        ISO-8601 time of the event.
    author
        Triggering actor and avatar.
    fields
        Ordered named values.
    footer
        Repository and event kind.

    """

    title: str
    url: str
    color: EmbedColor
    timestamp: str
    author: EmbedAuthor
    footer: EmbedFooter
    fields: tuple[EmbedField, ...] = ()

    def field(self, name: str) -> EmbedField | None:
        """Return the first field called ``name``, if any."""
        return next((item for item in self.fields if item.name == name), None)


class AllowedMentions(msgspec.Struct, kw_only=True, frozen=True):
    """Mention allow-list; an empty ``parse`` list suppresses all pings."""

    parse: tuple[str, ...] = ()


class Message(msgspec.Struct, kw_only=True, frozen=True):
    """Outbound webhook payload carrying exactly one embed."""

    username: str
    avatar_url: str
    embeds: tuple[Embed, ...]
    allowed_mentions: AllowedMentions = msgspec.field(default_factory=AllowedMentions)

    @property
    def embed(self) -> Embed:
        """Return the single embed this message carries."""
        return self.embeds[0]


def encode_message(message: Message) -> bytes:
    """Serialise ``message`` to the webhook JSON body."""
    return msgspec.json.encode(message)
