"""Typed event context consumed by the message builder.

``EventContext`` is a tagged union: every invocation carries exactly one
``PushEvent`` or ``PullRequestEvent``. Both are immutable and hold only the
fields needed to render a notification.
"""

from __future__ import annotations

import datetime as dt  # noqa: TC003
import enum

import msgspec


class EventKind(enum.StrEnum):
    """Source-control events Herald knows how to announce."""

    PUSH = "push"
    PULL_REQUEST = "pull_request"


class CommitSummary(msgspec.Struct, kw_only=True, frozen=True):
    """One commit listed in a push notification.

    Attributes
    ----------
    message
        Full commit message, possibly spanning several lines.
    author_name
        Commit author display name.
    url
        Link to the commit on the hosting platform.

    """

    message: str
    author_name: str
    url: str


class _EventBase(msgspec.Struct, kw_only=True, frozen=True):
    """Fields shared by every event kind.

    Attributes
    ----------
    actor
        Login of the user who triggered the event.
    repository
        ``owner/name`` identifier.
    ref
        Short ref name (branch or tag) the event concerns.
    occurred_at
        Timestamp shown on the embed.
    server_url
        Base URL of the hosting platform.
    skip
        True when the triggering commit or title carries the skip marker.

    """

    actor: str
    repository: str
    ref: str
    occurred_at: dt.datetime
    server_url: str = "https://github.com"
    skip: bool = False


class PushEvent(_EventBase, kw_only=True, tag="push"):
    """A push to a branch or tag."""

    sha: str
    compare_url: str | None = None
    commits: tuple[CommitSummary, ...] = ()

    @property
    def kind(self) -> EventKind:
        """Return the event discriminator."""
        return EventKind.PUSH

    @property
    def short_sha(self) -> str:
        """Return the seven-character abbreviated SHA."""
        return self.sha[:7]


class PullRequestEvent(_EventBase, kw_only=True, tag="pull_request"):
    """A pull request state change (opened, synchronize, closed, ...)."""

    number: int
    action: str
    title: str
    url: str
    merged: bool = False
    head_ref: str | None = None
    base_ref: str | None = None

    @property
    def kind(self) -> EventKind:
        """Return the event discriminator."""
        return EventKind.PULL_REQUEST


type EventContext = PushEvent | PullRequestEvent
