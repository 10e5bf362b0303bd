"""Build an :data:`EventContext` from GitHub Actions event metadata.

GitHub Actions exposes the triggering webhook payload as a JSON file named by
``GITHUB_EVENT_PATH`` and the event name as ``GITHUB_EVENT_NAME``. The payload
is decoded into narrow msgspec structs; unknown fields are ignored so payload
growth on the platform side does not break decoding.
"""

from __future__ import annotations

import dataclasses
import datetime as dt
import os
import typing as typ
from pathlib import Path

import msgspec

from herald.common.time import utcnow

from .errors import EventPayloadError, UnsupportedEventError
from .models import CommitSummary, PullRequestEvent, PushEvent
from .skip import is_skip_requested

if typ.TYPE_CHECKING:
    from .models import EventContext

DEFAULT_SERVER_URL = "https://github.com"
PULL_REQUEST_EVENT_NAMES = frozenset({"pull_request", "pull_request_target"})
_REF_PREFIXES = ("refs/heads/", "refs/tags/")
_UNKNOWN_ACTOR = "unknown"


class _RawUser(msgspec.Struct, kw_only=True):
    login: str = ""


class _RawRepository(msgspec.Struct, kw_only=True):
    full_name: str


class _RawCommitAuthor(msgspec.Struct, kw_only=True):
    name: str = ""
    username: str | None = None


class _RawCommit(msgspec.Struct, kw_only=True):
    id: str = ""
    message: str = ""
    url: str = ""
    timestamp: dt.datetime | None = None
    author: _RawCommitAuthor = msgspec.field(default_factory=_RawCommitAuthor)


class _RawPushPayload(msgspec.Struct, kw_only=True):
    ref: str = ""
    after: str = ""
    compare: str | None = None
    repository: _RawRepository
    sender: _RawUser | None = None
    commits: list[_RawCommit] = msgspec.field(default_factory=list)
    head_commit: _RawCommit | None = None


class _RawBranch(msgspec.Struct, kw_only=True):
    ref: str = ""


class _RawPullRequest(msgspec.Struct, kw_only=True):
    number: int
    title: str = ""
    html_url: str = ""
    merged: bool | None = None
    updated_at: dt.datetime | None = None
    head: _RawBranch | None = None
    base: _RawBranch | None = None
    user: _RawUser | None = None


class _RawPullRequestPayload(msgspec.Struct, kw_only=True):
    action: str = ""
    number: int | None = None
    pull_request: _RawPullRequest
    repository: _RawRepository
    sender: _RawUser | None = None


@dataclasses.dataclass(frozen=True, slots=True)
class EventSource:
    """Ambient values the CI runner provides alongside the payload.

    Attributes
    ----------
    skip_token
        Marker that suppresses the notification when present.
    server_url
        Base URL of the hosting platform.
    actor
        Triggering actor override (``GITHUB_ACTOR``); falls back to the
        payload ``sender``.
    ref_name
        Ref override (``GITHUB_REF_NAME``) used when the payload has none.

    """

    skip_token: str
    server_url: str = DEFAULT_SERVER_URL
    actor: str | None = None
    ref_name: str | None = None


def short_ref(ref: str) -> str:
    """Strip the ``refs/heads/`` or ``refs/tags/`` prefix from a ref."""
    for prefix in _REF_PREFIXES:
        if ref.startswith(prefix):
            return ref.removeprefix(prefix)
    return ref


def _as_utc(value: dt.datetime | None) -> dt.datetime:
    if value is None:
        return utcnow()
    if value.tzinfo is None:
        return value.replace(tzinfo=dt.UTC)
    return value.astimezone(dt.UTC)


def _resolve_actor(source: EventSource, sender: _RawUser | None) -> str:
    if source.actor and source.actor.strip():
        return source.actor.strip()
    if sender is not None and sender.login:
        return sender.login
    return _UNKNOWN_ACTOR


def _decode[PayloadT: msgspec.Struct](
    payload: bytes | typ.Mapping[str, typ.Any],
    kind: type[PayloadT],
    name: str,
) -> PayloadT:
    try:
        if isinstance(payload, bytes | bytearray | memoryview):
            return msgspec.json.decode(payload, type=kind)
        return msgspec.convert(payload, type=kind)
    except (msgspec.ValidationError, msgspec.DecodeError) as exc:
        raise EventPayloadError.invalid(name, str(exc)) from exc


def _push_context(raw: _RawPushPayload, source: EventSource) -> PushEvent:
    trigger = raw.head_commit or (raw.commits[-1] if raw.commits else None)
    trigger_message = trigger.message if trigger else None
    ref = short_ref(raw.ref) or (source.ref_name or "")
    commits = tuple(
        CommitSummary(
            message=commit.message,
            author_name=commit.author.name or commit.author.username or "",
            url=commit.url,
        )
        for commit in raw.commits
    )
    return PushEvent(
        actor=_resolve_actor(source, raw.sender),
        repository=raw.repository.full_name,
        ref=ref,
        occurred_at=_as_utc(trigger.timestamp if trigger else None),
        server_url=source.server_url.rstrip("/"),
        skip=is_skip_requested(trigger_message, source.skip_token),
        sha=raw.after or (trigger.id if trigger else ""),
        compare_url=raw.compare or None,
        commits=commits,
    )


def _pull_request_context(
    raw: _RawPullRequestPayload, source: EventSource
) -> PullRequestEvent:
    pr = raw.pull_request
    head_ref = pr.head.ref if pr.head and pr.head.ref else None
    base_ref = pr.base.ref if pr.base and pr.base.ref else None
    return PullRequestEvent(
        actor=_resolve_actor(source, raw.sender or pr.user),
        repository=raw.repository.full_name,
        ref=head_ref or base_ref or (source.ref_name or ""),
        occurred_at=_as_utc(pr.updated_at),
        server_url=source.server_url.rstrip("/"),
        skip=is_skip_requested(pr.title, source.skip_token),
        number=raw.number if raw.number is not None else pr.number,
        action=raw.action,
        title=pr.title,
        url=pr.html_url,
        merged=bool(pr.merged),
        head_ref=head_ref,
        base_ref=base_ref,
    )


def load_event_context(
    event_name: str,
    payload: bytes | typ.Mapping[str, typ.Any],
    source: EventSource,
) -> EventContext:
    """Decode a webhook payload into an immutable event context.

    Parameters
    ----------
    event_name
        Platform event name, e.g. ``push`` or ``pull_request``.
    payload
        Raw JSON bytes or an already-parsed mapping.
    source
        Runner-provided values and the skip policy.

    Returns
    -------
    EventContext
        A ``PushEvent`` or ``PullRequestEvent``.

    Raises
    ------
    UnsupportedEventError
        If ``event_name`` is not a push or pull request event.
    EventPayloadError
        If the payload does not match the expected schema.

    """
    if event_name == "push":
        return _push_context(_decode(payload, _RawPushPayload, event_name), source)
    if event_name in PULL_REQUEST_EVENT_NAMES:
        raw = _decode(payload, _RawPullRequestPayload, event_name)
        return _pull_request_context(raw, source)
    raise UnsupportedEventError(event_name)


def _require_env(env_var: str, override: str | None) -> str:
    value = override if override is not None else os.environ.get(env_var, "")
    value = value.strip()
    if not value:
        raise EventPayloadError.missing_env(env_var)
    return value


def load_event_context_from_env(
    skip_token: str,
    *,
    event_name: str | None = None,
    event_path: Path | None = None,
) -> EventContext:
    """Load the event context the way a GitHub Actions step sees it.

    Reads ``GITHUB_EVENT_NAME``, ``GITHUB_EVENT_PATH``, ``GITHUB_SERVER_URL``,
    ``GITHUB_ACTOR`` and ``GITHUB_REF_NAME``. ``event_name`` and
    ``event_path`` override the first two.

    Raises
    ------
    EventPayloadError
        If the event name or payload path is unavailable or unreadable.
    UnsupportedEventError
        If the event is neither a push nor a pull request.

    """
    name = _require_env("GITHUB_EVENT_NAME", event_name)
    path = Path(
        _require_env("GITHUB_EVENT_PATH", str(event_path) if event_path else None)
    )
    try:
        payload = path.read_bytes()
    except OSError as exc:
        raise EventPayloadError.unreadable(str(path), exc.strerror or str(exc)) from exc

    source = EventSource(
        skip_token=skip_token,
        server_url=os.environ.get("GITHUB_SERVER_URL", "").strip()
        or DEFAULT_SERVER_URL,
        actor=os.environ.get("GITHUB_ACTOR") or None,
        ref_name=os.environ.get("GITHUB_REF_NAME") or None,
    )
    return load_event_context(name, payload, source)
