"""Event context types and CI event loading."""

from __future__ import annotations

from .errors import EventPayloadError, UnsupportedEventError
from .loader import (
    EventSource,
    load_event_context,
    load_event_context_from_env,
    short_ref,
)
from .models import (
    CommitSummary,
    EventContext,
    EventKind,
    PullRequestEvent,
    PushEvent,
)
from .skip import is_skip_requested

__all__ = [
    "CommitSummary",
    "EventContext",
    "EventKind",
    "EventPayloadError",
    "EventSource",
    "PullRequestEvent",
    "PushEvent",
    "UnsupportedEventError",
    "is_skip_requested",
    "load_event_context",
    "load_event_context_from_env",
    "short_ref",
]
