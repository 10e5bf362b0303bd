"""Errors raised while loading CI event metadata."""

from __future__ import annotations

from herald.errors import HeraldError


class EventPayloadError(HeraldError):
    """Raised when event metadata is missing or cannot be decoded."""

    @classmethod
    def missing_env(cls, env_var: str) -> EventPayloadError:
        """Return an error for a required but unset environment variable."""
        return cls(f"{env_var} is required to describe the triggering event")

    @classmethod
    def unreadable(cls, path: str, reason: str) -> EventPayloadError:
        """Return an error when the event payload file cannot be read."""
        return cls(f"cannot read event payload {path}: {reason}")

    @classmethod
    def invalid(cls, event_name: str, detail: str) -> EventPayloadError:
        """Return an error for a payload that fails schema validation."""
        return cls(f"invalid {event_name} payload: {detail}")


class UnsupportedEventError(HeraldError):
    """Raised for event names Herald does not announce."""

    def __init__(self, event_name: str) -> None:
        """Initialise with the rejected event name."""
        self.event_name = event_name
        super().__init__(f"unsupported event: {event_name!r}")
