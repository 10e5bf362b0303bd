"""Base exceptions shared across Herald packages."""

from __future__ import annotations


class HeraldError(Exception):
    """Base exception for all Herald errors.

    The CLI catches this type to map failures onto a non-zero exit code.
    """


class HeraldConfigError(HeraldError):
    """Raised when environment configuration cannot be parsed."""

    @classmethod
    def not_an_integer(cls, env_var: str, raw: str) -> HeraldConfigError:
        """Return an error for non-numeric integer settings."""
        return cls(f"{env_var} must be an integer, got: {raw!r}")

    @classmethod
    def not_positive(cls, env_var: str, value: int) -> HeraldConfigError:
        """Return an error for integer settings below one."""
        return cls(f"{env_var} must be positive, got: {value}")

    @classmethod
    def missing_webhook_url(cls) -> HeraldConfigError:
        """Return an error when a client is built without a destination."""
        return cls("webhook URL must be non-empty to deliver messages")

    @classmethod
    def empty_skip_token(cls) -> HeraldConfigError:
        """Return an error when the skip token is blank."""
        return cls("HERALD_SKIP_TOKEN must be non-empty when set")
