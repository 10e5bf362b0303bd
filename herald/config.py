"""Configuration for a single notifier invocation.

The webhook URL is the only value a deployment must supply; leaving it unset
is a valid "disabled" state (forks and local runs), not an error. Everything
else is a formatting policy with a sensible default.

Usage
-----
>>> config = NotifierConfig(webhook_url="https://discord.test/api/webhooks/1/x")
>>> config.enabled
True
>>> config.field_char_limit
1000

Or load from environment variables:

>>> import os
>>> os.environ["HERALD_SKIP_TOKEN"] = "[no-ping]"
>>> NotifierConfig.from_env().skip_token
'[no-ping]'

"""

from __future__ import annotations

import dataclasses as dc
import os

from herald.errors import HeraldConfigError

DEFAULT_USERNAME = "GitHub"
DEFAULT_AVATAR_URL = (
    "https://github.githubassets.com/images/modules/logos_page/GitHub-Mark.png"
)
DEFAULT_ACTOR_ICON_TEMPLATE = "https://github.com/{actor}.png"
DEFAULT_SKIP_TOKEN = "[skip-notify]"
DEFAULT_FIELD_CHAR_LIMIT = 1000
DEFAULT_MAX_LISTED_COMMITS = 5


@dc.dataclass(frozen=True, slots=True)
class NotifierConfig:
    """Settings passed explicitly into :class:`herald.notifier.Notifier`.

    Attributes
    ----------
    webhook_url
        Destination webhook. Empty disables delivery.
    username
        Display name the message is posted under.
    avatar_url
        Avatar shown next to the posted message.
    actor_icon_template
        Template for the embed author icon; ``{actor}`` is substituted.
    skip_token
        Case-insensitive marker in a commit message or PR title that
        suppresses the notification.
    field_char_limit
        Character cap applied to the ``Commits`` field before sending.
    max_listed_commits
        Number of commit bullet lines rendered before the "more" summary.

    """

    webhook_url: str = ""
    username: str = DEFAULT_USERNAME
    avatar_url: str = DEFAULT_AVATAR_URL
    actor_icon_template: str = DEFAULT_ACTOR_ICON_TEMPLATE
    skip_token: str = DEFAULT_SKIP_TOKEN
    field_char_limit: int = DEFAULT_FIELD_CHAR_LIMIT
    max_listed_commits: int = DEFAULT_MAX_LISTED_COMMITS

    @property
    def enabled(self) -> bool:
        """Return True when a webhook destination is configured."""
        return bool(self.webhook_url.strip())

    @staticmethod
    def _parse_positive_int(env_var: str, default: int) -> int:
        """Read a positive integer env var, falling back to a default."""
        raw = os.environ.get(env_var, "")
        if not raw.strip():
            return default
        try:
            value = int(raw)
        except ValueError as exc:
            raise HeraldConfigError.not_an_integer(env_var, raw) from exc
        if value < 1:
            raise HeraldConfigError.not_positive(env_var, value)
        return value

    @staticmethod
    def _read_text(env_var: str, default: str) -> str:
        raw = os.environ.get(env_var, "").strip()
        return raw or default

    @classmethod
    def from_env(cls) -> NotifierConfig:
        """Create configuration from environment variables.

        Reads the following environment variables:

        - ``HERALD_WEBHOOK_URL``: Destination webhook; falls back to
          ``DISCORD_WEBHOOK_URL``. Empty disables delivery.
        - ``HERALD_USERNAME`` and ``HERALD_AVATAR_URL``: Message identity.
        - ``HERALD_ACTOR_ICON_TEMPLATE``: Author icon URL template.
        - ``HERALD_SKIP_TOKEN``: Skip marker. Must be non-blank when set.
        - ``HERALD_FIELD_CHAR_LIMIT``: Commits field cap (positive integer).
        - ``HERALD_MAX_LISTED_COMMITS``: Commit lines listed (positive integer).

        Returns
        -------
        NotifierConfig
            Configuration instance with values from environment or defaults.

        Raises
        ------
        HeraldConfigError
            If a numeric setting is malformed or the skip token is blank.

        """
        webhook_url = os.environ.get("HERALD_WEBHOOK_URL", "").strip()
        if not webhook_url:
            webhook_url = os.environ.get("DISCORD_WEBHOOK_URL", "").strip()

        raw_skip_token = os.environ.get("HERALD_SKIP_TOKEN")
        if raw_skip_token is None:
            skip_token = DEFAULT_SKIP_TOKEN
        else:
            skip_token = raw_skip_token.strip()
            if not skip_token:
                raise HeraldConfigError.empty_skip_token()

        return cls(
            webhook_url=webhook_url,
            username=cls._read_text("HERALD_USERNAME", DEFAULT_USERNAME),
            avatar_url=cls._read_text("HERALD_AVATAR_URL", DEFAULT_AVATAR_URL),
            actor_icon_template=cls._read_text(
                "HERALD_ACTOR_ICON_TEMPLATE", DEFAULT_ACTOR_ICON_TEMPLATE
            ),
            skip_token=skip_token,
            field_char_limit=cls._parse_positive_int(
                "HERALD_FIELD_CHAR_LIMIT", DEFAULT_FIELD_CHAR_LIMIT
            ),
            max_listed_commits=cls._parse_positive_int(
                "HERALD_MAX_LISTED_COMMITS", DEFAULT_MAX_LISTED_COMMITS
            ),
        )
