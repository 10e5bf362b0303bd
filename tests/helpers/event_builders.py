"""Deterministic event payloads and contexts for unit and behavioural tests.

Payload builders produce dictionaries shaped like the GitHub webhook JSON that
Actions writes to ``GITHUB_EVENT_PATH``. Context builders produce the decoded
``PushEvent`` / ``PullRequestEvent`` directly for tests that skip loading.

Examples
--------
>>> spec = PushPayloadSpec(messages=("fix bug", "add test"))
>>> payload = spec.build()
>>> len(payload["commits"])
2

"""

from __future__ import annotations

import dataclasses
import datetime as dt
import typing as typ

from herald.events import CommitSummary, PullRequestEvent, PushEvent

OCCURRED_AT = dt.datetime(2024, 7, 10, 10, 0, tzinfo=dt.UTC)
REPO = "acme/widgets"
SHA = "abcdef1234567"


@dataclasses.dataclass(frozen=True, slots=True)
class PushPayloadSpec:
    """Parameters for a ``push`` webhook payload."""

    repo: str = REPO
    ref: str = "refs/heads/main"
    sha: str = SHA
    actor: str = "alice"
    messages: tuple[str, ...] = ("fix bug", "add test")
    author_name: str = "Alice Example"
    compare: str | None = "https://github.com/acme/widgets/compare/0123456...abcdef1"
    include_head_commit: bool = True

    def _commit(self, index: int, message: str) -> dict[str, typ.Any]:
        commit_id = f"{index:07d}{self.sha[7:]}"
        return {
            "id": commit_id,
            "message": message,
            "timestamp": "2024-07-10T12:00:00+02:00",
            "url": f"https://github.com/{self.repo}/commit/{commit_id}",
            "author": {"name": self.author_name, "username": self.actor},
        }

    def build(self) -> dict[str, typ.Any]:
        """Return the payload as a JSON-compatible dictionary."""
        commits = [
            self._commit(index, message) for index, message in enumerate(self.messages)
        ]
        payload: dict[str, typ.Any] = {
            "ref": self.ref,
            "before": "0123456789abcdef",
            "after": self.sha,
            "compare": self.compare,
            "repository": {"full_name": self.repo, "private": False},
            "sender": {"login": self.actor, "id": 1},
            "pusher": {"name": self.actor},
            "commits": commits,
            "head_commit": commits[-1]
            if commits and self.include_head_commit
            else None,
        }
        return payload


@dataclasses.dataclass(frozen=True, slots=True)
class PullRequestPayloadSpec:
    """Parameters for a ``pull_request`` webhook payload."""

    repo: str = REPO
    number: int = 42
    action: str = "opened"
    title: str = "Add feature"
    merged: bool = False
    actor: str = "bob"
    head_ref: str = "feature/widgets"
    base_ref: str = "main"

    def build(self) -> dict[str, typ.Any]:
        """Return the payload as a JSON-compatible dictionary."""
        return {
            "action": self.action,
            "number": self.number,
            "pull_request": {
                "number": self.number,
                "title": self.title,
                "html_url": f"https://github.com/{self.repo}/pull/{self.number}",
                "merged": self.merged,
                "state": "closed" if self.action == "closed" else "open",
                "updated_at": "2024-07-10T10:00:00Z",
                "head": {"ref": self.head_ref, "sha": SHA},
                "base": {"ref": self.base_ref, "sha": "0123456"},
                "user": {"login": self.actor},
            },
            "repository": {"full_name": self.repo},
            "sender": {"login": self.actor},
        }


def commit_summaries(
    messages: typ.Sequence[str], *, author_name: str = "Alice Example"
) -> tuple[CommitSummary, ...]:
    """Return commit summaries with predictable URLs."""
    return tuple(
        CommitSummary(
            message=message,
            author_name=author_name,
            url=f"https://github.com/{REPO}/commit/{index:07d}",
        )
        for index, message in enumerate(messages)
    )


def push_event(
    messages: typ.Sequence[str] = ("fix bug", "add test"),
    *,
    skip: bool = False,
    compare_url: str | None = "https://github.com/acme/widgets/compare/a...b",
) -> PushEvent:
    """Return a push context for ``acme/widgets`` on ``main``."""
    return PushEvent(
        actor="alice",
        repository=REPO,
        ref="main",
        occurred_at=OCCURRED_AT,
        skip=skip,
        sha=SHA,
        compare_url=compare_url,
        commits=commit_summaries(messages),
    )


def pull_request_event(
    *,
    action: str = "opened",
    merged: bool = False,
    title: str = "Add feature",
    skip: bool = False,
) -> PullRequestEvent:
    """Return a pull request context for PR #42."""
    return PullRequestEvent(
        actor="bob",
        repository=REPO,
        ref="feature/widgets",
        occurred_at=OCCURRED_AT,
        skip=skip,
        number=42,
        action=action,
        title=title,
        url=f"https://github.com/{REPO}/pull/42",
        merged=merged,
        head_ref="feature/widgets",
        base_ref="main",
    )
