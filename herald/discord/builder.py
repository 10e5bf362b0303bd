"""Render an event context into a webhook message.

``build_message`` is pure: given the same context and configuration it always
returns the same message. Timestamps come from the event, never the clock.
"""

from __future__ import annotations

import enum
import typing as typ

from herald.common.time import isoformat_utc
from herald.config import NotifierConfig
from herald.events.models import CommitSummary, PullRequestEvent, PushEvent

from .models import (
    AllowedMentions,
    Embed,
    EmbedAuthor,
    EmbedColor,
    EmbedField,
    EmbedFooter,
    Message,
)

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from herald.events.models import EventContext

AUTHOR_FIELD = "Author"
COMMIT_FIELD = "Commit"
DIFF_FIELD = "Diff"
COMMITS_FIELD = "Commits"
BRANCH_FIELD = "Branch"


class BuildOutcome(enum.Enum):
    """Sentinel returned instead of a message when nothing should be sent."""

    SKIP = "skip"


SKIP: typ.Final = BuildOutcome.SKIP


def flatten_commit_message(message: str) -> str:
    """Join a multi-line commit message into one line without trailing spaces."""
    return " ".join(message.splitlines()).rstrip()


def render_commit_lines(
    commits: cabc.Sequence[CommitSummary], *, limit: int
) -> str | None:
    """Render up to ``limit`` commits as bullet lines.

    Returns ``None`` for an empty push (tag pushes, branch deletions) so the
    field can be omitted rather than rendered blank.
    """
    if not commits:
        return None

    lines = [
        f"• {flatten_commit_message(commit.message)} [link]({commit.url})"
        f" — {commit.author_name}"
        for commit in commits[:limit]
    ]
    remaining = len(commits) - limit
    if remaining > 0:
        lines.append(f"… and {remaining} more commits")
    return "\n".join(lines)


def _author_field(actor: str) -> EmbedField:
    return EmbedField(name=AUTHOR_FIELD, value=f"**{actor}**", inline=True)


def _push_embeds(ctx: PushEvent, config: NotifierConfig) -> tuple[Embed, ...]:
    fields = [
        _author_field(ctx.actor),
        EmbedField(name=COMMIT_FIELD, value=f"`{ctx.short_sha}`", inline=True),
    ]
    if ctx.compare_url:
        fields.append(
            EmbedField(
                name=DIFF_FIELD, value=f"[View changes]({ctx.compare_url})", inline=True
            )
        )
    commit_lines = render_commit_lines(ctx.commits, limit=config.max_listed_commits)
    if commit_lines is not None:
        fields.append(EmbedField(name=COMMITS_FIELD, value=commit_lines))

    return _embeds(
        ctx,
        config,
        title=f"🚀 Push to {ctx.repository} (@{ctx.ref})",
        url=f"{ctx.server_url}/{ctx.repository}/commit/{ctx.sha}",
        color=EmbedColor.INFO,
        fields=fields,
    )


def pull_request_headline(ctx: PullRequestEvent) -> tuple[str, EmbedColor]:
    """Return the embed title and colour for a pull request action."""
    if ctx.action == "closed" and ctx.merged:
        return (f"✅ PR #{ctx.number} merged — {ctx.title}", EmbedColor.SUCCESS)
    if ctx.action == "closed":
        return (f"⛔️ PR #{ctx.number} closed — {ctx.title}", EmbedColor.WARNING)
    return (f"📦 PR #{ctx.number} {ctx.action} — {ctx.title}", EmbedColor.INFO)


def _pull_request_embeds(
    ctx: PullRequestEvent, config: NotifierConfig
) -> tuple[Embed, ...]:
    title, color = pull_request_headline(ctx)
    fields = [_author_field(ctx.actor)]
    if ctx.head_ref and ctx.base_ref:
        fields.append(
            EmbedField(
                name=BRANCH_FIELD,
                value=f"`{ctx.head_ref}` → `{ctx.base_ref}`",
                inline=True,
            )
        )
    return _embeds(ctx, config, title=title, url=ctx.url, color=color, fields=fields)


def _embeds(  # noqa: PLR0913 - mirrors the embed schema
    ctx: EventContext,
    config: NotifierConfig,
    *,
    title: str,
    url: str,
    color: EmbedColor,
    fields: list[EmbedField],
) -> tuple[Embed, ...]:
    author = EmbedAuthor(
        name=ctx.actor,
        icon_url=config.actor_icon_template.format(actor=ctx.actor),
    )
    embed = Embed(
        title=title,
        url=url,
        color=color,
        timestamp=isoformat_utc(ctx.occurred_at),
        author=author,
        footer=EmbedFooter(text=f"{ctx.repository} • {ctx.kind}"),
        fields=tuple(fields),
    )
    return (embed,)


def build_message(
    ctx: EventContext, config: NotifierConfig | None = None
) -> Message | typ.Literal[BuildOutcome.SKIP]:
    """Build the webhook message for an event.

    Parameters
    ----------
    ctx
        Push or pull request context.
    config
        Formatting policy; defaults apply when omitted.

    Returns
    -------
    Message | BuildOutcome.SKIP
        The message to send, or :data:`SKIP` when the event carries the skip
        marker.

    """
    if ctx.skip:
        return SKIP

    policy = config or NotifierConfig()
    match ctx:
        case PushEvent():
            embeds = _push_embeds(ctx, policy)
        case PullRequestEvent():
            embeds = _pull_request_embeds(ctx, policy)
        case _:
            typ.assert_never(ctx)

    return Message(
        username=policy.username,
        avatar_url=policy.avatar_url,
        embeds=embeds,
        allowed_mentions=AllowedMentions(parse=()),
    )
