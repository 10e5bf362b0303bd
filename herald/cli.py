"""Announce the current GitHub Actions push or pull request event to a webhook."""

from __future__ import annotations

import argparse
import os
import typing as typ
from pathlib import Path

from herald.config import NotifierConfig
from herald.discord import SKIP, DeliveryFailedError, encode_message
from herald.errors import HeraldError
from herald.events import load_event_context_from_env
from herald.logging import configure_logging, get_logger, log_error, log_warning
from herald.notifier import Notifier

if typ.TYPE_CHECKING:
    from herald.events import EventContext

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_DELIVERY_FAILED = 1
EXIT_USAGE = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="herald", description=__doc__)
    parser.add_argument(
        "--event-name",
        default=None,
        help="Event name override (default: GITHUB_EVENT_NAME)",
    )
    parser.add_argument(
        "--event-path",
        type=Path,
        default=None,
        help="Event payload JSON override (default: GITHUB_EVENT_PATH)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the webhook payload instead of sending it",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (default: HERALD_LOG_LEVEL or INFO)",
    )
    return parser


def _print_payload(notifier: Notifier, ctx: EventContext) -> None:
    prepared = notifier.prepare(ctx)
    if prepared is SKIP:
        token = notifier.config.skip_token
        print(f"skip marker {token!r} present; nothing would be sent")
        return
    print(encode_message(prepared).decode("utf-8"))


def main(argv: list[str] | None = None) -> int:
    """Run one notification for the triggering CI event.

    Parameters
    ----------
    argv : list[str] | None, optional
        Command-line arguments. ``None`` defaults to ``sys.argv``.

    Returns
    -------
    int
        0 when sent, skipped, not configured or dry-run; 1 when delivery
        failed; 2 when configuration or event metadata is invalid.

    """
    args = _build_parser().parse_args(argv)

    raw_level = args.log_level or os.environ.get("HERALD_LOG_LEVEL")
    level, invalid = configure_logging(raw_level)
    if invalid and raw_level:
        log_warning(logger, "Unknown log level %r; using %s", raw_level, level)

    try:
        config = NotifierConfig.from_env()
        ctx = load_event_context_from_env(
            config.skip_token,
            event_name=args.event_name,
            event_path=args.event_path,
        )
    except HeraldError as exc:
        log_error(logger, "Cannot prepare notification: %s", exc)
        return EXIT_USAGE

    notifier = Notifier(config)
    if args.dry_run:
        _print_payload(notifier, ctx)
        return EXIT_OK

    try:
        notifier.run(ctx)
    except DeliveryFailedError:
        return EXIT_DELIVERY_FAILED
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
