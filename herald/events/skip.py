"""Skip-marker detection for commit messages and pull request titles."""

from __future__ import annotations


def is_skip_requested(text: str | None, token: str) -> bool:
    """Return True when ``text`` contains ``token``, ignoring case.

    A blank token never matches, so an empty policy cannot silence every
    notification.

    Examples
    --------
    >>> is_skip_requested("Fix typo [Skip-Notify]", "[skip-notify]")
    True
    >>> is_skip_requested("Fix typo", "[skip-notify]")
    False

    """
    needle = token.strip().casefold()
    if not text or not needle:
        return False
    return needle in text.casefold()
