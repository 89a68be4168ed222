"""Emphasis markup."""

from __future__ import annotations

__all__ = ["EMPHASIS_OPEN", "EMPHASIS_CLOSE", "highlight", "strip_emphasis"]

EMPHASIS_OPEN = "<b>"
EMPHASIS_CLOSE = "</b>"


def highlight(text: str) -> str:
    """Wrap ``text`` in emphasis tags."""

    return f"{EMPHASIS_OPEN}{text}{EMPHASIS_CLOSE}"


def strip_emphasis(text: str) -> str:
    """Remove every emphasis tag from ``text``.

    Only exact ``<b>`` and ``</b>`` markers are removed; ``<b class="...">``
    and other tags are left alone.
    """

    return text.replace(EMPHASIS_OPEN, "").replace(EMPHASIS_CLOSE, "")
