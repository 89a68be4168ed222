"""HTML boundary filter.

The filter is not an HTML parser.  It scans the input once for comments
(``<!-- ... -->``, spanning newlines) and tags (``<...>`` without a nested
``>``) and remembers each match as ``(start, last)`` where ``last`` is the
index of the construct's final character.  A candidate offset ``s`` is inside
markup when the nearest construct starting strictly before ``s`` has
``s < last``.

Stray ``<`` or ``>`` characters and unterminated tags never match the
pattern and are therefore treated as ordinary text.
"""

from __future__ import annotations

import re
from bisect import bisect_left
from dataclasses import dataclass, field

from bioneer.utils.textspan import Span

__all__ = ["HTML_CONSTRUCT_RX", "HtmlBoundaryFilter", "build_html_filter"]

HTML_CONSTRUCT_RX: re.Pattern[str] = re.compile(r"(<!--[\s\S]*?-->)|(<[^>]*>)")


@dataclass(slots=True, frozen=True)
class HtmlBoundaryFilter:
    """Tag and comment ranges of one input text.

    ``ranges`` is ascending and non-overlapping, as produced by
    :meth:`from_text`.
    """

    ranges: tuple[tuple[int, int], ...] = ()
    _starts: tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_starts", tuple(start for start, _ in self.ranges))

    @classmethod
    def from_text(cls, text: str) -> HtmlBoundaryFilter:
        """Scan ``text`` for tags and comments."""

        ranges = tuple(
            (match.start(), match.end() - 1) for match in HTML_CONSTRUCT_RX.finditer(text)
        )
        return cls(ranges)

    def is_inside(self, candidate: Span | int) -> bool:
        """Return ``True`` if ``candidate`` starts inside a tag or comment."""

        start = candidate if isinstance(candidate, int) else candidate.start
        idx = bisect_left(self._starts, start) - 1
        if idx < 0:
            return False
        return start < self.ranges[idx][1]

    def __len__(self) -> int:
        return len(self.ranges)


def build_html_filter(text: str) -> HtmlBoundaryFilter:
    """Return the :class:`HtmlBoundaryFilter` for ``text``."""

    return HtmlBoundaryFilter.from_text(text)
