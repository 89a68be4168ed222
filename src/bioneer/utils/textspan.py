"""Utility types and functions for working with text spans.

The helpers in this module are pure and framework agnostic.  Spans are
represented as half‑open intervals ``[start, end)`` over ``str`` code points
where ``start`` is inclusive and ``end`` is exclusive.  Boundary touching
spans therefore do not overlap.
"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass

from bioneer.utils.errors import SpanOutOfBoundsError

__all__ = [
    "Span",
    "build_line_starts",
    "char_to_line_col",
]


@dataclass(slots=True, frozen=True)
class Span:
    """A half-open ``[start, end)`` slice of some input text.

    ``text`` holds the covered characters so consumers never need to slice
    the source again.
    """

    start: int
    end: int
    text: str

    def __post_init__(self) -> None:  # noqa: D401 - simple validation
        if self.start < 0 or self.end < self.start:
            raise SpanOutOfBoundsError(f"invalid span [{self.start}, {self.end})")
        if len(self.text) != self.end - self.start:
            raise SpanOutOfBoundsError(
                f"span [{self.start}, {self.end}) does not match text of length {len(self.text)}"
            )

    @property
    def length(self) -> int:
        """Return span length in characters."""

        return self.end - self.start


def build_line_starts(text: str) -> tuple[int, ...]:
    """Return the starting character index for each line in ``text``."""

    starts = [0]
    for idx, char in enumerate(text):
        if char == "\n":
            starts.append(idx + 1)
    return tuple(starts)


def char_to_line_col(index: int, line_starts: tuple[int, ...]) -> tuple[int, int]:
    """Convert a character index to ``(line, col)`` using ``line_starts``.

    Line and column numbers are zero‑based.
    """

    if index < 0:
        raise ValueError("index must be non‑negative")
    line = bisect_right(line_starts, index) - 1
    if line < 0:
        line = 0
    col = index - line_starts[line]
    return line, col
