"""Bionic reading conversion.

:func:`bionify` walks the input once.  Every word outside HTML tags and
comments gets its leading characters wrapped in ``<b>``/``</b>``; all other
text, including the markup itself, is copied through unchanged.  Removing the
inserted markers therefore reproduces the input exactly.

Offsets are ``str`` indices, so a prefix never ends inside a multi-byte
character.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from bioneer.fixation import DEFAULT_CACHE, FixationCache
from bioneer.highlight import highlight
from bioneer.html_filter import HtmlBoundaryFilter
from bioneer.utils.textspan import Span
from bioneer.words import iter_words

__all__ = ["WordFixation", "bionify_spans", "bionify", "Bionifier"]


@dataclass(slots=True, frozen=True)
class WordFixation:
    """A word found in the input and what the conversion does with it.

    ``fixation`` is ``0`` for words inside markup, which are never emphasized.
    """

    span: Span
    fixation: int
    skipped: bool

    @property
    def prefix(self) -> str:
        """Return the emphasized part of the word."""

        return self.span.text[: self.fixation]


def bionify_spans(
    text: str, fixation_point: int = 0, *, cache: FixationCache | None = None
) -> Iterator[WordFixation]:
    """Yield a :class:`WordFixation` for every word of ``text`` in order."""

    cache = cache if cache is not None else DEFAULT_CACHE
    html = HtmlBoundaryFilter.from_text(text)
    for span in iter_words(text):
        if html.is_inside(span):
            yield WordFixation(span, 0, True)
            continue
        yield WordFixation(span, cache.get(span.text, fixation_point), False)


def bionify(text: str, fixation_point: int = 0, *, cache: FixationCache | None = None) -> str:
    """Return ``text`` with the fixation prefix of every word emphasized.

    Parameters
    ----------
    text:
        Plain text or HTML.  Words inside tags and comments are left alone.
    fixation_point:
        Boundary profile index; unknown indices use profile ``0``.
    cache:
        Fixation cache to consult.  Defaults to the process-wide
        :data:`~bioneer.fixation.DEFAULT_CACHE`.
    """

    parts: list[str] = []
    cursor = 0
    for word in bionify_spans(text, fixation_point, cache=cache):
        if word.skipped:
            continue
        start = word.span.start
        parts.append(text[cursor:start])
        if word.fixation:
            parts.append(highlight(text[start : start + word.fixation]))
        cursor = start + word.fixation
    parts.append(text[cursor:])
    return "".join(parts)


class Bionifier:
    """Callable converter bound to one fixation point and its own cache.

    Example
    -------
    ``Bionifier()("Hello, World!")`` returns ``"<b>Hel</b>lo, <b>Wor</b>ld!"``.
    """

    def __init__(self, fixation_point: int = 0, cache: FixationCache | None = None) -> None:
        self.fixation_point = fixation_point
        self.cache = cache if cache is not None else FixationCache()

    def __call__(self, text: str) -> str:
        return bionify(text, self.fixation_point, cache=self.cache)

    def words(self, text: str) -> Iterator[WordFixation]:
        """Yield the per-word decisions :meth:`__call__` would make for ``text``."""

        return bionify_spans(text, self.fixation_point, cache=self.cache)
