"""Word tokenizer.

A word is a maximal run of letters (Unicode ``L*``) and decimal digits
(``Nd``) containing at least one letter.  Runs of ``\\w`` characters are
found with a regular expression and then split on anything else ``\\w``
admits, such as the underscore, superscript digits or Roman numerals.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from itertools import groupby

from bioneer.utils.textspan import Span

__all__ = ["CANDIDATE_RX", "is_word_char", "iter_words"]

CANDIDATE_RX: re.Pattern[str] = re.compile(r"[^\W_]+")


def is_word_char(char: str) -> bool:
    """Return ``True`` for letters and decimal digits."""

    return char.isalpha() or char.isdecimal()


def iter_words(text: str) -> Iterator[Span]:
    """Yield word spans of ``text`` from left to right."""

    for match in CANDIDATE_RX.finditer(text):
        pos = match.start()
        for keep, group in groupby(match.group(), key=is_word_char):
            chunk = "".join(group)
            if keep and any(char.isalpha() for char in chunk):
                yield Span(pos, pos + len(chunk), chunk)
            pos += len(chunk)
