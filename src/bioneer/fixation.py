"""Fixation lengths: how many leading characters of a word to emphasize.

Each fixation point selects a boundary profile, an ascending list of word
lengths.  The position of the first boundary that is at least as large as
the word length says how many trailing characters stay plain; everything
before that is emphasized.  Words longer than every boundary keep a fixed
number of emphasized characters (the profile length).

:class:`FixationCache` memoizes the result per word.  Lookups and inserts
share one lock; when the lock cannot be acquired within ``lock_timeout`` the
value is computed directly and not stored.
"""

from __future__ import annotations

import threading

from bioneer.utils.logging import get_logger

__all__ = [
    "FIXATION_BOUNDARY_LIST",
    "FixationCache",
    "DEFAULT_CACHE",
    "boundary_profile",
    "length_to_emphasize",
    "calculate_fixation",
    "get_fixation",
]

log = get_logger(__name__)

# Editorial dataset; profile 3 contains a stray 0 and is kept as published.
FIXATION_BOUNDARY_LIST: tuple[tuple[int, ...], ...] = (
    (0, 4, 12, 17, 24, 29, 35, 42, 48),
    (1, 2, 7, 10, 13, 14, 19, 22, 25, 28, 31, 34, 37, 40, 43, 46, 49),
    (
        1, 2, 5, 7, 9, 11, 13, 15, 17, 19, 21, 23, 25, 27, 29, 31, 33, 35, 37, 39,
        41, 43, 45, 47, 49,
    ),
    (
        0, 2, 4, 5, 6, 8, 9, 11, 14, 15, 17, 18, 20, 0, 21, 23, 24, 26, 27, 29, 30,
        32, 33, 35, 36, 38, 39, 41, 42, 44, 45, 47, 48,
    ),
    (
        0, 2, 3, 5, 6, 7, 8, 10, 11, 12, 14, 15, 17, 19, 20, 21, 23, 24, 25, 26, 28,
        29, 30, 32, 33, 34, 35, 37, 38, 39, 41, 42, 43, 44, 46, 47, 48,
    ),
)  # fmt: skip


def boundary_profile(fixation_point: int) -> tuple[int, ...]:
    """Return the profile for ``fixation_point``, falling back to profile 0."""

    if 0 <= fixation_point < len(FIXATION_BOUNDARY_LIST):
        return FIXATION_BOUNDARY_LIST[fixation_point]
    return FIXATION_BOUNDARY_LIST[0]


def length_to_emphasize(word_length: int, fixation_point: int = 0) -> int:
    """Return how many leading characters of a ``word_length`` word to emphasize."""

    profile = boundary_profile(fixation_point)
    plain = next(
        (idx for idx, boundary in enumerate(profile) if word_length <= boundary),
        max(0, word_length - len(profile)),
    )
    return max(0, word_length - plain)


def calculate_fixation(word: str, fixation_point: int = 0) -> int:
    """Return the fixation length of ``word`` counted in characters."""

    return length_to_emphasize(len(word), fixation_point)


class FixationCache:
    """Thread-safe memo of fixation lengths keyed by word.

    The key is the word alone.  A cache instance therefore assumes a single
    fixation point; callers mixing fixation points should keep one cache per
    point, otherwise the first computed value is returned for later points.

    Parameters
    ----------
    lock_timeout:
        Seconds to wait for the lock before computing without the cache.
    lock:
        Optional lock to guard the map, e.g. one shared with the embedding
        application.  Defaults to a fresh :class:`threading.Lock`.
    """

    def __init__(self, lock_timeout: float = 1.0, lock: threading.Lock | None = None) -> None:
        if lock_timeout <= 0:
            raise ValueError("lock_timeout must be positive")
        self.lock_timeout = lock_timeout
        self._lock = lock if lock is not None else threading.Lock()
        self._entries: dict[str, int] = {}
        self.hits = 0
        self.misses = 0

    def get(self, word: str, fixation_point: int = 0) -> int:
        """Return the fixation length of ``word``, computing it on first sight."""

        if not self._lock.acquire(timeout=self.lock_timeout):
            log.debug("fixation cache lock unavailable; computing %r uncached", word)
            return calculate_fixation(word, fixation_point)
        try:
            fixation = self._entries.get(word)
            if fixation is None:
                fixation = calculate_fixation(word, fixation_point)
                self._entries[word] = fixation
                self.misses += 1
            else:
                self.hits += 1
            return fixation
        finally:
            self._lock.release()

    def clear(self) -> None:
        """Drop every entry and reset the hit/miss counters."""

        with self._lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, word: object) -> bool:
        with self._lock:
            return word in self._entries

    def __repr__(self) -> str:
        return (
            f"FixationCache(entries={len(self._entries)}, hits={self.hits}, "
            f"misses={self.misses})"
        )


DEFAULT_CACHE = FixationCache()


def get_fixation(word: str, fixation_point: int = 0) -> int:
    """Return the memoized fixation length of ``word`` from :data:`DEFAULT_CACHE`."""

    return DEFAULT_CACHE.get(word, fixation_point)
