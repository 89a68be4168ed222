"""Bionic reading markup for plain text and HTML.

The leading characters of every word are wrapped in ``<b>``/``</b>`` so the
eye can fixate on them while the brain completes the rest.  Words inside HTML
tags and comments are skipped, so markup is never corrupted::

    >>> from bioneer import bionify
    >>> bionify("Hello, World!")
    '<b>Hel</b>lo, <b>Wor</b>ld!'

The command line interface lives in :mod:`bioneer.cli`.
"""

from .fixation import FixationCache, calculate_fixation, get_fixation, length_to_emphasize
from .transform import Bionifier, WordFixation, bionify, bionify_spans

__version__ = "0.1.0"

__all__ = [
    "Bionifier",
    "FixationCache",
    "WordFixation",
    "bionify",
    "bionify_spans",
    "calculate_fixation",
    "get_fixation",
    "length_to_emphasize",
    "__version__",
]
