"""Verbatim reader for plain-text and HTML files.

HTML is read as raw text: conversion works on the markup itself, so the
reader must not parse, decode entities or touch whitespace.  Newlines are
kept exactly as stored (``newline=""``) and a UTF-8 byte-order mark is
dropped by the default ``"utf-8-sig"`` codec.  ``FileNotFoundError`` and
other I/O errors propagate to the caller.
"""

from __future__ import annotations

import os


def read_text(
    path: str | os.PathLike[str],
    *,
    encoding: str = "utf-8-sig",
    errors: str = "strict",
) -> str:
    """Return the contents of ``path`` without newline translation.

    Parameters
    ----------
    path:
        File to read.
    encoding:
        Text encoding; the default consumes a UTF-8 BOM when present.
    errors:
        Decoding error strategy passed to :func:`open`.
    """

    with open(path, "r", encoding=encoding, errors=errors, newline="") as f:
        return f.read()


__all__ = ["read_text"]
