"""Extension based registry for file I/O.

Plain text (``.txt``) and HTML (``.html``, ``.htm``) are registered by
default; both are read and written verbatim since the converter operates on
raw markup.  ``UnsupportedFormatError`` is raised when a file's extension has
no registered handler.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Callable

from ..utils.errors import UnsupportedFormatError
from .readers.text_reader import read_text
from .writers.text_writer import write_text

_READERS: dict[str, Callable[..., str]] = {}
_WRITERS: dict[str, Callable[..., None]] = {}

DEFAULT_EXTENSIONS: tuple[str, ...] = (".txt", ".html", ".htm")


def register_reader(ext: str, func: Callable[..., str]) -> None:
    """Register a reader for files ending with ``ext``.

    Parameters
    ----------
    ext:
        File extension including the dot (e.g. ``".txt"``).  Matching is
        case-insensitive.
    func:
        Callable that reads a file and returns a string.
    """

    _READERS[ext.lower()] = func


def register_writer(ext: str, func: Callable[..., None]) -> None:
    """Register a writer for files ending with ``ext``."""

    _WRITERS[ext.lower()] = func


def get_extension(path: str | os.PathLike[str]) -> str:
    """Return the lower-cased file extension of ``path`` (including the dot)."""

    suffix = Path(path).suffix
    return suffix.lower() if suffix else ""


def read_file(path: str | os.PathLike[str], **kwargs: Any) -> str:
    """Read ``path`` with the reader registered for its extension.

    Raises
    ------
    UnsupportedFormatError
        If no reader is registered for the file extension.
    """

    ext = get_extension(path)
    reader = _READERS.get(ext)
    if reader is None:
        raise UnsupportedFormatError(f"Unsupported file extension: '{ext}'") from None
    return reader(path, **kwargs)


def write_file(path: str | os.PathLike[str], text: str, **kwargs: Any) -> None:
    """Write ``text`` to ``path`` with the writer registered for its extension.

    Raises
    ------
    UnsupportedFormatError
        If no writer is registered for the file extension.
    """

    ext = get_extension(path)
    writer = _WRITERS.get(ext)
    if writer is None:
        raise UnsupportedFormatError(f"Unsupported file extension: '{ext}'") from None
    writer(path, text, **kwargs)


for _ext in DEFAULT_EXTENSIONS:
    register_reader(_ext, read_text)
    register_writer(_ext, write_text)

__all__ = [
    "DEFAULT_EXTENSIONS",
    "register_reader",
    "register_writer",
    "get_extension",
    "read_file",
    "write_file",
]
