"""Verbatim writer for converted plain-text and HTML output."""

from __future__ import annotations

import os
from pathlib import Path


def write_text(
    path: str | os.PathLike[str],
    text: str,
    *,
    encoding: str = "utf-8",
    newline: str | None = "",
) -> None:
    """Write ``text`` to ``path`` exactly as given.

    Missing parent directories are created.  The default ``newline=""``
    keeps the newline sequences already present in ``text``.
    """

    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    with open(file_path, "w", encoding=encoding, newline=newline) as f:
        f.write(text)


__all__ = ["write_text"]
