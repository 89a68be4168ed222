"""Typer-based command line interface for bionic reading conversion.

Commands
--------
``run``    convert a ``.txt``/``.html`` file into another file
``text``   convert a string given on the command line and print it
``words``  list every word with its position, fixation length and whether
           it is emphasized or skipped as markup

Exit codes
----------
0 success
3 I/O error (missing reader/writer, filesystem or encoding issues)
4 configuration error
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from time import perf_counter
from types import TracebackType
from typing import NoReturn, Optional

import typer

from .config import ConfigModel, load_config
from .fixation import FixationCache
from .io import read_file, write_file
from .transform import bionify, bionify_spans
from .utils.errors import UnsupportedFormatError
from .utils.logging import configure_logging, get_logger
from .utils.textspan import build_line_starts, char_to_line_col

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

log = get_logger(__name__)

app = typer.Typer(
    name="bioneer",
    help="Bionic reading markup for text and HTML. Use 'bioneer run' to convert a file.",
)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> NoReturn:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _load(config_path: Path | None, fixation_point: int | None, verbose: bool) -> ConfigModel:
    """Load configuration, apply CLI overrides and set up logging."""

    try:
        cfg = load_config(config_path)
    except Exception as exc:  # yaml, pydantic and filesystem errors alike
        _safe_exit(4, next(iter(str(exc).splitlines()), type(exc).__name__))
    if fixation_point is not None:
        if fixation_point < 0:
            _safe_exit(4, "--fixation-point must be non-negative")
        cfg = cfg.model_copy(deep=True)
        cfg.fixation.point = fixation_point
    configure_logging("DEBUG" if verbose else cfg.logging.level)
    log.debug("loaded config: fixation point %d", cfg.fixation.point)
    return cfg


def _read(path: Path, cfg: ConfigModel) -> str:
    try:
        return read_file(path, encoding=cfg.io.encoding_in)
    except (UnsupportedFormatError, OSError, LookupError, UnicodeError) as exc:
        _safe_exit(3, str(exc))


class Timing:
    """Context manager measuring elapsed milliseconds."""

    def __init__(self) -> None:
        self._start = 0.0
        self._end = 0.0

    def __enter__(self) -> "Timing":
        self._start = perf_counter()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self._end = perf_counter()

    @property
    def ms(self) -> float:
        return (self._end - self._start) * 1000.0


_CONFIG_OPTION = typer.Option(None, "--config", help="YAML config to override defaults")
_FIXATION_OPTION = typer.Option(
    None, "--fixation-point", "-f", help="Boundary profile index (unknown values use 0)"
)
_VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Log progress to stderr")


@app.callback()
def main() -> None:
    """Entry point for the bioneer command group."""
    pass


@app.command()
def run(  # noqa: PLR0913
    in_path: Path = typer.Option(  # noqa: B008
        ..., "--in", "--input", help="Input file (.txt, .html or .htm)"
    ),
    out_path: Path = typer.Option(..., "--out", help="Output file (.txt, .html or .htm)"),  # noqa: B008
    config_path: Optional[Path] = _CONFIG_OPTION,  # noqa: B008
    fixation_point: Optional[int] = _FIXATION_OPTION,  # noqa: B008
    encoding_in: Optional[str] = typer.Option(None, help="Input file encoding"),  # noqa: B008
    encoding_out: Optional[str] = typer.Option(None, help="Output file encoding"),  # noqa: B008
    verbose: bool = _VERBOSE_OPTION,  # noqa: B008
) -> None:
    """Convert ``in_path`` to bionic reading markup and write ``out_path``."""

    cfg = _load(config_path, fixation_point, verbose)
    if encoding_in is not None:
        cfg.io.encoding_in = encoding_in
    if encoding_out is not None:
        cfg.io.encoding_out = encoding_out

    text = _read(in_path, cfg)
    log.debug("read %d chars from %s", len(text), in_path)

    cache = FixationCache(lock_timeout=cfg.cache.lock_timeout)
    with Timing() as t_convert:
        converted = bionify(text, cfg.fixation.point, cache=cache)
    log.debug(
        "converted in %.1f ms (%d distinct words, %d cache hits)",
        t_convert.ms,
        len(cache),
        cache.hits,
    )

    try:
        # out_path must not be created when the text cannot be encoded
        converted.encode(cfg.io.encoding_out)
        write_file(out_path, converted, encoding=cfg.io.encoding_out)
    except (UnsupportedFormatError, OSError, LookupError, UnicodeError) as exc:
        _safe_exit(3, str(exc))
    log.debug("wrote %s", out_path)


@app.command()
def text(
    value: str = typer.Argument(..., help="Text or HTML to convert"),  # noqa: B008
    config_path: Optional[Path] = _CONFIG_OPTION,  # noqa: B008
    fixation_point: Optional[int] = _FIXATION_OPTION,  # noqa: B008
    verbose: bool = _VERBOSE_OPTION,  # noqa: B008
) -> None:
    """Print ``value`` converted to bionic reading markup."""

    cfg = _load(config_path, fixation_point, verbose)
    cache = FixationCache(lock_timeout=cfg.cache.lock_timeout)
    typer.echo(bionify(value, cfg.fixation.point, cache=cache))


@app.command()
def words(
    in_path: Path = typer.Option(..., "--in", "--input", help="Input file"),  # noqa: B008
    config_path: Optional[Path] = _CONFIG_OPTION,  # noqa: B008
    fixation_point: Optional[int] = _FIXATION_OPTION,  # noqa: B008
    verbose: bool = _VERBOSE_OPTION,  # noqa: B008
) -> None:
    """List the words of ``in_path`` as ``line:col  word  fixation  emph|skip``."""

    cfg = _load(config_path, fixation_point, verbose)
    source = _read(in_path, cfg)
    line_starts = build_line_starts(source)
    cache = FixationCache(lock_timeout=cfg.cache.lock_timeout)
    for word in bionify_spans(source, cfg.fixation.point, cache=cache):
        line, col = char_to_line_col(word.span.start, line_starts)
        status = "skip" if word.skipped else "emph"
        typer.echo(f"{line + 1}:{col + 1}\t{word.span.text}\t{word.fixation}\t{status}")
