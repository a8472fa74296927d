"""Reading name lists and opening the result file."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TextIO

from .errors import InputError, OutputError
from .validation import parse_names

STDIN_MARKER = "-"


def _parse_stdin(stream: TextIO) -> list[str]:
    try:
        return parse_names(stream)
    except UnicodeDecodeError as exc:
        raise InputError(f"Error reading input from stdin: {exc}") from exc


def read_names(
    path: str | None,
    *,
    stdin: TextIO | None = None,
    logger: logging.Logger,
) -> list[str]:
    """Load and clean every name from a file, ``-`` for stdin, or piped stdin.

    With no path, stdin is only read when it is not a terminal.
    """
    stream = stdin if stdin is not None else sys.stdin
    if path == STDIN_MARKER:
        logger.info("Reading subdomains from stdin (explicit '-')")
        return _parse_stdin(stream)
    if path:
        try:
            with Path(path).open(encoding="utf-8") as file_obj:
                return parse_names(file_obj)
        except (OSError, UnicodeDecodeError) as exc:
            raise InputError(f"Error opening input file {path}: {exc}") from exc
    if stream.isatty():
        raise InputError("No input specified. Provide -l <file> or pipe data to stdin.")
    logger.info("Reading subdomains from stdin (piped data)")
    return _parse_stdin(stream)


def open_output(path: str, *, append: bool = False) -> TextIO:
    """Open the result file for writing, creating its directory first."""
    output_path = Path(path)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        return output_path.open("a" if append else "w", encoding="utf-8")
    except OSError as exc:
        raise OutputError(f"Error opening output file {path}: {exc}") from exc
