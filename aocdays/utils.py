"""Small helpers shared by the puzzle solutions."""

from __future__ import annotations

import time
from pathlib import Path

_WHITESPACE = " \t\n\v\f\r"


def trim(text: str) -> str:
    """Return ``text`` without leading and trailing ASCII whitespace."""
    return text.strip(_WHITESPACE)


def split_string(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty pieces."""
    return [part for part in text.split(sep) if part]


def read_lines(path: str | Path) -> list[str]:
    """Read a text file and return its lines without line terminators.

    A trailing newline at the end of the file does not produce an extra
    empty line; empty lines elsewhere are kept.
    """
    with open(path, encoding="utf-8") as handle:
        return handle.read().splitlines()


class Timer:
    """Measures wall-clock time, in seconds, since creation or the last reset."""

    def __init__(self) -> None:
        self._start = time.perf_counter()

    def reset(self) -> None:
        """Restart the measurement from now."""
        self._start = time.perf_counter()

    def elapsed(self) -> float:
        """Seconds passed since creation or the last reset."""
        return time.perf_counter() - self._start