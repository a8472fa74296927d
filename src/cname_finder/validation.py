"""Name normalization and runtime guardrails."""

from __future__ import annotations

import re
from collections.abc import Iterable

from .errors import ConfigError

_SCHEMES = ("http://", "https://")
_NUMBER_RE = re.compile(r"\d+(?:\.\d*)?|\.\d+")
_DURATION_PART_RE = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|\u00b5s|\u03bcs|ms|s|m|h)")
_DURATION_UNITS = {
    "ns": 1e-9,
    "us": 1e-6,
    "\u00b5s": 1e-6,
    "\u03bcs": 1e-6,
    "ms": 0.001,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}


def normalize(name: str) -> str:
    """Trim whitespace and strip one trailing dot."""
    value = name.strip()
    if value.endswith("."):
        value = value[:-1]
    return value


def strip_scheme(value: str) -> str:
    """Drop an http(s) scheme prefix and trailing slashes."""
    value = value.strip()
    for scheme in _SCHEMES:
        if value.lower().startswith(scheme):
            value = value[len(scheme) :]
            break
    return value.rstrip("/")


def clean_line(line: str) -> str | None:
    """Return the candidate name held by an input line, or None to skip it."""
    value = line.strip()
    if not value or value.startswith("#"):
        return None
    value = strip_scheme(value.lower())
    return value or None


def parse_names(lines: Iterable[str]) -> list[str]:
    """Filter blank and comment lines and normalize the rest."""
    names: list[str] = []
    for line in lines:
        name = clean_line(line)
        if name is not None:
            names.append(name)
    return names


def dedupe_names(names: Iterable[str]) -> list[str]:
    """Drop repeated names, keeping the first occurrence."""
    output: list[str] = []
    seen: set[str] = set()
    for name in names:
        key = normalize(name)
        if key in seen:
            continue
        seen.add(key)
        output.append(name)
    return output


def parse_duration(value: str) -> float:
    """Parse Go-style durations such as ``5s``, ``500ms`` or ``1m30s`` into seconds.

    A bare number is read as seconds.
    """
    text = value.strip()
    if _NUMBER_RE.fullmatch(text):
        return float(text)
    total = 0.0
    position = 0
    for match in _DURATION_PART_RE.finditer(text):
        if match.start() != position:
            break
        amount, unit = match.groups()
        total += float(amount) * _DURATION_UNITS[unit]
        position = match.end()
    if not text or position != len(text):
        raise ConfigError(f"invalid duration {value!r} (use e.g. 3s, 500ms, 1m30s)")
    return total


def validate_runtime_constraints(*, output: str, timeout: float, workers: int) -> None:
    """Validate CLI/runtime configuration and raise ConfigError on invalid values."""
    if not output or not output.strip():
        raise ConfigError("-o/--output must not be empty.")
    if timeout <= 0:
        raise ConfigError("--timeout must be > 0.")
    if workers < 1:
        raise ConfigError("-t/--threads must be >= 1.")
