"""Runtime configuration model."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .validation import validate_runtime_constraints

DEFAULT_OUTPUT = "cnames.txt"
DEFAULT_TIMEOUT = 5.0
DEFAULT_WORKERS = os.cpu_count() or 1


@dataclass(frozen=True)
class FinderConfig:
    """Validated configuration used by the resolution pipeline."""

    input_path: str | None = None
    output: str = DEFAULT_OUTPUT
    timeout: float = DEFAULT_TIMEOUT
    workers: int = DEFAULT_WORKERS
    append: bool = False
    dedup: bool = False
    show_progress: bool = False

    def __post_init__(self) -> None:
        validate_runtime_constraints(
            output=self.output,
            timeout=self.timeout,
            workers=self.workers,
        )
