"""Protocols and lightweight model types."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Protocol


class OutcomeKind(Enum):
    SUCCESS = "success"
    NO_RECORD = "no_record"
    NOT_FOUND = "not_found"
    TIMEOUT = "timeout"
    ERROR = "error"


@dataclass(frozen=True)
class ResolutionOutcome:
    """Classified result of one CNAME lookup."""

    kind: OutcomeKind
    target: str | None = None
    detail: str = ""

    @classmethod
    def success(cls, target: str) -> ResolutionOutcome:
        return cls(OutcomeKind.SUCCESS, target=target)

    @classmethod
    def no_record(cls) -> ResolutionOutcome:
        return cls(OutcomeKind.NO_RECORD)

    @classmethod
    def not_found(cls) -> ResolutionOutcome:
        return cls(OutcomeKind.NOT_FOUND)

    @classmethod
    def timeout(cls) -> ResolutionOutcome:
        return cls(OutcomeKind.TIMEOUT)

    @classmethod
    def error(cls, detail: str) -> ResolutionOutcome:
        return cls(OutcomeKind.ERROR, detail=detail)


@dataclass(frozen=True)
class ResultRecord:
    """A source name paired with its resolution outcome."""

    source: str
    outcome: ResolutionOutcome

    def output_line(self) -> str:
        return f"{self.source} > {self.outcome.target}"


@dataclass(frozen=True)
class StatusEvent:
    """One per processed name, emitted by the collector."""

    record: ResultRecord
    write_error: str | None = None

    @property
    def source(self) -> str:
        return self.record.source

    @property
    def kind(self) -> str:
        if self.write_error is not None:
            return "write_failed"
        return self.record.outcome.kind.value


@dataclass
class PipelineSummary:
    """Per-kind counters for a pipeline run."""

    total: int = 0
    success: int = 0
    no_record: int = 0
    not_found: int = 0
    timeout: int = 0
    error: int = 0
    written: int = 0
    write_failed: int = 0

    def count(self, kind: OutcomeKind) -> None:
        self.total += 1
        setattr(self, kind.value, getattr(self, kind.value) + 1)


class CnameResolver(Protocol):
    """Contract for CNAME lookups."""

    def resolve(self, name: str, timeout: float) -> ResolutionOutcome:
        """Resolve one name within timeout seconds and classify the outcome."""


class Sink(Protocol):
    """Writable text stream receiving result lines."""

    def write(self, text: str) -> int:
        """Write text and return the number of characters written."""


EventCallback = Callable[[StatusEvent], None]
