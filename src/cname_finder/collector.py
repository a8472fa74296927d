"""Serialized consumer that owns the output sink."""

from __future__ import annotations

import logging

from .models import (
    EventCallback,
    OutcomeKind,
    PipelineSummary,
    ResultRecord,
    Sink,
    StatusEvent,
)
from .queues import ClosableQueue


class ResultCollector:
    """Drain result records, write successes to the sink and emit status events.

    Only the thread running :meth:`run` touches the sink and the summary.
    """

    def __init__(
        self,
        *,
        sink: Sink,
        logger: logging.Logger,
        on_event: EventCallback | None = None,
    ) -> None:
        self._sink = sink
        self._logger = logger
        self._on_event = on_event
        self.summary = PipelineSummary()

    def handle(self, record: ResultRecord) -> StatusEvent:
        """Classify one record and perform its side effects."""
        outcome = record.outcome
        self.summary.count(outcome.kind)
        write_error: str | None = None
        if outcome.kind is OutcomeKind.SUCCESS:
            try:
                self._sink.write(record.output_line() + "\n")
                self.summary.written += 1
            except OSError as exc:
                write_error = str(exc) or type(exc).__name__
                self.summary.write_failed += 1
                self._logger.warning("Failed writing result for %s: %s", record.source, exc)

        event = StatusEvent(record=record, write_error=write_error)
        self._logger.debug("%s -> %s", record.source, event.kind)
        if self._on_event is not None:
            self._on_event(event)
        return event

    def run(self, results: ClosableQueue[ResultRecord]) -> PipelineSummary:
        """Consume until the result channel is closed and drained."""
        for record in results:
            self.handle(record)
        return self.summary
