"""Core orchestration pipeline."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from concurrent.futures import Future, ThreadPoolExecutor, wait
from enum import Enum
from typing import TextIO

from rich.console import Console
from tqdm import tqdm

from .collector import ResultCollector
from .config import FinderConfig
from .errors import PipelineError
from .io_text import open_output, read_names
from .models import (
    CnameResolver,
    EventCallback,
    PipelineSummary,
    ResolutionOutcome,
    ResultRecord,
    Sink,
    StatusEvent,
)
from .presentation import render_event
from .queues import ClosableQueue
from .resolver import DnsCnameResolver
from .validation import dedupe_names


class PipelineState(Enum):
    IDLE = "idle"
    WORKERS_RUNNING = "workers_running"
    FEEDING = "feeding"
    DRAINING = "draining"
    DONE = "done"


class CnamePipeline:
    """Fan names out to resolver threads and fan results into one collector.

    Shutdown order matters: the job queue is closed only after the last name
    is put, the result channel is closed only after every worker returned, and
    the run ends when the collector has drained the result channel.
    """

    def __init__(
        self,
        *,
        resolver: CnameResolver,
        sink: Sink,
        workers: int,
        timeout: float,
        logger: logging.Logger,
        on_event: EventCallback | None = None,
    ) -> None:
        if workers < 1:
            raise PipelineError("workers must be >= 1")
        self._resolver = resolver
        self._workers = workers
        self._timeout = timeout
        self._logger = logger
        self._collector = ResultCollector(sink=sink, logger=logger, on_event=on_event)
        self._jobs: ClosableQueue[str] = ClosableQueue()
        self._results: ClosableQueue[ResultRecord] = ClosableQueue()
        self.state = PipelineState.IDLE

    def _resolve_one(self, name: str) -> ResultRecord:
        try:
            outcome = self._resolver.resolve(name, self._timeout)
        except Exception as exc:
            self._logger.debug("Resolver raised for %s", name, exc_info=True)
            outcome = ResolutionOutcome.error(str(exc) or type(exc).__name__)
        return ResultRecord(source=name, outcome=outcome)

    def _work(self) -> None:
        for name in self._jobs:
            self._results.put(self._resolve_one(name))

    def run(self, names: Sequence[str]) -> PipelineSummary:
        """Resolve every name and block until all results are collected."""
        if self.state is not PipelineState.IDLE:
            raise PipelineError(f"pipeline already used (state: {self.state.value})")

        self._logger.info("Resolving %d names with %d workers", len(names), self._workers)
        with ThreadPoolExecutor(max_workers=1) as collector_pool, ThreadPoolExecutor(
            max_workers=self._workers
        ) as worker_pool:
            collector = collector_pool.submit(self._collector.run, self._results)
            workers: list[Future[None]] = []
            try:
                for _ in range(self._workers):
                    workers.append(worker_pool.submit(self._work))
                self.state = PipelineState.WORKERS_RUNNING

                self.state = PipelineState.FEEDING
                for name in names:
                    self._jobs.put(name)
            finally:
                # Workers that did start must see the close, even if submit() failed.
                self._jobs.close()
                self.state = PipelineState.DRAINING
                try:
                    wait(workers)
                finally:
                    self._results.close()

            for future in workers:
                future.result()
            summary = collector.result()

        self.state = PipelineState.DONE
        return summary


def resolve_names(
    names: Sequence[str],
    *,
    resolver: CnameResolver,
    sink: Sink,
    workers: int,
    timeout: float,
    logger: logging.Logger,
    on_event: EventCallback | None = None,
) -> PipelineSummary:
    """Run one pipeline over names and return its summary."""
    pipeline = CnamePipeline(
        resolver=resolver,
        sink=sink,
        workers=workers,
        timeout=timeout,
        logger=logger,
        on_event=on_event,
    )
    return pipeline.run(names)


def _log_summary(summary: PipelineSummary, logger: logging.Logger) -> None:
    logger.info(
        "Processed %d names: %d CNAMEs, %d without CNAME, %d not found, %d timeouts, %d errors",
        summary.total,
        summary.success,
        summary.no_record,
        summary.not_found,
        summary.timeout,
        summary.error,
    )
    if summary.write_failed:
        logger.warning("%d results could not be written", summary.write_failed)


def run_pipeline(
    config: FinderConfig,
    *,
    logger: logging.Logger,
    stdin: TextIO | None = None,
    console: Console | None = None,
    resolver: CnameResolver | None = None,
) -> PipelineSummary:
    """Build concrete dependencies, read input, resolve and write the output file."""
    out = console or Console(highlight=False, soft_wrap=True)
    names = read_names(config.input_path, stdin=stdin, logger=logger)
    if config.dedup:
        names = dedupe_names(names)
    with open_output(config.output, append=config.append) as sink:
        if not names:
            out.print("[-] No subdomains found in input, exiting.", style="cyan")
            return PipelineSummary()

        active_resolver = resolver if resolver is not None else DnsCnameResolver()
        if config.show_progress:
            with tqdm(total=len(names), desc="resolving", unit="name") as bar:

                def on_event(_event: StatusEvent) -> None:
                    bar.update(1)

                summary = resolve_names(
                    names,
                    resolver=active_resolver,
                    sink=sink,
                    workers=config.workers,
                    timeout=config.timeout,
                    logger=logger,
                    on_event=on_event,
                )
        else:
            summary = resolve_names(
                names,
                resolver=active_resolver,
                sink=sink,
                workers=config.workers,
                timeout=config.timeout,
                logger=logger,
                on_event=lambda event: out.print(render_event(event), soft_wrap=True),
            )

    _log_summary(summary, logger)
    return summary
