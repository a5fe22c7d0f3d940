# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Slack-Summary-Bot contributors

"""Thread-pool runner for work that continues after a trigger is acknowledged."""

import threading
import time
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Callable

from summarybot_logging import Logger


class BackgroundRunner:
    """Runs submitted jobs on worker threads and logs each job's outcome.

    Every job ends in exactly one structured log entry: "Background task
    completed" or "Background task failed", carrying the job name, its
    duration and the context passed at submission.
    """

    def __init__(self, max_workers: int, logger: Logger):
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self.logger = logger
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers,
            thread_name_prefix="summary-bot",
        )
        self._lock = threading.Lock()

        # Stats
        self.tasks_submitted = 0
        self.tasks_completed = 0
        self.tasks_failed = 0
        self.tasks_in_flight = 0

    def submit(self, name: str, fn: Callable[..., Any], *args: Any, **context: Any) -> Future:
        """Schedule ``fn(*args)``; ``context`` is attached to the outcome log entry."""
        with self._lock:
            self.tasks_submitted += 1
            self.tasks_in_flight += 1

        started = time.monotonic()
        future = self._executor.submit(fn, *args)
        future.add_done_callback(lambda f: self._on_done(name, started, context, f))
        return future

    def _on_done(self, name: str, started: float, context: dict[str, Any], future: Future) -> None:
        duration_ms = int((time.monotonic() - started) * 1000)
        error = future.exception()

        with self._lock:
            self.tasks_in_flight -= 1
            if error is None:
                self.tasks_completed += 1
            else:
                self.tasks_failed += 1

        if error is None:
            self.logger.info(
                "Background task completed",
                task=name,
                outcome="completed",
                result=future.result(),
                duration_ms=duration_ms,
                **context,
            )
        else:
            self.logger.error(
                "Background task failed",
                task=name,
                outcome="failed",
                error_type=type(error).__name__,
                error=str(error),
                duration_ms=duration_ms,
                **context,
            )

    def get_stats(self) -> dict[str, int]:
        with self._lock:
            return {
                "tasks_submitted": self.tasks_submitted,
                "tasks_completed": self.tasks_completed,
                "tasks_failed": self.tasks_failed,
                "tasks_in_flight": self.tasks_in_flight,
            }

    def shutdown(self, wait: bool = True) -> None:
        """Stop accepting work; by default waits for in-flight jobs."""
        self.logger.info("Shutting down background runner", wait=wait)
        self._executor.shutdown(wait=wait)
