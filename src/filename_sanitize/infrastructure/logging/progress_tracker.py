#!/usr/bin/env python3

"""Progress tracking for batch sanitization runs."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from time import time


class ProgressTracker:
    """
    Track and report progress while sanitizing a batch of names.

    Counts successes and failures, times operations and logs a summary
    once the batch is done.
    """

    def __init__(self, logger: logging.Logger, total: int = 0):
        """
        Initialize progress tracker.

        Args:
            logger: Logger instance for progress reporting
            total: Number of names expected in the batch
        """
        self.logger = logger
        self.total = total
        self.start_time = time()
        self.processed = 0
        self.succeeded = 0
        self.failures: list[tuple[str, str]] = []
        self.operation_stack: list[tuple[str, float]] = []

    @contextmanager
    def track_operation(self, operation_name: str) -> Iterator[None]:
        """
        Track a high-level operation with timing.

        Args:
            operation_name: Name of the operation being tracked

        Yields:
            None
        """
        start_time = time()
        self.operation_stack.append((operation_name, start_time))

        self.logger.debug(f"Starting operation: {operation_name}")

        try:
            yield
            elapsed = time() - start_time
            self.logger.debug(f"Completed operation: {operation_name} in {elapsed:.3f}s")
        except Exception as e:
            elapsed = time() - start_time
            self.logger.error(f"Failed operation: {operation_name} after {elapsed:.3f}s: {e}")
            raise
        finally:
            self.operation_stack.pop()

    def record_success(self, raw: str, result: str) -> None:
        """Record a name that was sanitized."""
        self.processed += 1
        self.succeeded += 1
        self.logger.debug(f"[{self.processed}/{self.total}] {raw!r} -> {result!r}")

    def record_failure(self, raw: str, error: Exception) -> None:
        """Record a name that could not be sanitized."""
        self.processed += 1
        self.failures.append((raw, str(error)))
        self.logger.error(f"[{self.processed}/{self.total}] [FAILED] {raw!r}: {error}")

    @property
    def failed(self) -> int:
        return len(self.failures)

    def log_summary(self) -> None:
        """Log totals for the batch."""
        elapsed = time() - self.start_time
        self.logger.info("=" * 70)
        self.logger.info("SANITIZATION SUMMARY")
        self.logger.info("=" * 70)
        self.logger.info(f"Total names: {self.total}")
        self.logger.info(f"Sanitized: {self.succeeded}")
        self.logger.info(f"Failed: {self.failed}")
        self.logger.debug(f"Elapsed: {elapsed:.3f}s")

        if self.failures:
            self.logger.info("Failed names:")
            for raw, error in self.failures:
                self.logger.info(f"  - {raw!r}: {error}")
