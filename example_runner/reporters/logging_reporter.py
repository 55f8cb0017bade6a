"""Reporter that writes example lifecycle events to the logging system."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from example_runner.reporters.base import Reporter

if TYPE_CHECKING:
    from example_runner.example import Example

STATUS_SYMBOLS = {
    "passed": "✓",
    "failed": "✗",
    "pending": "*",
}


@dataclass(kw_only=True)
class LoggingReporter(Reporter):
    """Logs each finished example and keeps running totals."""

    log: logging.Logger = field(
        default_factory=lambda: logging.getLogger("example_runner"), repr=False
    )
    passed: list["Example"] = field(default_factory=list)
    failed: list["Example"] = field(default_factory=list)
    pending: list["Example"] = field(default_factory=list)

    @property
    def example_count(self) -> int:
        return len(self.passed) + len(self.failed) + len(self.pending)

    def example_started(self, example: "Example") -> None:
        self.log.debug("Running: %s", example.full_description)

    def example_passed(self, example: "Example") -> None:
        self.passed.append(example)
        self._log_finished(example)

    def example_failed(self, example: "Example") -> None:
        self.failed.append(example)
        self._log_finished(example)
        exception = example.exception
        self.log.info("  %s: %s", type(exception).__name__, exception)

    def example_pending(self, example: "Example") -> None:
        self.pending.append(example)
        self._log_finished(example)
        self.log.info("  Pending: %s", example.execution_result.pending_message)

    def message(self, message: str) -> None:
        self.log.warning("%s", message)

    def deprecation(self, notice: Mapping[str, Any]) -> None:
        if "message" in notice:
            self.log.warning("Deprecation: %s", notice["message"])
            return

        text = f"{notice['deprecated']} is deprecated."
        if replacement := notice.get("replacement"):
            text += f" Use {replacement} instead."
        if call_site := notice.get("call_site"):
            text += f" Called from {call_site}."
        self.log.warning("Deprecation: %s", text)

    def log_summary(self) -> None:
        """Log a formatted summary of every example reported so far."""
        self.log.info("=" * 80)
        self.log.info("Examples Summary:")
        self.log.info("=" * 80)
        self.log.info(
            "%d example(s), %d failure(s), %d pending",
            self.example_count,
            len(self.failed),
            len(self.pending),
        )
        for example in self.failed:
            self.log.info("%s %s", STATUS_SYMBOLS["failed"], example.full_description)
            self.log.info("  # %s", example.location)

    def _log_finished(self, example: "Example") -> None:
        result = example.execution_result
        self.log.info(
            "%s %s: %s (%.2fs)",
            STATUS_SYMBOLS.get(result.status, "?"),
            example.full_description,
            result.status,
            result.run_time or 0.0,
        )
