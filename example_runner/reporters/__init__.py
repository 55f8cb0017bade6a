"""Reporters for example lifecycle events."""

from example_runner.reporters.base import Reporter
from example_runner.reporters.loading import (
    InvalidReporterError,
    ReporterNotFoundError,
    load_reporter,
)
from example_runner.reporters.logging_reporter import LoggingReporter

__all__ = [
    "InvalidReporterError",
    "LoggingReporter",
    "Reporter",
    "ReporterNotFoundError",
    "load_reporter",
]
