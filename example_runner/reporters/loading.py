"""Reporters registered by installed distributions."""

import logging
from importlib.metadata import entry_points

from example_runner.reporters.base import Reporter

log = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "example_runner.reporters"


class ReporterNotFoundError(Exception):
    """Raised when no reporter is registered under the requested name."""

    def __init__(self, key: str, available: list[str]) -> None:
        super().__init__(
            f"Reporter '{key}' not found. Available reporters: {available}"
        )
        self.key = key
        self.available = available


class InvalidReporterError(TypeError):
    """Raised when an entry point does not name a ``Reporter`` subclass."""


def load_reporter(key: str) -> type[Reporter]:
    """Return the reporter class registered as ``key``.

    Raises:
        ReporterNotFoundError: If nothing is registered under ``key``
        InvalidReporterError: If the registered object is not a reporter class

    """
    registered = entry_points(group=ENTRY_POINT_GROUP)
    if key not in registered.names:
        raise ReporterNotFoundError(key, sorted(registered.names))

    entry = registered[key]
    loaded = entry.load()
    if not (isinstance(loaded, type) and issubclass(loaded, Reporter)):
        raise InvalidReporterError(
            f"Entry point '{key}' ({entry.value}) is not a Reporter subclass"
        )

    log.debug("Loaded reporter '%s' from %s", key, entry.value)
    return loaded
