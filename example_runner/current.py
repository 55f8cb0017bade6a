"""Tracking of the example that is currently running.

The marker is a context variable, so it is local to the thread or task that
runs the example. It is only ever set by ``Example.run`` and is reset when
that call returns, whatever the outcome.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from example_runner.example import Example

CURRENT_EXAMPLE: ContextVar["Example | None"] = ContextVar(
    "CURRENT_EXAMPLE",
    default=None,
)


def current_example() -> "Example | None":
    """Return the example being run, or None outside of a run."""
    return CURRENT_EXAMPLE.get()


@contextmanager
def running(example: "Example") -> Iterator["Example"]:
    """Publish ``example`` as the current example for the duration of the block."""
    token = CURRENT_EXAMPLE.set(example)
    try:
        yield example
    finally:
        CURRENT_EXAMPLE.reset(token)
