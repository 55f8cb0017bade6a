"""Pending and skip handling for examples.

An example is pending when it is expected to fail, and skipped when it
should not run at all. Both end up reported as pending. A pending example
whose body passes is reported as a failure, since the reason it was marked
pending no longer holds.
"""

import logging
from typing import TYPE_CHECKING, NoReturn

from example_runner.current import current_example

if TYPE_CHECKING:
    from example_runner.example import Example

log = logging.getLogger(__name__)

NO_REASON_GIVEN = "No reason given"
PENDING_FIXED_MESSAGE = "Expected example to fail since it is pending, but it passed."


class PendingExampleFixedError(Exception):
    """Raised when an example marked pending passes."""

    def __init__(
        self, message: str = PENDING_FIXED_MESSAGE, location: str | None = None
    ) -> None:
        super().__init__(message)
        self.location = location


class SkipDeclaredInExample(Exception):
    """Raised by ``skip()`` to stop the example that called it."""


class NoCurrentExampleError(Exception):
    """Raised when ``pending()`` or ``skip()`` is called outside of a run."""


def pending_message_for(reason: bool | str | None) -> str:
    """Return the message recorded for a pending or skip declaration."""
    if isinstance(reason, str) and reason:
        return reason
    return NO_REASON_GIVEN


def mark_pending(example: "Example", reason: bool | str | None) -> None:
    """Record that ``example`` is pending for ``reason``."""
    message = pending_message_for(reason)
    log.debug("Marking %s pending: %s", example.location, message)
    example.metadata.pending = True
    example.execution_result.pending_message = message
    example.execution_result.pending_fixed = False


def mark_fixed(example: "Example") -> None:
    """Record that a pending example passed."""
    example.metadata.pending = False
    example.execution_result.pending_fixed = True


def fixed_error_for(example: "Example") -> PendingExampleFixedError:
    """Build the failure reported for a pending example that passed."""
    return PendingExampleFixedError(location=example.location)


def pending(message: str | None = None, example: "Example | None" = None) -> None:
    """Mark the running example pending and let its body carry on.

    If the rest of the body fails, the example is reported as pending; if it
    passes, it is reported as failed with ``PendingExampleFixedError``.
    """
    mark_pending(_resolve(example, "pending"), message)


def skip(message: str | None = None, example: "Example | None" = None) -> NoReturn:
    """Mark the running example skipped and stop its body."""
    mark_pending(_resolve(example, "skip"), message)
    raise SkipDeclaredInExample(pending_message_for(message))


def _resolve(example: "Example | None", caller: str) -> "Example":
    if example is None:
        example = current_example()
    if example is None:
        raise NoCurrentExampleError(
            f"{caller}() can only be called from a running example"
        )
    return example
