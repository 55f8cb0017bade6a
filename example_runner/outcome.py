"""Outcomes of running an example's before hooks and body."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Ok:
    """The body returned normally."""


@dataclass(frozen=True)
class Failed:
    """A before hook or the body raised."""

    error: Exception


@dataclass(frozen=True)
class SkippedNow:
    """The example skipped itself; pending state is already recorded."""


@dataclass(frozen=True)
class PendingFixed:
    """The example is pending but its body returned normally."""


type Outcome = Ok | Failed | SkippedNow | PendingFixed
