"""Deferred invocation of an example, handed to around hooks."""

from collections.abc import Callable
from dataclasses import dataclass, field

from example_runner.models.metadata import Metadata


@dataclass(frozen=True, kw_only=True)
class Procsy:
    """Wraps the rest of an example's pipeline so an around hook can run it.

    The hook decides whether to call ``run`` at all. Not calling it means
    neither the example body nor its before and after hooks execute;
    calling it twice runs them twice.

    Example:
        >>> def only_when_enabled(context, procsy):
        ...     if procsy.metadata.tag("enabled", True):
        ...         procsy.run()

    """

    metadata: Metadata
    body: Callable[[], None] = field(repr=False)

    def run(self) -> None:
        """Execute the wrapped pipeline."""
        self.body()

    __call__ = run

    def wrap(self, body: Callable[[], None]) -> "Procsy":
        """Return a procsy for the same example that runs ``body`` instead."""
        return Procsy(metadata=self.metadata, body=body)
