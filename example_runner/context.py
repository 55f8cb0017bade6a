"""Execution context handed to example bodies and hooks."""

from dataclasses import dataclass, field, fields
from typing import TYPE_CHECKING, Any, NoReturn, Protocol

from example_runner import pending as pending_policy

if TYPE_CHECKING:
    from example_runner.example import Example


class MockSpace(Protocol):
    """Lifecycle of the test doubles used by one example."""

    def setup(self) -> None:
        """Prepare for doubles to be created."""
        ...

    def verify(self) -> None:
        """Check the expectations set on doubles; raise if any was not met."""
        ...

    def teardown(self) -> None:
        """Discard every double created since ``setup``."""
        ...


class NullMockSpace:
    """Mock space for examples that use no test doubles."""

    def setup(self) -> None:
        pass

    def verify(self) -> None:
        pass

    def teardown(self) -> None:
        pass


@dataclass(kw_only=True)
class ExampleContext:
    """State an example body and its hooks may touch while the example runs.

    One context is created per example run. Everything stored in ``state``,
    and any attribute a body or hook sets on the context itself, is
    discarded when the run ends, so nothing leaks into the next example.
    """

    mocks: MockSpace = field(default_factory=NullMockSpace)
    state: dict[str, Any] = field(default_factory=dict)
    example: "Example | None" = field(default=None, repr=False)

    def pending(self, message: str | None = None) -> None:
        """Mark this context's example pending."""
        pending_policy.pending(message, example=self.example)

    def skip(self, message: str | None = None) -> NoReturn:
        """Mark this context's example skipped and stop its body."""
        pending_policy.skip(message, example=self.example)

    def reset(self) -> None:
        """Clear all per-run state and detach the example."""
        declared = {f.name for f in fields(self)}
        for name in [name for name in vars(self) if name not in declared]:
            delattr(self, name)
        self.state.clear()
        self.example = None
