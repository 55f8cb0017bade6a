"""Abstract base class for reporters receiving example lifecycle events."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from example_runner.example import Example


class Reporter(ABC):
    """Receives lifecycle notifications for examples as they run.

    Every example produces one ``example_started`` call followed by exactly
    one of ``example_passed``, ``example_failed`` or ``example_pending``.
    """

    @abstractmethod
    def example_started(self, example: "Example") -> None:
        """Handle an example that is about to run."""

    @abstractmethod
    def example_passed(self, example: "Example") -> None:
        """Handle an example that passed."""

    @abstractmethod
    def example_failed(self, example: "Example") -> None:
        """Handle an example that failed; ``example.exception`` is set."""

    @abstractmethod
    def example_pending(self, example: "Example") -> None:
        """Handle an example that was skipped or is pending."""

    @abstractmethod
    def message(self, message: str) -> None:
        """Handle free-form diagnostic text."""

    @abstractmethod
    def deprecation(self, notice: Mapping[str, Any]) -> None:
        """Handle a deprecation notice.

        Args:
            notice: Either ``deprecated`` and ``call_site`` plus any extra
                fields such as ``replacement``, or a single ``message``

        """
