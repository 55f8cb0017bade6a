"""Source of descriptions generated by matchers."""

from dataclasses import dataclass
from typing import Protocol


class MatcherDescriptions(Protocol):
    """Remembers how the last matcher described itself."""

    def generated_description(self) -> str | None:
        """Return the last generated description, if any."""
        ...

    def clear_generated_description(self) -> None:
        """Forget the last generated description."""
        ...


@dataclass
class GeneratedDescriptions:
    """In-memory store written to by matchers as they run."""

    last: str | None = None

    def record(self, description: str) -> None:
        self.last = description

    def generated_description(self) -> str | None:
        return self.last

    def clear_generated_description(self) -> None:
        self.last = None
