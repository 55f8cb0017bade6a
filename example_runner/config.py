"""Configuration for running examples."""

from collections.abc import Callable

from pydantic import Field

from example_runner.models.base import Model
from example_runner.reporters.base import Reporter
from example_runner.reporters.loading import load_reporter


class RunnerConfig(Model):
    """Settings consulted while examples run."""

    dry_run: bool = Field(
        default=False,
        description="Report every example without running hooks or bodies",
    )
    expecting_matcher_descriptions: bool = Field(
        default=False,
        description="Name undescribed examples after their last matcher",
    )
    description_formatter: Callable[[str], str] | None = Field(
        default=None, description="Applied to every example description"
    )
    reporter: str = Field(
        default="logging", description="Entry point name of the reporter to build"
    )

    def format_description(self, description: str) -> str:
        """Format an example description for display."""
        if self.description_formatter is None:
            return description
        return self.description_formatter(description)

    def build_reporter(self) -> Reporter:
        """Instantiate the reporter registered under ``reporter``."""
        return load_reporter(self.reporter)()
