"""Example groups: a set of examples sharing metadata, hooks and settings."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from example_runner.clock import Clock
from example_runner.config import RunnerConfig
from example_runner.context import ExampleContext, MockSpace, NullMockSpace
from example_runner.descriptions import GeneratedDescriptions, MatcherDescriptions
from example_runner.example import Body, Example
from example_runner.hooks import HookRegistry, Hooks
from example_runner.models.metadata import GroupMetadata
from example_runner.reporters.base import Reporter

log = logging.getLogger(__name__)


@dataclass(kw_only=True, eq=False)
class ExampleGroup:
    """Examples declared together, run one after another."""

    metadata: GroupMetadata
    hooks: HookRegistry = field(default_factory=Hooks)
    config: RunnerConfig = field(default_factory=RunnerConfig)
    matcher_descriptions: MatcherDescriptions = field(
        default_factory=GeneratedDescriptions
    )
    mock_space_factory: Callable[[], MockSpace] = NullMockSpace
    clock: Clock | None = None
    examples: list[Example] = field(default_factory=list)

    def example(
        self, description: str | None = None, body: Body | None = None, **options: Any
    ) -> Example:
        """Declare an example in this group and return it."""
        example = Example(self, description, options, body, clock=self.clock)
        self.examples.append(example)
        return example

    def new_context(self) -> ExampleContext:
        """Create a fresh context for one example run."""
        return ExampleContext(mocks=self.mock_space_factory())

    def run(self, reporter: Reporter | None = None) -> bool:
        """Run every example in declaration order.

        before(:all) hooks run once first; if one fails, every example is
        reported as failed with that error and none of them runs. Without a
        ``reporter`` the one named by ``config.reporter`` is built.

        Returns:
            True if no example failed

        """
        if reporter is None:
            reporter = self.config.build_reporter()

        log.info(
            "Running %d example(s) in %s",
            len(self.examples),
            self.metadata.full_description,
        )
        group_context = self.new_context()
        try:
            self.hooks.run("before", "all", None, context=group_context)
        except Exception as e:
            log.error("before(:all) hook failed: %s", e, exc_info=e)
            results = [
                example.fail_with_exception(reporter, e) for example in self.examples
            ]
        else:
            results = [
                example.run(self.new_context(), reporter) for example in self.examples
            ]
        finally:
            self._run_after_all(group_context, reporter)

        return all(results)

    def _run_after_all(self, context: ExampleContext, reporter: Reporter) -> None:
        try:
            self.hooks.run("after", "all", None, context=context)
        except Exception as e:
            reporter.message(
                f"\nAn error occurred in an after(:all) hook.\n"
                f"  {type(e).__name__}: {e}\n"
            )
        finally:
            context.reset()
