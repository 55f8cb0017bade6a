"""Example: runs one declared test through its hooks and reports the outcome."""

import logging
import traceback
from collections.abc import Callable, Mapping, Sequence
from enum import Enum
from typing import TYPE_CHECKING, Any

from example_runner.clock import Clock, SystemClock
from example_runner.context import ExampleContext
from example_runner.current import running
from example_runner.hooks import AroundHook
from example_runner.models.metadata import Metadata, source_location_of
from example_runner.models.result import ExecutionResult
from example_runner.outcome import Failed, Ok, Outcome, PendingFixed, SkippedNow
from example_runner.pending import (
    SkipDeclaredInExample,
    fixed_error_for,
    mark_fixed,
    mark_pending,
)
from example_runner.procsy import Procsy
from example_runner.reporters.base import Reporter

if TYPE_CHECKING:
    from example_runner.group import ExampleGroup

log = logging.getLogger(__name__)

type Body = Callable[[ExampleContext], object]


class Capture(Enum):
    """Context markers for ``Example.capture_failure``."""

    SILENT = "silent"


class Example:
    """A single declared test, and the state of its current run.

    ``run`` binds an ``ExampleContext``, runs the around, before and after
    hooks and the body, and reports exactly one of passed, failed or
    pending. The first failure captured during the run is the one
    reported; later failures only produce a diagnostic message.
    """

    def __init__(
        self,
        example_group: "ExampleGroup",
        description: str | None = None,
        options: Mapping[str, Any] | None = None,
        body: Body | None = None,
        *,
        clock: Clock | None = None,
    ) -> None:
        self.example_group = example_group
        self.metadata: Metadata = example_group.metadata.for_example(
            description, options or {}, body=body
        )
        self.clock: Clock = clock or SystemClock()
        self._body = body
        self._exception: Exception | None = None
        self._context: ExampleContext | None = None
        self._reporter: Reporter | None = None
        self._around_each_hooks: Sequence[AroundHook] | None = None

    def __repr__(self) -> str:
        return f"<Example {self.full_description!r} at {self.location}>"

    @property
    def exception(self) -> Exception | None:
        """The first exception captured while running this example."""
        return self._exception

    @property
    def context(self) -> ExampleContext | None:
        """The context bound for the current run; None outside of a run."""
        return self._context

    @property
    def execution_result(self) -> ExecutionResult:
        return self.metadata.execution_result

    @property
    def file_path(self) -> str:
        return self.metadata.file_path

    @property
    def full_description(self) -> str:
        return self.metadata.full_description

    @property
    def location(self) -> str:
        return self.metadata.location

    @property
    def pending(self) -> bool | str:
        return self.metadata.pending

    @property
    def skip(self) -> bool | str:
        return self.metadata.skip

    @property
    def description(self) -> str:
        """The declared description, or one naming the example's location."""
        description = self.metadata.description or f"example at {self.location}"
        return self.example_group.config.format_description(description)

    @property
    def source_location(self) -> str | None:
        """``file:line`` where the body was defined, if it has a body."""
        if (location := source_location_of(self._body)) is None:
            return None
        return f"{location[0]}:{location[1]}"

    @property
    def around_each_hooks(self) -> Sequence[AroundHook]:
        if self._around_each_hooks is None:
            hooks = self.example_group.hooks
            self._around_each_hooks = hooks.around_each_hooks_for(self)
        return self._around_each_hooks

    def run(self, context: ExampleContext, reporter: Reporter) -> bool:
        """Run the example in ``context`` and report it to ``reporter``.

        An example runs once. Running it again raises
        ``InvalidStatusTransitionError`` before anything is reported.

        Returns:
            False if the example failed, True if it passed or is pending

        """
        self._context = context
        context.example = self
        self._reporter = reporter

        try:
            with running(self):
                try:
                    self._start(reporter)
                    self._run_phases()
                finally:
                    context.reset()
                    self._context = None
                    self._assign_generated_description()

                return self._finish(reporter)
        finally:
            self._reporter = None

    def fail_with_exception(self, reporter: Reporter, exception: Exception) -> bool:
        """Report the example as failed with ``exception`` without running it.

        Used when a before(:all) hook failed, so neither the per-example
        hooks nor the body may run.
        """
        self._reporter = reporter
        try:
            self._start(reporter)
            self.capture_failure(exception)
            return self._finish(reporter)
        finally:
            self._reporter = None

    def capture_failure(
        self, exception: Exception, context: str | Capture | None = None
    ) -> None:
        """Record ``exception`` unless a failure was already captured.

        A later failure never replaces the first one. Unless ``context`` is
        ``Capture.SILENT`` it is reported as a diagnostic message instead.
        """
        if self._exception is None:
            self._exception = exception
            return

        if context is Capture.SILENT:
            return

        message = _collision_message(exception, context)
        if self._reporter is None:
            log.warning("%s", message)
        else:
            self._reporter.message(message)

    def call_with_capture(self, context: str, func: Callable[[], object]) -> None:
        """Call ``func``, capturing any failure with ``context``."""
        try:
            func()
        except Exception as e:
            self.capture_failure(e, context)

    def _start(self, reporter: Reporter) -> None:
        log.debug("Starting %s", self.location)
        self.execution_result.record_started(self.clock.now())
        reporter.example_started(self)

    def _finish(self, reporter: Reporter) -> bool:
        result = self.execution_result
        pending_message = result.pending_message

        if self._exception is not None:
            result.record_finished(
                "failed", self.clock.now(), exception=self._exception
            )
            reporter.example_failed(self)
            succeeded = False
        elif pending_message is not None:
            result.record_finished(
                "pending", self.clock.now(), pending_message=pending_message
            )
            reporter.example_pending(self)
            succeeded = True
        else:
            result.record_finished("passed", self.clock.now())
            reporter.example_passed(self)
            succeeded = True

        log.debug(
            "Finished %s: status=%s run_time=%.4fs",
            self.location,
            result.status,
            result.run_time,
        )
        return succeeded

    def _run_phases(self) -> None:
        try:
            if self.skip:
                mark_pending(self, self.skip)
                return

            if self.pending:
                mark_pending(self, self.pending)
            if not self.example_group.config.dry_run:
                self._with_around_each_hooks(self._run_guarded_pipeline)
        except Exception as e:
            self.capture_failure(e)

    def _with_around_each_hooks(self, pipeline: Callable[[], None]) -> None:
        try:
            if not self.around_each_hooks:
                pipeline()
            else:
                procsy = Procsy(metadata=self.metadata, body=pipeline)
                self.example_group.hooks.run("around", "each", self, procsy)
        except Exception as e:
            self.capture_failure(e, "in an around(:each) hook")

    def _run_guarded_pipeline(self) -> None:
        try:
            match self._run_before_each_and_body():
                case PendingFixed():
                    mark_fixed(self)
                    self.capture_failure(fixed_error_for(self))
                case Failed(error) if self.pending:
                    self.execution_result.pending_exception = error
                case Failed(error):
                    self.capture_failure(error)
                case Ok() | SkippedNow():
                    pass
        finally:
            self._run_after_each()

    def _run_before_each_and_body(self) -> Outcome:
        context = self._bound_context()
        try:
            context.mocks.setup()
            self.example_group.hooks.run("before", "each", self)
            if self._body is not None:
                self._body(context)
        except SkipDeclaredInExample:
            return SkippedNow()
        except Exception as e:
            return Failed(e)

        if self.pending:
            return PendingFixed()
        return Ok()

    def _run_after_each(self) -> None:
        context = self._bound_context()
        try:
            self.example_group.hooks.run("after", "each", self)
            self._verify_mocks(context)
        except Exception as e:
            self.capture_failure(e, "in an after(:each) hook")
        finally:
            context.mocks.teardown()

    def _verify_mocks(self, context: ExampleContext) -> None:
        try:
            context.mocks.verify()
        except Exception as e:
            if self.execution_result.pending_message is not None:
                self.execution_result.pending_fixed = False
                self.metadata.pending = True
                self._exception = None
            else:
                self.capture_failure(e, Capture.SILENT)

    def _assign_generated_description(self) -> None:
        if not self.example_group.config.expecting_matcher_descriptions:
            return

        descriptions = self.example_group.matcher_descriptions
        try:
            if not self.metadata.description_args:
                generated = descriptions.generated_description()
                if generated is not None:
                    self.metadata.description_args.append(generated)
            descriptions.clear_generated_description()
        except Exception as e:
            self.capture_failure(e, "while assigning the example description")

    def _bound_context(self) -> ExampleContext:
        if self._context is None:
            raise RuntimeError(f"{self!r} is not running")
        return self._context


def _collision_message(exception: Exception, context: str | Capture | None) -> str:
    heading = "An error occurred"
    if isinstance(context, str) and context:
        heading = f"{heading} {context}"
    return (
        f"\n{heading}\n"
        f"  {type(exception).__name__}: {exception}\n"
        f"  occurred at {_raised_at(exception)}\n\n"
    )


def _raised_at(exception: Exception) -> str:
    frames = traceback.extract_tb(exception.__traceback__)
    if frames:
        frame = frames[-1]
        return f"{frame.filename}:{frame.lineno}:in {frame.name}"
    return getattr(exception, "location", None) or "unknown location"
