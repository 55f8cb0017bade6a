"""Tests for deprecation notices and warnings."""

import inspect
import re
from unittest.mock import Mock

import pytest

from example_runner.context import ExampleContext
from example_runner.group import ExampleGroup
from example_runner.notices import deprecate, warn_deprecation, warn_with


class TestDeprecate:
    """Tests for deprecate."""

    def test_passes_fields_to_reporter(self, reporter: Mock) -> None:
        """Extra fields are forwarded with the deprecated name."""
        deprecate(reporter, "old_method", replacement="new_method")

        notice = reporter.deprecation.call_args.args[0]
        assert notice["deprecated"] == "old_method"
        assert notice["replacement"] == "new_method"

    def test_adds_the_call_site(self, reporter: Mock) -> None:
        """The call site is the caller outside of example_runner."""
        frame = inspect.currentframe()
        assert frame is not None
        line = frame.f_lineno + 1
        deprecate(reporter, "old_method")

        notice = reporter.deprecation.call_args.args[0]
        assert notice["call_site"].endswith(f"test_notices.py:{line}")

    def test_does_not_override_a_passed_call_site(self, reporter: Mock) -> None:
        """An explicit call site wins."""
        deprecate(reporter, "old_method", call_site="/some_file.py:17")

        notice = reporter.deprecation.call_args.args[0]
        assert notice["call_site"] == "/some_file.py:17"


def test_warn_deprecation_wraps_message(reporter: Mock) -> None:
    """The message is sent as the only field."""
    warn_deprecation(reporter, "this is the message")

    reporter.deprecation.assert_called_once_with({"message": "this is the message"})


class TestWarnWith:
    """Tests for warn_with."""

    def test_plain_warning(self) -> None:
        """Without spec_location the message is unchanged."""
        with pytest.warns(UserWarning, match="^The warning$"):
            warn_with("The warning")

    def test_adds_location_of_given_example(self, group: ExampleGroup) -> None:
        """The example's location is appended after a period."""
        example = group.example(
            "x", lambda ctx: None, file_path="widget_test.py", line_number=12
        )
        expected = "The warning. Warning generated from example at `widget_test.py:12`."

        with pytest.warns(UserWarning, match=re.escape(expected)):
            warn_with("The warning", spec_location=True, example=example)

    def test_adds_location_of_running_example(
        self, group: ExampleGroup, reporter: Mock
    ) -> None:
        """The currently running example is used when none is given."""

        def body(context: ExampleContext) -> None:
            warn_with("The warning.", spec_location=True)

        example = group.example("x", body, file_path="widget_test.py", line_number=5)
        expected = "The warning. Warning generated from example at `widget_test.py:5`."

        with pytest.warns(UserWarning, match=re.escape(expected)):
            example.run(group.new_context(), reporter)

    def test_without_current_example(self) -> None:
        """Says the origin is unknown outside of a run."""
        expected = (
            "The warning. example_runner could not determine which call"
            " generated this warning."
        )

        with pytest.warns(UserWarning, match=re.escape(expected)):
            warn_with("The warning.", spec_location=True)

    def test_uses_given_category(self) -> None:
        """The warning category can be chosen."""
        with pytest.warns(DeprecationWarning):
            warn_with("old", category=DeprecationWarning)
