"""Deprecation notices and warnings that point at the calling example."""

import traceback
import warnings
from pathlib import Path
from typing import TYPE_CHECKING, Any

from example_runner.current import current_example
from example_runner.reporters.base import Reporter

if TYPE_CHECKING:
    from example_runner.example import Example

PACKAGE_ROOT = Path(__file__).resolve().parent


def first_non_framework_line() -> str | None:
    """Return ``file:line`` of the innermost frame outside of this package."""
    for frame in reversed(traceback.extract_stack()):
        if not Path(frame.filename).resolve().is_relative_to(PACKAGE_ROOT):
            return f"{frame.filename}:{frame.lineno}"
    return None


def deprecate(reporter: Reporter, deprecated: str, **data: Any) -> None:
    """Report that ``deprecated`` was used.

    The call site defaults to the first caller outside of example_runner;
    any field in ``data``, including ``call_site``, overrides the defaults.
    """
    notice = {"deprecated": deprecated, "call_site": first_non_framework_line()}
    notice.update(data)
    reporter.deprecation(notice)


def warn_deprecation(reporter: Reporter, message: str) -> None:
    """Report a free-form deprecation message."""
    reporter.deprecation({"message": message})


def warn_with(
    message: str,
    *,
    spec_location: bool = False,
    example: "Example | None" = None,
    category: type[Warning] = UserWarning,
) -> None:
    """Emit a warning, optionally naming the example that triggered it.

    Args:
        message: Warning text
        spec_location: Append the location of ``example`` (or of the
            currently running example) to the message
        example: Example to attribute the warning to
        category: Warning category passed to ``warnings.warn``

    """
    if spec_location:
        if not message.endswith("."):
            message += "."

        if example is None:
            example = current_example()
        if example is None:
            message += (
                " example_runner could not determine which call generated"
                " this warning."
            )
        else:
            message += f" Warning generated from example at `{example.location}`."

    warnings.warn(message, category, stacklevel=2)
