"""Shared fixtures for unit tests."""

from unittest.mock import Mock

import pytest

from example_runner.context import MockSpace
from example_runner.group import ExampleGroup
from example_runner.hooks import Hooks
from example_runner.reporters.base import Reporter
from example_runner.testing.clock import FakeClock
from example_runner.testing.factories import GroupMetadataFactory


@pytest.fixture
def clock() -> FakeClock:
    """Create a deterministic clock."""
    return FakeClock()


@pytest.fixture
def reporter() -> Mock:
    """Create mock reporter."""
    return Mock(spec=Reporter)


@pytest.fixture
def hooks() -> Hooks:
    """Create an empty hook registry."""
    return Hooks()


@pytest.fixture
def mocks() -> Mock:
    """Create mock test double lifecycle."""
    return Mock(spec=MockSpace)


@pytest.fixture
def group(clock: FakeClock, hooks: Hooks, mocks: Mock) -> ExampleGroup:
    """Create a group whose examples use the fake clock and mock space."""
    return ExampleGroup(
        metadata=GroupMetadataFactory.build(description="Widget"),
        hooks=hooks,
        mock_space_factory=lambda: mocks,
        clock=clock,
    )
