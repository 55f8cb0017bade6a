"""Metadata records describing example groups and examples."""

import inspect
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from example_runner.models.result import ExecutionResult

NOT_YET_IMPLEMENTED = "Not yet implemented"

_NO_SPACE_PREFIXES = ("#", ".", "::")


def join_descriptions(descriptions: list[str]) -> str:
    """Join nested descriptions the way they read in a report.

    Descriptions naming a method (``#save``, ``.build``, ``::VERSION``) are
    attached to their parent without a space.
    """
    full = ""
    for description in descriptions:
        if not description:
            continue
        if not full or description.startswith(_NO_SPACE_PREFIXES):
            full += description
        else:
            full += f" {description}"
    return full


def source_location_of(body: Callable[..., Any] | None) -> tuple[str, int] | None:
    """Return the file and first line of a callable, if it has any."""
    code = getattr(body, "__code__", None)
    if code is None:
        return None
    file_path = inspect.getsourcefile(body) or code.co_filename
    return file_path, code.co_firstlineno


@dataclass(kw_only=True)
class GroupMetadata:
    """Metadata of an example group, shared by all of its examples."""

    description: str
    file_path: str = ""
    line_number: int = 0
    parent: "GroupMetadata | None" = None
    tags: Mapping[str, Any] = field(default_factory=dict)

    @property
    def descriptions(self) -> list[str]:
        """Descriptions from the outermost group down to this one."""
        chain: list[str] = []
        group: GroupMetadata | None = self
        while group is not None:
            chain.append(group.description)
            group = group.parent
        return chain[::-1]

    @property
    def full_description(self) -> str:
        return join_descriptions(self.descriptions)

    @property
    def inherited_tags(self) -> dict[str, Any]:
        """Tags of this group merged over those of its ancestors."""
        tags = dict(self.parent.inherited_tags) if self.parent else {}
        tags.update(self.tags)
        return tags

    def for_example(
        self,
        description: str | None,
        options: Mapping[str, Any],
        *,
        body: Callable[..., Any] | None = None,
    ) -> "Metadata":
        """Derive the metadata of an example declared in this group.

        ``options`` may carry ``pending``, ``skip``, ``file_path`` and
        ``line_number``; every other key becomes a tag. An example without a
        body is skipped as not yet implemented.
        """
        tags = self.inherited_tags
        tags.update(options)

        pending = tags.pop("pending", False)
        skip = tags.pop("skip", False)
        if body is None and not skip:
            skip = NOT_YET_IMPLEMENTED

        file_path = tags.pop("file_path", None)
        line_number = tags.pop("line_number", None)
        if file_path is None or line_number is None:
            file_path, line_number = source_location_of(body) or (
                self.file_path,
                self.line_number,
            )

        return Metadata(
            example_group=self,
            description_args=[description] if description else [],
            file_path=file_path,
            line_number=line_number,
            pending=pending,
            skip=skip,
            tags=tags,
        )


@dataclass(kw_only=True)
class Metadata:
    """Metadata of a single example.

    The record is fixed once the example is declared. During a run only
    ``pending``, ``description_args`` and the fields of ``execution_result``
    change.
    """

    example_group: GroupMetadata
    description_args: list[Any] = field(default_factory=list)
    file_path: str = ""
    line_number: int = 0
    pending: bool | str = False
    skip: bool | str = False
    tags: Mapping[str, Any] = field(default_factory=dict)
    execution_result: ExecutionResult = field(default_factory=ExecutionResult)

    @property
    def description(self) -> str:
        return " ".join(str(arg) for arg in self.description_args)

    @property
    def location(self) -> str:
        return f"{self.file_path}:{self.line_number}"

    @property
    def full_description(self) -> str:
        return join_descriptions([*self.example_group.descriptions, self.description])

    def tag(self, key: str, default: Any = None) -> Any:
        """Look up an arbitrary tag given at declaration time."""
        return self.tags.get(key, default)
