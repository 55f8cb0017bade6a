"""Registry of before, after and around hooks."""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from functools import partial
from typing import TYPE_CHECKING, Literal, Protocol

from example_runner.context import ExampleContext
from example_runner.procsy import Procsy

if TYPE_CHECKING:
    from example_runner.example import Example

log = logging.getLogger(__name__)

type Phase = Literal["before", "after", "around"]
type Scope = Literal["each", "all"]
type Hook = Callable[[ExampleContext], None]
type AroundHook = Callable[[ExampleContext, Procsy], None]


class HookRegistry(Protocol):
    """Hooks an example runs around its body."""

    def run(
        self,
        phase: Phase,
        scope: Scope,
        example: "Example | None",
        procsy: Procsy | None = None,
        *,
        context: ExampleContext | None = None,
    ) -> None:
        """Run every hook registered for ``phase`` and ``scope``."""
        ...

    def around_each_hooks_for(self, example: "Example") -> Sequence[AroundHook]:
        """Return the around hooks that apply to ``example``."""
        ...


@dataclass(kw_only=True)
class Hooks:
    """Ordered hook registry.

    Before hooks run in registration order and after hooks in reverse
    order. The first registered around hook is the outermost one.
    """

    before_each: list[Hook] = field(default_factory=list)
    after_each: list[Hook] = field(default_factory=list)
    around_each: list[AroundHook] = field(default_factory=list)
    before_all: list[Hook] = field(default_factory=list)
    after_all: list[Hook] = field(default_factory=list)

    def before(self, hook: Hook, scope: Scope = "each") -> Hook:
        """Register a before hook; usable as a decorator."""
        (self.before_each if scope == "each" else self.before_all).append(hook)
        return hook

    def after(self, hook: Hook, scope: Scope = "each") -> Hook:
        """Register an after hook; usable as a decorator."""
        (self.after_each if scope == "each" else self.after_all).append(hook)
        return hook

    def around(self, hook: AroundHook) -> AroundHook:
        """Register an around hook; usable as a decorator."""
        self.around_each.append(hook)
        return hook

    def around_each_hooks_for(self, example: "Example") -> Sequence[AroundHook]:
        return tuple(self.around_each)

    def run(
        self,
        phase: Phase,
        scope: Scope,
        example: "Example | None",
        procsy: Procsy | None = None,
        *,
        context: ExampleContext | None = None,
    ) -> None:
        """Run the hooks registered for ``phase`` and ``scope``.

        Hooks of scope ``each`` run in the context of ``example``. Hooks of
        scope ``all`` run once per group in the given ``context``.

        Every after(:each) hook runs even when an earlier one fails; the
        failure is captured on the example instead of being raised.

        Raises:
            ValueError: If there is no context to run in, or an around hook
                run is requested without a procsy

        """
        if context is None and example is not None:
            context = example.context
        if context is None:
            raise ValueError(f"No context to run {phase}({scope}) hooks in")

        match phase, scope:
            case "before", "each":
                self._run_in_order(self.before_each, context)
            case "before", "all":
                self._run_in_order(self.before_all, context)
            case "after", "each" if example is not None:
                for hook in reversed(self.after_each):
                    example.call_with_capture(
                        "in an after(:each) hook", partial(hook, context)
                    )
            case "after", "all":
                self._run_in_order(self.after_all[::-1], context)
            case "around", "each" if example is not None and procsy is not None:
                self._run_around(example, context, procsy)
            case _:
                raise ValueError(f"Cannot run {phase}({scope}) hooks here")

    def _run_in_order(self, hooks: Sequence[Hook], context: ExampleContext) -> None:
        for hook in hooks:
            hook(context)

    def _run_around(
        self, example: "Example", context: ExampleContext, procsy: Procsy
    ) -> None:
        hooks = self.around_each_hooks_for(example)
        wrapped = procsy
        for hook in reversed(hooks):
            wrapped = wrapped.wrap(partial(hook, context, wrapped))
        log.debug("Running %d around hook(s) for %s", len(hooks), example.location)
        wrapped.run()
