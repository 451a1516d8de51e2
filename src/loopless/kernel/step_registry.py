from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from loopless.kernel.scenario import StepFn


class UnknownStepError(KeyError):
    pass


# Factory signature: (per-step config overrides, wiring bundle) -> step callable.
StepFactory = Callable[[dict[str, object], dict[str, object]], StepFn]


@dataclass
class StepRegistry:
    # Names usable under pipeline.steps; re-registering a name replaces its factory.
    _factories: dict[str, StepFactory] = field(default_factory=dict)

    def register(self, name: str, factory: StepFactory) -> None:
        if not name:
            raise ValueError("step name must not be empty")
        self._factories[name] = factory

    def get(self, name: str) -> StepFactory:
        try:
            return self._factories[name]
        except KeyError:
            raise UnknownStepError(name) from None

    def __contains__(self, name: object) -> bool:
        return name in self._factories

    def names(self) -> list[str]:
        return sorted(self._factories)
