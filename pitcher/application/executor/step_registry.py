# pitcher/application/executor/step_registry.py
from __future__ import annotations

from typing import Dict, Iterable, List

from pitcher.domain.exceptions import UnknownStepError
from pitcher.domain.steps.base import Step


class StepRegistry:
    def __init__(self) -> None:
        self._steps: Dict[str, Step] = {}

    def add(self, name: str, step: Step) -> None:
        if not name:
            raise ValueError("step name must not be empty")
        self._steps[name] = step if step.name == name else step.named(name)

    def get(self, name: str) -> Step:
        step = self._steps.get(name)
        if step is None:
            raise UnknownStepError(name)
        return step

    def resolve(self, names: Iterable[str]) -> List[Step]:
        return [self.get(name) for name in names]

    def names(self) -> List[str]:
        return sorted(self._steps)

    def __contains__(self, name: object) -> bool:
        return name in self._steps

    def __len__(self) -> int:
        return len(self._steps)
