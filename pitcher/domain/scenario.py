# pitcher/domain/scenario.py
"""
Scenario domain model
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from pitcher.domain.steps.base import Step


@dataclass(frozen=True)
class Scenario:
    """
    Named steps plus the session values they expect, as read from a file.
    """
    steps: List[Step]
    session: Dict[str, str] = field(default_factory=dict)
    source: str = ""

    def step_names(self) -> List[str]:
        return [s.name for s in self.steps if s.name]
