# pitcher/domain/steps/base.py
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import List, Optional

from pitcher.domain.processors import Assertion, PostProcessor, PreProcessor
from pitcher.domain.request import Request


@dataclass(frozen=True)
class Step:
    request: Request
    assertions: List[Assertion] = field(default_factory=list)
    pre_processors: List[PreProcessor] = field(default_factory=list)
    post_processors: List[PostProcessor] = field(default_factory=list)
    name: Optional[str] = None

    @property
    def label(self) -> str:
        return self.name or f"{self.request.method.upper()} {self.request.path}"

    def with_pre_processors(self, *pre_processors: PreProcessor) -> "Step":
        return replace(self, pre_processors=list(pre_processors))

    def with_post_processors(self, *post_processors: PostProcessor) -> "Step":
        return replace(self, post_processors=list(post_processors))

    def with_assertions(self, *assertions: Assertion) -> "Step":
        return replace(self, assertions=list(assertions))

    def named(self, name: str) -> "Step":
        return replace(self, name=name)
