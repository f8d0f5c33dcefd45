# pitcher/application/services/processor_chain.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List

from pitcher.application.ports.logger import LoggerPort
from pitcher.domain.exceptions import PitcherError, ProcessorError
from pitcher.domain.processors import PostProcessor, PreProcessor, hook_name
from pitcher.domain.request import Request, Response
from pitcher.domain.session import Session
from pitcher.domain.steps.base import Step


@dataclass(frozen=True)
class ProcessorChain:
    """
    Global hooks followed by the step's own, each list in registration order.
    """
    pre_processors: List[PreProcessor] = field(default_factory=list)
    post_processors: List[PostProcessor] = field(default_factory=list)

    @classmethod
    def compose(
        cls,
        global_pre: Iterable[PreProcessor],
        global_post: Iterable[PostProcessor],
        step: Step,
    ) -> "ProcessorChain":
        return cls(
            pre_processors=[*global_pre, *step.pre_processors],
            post_processors=[*global_post, *step.post_processors],
        )

    def run_pre(self, request: Request, session: Session, logger: LoggerPort) -> List[str]:
        """Run every pre-processor. Failures are logged and returned, never raised."""
        warnings: List[str] = []
        for proc in self.pre_processors:
            name = hook_name(proc)
            try:
                proc(request, session)
            except Exception as exc:
                logger.warning("processor.pre_failed", processor=name, error=str(exc))
                warnings.append(f"{name}: {exc}")
        return warnings

    def run_post(self, request: Request, response: Response, session: Session, logger: LoggerPort) -> None:
        """Run post-processors until one raises; the error ends the step."""
        for proc in self.post_processors:
            name = hook_name(proc)
            try:
                proc(request, response, session)
            except PitcherError as exc:
                logger.error("processor.post_failed", processor=name, error=str(exc))
                raise
            except Exception as exc:
                logger.error("processor.post_failed", processor=name, error=str(exc))
                raise ProcessorError(name, str(exc)) from exc
