# pitcher/application/executor/sequencer.py
from __future__ import annotations

import time
import uuid
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from pitcher.application.executor.step_runner import StepResult, StepRunner
from pitcher.application.ports.logger import LoggerPort
from pitcher.domain.exceptions import PitcherError
from pitcher.domain.request import Response
from pitcher.domain.session import Session
from pitcher.domain.steps.base import Step


@dataclass(frozen=True)
class SequenceResult:
    ok: bool
    responses: List[Response] = field(default_factory=list)
    error: Optional[PitcherError] = None
    failed_step: Optional[str] = None
    failed_response: Optional[Response] = None
    warnings: List[str] = field(default_factory=list)
    run_id: str = ""

    def raise_for_error(self) -> "SequenceResult":
        if self.error is not None:
            raise self.error
        return self


class Sequencer:
    """
    Runs steps strictly in order and stops at the first failed step.

    ``responses`` only ever holds the responses of steps that succeeded;
    the failing step's response, when there is one, is ``failed_response``.
    """

    def __init__(self, runner: StepRunner, session: Session, logger: LoggerPort):
        self._runner = runner
        self._session = session
        self._logger = logger

    def execute(self, steps: Iterable[Step], run_id: str = "") -> SequenceResult:
        run_id = run_id or uuid.uuid4().hex
        logger = self._logger.bind(run_id=run_id)

        responses: List[Response] = []
        warnings: List[str] = []

        for index, step in enumerate(steps):
            step_logger = logger.bind(step=step.label, index=index)
            step_logger.info("step.start", method=step.request.method.upper(), path=step.request.path)
            t0 = time.perf_counter()

            result: StepResult = self._runner.run(step, self._session, step_logger)

            step_logger.info(
                "step.end",
                ok=result.ok,
                state=result.state.value,
                elapsed_ms=int((time.perf_counter() - t0) * 1000),
            )
            warnings.extend(f"{result.name}: {w}" for w in result.warnings)

            if not result.ok:
                logger.error("run.failed", step=result.name, error=str(result.error))
                return SequenceResult(
                    ok=False,
                    responses=responses,
                    error=result.error,
                    failed_step=result.name,
                    failed_response=result.response,
                    warnings=warnings,
                    run_id=run_id,
                )
            responses.append(result.response)

        logger.info("run.succeeded", steps=len(responses))
        return SequenceResult(ok=True, responses=responses, warnings=warnings, run_id=run_id)
