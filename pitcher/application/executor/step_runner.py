# pitcher/application/executor/step_runner.py
from __future__ import annotations

import copy
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional

from pitcher.application.ports.http_client import HttpClientPort
from pitcher.application.ports.logger import LoggerPort
from pitcher.application.services.assertion_evaluator import AssertionEvaluator
from pitcher.application.services.processor_chain import ProcessorChain
from pitcher.application.services.redactor import mask_headers
from pitcher.application.services.url_builder import build_url
from pitcher.application.services.variable_resolver import VariableResolver
from pitcher.domain.exceptions import PitcherError, TransportError
from pitcher.domain.processors import PostProcessor, PreProcessor
from pitcher.domain.request import APPLICATION_JSON, CONTENT_TYPE, Request, Response
from pitcher.domain.session import Session
from pitcher.domain.steps.base import Step


class StepState(str, Enum):
    PENDING = "pending"
    PRE_PROCESSED = "pre_processed"
    RESOLVED = "resolved"
    DISPATCHED = "dispatched"
    POST_PROCESSED = "post_processed"
    ASSERTED = "asserted"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class StepResult:
    name: str
    state: StepState
    request: Request
    response: Optional[Response] = None
    error: Optional[PitcherError] = None
    warnings: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.state is StepState.SUCCEEDED


class StepRunner:
    """
    Runs one step end to end:
    pre-processors -> variable resolution -> dispatch -> post-processors -> assertions.

    The step's request is copied first, so the step itself can be run again.
    """

    def __init__(
        self,
        http_client: HttpClientPort,
        global_pre: Iterable[PreProcessor] = (),
        global_post: Iterable[PostProcessor] = (),
        resolver: Optional[VariableResolver] = None,
        evaluator: Optional[AssertionEvaluator] = None,
    ):
        self._http = http_client
        self._global_pre = list(global_pre)
        self._global_post = list(global_post)
        self._resolver = resolver or VariableResolver()
        self._evaluator = evaluator or AssertionEvaluator()

    def run(self, step: Step, session: Session, logger: LoggerPort) -> StepResult:
        request = copy.deepcopy(step.request)
        chain = ProcessorChain.compose(self._global_pre, self._global_post, step)
        state = StepState.PENDING

        warnings = chain.run_pre(request, session, logger)
        state = self._advance(state, StepState.PRE_PROCESSED, logger)

        for key in self._resolver.resolve_request(request, session):
            logger.warning("resolver.unresolved", key=key)
            warnings.append(f"unresolved placeholder: ${{{key}}}")
        state = self._advance(state, StepState.RESOLVED, logger)

        try:
            response = self._dispatch(request, session, logger)
        except TransportError as exc:
            logger.error("http.step_failed", error=str(exc))
            return self._failed(step, state, request, None, exc, warnings, logger)
        state = self._advance(state, StepState.DISPATCHED, logger)

        try:
            chain.run_post(request, response, session, logger)
            state = self._advance(state, StepState.POST_PROCESSED, logger)
            self._evaluator.evaluate(step.assertions, response, logger)
        except PitcherError as exc:
            return self._failed(step, state, request, response, exc, warnings, logger)
        state = self._advance(state, StepState.ASSERTED, logger)

        state = self._advance(state, StepState.SUCCEEDED, logger)
        return StepResult(
            name=step.label,
            state=state,
            request=request,
            response=response,
            warnings=warnings,
        )

    def _dispatch(self, request: Request, session: Session, logger: LoggerPort) -> Response:
        url = build_url(request, session)

        if request.body and not request.content_type:
            request.content_type = APPLICATION_JSON
        if request.content_type and not request.has_header(CONTENT_TYPE):
            request.set_header(CONTENT_TYPE, request.content_type)

        method = request.method.upper()
        logger.info("http.request", method=method, url=url)
        logger.debug("http.request_detail", headers=mask_headers(request.headers), body=request.body)

        resp = self._http.send(
            method,
            url,
            {k: list(v) for k, v in request.headers.items()},
            request.body or None,
        )
        response = Response(status_code=resp.status, body=resp.text, headers=dict(resp.headers or {}))

        logger.info("http.response", status=response.status_code, body_len=len(response.body))
        logger.debug("http.response_detail", headers=dict(response.headers), body=response.body[:2000])
        return response

    def _advance(self, current: StepState, new: StepState, logger: LoggerPort) -> StepState:
        logger.debug("step.state", from_state=current.value, to_state=new.value)
        return new

    def _failed(
        self,
        step: Step,
        state: StepState,
        request: Request,
        response: Optional[Response],
        error: PitcherError,
        warnings: List[str],
        logger: LoggerPort,
    ) -> StepResult:
        self._advance(state, StepState.FAILED, logger)
        return StepResult(
            name=step.label,
            state=StepState.FAILED,
            request=request,
            response=response,
            error=error,
            warnings=warnings,
        )
