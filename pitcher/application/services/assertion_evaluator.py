# pitcher/application/services/assertion_evaluator.py
from __future__ import annotations

from typing import Iterable

from pitcher.application.ports.logger import LoggerPort
from pitcher.domain.exceptions import AssertionFailedError
from pitcher.domain.processors import Assertion, hook_name
from pitcher.domain.request import Response


class AssertionEvaluator:
    def evaluate(self, assertions: Iterable[Assertion], response: Response, logger: LoggerPort) -> None:
        for assertion in assertions:
            name = hook_name(assertion)
            try:
                ok = bool(assertion(response))
            except Exception as exc:
                logger.warning("assertion.eval_failed", assertion=name, error=str(exc))
                raise AssertionFailedError(name, response.status_code) from exc

            if not ok:
                logger.error("assertion.failed", assertion=name, status=response.status_code)
                raise AssertionFailedError(name, response.status_code)
            logger.debug("assertion.passed", assertion=name)
