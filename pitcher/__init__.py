"""
pitcher: run HTTP requests as an ordered sequence of steps sharing one session.
"""
from pitcher.application.executor.sequencer import SequenceResult
from pitcher.application.executor.step_runner import StepResult, StepState
from pitcher.application.processors import (
    bearer_auth,
    extract,
    extract_header,
    jwt_auth,
    log_payload,
    log_step,
    set_header,
    update_session,
)
from pitcher.client import Client, new_session
from pitcher.config import RunConfig
from pitcher.domain.assertions import NamedAssertion, body_contains, not_found, status_is, success
from pitcher.domain.exceptions import (
    AssertionFailedError,
    ExtractionError,
    InvalidUrlError,
    PitcherError,
    ProcessorError,
    ScenarioLoadError,
    SessionKeyMissingError,
    TransportError,
    UnknownStepError,
)
from pitcher.domain.request import Request, Response
from pitcher.domain.session import LayeredSession, MappingSource, Session
from pitcher.domain.steps import Step, delete, expect_success, get, patch, post, put

__all__ = [
    "Client",
    "RunConfig",
    "new_session",
    "Session",
    "LayeredSession",
    "MappingSource",
    "Request",
    "Response",
    "Step",
    "StepResult",
    "StepState",
    "SequenceResult",
    "get",
    "post",
    "put",
    "patch",
    "delete",
    "expect_success",
    "NamedAssertion",
    "success",
    "not_found",
    "status_is",
    "body_contains",
    "bearer_auth",
    "jwt_auth",
    "set_header",
    "update_session",
    "extract",
    "extract_header",
    "log_payload",
    "log_step",
    "PitcherError",
    "TransportError",
    "InvalidUrlError",
    "ProcessorError",
    "SessionKeyMissingError",
    "ExtractionError",
    "AssertionFailedError",
    "UnknownStepError",
    "ScenarioLoadError",
]
