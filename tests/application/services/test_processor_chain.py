# tests/application/services/test_processor_chain.py
import pytest

from recording_logger import RecordingLogger

from pitcher.application.services.processor_chain import ProcessorChain
from pitcher.domain.exceptions import ExtractionError, ProcessorError
from pitcher.domain.request import Request, Response
from pitcher.domain.session import LayeredSession
from pitcher.domain.steps import get


def _tag(value):
    def _pre(request, session):
        request.add_header("X-Order", value)
    return _pre


def _broken_pre(request, session):
    raise RuntimeError("boom")


def _broken_post(request, response, session):
    raise RuntimeError("kaput")


def test_compose_puts_global_hooks_first():
    step = get("/x").with_pre_processors(_tag("step"))
    chain = ProcessorChain.compose([_tag("global")], [], step)
    request = Request(method="GET")

    chain.run_pre(request, LayeredSession(), RecordingLogger())

    assert request.headers["X-Order"] == ["global", "step"]


def test_pre_failure_is_logged_and_chain_continues():
    logger = RecordingLogger()
    chain = ProcessorChain(pre_processors=[_broken_pre, _tag("after")])
    request = Request(method="GET")

    warnings = chain.run_pre(request, LayeredSession(), logger)

    assert warnings == ["_broken_pre: boom"]
    assert request.headers["X-Order"] == ["after"]
    [record] = logger.events("processor.pre_failed")
    assert record["level"] == "warning"
    assert record["processor"] == "_broken_pre"


def test_post_failure_is_wrapped():
    logger = RecordingLogger()
    chain = ProcessorChain(post_processors=[_broken_post])

    with pytest.raises(ProcessorError) as exc_info:
        chain.run_post(Request(method="GET"), Response(status_code=200), LayeredSession(), logger)

    assert exc_info.value.processor == "_broken_post"
    assert isinstance(exc_info.value.__cause__, RuntimeError)
    assert logger.events("processor.post_failed", level="error")


def test_post_failure_stops_remaining_processors():
    seen = []

    def _raise_extraction(request, response, session):
        raise ExtractionError("id", "0.id")

    def _record(request, response, session):
        seen.append("ran")

    chain = ProcessorChain(post_processors=[_raise_extraction, _record])

    with pytest.raises(ExtractionError):
        chain.run_post(Request(method="GET"), Response(status_code=200), LayeredSession(), RecordingLogger())

    assert seen == []
