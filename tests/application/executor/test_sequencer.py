# tests/application/executor/test_sequencer.py
import pytest

from mock_http_client import MockHttpClient
from recording_logger import RecordingLogger

from pitcher.application.executor.sequencer import Sequencer
from pitcher.application.executor.step_runner import StepRunner
from pitcher.application.ports.http_client import HttpResponse
from pitcher.application.processors.post import extract
from pitcher.domain.exceptions import AssertionFailedError
from pitcher.domain.session import LayeredSession
from pitcher.domain.steps import get, post

HOST = "https://api.example.com"


def _sequencer(http, logger=None, **session_values):
    session = LayeredSession({"host": HOST, **session_values})
    return Sequencer(StepRunner(http), session, logger or RecordingLogger()), session


class TestSequencer:
    def test_all_steps_succeed(self):
        http = MockHttpClient()
        sequencer, _ = _sequencer(http)

        result = sequencer.execute([get("/a").named("A"), get("/b").named("B")])

        assert result.ok is True
        assert len(result.responses) == 2
        assert result.error is None
        assert result.failed_step is None
        assert http.urls == [f"{HOST}/a", f"{HOST}/b"]

    def test_stops_at_first_failure(self):
        http = MockHttpClient(
            routes={("GET", f"{HOST}/b"): HttpResponse(500, "boom")},
        )
        sequencer, _ = _sequencer(http)

        result = sequencer.execute([get("/a").named("A"), get("/b").named("B"), get("/c").named("C")])

        assert result.ok is False
        assert result.failed_step == "B"
        assert isinstance(result.error, AssertionFailedError)
        assert len(result.responses) == 1
        assert result.failed_response.status_code == 500
        assert http.urls == [f"{HOST}/a", f"{HOST}/b"]

    def test_extracted_value_feeds_later_step(self):
        http = MockHttpClient(
            routes={("POST", f"{HOST}/posts"): HttpResponse(201, '{"id": 42}')},
        )
        sequencer, session = _sequencer(http)
        create = post("/posts", '{"title": "${randomUUID}"}').with_post_processors(extract("id", "id"))

        result = sequencer.execute([create, get("/posts/${id}")])

        assert result.ok is True
        assert session.get("id") == "42"
        assert http.urls[1] == f"{HOST}/posts/42"

    def test_warnings_are_prefixed_with_step_label(self):
        sequencer, _ = _sequencer(MockHttpClient())

        result = sequencer.execute([get("/users/${id}")])

        assert result.warnings == ["GET /users/${id}: unresolved placeholder: ${id}"]

    def test_raise_for_error(self):
        sequencer, _ = _sequencer(MockHttpClient(default=HttpResponse(500, "")))

        result = sequencer.execute([get("/a")])

        with pytest.raises(AssertionFailedError):
            result.raise_for_error()

    def test_raise_for_error_returns_result_on_success(self):
        sequencer, _ = _sequencer(MockHttpClient())

        result = sequencer.execute([get("/a")])

        assert result.raise_for_error() is result

    def test_run_id_and_step_are_bound_to_logs(self):
        logger = RecordingLogger()
        sequencer, _ = _sequencer(MockHttpClient(), logger)

        result = sequencer.execute([get("/a").named("A")], run_id="run-1")

        assert result.run_id == "run-1"
        [start] = logger.events("step.start")
        assert start["run_id"] == "run-1"
        assert start["step"] == "A"
        assert start["index"] == 0
        [end] = logger.events("step.end")
        assert end["ok"] is True
        assert end["state"] == "succeeded"
        assert isinstance(end["elapsed_ms"], int)
        assert logger.events("run.succeeded")

    def test_run_id_generated_when_missing(self):
        sequencer, _ = _sequencer(MockHttpClient())

        assert sequencer.execute([]).run_id

    def test_empty_sequence_succeeds(self):
        http = MockHttpClient()
        sequencer, _ = _sequencer(http)

        result = sequencer.execute([])

        assert result.ok is True
        assert result.responses == []
        assert http.sent == []
