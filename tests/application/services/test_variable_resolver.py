# tests/application/services/test_variable_resolver.py
import itertools
import uuid

from pitcher.application.services.variable_resolver import RANDOM_UUID_TOKEN, VariableResolver
from pitcher.domain.request import Request
from pitcher.domain.session import LayeredSession


def _counter_ids():
    counter = itertools.count(1)
    return lambda: f"id-{next(counter)}"


class TestSubstituteSessionKeys:
    def test_text_without_placeholders_is_unchanged(self):
        resolver = VariableResolver()
        session = LayeredSession({"with": "W"})

        assert resolver.resolve("plain text", session) == "plain text"
        assert resolver.resolve("", session) == ""

    def test_every_occurrence_is_replaced(self):
        resolver = VariableResolver()
        session = LayeredSession({"with": "W", "place": "P"})

        assert resolver.resolve("a ${with} b ${place}c ${with} d", session) == "a W b Pc W d"

    def test_sentence_with_repeated_placeholder(self):
        resolver = VariableResolver()
        session = LayeredSession({"with": "with", "place": "place"})

        out = resolver.resolve("some text ${with} some ${place}holders to be ${with} updated", session)

        assert out == "some text with some placeholders to be with updated"

    def test_unknown_key_is_kept_and_reported(self):
        resolver = VariableResolver()
        session = LayeredSession({"known": "K"})
        unresolved = []

        out = resolver.resolve("${known}/${missing}", session, unresolved)

        assert out == "K/${missing}"
        assert unresolved == ["missing"]

    def test_substituted_value_is_not_expanded_again(self):
        resolver = VariableResolver()
        session = LayeredSession({"a": "${b}", "b": "B"})

        assert resolver.resolve("${a}", session) == "${b}"


class TestRandomIds:
    def test_each_occurrence_gets_its_own_id(self):
        resolver = VariableResolver(id_factory=_counter_ids())

        out = resolver.resolve(f"{RANDOM_UUID_TOKEN}-{RANDOM_UUID_TOKEN}", LayeredSession())

        assert out == "id-1-id-2"

    def test_default_ids_are_uuid4(self):
        out = VariableResolver().resolve(RANDOM_UUID_TOKEN, LayeredSession())

        assert uuid.UUID(out).version == 4

    def test_random_ids_run_before_session_keys(self):
        resolver = VariableResolver(id_factory=lambda: "generated")
        session = LayeredSession({"randomUUID": "from-session"})

        assert resolver.resolve("${randomUUID}", session) == "generated"


class TestResolveRequest:
    def test_resolves_body_host_path_and_query(self):
        resolver = VariableResolver()
        session = LayeredSession({"id": "7", "base": "https://api.example.com", "q": "john"})
        request = Request(
            method="POST",
            path="/users/${id}",
            host="${base}",
            body='{"id": "${id}"}',
            query={"name": "${q}"},
        )

        unresolved = resolver.resolve_request(request, session)

        assert unresolved == []
        assert request.path == "/users/7"
        assert request.host == "https://api.example.com"
        assert request.body == '{"id": "7"}'
        assert request.query == {"name": "john"}

    def test_headers_are_left_alone(self):
        resolver = VariableResolver()
        request = Request(method="GET", path="/", headers={"X-Id": ["${id}"]})

        resolver.resolve_request(request, LayeredSession({"id": "7"}))

        assert request.headers == {"X-Id": ["${id}"]}

    def test_returns_unresolved_keys_in_order(self):
        resolver = VariableResolver()
        request = Request(method="GET", path="/${a}/${b}", body="${c}")

        unresolved = resolver.resolve_request(request, LayeredSession())

        assert unresolved == ["c", "a", "b"]
