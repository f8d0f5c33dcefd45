# tests/application/executor/test_step_registry.py
import pytest

from pitcher.application.executor.step_registry import StepRegistry
from pitcher.domain.exceptions import UnknownStepError
from pitcher.domain.steps import get


class TestStepRegistry:
    def test_add_and_get(self):
        registry = StepRegistry()
        registry.add("list", get("/posts"))

        step = registry.get("list")

        assert step.request.path == "/posts"
        assert step.name == "list"
        assert "list" in registry
        assert len(registry) == 1

    def test_unknown_name_raises(self):
        with pytest.raises(UnknownStepError) as exc_info:
            StepRegistry().get("nope")

        assert exc_info.value.name == "nope"

    def test_empty_name_rejected(self):
        with pytest.raises(ValueError):
            StepRegistry().add("", get("/"))

    def test_add_replaces_existing_name(self):
        registry = StepRegistry()
        registry.add("s", get("/old"))
        registry.add("s", get("/new"))

        assert registry.get("s").request.path == "/new"
        assert len(registry) == 1

    def test_resolve_keeps_requested_order(self):
        registry = StepRegistry()
        registry.add("b", get("/b"))
        registry.add("a", get("/a"))

        steps = registry.resolve(["b", "a", "b"])

        assert [s.request.path for s in steps] == ["/b", "/a", "/b"]

    def test_names_sorted(self):
        registry = StepRegistry()
        registry.add("zeta", get("/z"))
        registry.add("alpha", get("/a"))

        assert registry.names() == ["alpha", "zeta"]
