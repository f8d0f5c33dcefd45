# pitcher/application/processors/catalog.py
"""
Name -> factory tables used to turn processor references from scenario
files into callables.

A reference is either a bare name (``log_step``) or a single-key mapping
from name to keyword arguments (``{extract: {key: id, path: 0.id}}``).
"""
from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, Mapping, Union

from pitcher.application.processors.post import extract, extract_header, log_payload, log_step
from pitcher.application.processors.pre import bearer_auth, jwt_auth, set_header, update_session
from pitcher.domain.assertions import body_contains, not_found, status_is, success
from pitcher.domain.exceptions import ScenarioLoadError
from pitcher.domain.processors import Assertion, PostProcessor, PreProcessor

ProcessorRef = Union[str, Mapping[str, Any]]


def _status_is(codes: Union[int, Iterable[int]]) -> Assertion:
    if isinstance(codes, int):
        return status_is(codes)
    return status_is(*codes)


def default_pre_factories() -> Dict[str, Callable[..., PreProcessor]]:
    return {
        "jwt_auth": lambda: jwt_auth,
        "bearer_auth": bearer_auth,
        "update_session": update_session,
        "set_header": set_header,
    }


def default_post_factories() -> Dict[str, Callable[..., PostProcessor]]:
    return {
        "log_step": lambda: log_step,
        "log_payload": lambda: log_payload,
        "extract": extract,
        "extract_header": extract_header,
    }


def default_assertion_factories() -> Dict[str, Callable[..., Assertion]]:
    return {
        "success": lambda: success,
        "not_found": lambda: not_found,
        "status_is": _status_is,
        "body_contains": body_contains,
    }


class ProcessorCatalog:
    def __init__(self) -> None:
        self._tables: Dict[str, Dict[str, Callable[..., Any]]] = {
            "pre": default_pre_factories(),
            "post": default_post_factories(),
            "assert": default_assertion_factories(),
        }

    def register_pre(self, name: str, factory: Callable[..., PreProcessor]) -> None:
        self._tables["pre"][name] = factory

    def register_post(self, name: str, factory: Callable[..., PostProcessor]) -> None:
        self._tables["post"][name] = factory

    def register_assertion(self, name: str, factory: Callable[..., Assertion]) -> None:
        self._tables["assert"][name] = factory

    def build_pre(self, ref: ProcessorRef) -> PreProcessor:
        return self._build("pre", ref)

    def build_post(self, ref: ProcessorRef) -> PostProcessor:
        return self._build("post", ref)

    def build_assertion(self, ref: ProcessorRef) -> Assertion:
        return self._build("assert", ref)

    def _build(self, kind: str, ref: ProcessorRef) -> Any:
        if isinstance(ref, str):
            name, kwargs = ref, {}
        elif isinstance(ref, Mapping) and len(ref) == 1:
            name, kwargs = next(iter(ref.items()))
            kwargs = kwargs or {}
            if not isinstance(kwargs, Mapping):
                raise ScenarioLoadError(f"arguments of {kind} processor {name} must be a mapping")
        else:
            raise ScenarioLoadError(f"invalid {kind} processor reference: {ref!r}")

        factory = self._tables[kind].get(name)
        if factory is None:
            raise ScenarioLoadError(f"unknown {kind} processor: {name}")
        try:
            return factory(**kwargs)
        except (TypeError, ValueError) as exc:
            raise ScenarioLoadError(f"invalid arguments for {kind} processor {name}: {exc}") from exc
