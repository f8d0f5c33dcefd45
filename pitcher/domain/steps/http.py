# pitcher/domain/steps/http.py
"""
Convenience builders, one per HTTP method.

Every builder attaches the ``success`` assertion; swap it with
``Step.with_assertions`` when a step expects another outcome.
"""
from __future__ import annotations

from typing import Dict, Optional

from pitcher.domain.assertions import success
from pitcher.domain.request import Request
from pitcher.domain.steps.base import Step


def expect_success(request: Request) -> Step:
    return Step(request=request, assertions=[success])


def get(path: str, query: Optional[Dict[str, str]] = None) -> Step:
    return expect_success(Request(method="GET", path=path, query=dict(query or {})))


def post(path: str, body: str = "", content_type: str = "") -> Step:
    return expect_success(Request(method="POST", path=path, body=body, content_type=content_type))


def put(path: str, body: str = "", content_type: str = "") -> Step:
    return expect_success(Request(method="PUT", path=path, body=body, content_type=content_type))


def patch(path: str, body: str = "", content_type: str = "") -> Step:
    return expect_success(Request(method="PATCH", path=path, body=body, content_type=content_type))


def delete(path: str, body: str = "", content_type: str = "") -> Step:
    return expect_success(Request(method="DELETE", path=path, body=body, content_type=content_type))
