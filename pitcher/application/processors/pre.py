# pitcher/application/processors/pre.py
"""
Ready-made pre-processors.

A pre-processor that cannot do its job raises; the runner logs the error as
a warning and carries on with the request as it is.
"""
from __future__ import annotations

from typing import Callable

from pitcher.domain.exceptions import SessionKeyMissingError
from pitcher.domain.processors import PreProcessor
from pitcher.domain.request import AUTHORIZATION, Request
from pitcher.domain.session import Session

JWT_KEY = "jwt_token"


def _named(name: str) -> Callable[[PreProcessor], PreProcessor]:
    def _wrap(fn: PreProcessor) -> PreProcessor:
        fn.__name__ = name
        fn.__qualname__ = name
        return fn
    return _wrap


def bearer_auth(key: str = JWT_KEY) -> PreProcessor:
    """Set ``Authorization: Bearer <session[key]>``."""

    @_named(f"bearer_auth({key})")
    def _bearer_auth(request: Request, session: Session) -> None:
        token = session.get(key)
        if not token:
            raise SessionKeyMissingError(key)
        request.set_header(AUTHORIZATION, f"Bearer {token}")

    return _bearer_auth


jwt_auth = _named("jwt_auth")(bearer_auth(JWT_KEY))


def update_session(key: str, value: str) -> PreProcessor:
    @_named(f"update_session({key})")
    def _update_session(request: Request, session: Session) -> None:
        session.put(key, value)

    return _update_session


def set_header(name: str, value: str) -> PreProcessor:
    @_named(f"set_header({name})")
    def _set_header(request: Request, session: Session) -> None:
        request.set_header(name, value)

    return _set_header
