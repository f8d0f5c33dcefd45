# pitcher/domain/processors.py
"""
Call shapes of the three hook kinds a step carries.

- PreProcessor: mutates the outgoing request and/or the session. Raising is
  a soft failure; the runner logs it and moves on.
- PostProcessor: reads the response, may write to the session. Raising
  fails the step.
- Assertion: boolean predicate over the response. False fails the step.
"""
from __future__ import annotations

import functools
from typing import Any, Callable

from pitcher.domain.request import Request, Response
from pitcher.domain.session import Session

PreProcessor = Callable[[Request, Session], None]
PostProcessor = Callable[[Request, Response, Session], None]
Assertion = Callable[[Response], bool]


def hook_name(hook: Any) -> str:
    if isinstance(hook, functools.partial):
        return hook_name(hook.func)
    name = getattr(hook, "name", None) or getattr(hook, "__name__", None)
    return str(name) if name else type(hook).__name__
