# pitcher/domain/assertions.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from pitcher.domain.request import Response


@dataclass(frozen=True)
class NamedAssertion:
    name: str
    predicate: Callable[[Response], bool]

    def __call__(self, response: Response) -> bool:
        return bool(self.predicate(response))


def _is_success(response: Response) -> bool:
    return 200 <= response.status_code <= 299


def _is_not_found(response: Response) -> bool:
    return response.status_code == 404


success = NamedAssertion("success", _is_success)
not_found = NamedAssertion("not_found", _is_not_found)


def status_is(*codes: int) -> NamedAssertion:
    if not codes:
        raise ValueError("status_is needs at least one status code")
    allowed = frozenset(codes)
    label = "|".join(str(c) for c in sorted(allowed))
    return NamedAssertion(f"status_is({label})", lambda r: r.status_code in allowed)


def body_contains(text: str) -> NamedAssertion:
    return NamedAssertion(f"body_contains({text!r})", lambda r: text in (r.body or ""))
