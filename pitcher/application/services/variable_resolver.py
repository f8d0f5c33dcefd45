# pitcher/application/services/variable_resolver.py
from __future__ import annotations

import re
import uuid
from typing import Callable, List, Optional

from pitcher.domain.request import Request
from pitcher.domain.session import Session

RANDOM_UUID_TOKEN = "${randomUUID}"

_PLACEHOLDER = re.compile(r"\$\{(.*?)\}")


def _new_uuid() -> str:
    return str(uuid.uuid4())


class VariableResolver:
    """
    Rewrites the templated fields of a request in two passes:

    1. every ``${randomUUID}`` becomes a fresh UUID4, one per occurrence
    2. every ``${key}`` found in the session is replaced by its value

    Placeholders whose key the session does not know are kept verbatim.
    Neither pass looks at text produced by a substitution, so values that
    themselves contain ``${...}`` are never expanded again.
    """

    def __init__(self, id_factory: Callable[[], str] = _new_uuid):
        self._id_factory = id_factory

    def resolve(self, text: str, session: Session, unresolved: Optional[List[str]] = None) -> str:
        text = self.substitute_random_ids(text)
        return self.substitute_session_keys(text, session, unresolved)

    def resolve_request(self, request: Request, session: Session) -> List[str]:
        """
        Resolve body, host, path and query values in place.
        Returns the keys left unresolved, in order of appearance.
        """
        unresolved: List[str] = []
        request.body = self.resolve(request.body, session, unresolved)
        request.host = self.resolve(request.host, session, unresolved)
        request.path = self.resolve(request.path, session, unresolved)
        for key, value in list(request.query.items()):
            request.query[key] = self.resolve(value, session, unresolved)
        return unresolved

    def substitute_random_ids(self, text: str) -> str:
        if not text or RANDOM_UUID_TOKEN not in text:
            return text
        parts = text.split(RANDOM_UUID_TOKEN)
        out = parts[0]
        for part in parts[1:]:
            out += self._id_factory() + part
        return out

    def substitute_session_keys(
        self,
        text: str,
        session: Session,
        unresolved: Optional[List[str]] = None,
    ) -> str:
        if not text or "${" not in text:
            return text

        def _replace(match: "re.Match[str]") -> str:
            key = match.group(1)
            value = session.get(key)
            if not value:
                if unresolved is not None:
                    unresolved.append(key)
                return match.group(0)
            return value

        return _PLACEHOLDER.sub(_replace, text)
