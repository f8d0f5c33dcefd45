# pitcher/domain/request.py
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

APPLICATION_JSON = "application/json"
CONTENT_TYPE = "Content-Type"
AUTHORIZATION = "Authorization"


def canonical_header_key(name: str) -> str:
    # "content-type" -> "Content-Type"
    return "-".join(part[:1].upper() + part[1:].lower() for part in name.strip().split("-"))


@dataclass
class Request:
    method: str
    path: str = ""
    host: str = ""
    body: str = ""
    content_type: str = ""
    query: Dict[str, str] = field(default_factory=dict)
    headers: Dict[str, List[str]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        canonical: Dict[str, List[str]] = {}
        for name, values in self.headers.items():
            canonical.setdefault(canonical_header_key(name), []).extend(values)
        self.headers = canonical

    def add_header(self, name: str, value: str) -> None:
        self.headers.setdefault(canonical_header_key(name), []).append(value)

    def set_header(self, name: str, value: str) -> None:
        self.headers[canonical_header_key(name)] = [value]

    def get_header(self, name: str) -> Optional[str]:
        values = self.headers.get(canonical_header_key(name))
        return values[0] if values else None

    def has_header(self, name: str) -> bool:
        return bool(self.headers.get(canonical_header_key(name)))


@dataclass(frozen=True)
class Response:
    status_code: int
    body: str = ""
    headers: Mapping[str, str] = field(default_factory=dict)

    def header(self, name: str) -> Optional[str]:
        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return None

    def is_json(self) -> bool:
        return APPLICATION_JSON in (self.header(CONTENT_TYPE) or "")

    def json(self) -> Any:
        return json.loads(self.body)
