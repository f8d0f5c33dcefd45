# pitcher/application/services/redactor.py
from __future__ import annotations

from typing import Any, Dict, List, Mapping

SENSITIVE_KEYS = {"password", "passwd", "pass", "authorization", "cookie", "set-cookie", "x-api-key"}
SENSITIVE_MARKERS = ("token", "secret", "password", "apikey", "api_key")

MASK = "********"


def is_sensitive(key: str) -> bool:
    lowered = key.lower()
    return lowered in SENSITIVE_KEYS or any(m in lowered for m in SENSITIVE_MARKERS)


def mask_value(key: str, value: Any) -> Any:
    if value is not None and is_sensitive(key):
        return MASK
    return value


def mask_dict(d: Mapping[str, Any]) -> Dict[str, Any]:
    return {k: mask_value(k, v) for k, v in d.items()}


def mask_headers(headers: Mapping[str, List[str]]) -> Dict[str, List[str]]:
    return {k: [mask_value(k, v) for v in values] for k, values in headers.items()}
