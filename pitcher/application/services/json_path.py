# pitcher/application/services/json_path.py
"""
Path lookup into JSON response bodies.

path examples:
  id
  data.items.0.id
  items.#          (array length)
  items.#.id       (id of every element, as a JSON array)
  meta\\.version    (key containing a dot)
"""
from __future__ import annotations

import json
from typing import Any, List, Tuple

_MISSING = object()


def extract_json(body: str, path: str) -> Tuple[str, bool]:
    """
    Return ``(value, found)``. The value is rendered as text: strings as-is,
    booleans as ``true``/``false``, null as an empty string, everything else
    as compact JSON.
    """
    if not body or not path:
        return "", False
    try:
        doc = json.loads(body)
    except ValueError:
        return "", False

    value = _resolve(doc, split_path(path))
    if value is _MISSING:
        return "", False
    return to_text(value), True


def split_path(path: str) -> List[str]:
    parts: List[str] = []
    cur = ""
    escaped = False
    for ch in path:
        if escaped:
            cur += ch
            escaped = False
        elif ch == "\\":
            escaped = True
        elif ch == ".":
            parts.append(cur)
            cur = ""
        else:
            cur += ch
    parts.append(cur)
    return parts


def to_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def _resolve(cur: Any, parts: List[str]) -> Any:
    for i, part in enumerate(parts):
        if part == "#":
            if not isinstance(cur, list):
                return _MISSING
            rest = parts[i + 1:]
            if not rest:
                return len(cur)
            mapped = [_resolve(item, rest) for item in cur]
            return [v for v in mapped if v is not _MISSING]
        cur = _resolve_part(cur, part)
        if cur is _MISSING:
            return _MISSING
    return cur


def _resolve_part(cur: Any, part: str) -> Any:
    if isinstance(cur, list):
        if not (part.isascii() and part.isdigit()):
            return _MISSING
        idx = int(part)
        return cur[idx] if idx < len(cur) else _MISSING
    if isinstance(cur, dict):
        return cur.get(part, _MISSING)
    return _MISSING
