# tests/recording_logger.py
from __future__ import annotations

from typing import Any, Dict, List, Optional


class RecordingLogger:
    def __init__(self, records: Optional[List[Dict[str, Any]]] = None, bound: Optional[Dict[str, Any]] = None):
        self.records: List[Dict[str, Any]] = records if records is not None else []
        self.bound = dict(bound or {})

    def bind(self, **fields: Any) -> "RecordingLogger":
        merged = dict(self.bound)
        merged.update(fields)
        return RecordingLogger(self.records, merged)

    def debug(self, event: str, **fields: Any) -> None:
        self._emit("debug", event, fields)

    def info(self, event: str, **fields: Any) -> None:
        self._emit("info", event, fields)

    def warning(self, event: str, **fields: Any) -> None:
        self._emit("warning", event, fields)

    def error(self, event: str, **fields: Any) -> None:
        self._emit("error", event, fields)

    def _emit(self, level: str, event: str, fields: Dict[str, Any]) -> None:
        self.records.append({"level": level, "event": event, **self.bound, **fields})

    def events(self, event: Optional[str] = None, level: Optional[str] = None) -> List[Dict[str, Any]]:
        return [
            r for r in self.records
            if (event is None or r["event"] == event) and (level is None or r["level"] == level)
        ]
