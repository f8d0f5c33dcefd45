# pitcher/domain/session.py
"""
Run-scoped key/value store shared by every step of a run.

Reads walk an ordered list of lookup sources and stop at the first one
holding a non-empty value. Writes always land in the in-memory map, which is
the first source, so a value put during the run shadows the environment.
A Session is not safe for concurrent runs.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional, Protocol


class SessionSource(Protocol):
    name: str

    def lookup(self, key: str) -> Optional[str]:
        ...


class Session(Protocol):
    def get(self, key: str) -> Optional[str]:
        ...

    def put(self, key: str, value: str) -> None:
        ...


@dataclass
class MappingSource:
    values: Dict[str, str] = field(default_factory=dict)
    name: str = "memory"

    def lookup(self, key: str) -> Optional[str]:
        return self.values.get(key)


class LayeredSession:
    def __init__(
        self,
        values: Optional[Mapping[str, str]] = None,
        fallbacks: Iterable[SessionSource] = (),
    ):
        self._memory = MappingSource(dict(values or {}))
        self._sources: List[SessionSource] = [self._memory, *fallbacks]

    @property
    def sources(self) -> List[SessionSource]:
        return list(self._sources)

    def get(self, key: str) -> Optional[str]:
        for source in self._sources:
            value = source.lookup(key)
            if value:
                return value
        return None

    def put(self, key: str, value: str) -> None:
        self._memory.values[key] = value

    def snapshot(self) -> Dict[str, str]:
        """Copy of the in-memory entries only."""
        return dict(self._memory.values)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key) is not None

    def __repr__(self) -> str:
        names = ",".join(s.name for s in self._sources)
        return f"LayeredSession(sources=[{names}], keys={sorted(self._memory.values)})"
