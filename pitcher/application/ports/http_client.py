# pitcher/application/ports/http_client.py
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass(frozen=True)
class HttpResponse:
    status: int
    text: str
    headers: Dict[str, str] = field(default_factory=dict)
    url: str = ""


class HttpClientPort(ABC):
    """
    Transport used by the step runner.

    Implementations raise ``TransportError`` for anything that keeps a
    response from coming back (DNS, refused connection, timeout, read error).
    """

    @abstractmethod
    def send(
        self,
        method: str,
        url: str,
        headers: Dict[str, List[str]],
        body: Optional[str] = None,
    ) -> HttpResponse:
        ...
