# pitcher/application/services/url_builder.py
from __future__ import annotations

from typing import Mapping
from urllib.parse import urlencode, urlsplit, urlunsplit

from pitcher.domain.exceptions import InvalidUrlError
from pitcher.domain.request import Request
from pitcher.domain.session import Session

HOST_KEY = "host"


def is_absolute(url: str) -> bool:
    return url.startswith("http://") or url.startswith("https://")


def is_parsable_host(host: str) -> bool:
    """Whether ``host`` splits cleanly into a URL with a valid port and a clean netloc."""
    try:
        parts = urlsplit(host)
        parts.port  # raises ValueError on a non-numeric port
    except ValueError:
        return False
    return not any(ch.isspace() or ord(ch) < 0x20 or ord(ch) == 0x7F for ch in parts.netloc)


def effective_host(request: Request, session: Session) -> str:
    """Request host when set and parsable, otherwise the session's ``host``."""
    if request.host and is_parsable_host(request.host):
        return request.host
    return session.get(HOST_KEY) or ""


def join_url(host: str, path: str) -> str:
    if not path:
        return host
    if not host:
        return path
    return host.rstrip("/") + "/" + path.lstrip("/")


def with_query(url: str, query: Mapping[str, str]) -> str:
    if not query:
        return url
    parts = urlsplit(url)
    encoded = urlencode(sorted(query.items()))
    merged = f"{parts.query}&{encoded}" if parts.query else encoded
    return urlunsplit(parts._replace(query=merged))


def build_url(request: Request, session: Session) -> str:
    if is_absolute(request.path):
        url = request.path
    else:
        url = join_url(effective_host(request, session), request.path)

    try:
        parts = urlsplit(url)
    except ValueError as exc:
        raise InvalidUrlError(f"invalid request url {url!r}: {exc}") from exc
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise InvalidUrlError(f"invalid request url {url!r}: missing scheme or host")

    return with_query(url, request.query)
