# pitcher/infrastructure/http/requests_client.py
from __future__ import annotations

from typing import Dict, List, Optional

import requests

from pitcher.application.ports.http_client import HttpClientPort, HttpResponse
from pitcher.domain.exceptions import InvalidUrlError, TransportError


class RequestsHttpClient(HttpClientPort):
    def __init__(
        self,
        timeout_sec: float = 20,
        verify_tls: bool = True,
        base_headers: Optional[Dict[str, str]] = None,
        session: Optional[requests.Session] = None,
    ):
        self._session = session or requests.Session()
        self._timeout = timeout_sec
        self._verify = verify_tls
        self._base_headers = base_headers or {}

    def send(
        self,
        method: str,
        url: str,
        headers: Dict[str, List[str]],
        body: Optional[str] = None,
    ) -> HttpResponse:
        merged = dict(self._base_headers)
        # requests takes one value per header name
        for name, values in (headers or {}).items():
            merged[name] = ", ".join(values)

        try:
            resp = self._session.request(
                method=method.upper(),
                url=url,
                headers=merged,
                data=body.encode("utf-8") if body else None,
                timeout=self._timeout,
                verify=self._verify,
            )
            text = resp.text
        except (requests.exceptions.InvalidURL, requests.exceptions.MissingSchema, requests.exceptions.InvalidSchema) as exc:
            raise InvalidUrlError(str(exc)) from exc
        except requests.RequestException as exc:
            raise TransportError(f"{method.upper()} {url} failed: {exc}") from exc

        return HttpResponse(
            status=resp.status_code,
            text=text,
            headers=dict(resp.headers),
            url=str(resp.url),
        )
