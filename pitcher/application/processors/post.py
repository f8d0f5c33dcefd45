# pitcher/application/processors/post.py
from __future__ import annotations

import json
from typing import Callable

from loguru import logger

from pitcher.application.services.json_path import extract_json
from pitcher.domain.exceptions import ExtractionError
from pitcher.domain.processors import PostProcessor
from pitcher.domain.request import Request, Response
from pitcher.domain.session import Session


def _named(name: str) -> Callable[[PostProcessor], PostProcessor]:
    def _wrap(fn: PostProcessor) -> PostProcessor:
        fn.__name__ = name
        fn.__qualname__ = name
        return fn
    return _wrap


def log_step(request: Request, response: Response, session: Session) -> None:
    logger.info(
        "Executing {} {} -> {}",
        request.method.upper(),
        request.path,
        response.status_code,
    )


def log_payload(request: Request, response: Response, session: Session) -> None:
    """Print the response body, indented when it is JSON."""
    if response.is_json():
        try:
            print(json.dumps(response.json(), indent=2, ensure_ascii=False))
            return
        except ValueError:
            pass
    print(response.body)


def extract(key: str, path: str, required: bool = False) -> PostProcessor:
    """
    Copy the value at ``path`` of a JSON body into ``session[key]``.

    A miss is only logged unless ``required`` is set, in which case it fails
    the step.
    """

    @_named(f"extract({key})")
    def _extract(request: Request, response: Response, session: Session) -> None:
        value, found = extract_json(response.body, path)
        if not found:
            if required:
                raise ExtractionError(key, path)
            logger.info("unable to find value in the json response key={} path={}", key, path)
            return
        session.put(key, value)

    return _extract


def extract_header(key: str, header: str, required: bool = False) -> PostProcessor:
    @_named(f"extract_header({key})")
    def _extract_header(request: Request, response: Response, session: Session) -> None:
        value = response.header(header)
        if not value:
            if required:
                raise ExtractionError(key, header)
            logger.info("unable to find response header key={} header={}", key, header)
            return
        session.put(key, value)

    return _extract_header
