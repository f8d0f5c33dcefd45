# pitcher/domain/exceptions.py
from __future__ import annotations

from typing import Optional


class PitcherError(Exception):
    """Base class for every failure raised by a run."""


class TransportError(PitcherError):
    """The request could not be sent or its response could not be read."""


class InvalidUrlError(TransportError):
    pass


class ProcessorError(PitcherError):
    def __init__(self, processor: str, message: str):
        super().__init__(f"processor {processor} failed: {message}")
        self.processor = processor


class SessionKeyMissingError(PitcherError):
    def __init__(self, key: str):
        super().__init__(f"session key not found: {key}")
        self.key = key


class ExtractionError(PitcherError):
    def __init__(self, key: str, path: str):
        super().__init__(f"unable to extract {key} from path {path}")
        self.key = key
        self.path = path


class AssertionFailedError(PitcherError):
    def __init__(self, assertion: str, status_code: Optional[int]):
        super().__init__(f"assertion failed: {assertion} (status={status_code})")
        self.assertion = assertion
        self.status_code = status_code


class UnknownStepError(PitcherError):
    def __init__(self, name: str):
        super().__init__(f"unknown step: {name}")
        self.name = name


class ScenarioLoadError(PitcherError):
    pass
