# pitcher/infrastructure/session/env_source.py
from __future__ import annotations

import os
from typing import Mapping, Optional


class EnvironmentSource:
    """
    Session fallback on the process environment, read at lookup time.
    """

    name = "env"

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self._environ = environ

    def lookup(self, key: str) -> Optional[str]:
        environ = os.environ if self._environ is None else self._environ
        return environ.get(key)
