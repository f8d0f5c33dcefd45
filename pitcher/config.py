# pitcher/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

ENV_PREFIX = "PITCHER_"


def verbosity_to_level(verbosity: int) -> str:
    """0 = errors only (responses are still printed), 1 = info, 2+ = debug."""
    if verbosity <= 0:
        return "ERROR"
    if verbosity >= 2:
        return "DEBUG"
    return "INFO"


def _as_bool(raw: str) -> bool:
    return raw.strip().lower() not in ("0", "false", "no", "off", "")


@dataclass(frozen=True)
class RunConfig:
    verbosity: int = 1
    timeout_sec: float = 20
    verify_tls: bool = True
    env_file: Optional[str] = None

    @property
    def log_level(self) -> str:
        return verbosity_to_level(self.verbosity)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, load_env_file: bool = True) -> "RunConfig":
        """
        Build a config from ``PITCHER_*`` variables. A ``.env`` file in the
        working directory is loaded first unless ``load_env_file`` is false.
        """
        if environ is None:
            if load_env_file:
                load_dotenv()
            environ = os.environ

        defaults = cls()
        try:
            return cls(
                verbosity=int(environ.get(f"{ENV_PREFIX}VERBOSITY", defaults.verbosity)),
                timeout_sec=float(environ.get(f"{ENV_PREFIX}TIMEOUT_SEC", defaults.timeout_sec)),
                verify_tls=_as_bool(environ.get(f"{ENV_PREFIX}VERIFY_TLS", "true")),
                env_file=environ.get(f"{ENV_PREFIX}ENV_FILE") or None,
            )
        except ValueError as exc:
            raise ValueError(f"invalid {ENV_PREFIX}* setting: {exc}") from exc
