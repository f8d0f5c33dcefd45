# pitcher/infrastructure/session/dotenv_source.py
from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Union

from dotenv import dotenv_values


class DotenvSource:
    """
    Session fallback on a ``.env`` file. The file is read once; a missing
    file yields an empty source.
    """

    name = "dotenv"

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._values: Dict[str, str] = {}
        if self.path.exists():
            self._values = {k: v for k, v in dotenv_values(self.path).items() if v is not None}

    def lookup(self, key: str) -> Optional[str]:
        return self._values.get(key)
