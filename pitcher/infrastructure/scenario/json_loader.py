# pitcher/infrastructure/scenario/json_loader.py
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pitcher.infrastructure.scenario.base_loader import ScenarioLoaderBase


class JsonScenarioLoader(ScenarioLoaderBase):
    """Reads ``.json`` scenarios; a leading BOM is accepted and a blank file counts as empty."""

    def _load_file(self, path: Path) -> Any:
        text = path.read_text(encoding="utf-8-sig")
        if not text.strip():
            return None
        return json.loads(text)
