# pitcher/infrastructure/scenario/loader_registry.py
from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Union

from pitcher.application.processors.catalog import ProcessorCatalog
from pitcher.domain.exceptions import ScenarioLoadError
from pitcher.domain.scenario import Scenario
from pitcher.infrastructure.scenario.base_loader import ScenarioLoaderBase
from pitcher.infrastructure.scenario.json_loader import JsonScenarioLoader
from pitcher.infrastructure.scenario.yaml_loader import YamlScenarioLoader


class ScenarioLoaderRegistry:
    def __init__(self, catalog: Optional[ProcessorCatalog] = None) -> None:
        yaml_loader = YamlScenarioLoader(catalog)
        self._loaders: Dict[str, ScenarioLoaderBase] = {
            ".yaml": yaml_loader,
            ".yml": yaml_loader,
            ".json": JsonScenarioLoader(catalog),
        }

    def get_loader(self, path: Path) -> ScenarioLoaderBase:
        ext = path.suffix.lower()
        loader = self._loaders.get(ext)
        if loader is None:
            raise ScenarioLoadError(f"Unsupported scenario format: {ext}")
        return loader

    def load(self, path: Union[str, Path]) -> Scenario:
        p = Path(path)
        return self.get_loader(p).load_from_file(p)
