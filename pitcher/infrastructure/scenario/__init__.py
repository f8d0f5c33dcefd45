from pitcher.infrastructure.scenario.base_loader import ScenarioLoaderBase
from pitcher.infrastructure.scenario.json_loader import JsonScenarioLoader
from pitcher.infrastructure.scenario.loader_registry import ScenarioLoaderRegistry
from pitcher.infrastructure.scenario.yaml_loader import YamlScenarioLoader

__all__ = [
    "ScenarioLoaderBase",
    "ScenarioLoaderRegistry",
    "YamlScenarioLoader",
    "JsonScenarioLoader",
]
