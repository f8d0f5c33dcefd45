# pitcher/infrastructure/scenario/base_loader.py
from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from pitcher.application.processors.catalog import ProcessorCatalog
from pitcher.domain.assertions import success
from pitcher.domain.exceptions import ScenarioLoadError
from pitcher.domain.request import Request, canonical_header_key
from pitcher.domain.scenario import Scenario
from pitcher.domain.steps.base import Step
from pitcher.infrastructure.scenario.models import ScenarioDocument, StepDocument


class ScenarioLoaderBase(ABC):
    def __init__(self, catalog: Optional[ProcessorCatalog] = None):
        self._catalog = catalog or ProcessorCatalog()

    def load_from_file(self, path: Union[str, Path]) -> Scenario:
        p = Path(path)
        if not p.exists():
            raise ScenarioLoadError(f"Scenario file not found: {path}")

        try:
            data = self._load_file(p)
        except (OSError, ValueError) as exc:
            raise ScenarioLoadError(f"Unable to read scenario file {path}: {exc}") from exc

        if data is None:
            raise ScenarioLoadError(f"Scenario file is empty: {path}")
        if not isinstance(data, dict):
            raise ScenarioLoadError(f"Scenario file is invalid: {path}")

        return self.load_from_dict(data, source=str(p))

    def load_from_dict(self, data: Dict[str, Any], source: str = "") -> Scenario:
        try:
            doc = ScenarioDocument.model_validate(data)
        except ValidationError as exc:
            raise ScenarioLoadError(f"Scenario {source or '<dict>'} is invalid: {exc}") from exc

        return Scenario(
            steps=[self._build_step(s) for s in doc.steps],
            session=dict(doc.session),
            source=source,
        )

    def _build_step(self, doc: StepDocument) -> Step:
        request = Request(
            method=doc.method,
            path=doc.path,
            host=doc.host,
            body=doc.body_text(),
            content_type=doc.content_type,
            query=dict(doc.query),
            headers={canonical_header_key(k): list(v) for k, v in doc.headers.items()},
        )
        if doc.assertions is None:
            assertions = [success]
        else:
            assertions = [self._catalog.build_assertion(ref) for ref in doc.assertions]

        return Step(
            request=request,
            assertions=assertions,
            pre_processors=[self._catalog.build_pre(ref) for ref in doc.pre],
            post_processors=[self._catalog.build_post(ref) for ref in doc.post],
            name=doc.name,
        )

    @abstractmethod
    def _load_file(self, path: Path) -> Any:
        ...
