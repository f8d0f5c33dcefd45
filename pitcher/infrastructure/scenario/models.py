# pitcher/infrastructure/scenario/models.py
from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

ProcessorRefModel = Union[str, Dict[str, Optional[Dict[str, Any]]]]


def _scalar_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return "" if value is None else str(value)


class StepDocument(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    name: str = Field(min_length=1, description="Name used to run the step")
    method: str = Field(default="GET", description="HTTP method")
    path: str = Field(default="", description="Path joined to the host, or an absolute URL")
    host: str = Field(default="", description="Host override; session 'host' when empty")
    body: Union[str, Dict[str, Any], List[Any], None] = Field(
        default=None,
        description="Raw body; mappings and lists are sent as JSON",
    )
    content_type: str = ""
    query: Dict[str, str] = Field(default_factory=dict)
    headers: Dict[str, List[str]] = Field(default_factory=dict)
    pre: List[ProcessorRefModel] = Field(default_factory=list)
    post: List[ProcessorRefModel] = Field(default_factory=list)
    assertions: Optional[List[ProcessorRefModel]] = Field(default=None, alias="assert")

    @field_validator("method")
    @classmethod
    def _upper_method(cls, v: str) -> str:
        v = v.strip().upper()
        if not v:
            raise ValueError("method must not be empty")
        return v

    @field_validator("query", mode="before")
    @classmethod
    def _query_as_text(cls, v: Any) -> Any:
        if isinstance(v, dict):
            return {str(k): _scalar_text(val) for k, val in v.items()}
        return v

    @field_validator("headers", mode="before")
    @classmethod
    def _headers_as_lists(cls, v: Any) -> Any:
        if isinstance(v, dict):
            return {
                str(k): [_scalar_text(x) for x in val] if isinstance(val, list) else [_scalar_text(val)]
                for k, val in v.items()
            }
        return v

    def body_text(self) -> str:
        if self.body is None:
            return ""
        if isinstance(self.body, str):
            return self.body
        return json.dumps(self.body, ensure_ascii=False)


class ScenarioDocument(BaseModel):
    model_config = ConfigDict(extra="forbid")

    session: Dict[str, str] = Field(default_factory=dict)
    steps: List[StepDocument] = Field(default_factory=list)

    @field_validator("session", mode="before")
    @classmethod
    def _session_as_text(cls, v: Any) -> Any:
        if isinstance(v, dict):
            return {str(k): _scalar_text(val) for k, val in v.items()}
        return v

    @model_validator(mode="after")
    def _unique_step_names(self) -> "ScenarioDocument":
        seen = set()
        for step in self.steps:
            if step.name in seen:
                raise ValueError(f"duplicate step name: {step.name}")
            seen.add(step.name)
        return self
