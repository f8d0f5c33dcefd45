# pitcher/client.py
"""
Client facade: owns the session, the global processor lists and the named
steps, and runs steps through the sequencer.

A Client (and its Session) runs one sequence at a time. Calling ``do`` from
several threads on the same instance is not supported.
"""
from __future__ import annotations

from typing import Iterable, List, Mapping, Optional, Sequence

from pitcher.application.executor.sequencer import SequenceResult, Sequencer
from pitcher.application.executor.step_registry import StepRegistry
from pitcher.application.executor.step_runner import StepRunner
from pitcher.application.ports.http_client import HttpClientPort
from pitcher.application.ports.logger import LoggerPort
from pitcher.config import RunConfig
from pitcher.domain.processors import PostProcessor, PreProcessor
from pitcher.domain.scenario import Scenario
from pitcher.domain.session import LayeredSession, Session, SessionSource
from pitcher.domain.steps.base import Step
from pitcher.infrastructure.http.requests_client import RequestsHttpClient
from pitcher.infrastructure.logging.loguru_logger import LoguruLogger
from pitcher.infrastructure.session.dotenv_source import DotenvSource
from pitcher.infrastructure.session.env_source import EnvironmentSource


def new_session(values: Optional[Mapping[str, str]] = None, env_file: Optional[str] = None) -> LayeredSession:
    """In-memory values first, then the process environment, then ``env_file``."""
    fallbacks: List[SessionSource] = [EnvironmentSource()]
    if env_file:
        fallbacks.append(DotenvSource(env_file))
    return LayeredSession(values, fallbacks)


class Client:
    def __init__(
        self,
        session: Optional[Session] = None,
        pre_processors: Iterable[PreProcessor] = (),
        post_processors: Iterable[PostProcessor] = (),
        http_client: Optional[HttpClientPort] = None,
        logger: Optional[LoggerPort] = None,
        config: Optional[RunConfig] = None,
    ):
        self._config = config or RunConfig()
        self._session = session if session is not None else new_session(env_file=self._config.env_file)
        self._global_pre: List[PreProcessor] = list(pre_processors)
        self._global_post: List[PostProcessor] = list(post_processors)
        self._http = http_client or RequestsHttpClient(
            timeout_sec=self._config.timeout_sec,
            verify_tls=self._config.verify_tls,
        )
        self._logger = logger or LoguruLogger()
        self._registry = StepRegistry()

    @property
    def session(self) -> Session:
        return self._session

    @property
    def config(self) -> RunConfig:
        return self._config

    @property
    def registry(self) -> StepRegistry:
        return self._registry

    def add(self, name: str, step: Step) -> "Client":
        self._registry.add(name, step)
        return self

    def add_scenario(self, scenario: Scenario) -> "Client":
        """Register the scenario's steps and seed its session values."""
        for key, value in scenario.session.items():
            self._session.put(key, value)
        for step in scenario.steps:
            self._registry.add(step.name or step.label, step)
        return self

    def step_names(self) -> List[str]:
        return self._registry.names()

    def do(self, *steps: Step) -> SequenceResult:
        runner = StepRunner(self._http, self._global_pre, self._global_post)
        return Sequencer(runner, self._session, self._logger).execute(steps)

    def run(self, *names: str) -> SequenceResult:
        """Run registered steps by name; raises UnknownStepError for a name never added."""
        return self.do(*self._registry.resolve(names))

    def main(self, argv: Optional[Sequence[str]] = None) -> int:
        from pitcher.cli import main

        return main(argv, client=self)
