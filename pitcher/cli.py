#!/usr/bin/env python3
"""
Run named steps from the command line.

Usage:
  pitcher [-s key=value]... [-v N] [-f scenario.yaml]... [step ...]

Examples:
  pitcher -f scenarios/posts.yaml
  pitcher -f scenarios/posts.yaml -s host=http://localhost:8080 list-posts get-post
  pitcher -f scenarios/posts.yaml -v 2 -s jwt_token=abc create-post
"""
from __future__ import annotations

import argparse
from dataclasses import replace
from typing import List, Optional, Sequence, Tuple

from pitcher.application.services.redactor import mask_dict
from pitcher.client import Client
from pitcher.config import RunConfig
from pitcher.domain.exceptions import ScenarioLoadError, UnknownStepError
from pitcher.infrastructure.logging.log_setup import setup_console_logging
from pitcher.infrastructure.logging.loguru_logger import LoguruLogger
from pitcher.infrastructure.scenario.loader_registry import ScenarioLoaderRegistry


def _session_pair(raw: str) -> Tuple[str, str]:
    key, sep, value = raw.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"invalid format {raw!r}, expected key=value")
    return key, value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pitcher", description="Run HTTP steps in sequence")
    parser.add_argument(
        "-s",
        dest="session",
        action="append",
        type=_session_pair,
        default=[],
        metavar="KEY=VALUE",
        help="Specify session key=value pairs",
    )
    parser.add_argument(
        "-v",
        dest="verbose",
        type=int,
        default=None,
        help="set verbose log level (0=response only; 1=info; 2+=debug)",
    )
    parser.add_argument(
        "-f",
        "--file",
        dest="files",
        action="append",
        default=[],
        help="Scenario file (.yaml, .yml, .json) whose steps are registered",
    )
    parser.add_argument("--env-file", type=str, default=None, help="dotenv file used as session fallback")
    parser.add_argument("--timeout", type=float, default=None, help="HTTP timeout in seconds")
    parser.add_argument("steps", nargs="*", help="Registered step names, run in the given order")
    return parser


def _config_from_args(args: argparse.Namespace) -> RunConfig:
    config = RunConfig.from_env()
    if args.verbose is not None:
        config = replace(config, verbosity=args.verbose)
    if args.timeout is not None:
        config = replace(config, timeout_sec=args.timeout)
    if args.env_file is not None:
        config = replace(config, env_file=args.env_file)
    return config


def main(argv: Optional[Sequence[str]] = None, client: Optional[Client] = None) -> int:
    """
    With ``client`` given, its steps, session and transport are used as-is
    and ``--timeout`` / ``--env-file`` have no effect on it.
    """
    args = build_parser().parse_args(argv)
    try:
        config = _config_from_args(args)
    except ValueError as exc:
        setup_console_logging()
        LoguruLogger().bind(component="cli").error("cli.config_invalid", error=str(exc))
        return 1
    setup_console_logging(level=config.log_level)
    log = LoguruLogger().bind(component="cli")

    if client is None:
        client = Client(config=config)

    registry = ScenarioLoaderRegistry()
    try:
        for path in args.files:
            client.add_scenario(registry.load(path))
    except ScenarioLoadError as exc:
        log.error("cli.scenario_load_failed", error=str(exc))
        return 1

    cmd_steps: List[str] = args.steps
    if not cmd_steps:
        print("No step(s) provided. Please provide at least one step:")
        for name in client.step_names():
            print(f"  {name}")
        return 0

    for key, value in args.session:
        client.session.put(key, value)

    try:
        steps = client.registry.resolve(cmd_steps)
    except UnknownStepError as exc:
        log.error("cli.unknown_step", step=exc.name)
        return 1

    snapshot = getattr(client.session, "snapshot", None)
    log.debug(
        "cli.executing",
        steps=cmd_steps,
        session=mask_dict(snapshot()) if callable(snapshot) else {},
    )

    result = client.do(*steps)
    if not result.ok:
        log.error("cli.run_failed", step=result.failed_step, error=str(result.error))
        return 1
    for warning in result.warnings:
        log.warning("cli.warning", message=warning)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
