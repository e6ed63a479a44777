"""Provide the CLI entrypoint for Priority Scheduler.

Loads the optional config, configures logging, and runs the interactive
task shell over a fresh workspace.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from .config import SchedulerConfig, load_scheduler_config
from .shell import TaskShell
from .task_engine import TaskWorkspace


def _configure_logging(level: str = "INFO") -> None:
    """Configure loguru logger with the specified level."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=level.upper(),
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{module}</cyan>:<cyan>{line}</cyan> - "
            "{message}"
        ),
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Priority Scheduler - interactive task prioritization and dependency ordering",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a YAML config file (default: ./scheduler.yaml if present)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (DEBUG, INFO, WARNING, ...); overrides the config file",
    )
    parser.add_argument(
        "--strict-cycles",
        action="store_true",
        default=None,
        help="Fail the sort on dependency cycles instead of returning a degraded order",
    )
    parser.add_argument(
        "--hide-dependencies",
        action="store_true",
        help="Do not show dependency columns in task listings",
    )
    return parser


def resolve_config(args: argparse.Namespace) -> SchedulerConfig:
    """Merge the config file with CLI overrides."""
    config, err = load_scheduler_config(args.config)
    if err:
        logger.warning("Ignoring config: {}", err)
    updates: dict[str, object] = {}
    if args.log_level:
        updates["log_level"] = str(args.log_level).upper()
    if args.strict_cycles:
        updates["strict_cycles"] = True
    if args.hide_dependencies:
        updates["show_dependencies"] = False
    if not updates:
        return config
    return SchedulerConfig.model_validate({**config.model_dump(), **updates})


def main(argv: list[str] | None = None) -> int:
    """Run the `priority-scheduler` CLI.

    Args:
        argv: Optional argument list (excluding the executable name). When
            omitted, uses `sys.argv[1:]`.

    Returns:
        The process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    # Default sink until the config is known; config problems are logged here.
    _configure_logging()
    try:
        config = resolve_config(args)
    except ValidationError as exc:
        parser.error(str(exc))
    _configure_logging(config.log_level)
    logger.debug("Starting scheduler with {}", config.model_dump())

    workspace = TaskWorkspace(strict_cycles=config.strict_cycles)
    shell = TaskShell(workspace, show_dependencies=config.show_dependencies)
    return shell.run()


if __name__ == "__main__":
    raise SystemExit(main())
