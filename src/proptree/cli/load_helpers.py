from __future__ import annotations

"""Shared helpers for loading configuration with CLI-friendly errors."""

import typer
from rich.console import Console

from proptree.cli.paths import resolve_config_path
from proptree.io.loaders import ConfigError, load_runner_config
from proptree.runner.models import RunnerConfig


def load_config_or_exit(
    path: str | None,
    *,
    console: Console,
    seed: int | None = None,
    verbose_errors: bool = False,
) -> RunnerConfig:
    """Load the runner config, applying a ``--seed`` override, or exit with code 1."""
    try:
        config = load_runner_config(resolve_config_path(path))
    except ConfigError as err:
        if verbose_errors and err.cause:
            console.print(f"[red]Failed to load config:[/red] {err.message}\n{err.cause}")
        else:
            console.print(f"[red]Failed to load config:[/red] {err}")
        raise typer.Exit(code=1)
    if seed is not None:
        config = config.model_copy(update={"seed": seed})
    return config


__all__ = ["load_config_or_exit"]
