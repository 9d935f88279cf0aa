"""
proptree CLI: inspect optional-value strategies.

- weights: Show the branch weights derived from a probability
- sample: Draw values and compare the present/absent split to the probability
- shrink: Falsify "value is None or value < threshold" and show the shrunk example
"""

from __future__ import annotations

import typer
from pydantic import ValidationError
from rich.console import Console

from proptree.cli.formatters import (
    build_distribution_table,
    build_shrink_table,
    build_weights_table,
    format_value,
)
from proptree.cli.load_helpers import load_config_or_exit
from proptree.core.entropy import EntropySource
from proptree.core.errors import PreconditionError
from proptree.core.option import OptionStrategy, weighted
from proptree.core.strategy import IntegerRange
from proptree.runner.test_runner import TestRunner
from proptree.utils.logging import configure_logging

app = typer.Typer(help="proptree CLI: inspect optional-value strategies and their shrinking.")
console = Console()


def _build_strategy(probability: float, start: int, end: int) -> OptionStrategy:
    try:
        inner = IntegerRange(start=start, end=end)
    except ValidationError:
        console.print(f"[red]Invalid range[/red]: [{start}, {end}) is empty")
        raise typer.Exit(code=2)
    try:
        return weighted(probability, inner)
    except PreconditionError as err:
        console.print(f"[red]Invalid probability[/red]: {err}")
        raise typer.Exit(code=1)


@app.command()
def weights(
    probability: float = typer.Option(..., "--probability", "-p", help="Probability of a present value, strictly between 0 and 1"),
) -> None:
    """Show the integer branch weights for a probability."""
    strategy = _build_strategy(probability, 0, 1)
    console.print(build_weights_table(strategy))


@app.command()
def sample(
    probability: float = typer.Option(0.5, "--probability", "-p", help="Probability of a present value"),
    count: int = typer.Option(1000, "--count", "-n", min=1, help="Number of values to draw"),
    start: int = typer.Option(0, help="Inclusive lower bound of wrapped integers"),
    end: int = typer.Option(1000, help="Exclusive upper bound of wrapped integers"),
    seed: int | None = typer.Option(None, help="Entropy seed (overrides config)"),
    config: str | None = typer.Option(None, "--config", help="Path to proptree.yaml"),
    show: int = typer.Option(5, help="Number of drawn values to echo"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Draw optional values and report the present/absent split."""
    configure_logging(verbose)
    settings = load_config_or_exit(config, console=console, seed=seed, verbose_errors=verbose)
    strategy = _build_strategy(probability, start, end)

    entropy = EntropySource(seed=settings.seed, max_draws=settings.max_draws)
    values = [strategy.new_value(entropy).current() for _ in range(count)]
    present = sum(1 for value in values if value is not None)

    console.print(f"[bold]Seed:[/bold] {entropy.seed}")
    if show > 0:
        console.print(f"[bold]First values:[/bold] {', '.join(format_value(v) for v in values[:show])}")
    console.print(build_distribution_table(present, count - present, strategy.probability))


@app.command()
def shrink(
    probability: float = typer.Option(0.5, "--probability", "-p", help="Probability of a present value"),
    start: int = typer.Option(0, help="Inclusive lower bound of wrapped integers"),
    end: int = typer.Option(1000, help="Exclusive upper bound of wrapped integers"),
    threshold: int = typer.Option(500, help="Values at or above this fail the test"),
    seed: int | None = typer.Option(None, help="Entropy seed (overrides config)"),
    config: str | None = typer.Option(None, "--config", help="Path to proptree.yaml"),
    trace: bool = typer.Option(False, "--trace", help="Show every value tried while shrinking"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Find and shrink a counterexample to "value is None or value < threshold"."""
    configure_logging(verbose)
    settings = load_config_or_exit(config, console=console, seed=seed, verbose_errors=verbose)
    strategy = _build_strategy(probability, start, end)

    def below_threshold(value: int | None) -> None:
        if value is not None and value >= threshold:
            raise AssertionError(f"{value} >= {threshold}")

    result = TestRunner(settings).run(strategy, below_threshold)

    console.print(f"[bold]Seed:[/bold] {result.seed}")
    if result.passed:
        console.print(f"[green]OK[/green] No failing case in {result.cases_run} case(s)")
        return

    console.print(f"[red]Falsified[/red] after {result.cases_run} case(s): {result.reason}")
    console.print(f"[bold]Original:[/bold] {format_value(result.original)}")
    console.print(f"[bold]Minimal:[/bold] {format_value(result.minimal)}")
    if trace:
        console.print(build_shrink_table(result))
    raise typer.Exit(code=1)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
