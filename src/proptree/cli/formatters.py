"""Formatting helpers for CLI presentation."""

from __future__ import annotations

from typing import Any

from rich.table import Table

from proptree.core.option import OptionStrategy
from proptree.runner.models import RunResult


def format_value(value: Any) -> str:
    """Format a generated value for display."""
    if value is None:
        return "None"
    return repr(value)


def build_weights_table(strategy: OptionStrategy) -> Table:
    weight_absent = strategy.union.options[0][0]
    weight_present = strategy.union.options[1][0]

    table = Table(title="Branch weights")
    table.add_column("Branch")
    table.add_column("Outcome")
    table.add_column("Weight", justify="right")
    table.add_column("Share", justify="right")
    table.add_row("0", "absent", str(weight_absent), f"{1 - strategy.probability:.6f}")
    table.add_row("1", "present", str(weight_present), f"{strategy.probability:.6f}")
    return table


def build_distribution_table(present: int, absent: int, probability: float) -> Table:
    total = present + absent

    table = Table(title=f"Distribution over {total} draw(s)")
    table.add_column("Outcome")
    table.add_column("Count", justify="right")
    table.add_column("Observed", justify="right")
    table.add_column("Expected", justify="right")
    for label, count, expected in (
        ("present", present, probability),
        ("absent", absent, 1 - probability),
    ):
        observed = count / total if total else 0.0
        table.add_row(label, str(count), f"{observed:.3f}", f"{expected:.3f}")
    return table


def build_shrink_table(result: RunResult) -> Table:
    table = Table(title=f"Shrink trace ({result.shrink_iterations} step(s))")
    table.add_column("#", justify="right")
    table.add_column("Value")
    table.add_column("Result")
    for step in result.steps:
        status = "[red]fails[/red]" if step.failed else "[green]passes[/green]"
        table.add_row(str(step.index), format_value(step.value), status)
    return table
