from __future__ import annotations

"""Generic sanity checks that every strategy and its value trees must pass."""

import copy
from typing import Optional

from pydantic import BaseModel

from proptree.core.entropy import EntropySource
from proptree.core.strategy import Strategy, ValueTree


class SanityError(AssertionError):
    """A strategy violated the value tree contract."""


class SanityOptions(BaseModel):
    # Require complicate() to succeed right after a successful simplify()
    strict_complicate_after_simplify: bool = True
    cases: int = 1024
    max_steps: int = 65_536


def _describe(tree: ValueTree) -> str:
    return f"{tree!r} (current: {tree.current()!r})"


def _check_complications(tree: ValueTree, num_simplifies: int, options: SanityOptions) -> None:
    complicated = copy.deepcopy(tree)
    if options.strict_complicate_after_simplify and not complicated.complicate():
        raise SanityError(
            "complicate() returned False immediately after simplify() returned True; "
            f"state after {num_simplifies} call(s) to simplify(): {_describe(tree)}"
        )
    steps = 0
    while complicated.complicate():
        steps += 1
        if steps > options.max_steps:
            raise SanityError(
                f"complicate() returned True over {options.max_steps} times in a row; "
                f"possible infinite loop at {_describe(complicated)}"
            )


def _check_tree(tree: ValueTree, options: SanityOptions) -> None:
    num_simplifies = 0
    while tree.simplify():
        num_simplifies += 1
        if num_simplifies > options.max_steps:
            raise SanityError(
                f"simplify() returned True over {options.max_steps} times in a row; "
                f"possible infinite loop at {_describe(tree)}"
            )
        _check_complications(tree, num_simplifies, options)

    settled = tree.current()
    if tree.simplify():
        raise SanityError(f"simplify() is not idempotent at exhaustion: {_describe(tree)}")
    if tree.current() != settled:
        raise SanityError(f"failed simplify() changed the value from {settled!r} to {tree.current()!r}")


def check_strategy_sanity(
    strategy: Strategy,
    options: Optional[SanityOptions] = None,
    *,
    entropy: Optional[EntropySource] = None,
) -> None:
    """
    Generate trees from ``strategy`` and exercise their simplify/complicate paths.

    Checks that simplification terminates, that complicate() succeeds after
    each successful simplify() (when strict), that repeated complicate()
    terminates, and that simplify() stays a no-op once exhausted.

    Raises:
        SanityError: On the first contract violation found
    """
    options = options or SanityOptions()
    entropy = entropy or EntropySource(seed=0)
    for _ in range(options.cases):
        _check_tree(strategy.new_value(entropy), options)
