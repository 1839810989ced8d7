"""
Scenario Workloads

CPU-bound pure functions used as baseline and candidate bodies. Every
pair computes the same value; only the way the work is expressed
differs. Each function builds its own counters and closures.
"""
from __future__ import annotations

from typing import Any, Callable

from overheadbench.dispatch import (
    ErasedCallable,
    IndexRange,
    traverse_dynamic,
    traverse_static,
)


# ============================================================================
# Summation: hand-written loop vs. range traversal
# ============================================================================


def sum_doubled_loop(n: int) -> int:
    """Sum ``i * 2`` for ``i`` in ``[0, n)`` with a plain loop."""
    total = 0
    for i in range(n):
        total += i * 2
    return total


def sum_doubled_dynamic(n: int) -> int:
    """Sum ``i * 2`` for ``i`` in ``[0, n)`` via the type-erased traversal."""
    total = 0

    def accumulate(i: int) -> None:
        nonlocal total
        total += i * 2

    traverse_dynamic(IndexRange(n), accumulate)
    return total


def sum_doubled_static(n: int) -> int:
    """Sum ``i * 2`` for ``i`` in ``[0, n)`` via the direct-call traversal."""
    total = 0

    def accumulate(i: int) -> None:
        nonlocal total
        total += i * 2

    traverse_static(IndexRange(n), accumulate)
    return total


# ============================================================================
# Calls: direct closure vs. type-erased closure
# ============================================================================


def call_direct(n: int) -> int:
    """Call a small closure ``n`` times and sum its results."""
    f = lambda i: i + 2  # noqa: E731
    total = 0
    for i in range(n):
        total += f(i)
    return total


def call_erased(n: int) -> int:
    """Same as call_direct, with the closure behind an ErasedCallable."""
    f = ErasedCallable(lambda i: i + 2)
    total = 0
    for i in range(n):
        total += f(i)
    return total


# ============================================================================
# Recursion: named function vs. self-passing closure
# ============================================================================


def factorial(n: int) -> int:
    """Named recursive factorial. ``n <= 1`` yields 1."""
    if n <= 1:
        return 1
    return n * factorial(n - 1)


def self_passing(step: Callable[..., Any]) -> Callable[..., Any]:
    """Make ``step`` recursive without it referring to its own name.

    ``step`` receives itself as its last argument and recurses by
    calling that argument. The returned entry point supplies it.

    Args:
        step: Callable of the form ``step(*args, self_ref)``.

    Returns:
        Callable taking only ``*args``.

    Example:
        ```python
        def countdown(n, self_ref):
            if n > 0:
                self_ref(n - 1, self_ref)

        self_passing(countdown)(10)
        ```
    """
    def entry(*args: Any) -> Any:
        return step(*args, step)

    return entry


def _factorial_step(n: int, self_ref: Callable[[int, Any], int]) -> int:
    def recur(m: int) -> int:
        return self_ref(m, self_ref)

    if n <= 1:
        return 1
    return n * recur(n - 1)


factorial_self_passing = self_passing(_factorial_step)
