"""
Benchmark Timer

Provides the repeated-trial timing primitive and the Duration value
it returns.
"""
from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

DEFAULT_TRIALS = 10


class TimeUnit(Enum):
    """Time unit with its size in nanoseconds."""

    NS = (1, "ns")
    US = (1_000, "us")
    MS = (1_000_000, "ms")
    S = (1_000_000_000, "s")

    def __init__(self, factor: int, suffix: str) -> None:
        self.factor = factor
        self.suffix = suffix

    @classmethod
    def parse(cls, value: "str | TimeUnit") -> "TimeUnit":
        """Resolve a unit from its suffix ("ns", "us", "ms", "s").

        Raises:
            ValueError: If the suffix is unknown.
        """
        if isinstance(value, cls):
            return value
        for unit in cls:
            if unit.suffix == value:
                return unit
        raise ValueError(f"Unknown time unit: {value!r}")


@dataclass(frozen=True, slots=True, order=True)
class Duration:
    """Elapsed wall-clock time.

    Stored in nanoseconds. Averages produced by division may carry a
    fractional part.
    """

    nanoseconds: float = 0

    def __sub__(self, other: "Duration") -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self.nanoseconds - other.nanoseconds)

    def __add__(self, other: "Duration") -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self.nanoseconds + other.nanoseconds)

    def __truediv__(self, count: int) -> "Duration":
        if isinstance(count, bool) or not isinstance(count, int):
            return NotImplemented
        if count <= 0:
            raise ValueError(f"count must be positive, got {count}")
        return Duration(self.nanoseconds / count)

    @property
    def microseconds(self) -> float:
        """Duration in microseconds."""
        return self.nanoseconds / TimeUnit.US.factor

    @property
    def milliseconds(self) -> float:
        """Duration in milliseconds."""
        return self.nanoseconds / TimeUnit.MS.factor

    @property
    def seconds(self) -> float:
        """Duration in seconds."""
        return self.nanoseconds / TimeUnit.S.factor

    def to(self, unit: "TimeUnit | str") -> float:
        """Express the duration in ``unit``.

        Args:
            unit: Target unit or its suffix.

        Returns:
            The duration as a float in that unit.
        """
        return self.nanoseconds / TimeUnit.parse(unit).factor

    def __str__(self) -> str:
        return f"{self.milliseconds:.3f} ms"


def measure(operation: Callable[[], Any], trial_count: int = DEFAULT_TRIALS) -> Duration:
    """Time ``operation`` run ``trial_count`` times back to back.

    The interval spans the first invocation's start to the last
    invocation's end, measured with the monotonic performance counter.
    Exceptions raised by ``operation`` propagate unchanged.

    Args:
        operation: Zero-argument unit of work.
        trial_count: Number of repetitions (must be >= 1).

    Returns:
        Total elapsed Duration for all trials.

    Raises:
        ValueError: If trial_count is less than 1.

    Example:
        ```python
        elapsed = measure(lambda: sum(range(1000)), 100)
        print(f"Per trial: {(elapsed / 100).microseconds:.2f} us")
        ```
    """
    if trial_count < 1:
        raise ValueError(f"trial_count must be >= 1, got {trial_count}")

    start = time.perf_counter_ns()
    for _ in range(trial_count):
        operation()
    end = time.perf_counter_ns()

    return Duration(end - start)


def per_unit(duration: Duration, count: int, unit: "TimeUnit | str" = TimeUnit.MS) -> float:
    """Normalize a duration by a repetition count.

    Args:
        duration: Total measured duration.
        count: Number of trials or calls the duration covers.
        unit: Unit to express the result in.

    Returns:
        Average cost per repetition in ``unit``.
    """
    return (duration / count).to(unit)
