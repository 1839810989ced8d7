"""
Baseline vs. Candidate Comparison

Times a baseline and a candidate workload, normalizes both to a
per-trial or per-call cost and checks the candidate's excess cost
against a threshold.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Callable

from overheadbench.benchmark.timer import DEFAULT_TRIALS, Duration, TimeUnit, measure
from overheadbench.exceptions import OverheadAssertionError, ResultMismatchError

logger = logging.getLogger(__name__)

Workload = Callable[[int], Any]


class Normalization(Enum):
    """What a total duration is divided by.

    - PER_TRIAL: number of trials
    - PER_CALL: number of trials times number of elements
    """
    PER_TRIAL = auto()
    PER_CALL = auto()

    def divisor(self, elements: int, trials: int) -> int:
        if self is Normalization.PER_CALL:
            return max(elements, 1) * trials
        return trials

    @property
    def label(self) -> str:
        return "per call" if self is Normalization.PER_CALL else "per trial"


class Expectation(Enum):
    """Direction in which delta is checked against the threshold."""
    BELOW = "<"
    ABOVE = ">"

    def holds(self, delta: float, threshold: float) -> bool:
        if self is Expectation.ABOVE:
            return delta > threshold
        return delta < threshold


@dataclass
class ComparisonResult:
    """Result of comparing a candidate against a baseline.

    Attributes:
        name: Scenario name.
        baseline: Total duration of all baseline trials.
        candidate: Total duration of all candidate trials.
        elements: Element count handed to each workload.
        trials: Number of trials per workload.
        normalization: How totals are turned into per-unit costs.
        expectation: Direction of the threshold check.
        threshold: Threshold for delta, in ``unit``.
        unit: Unit of costs, delta and threshold.
    """

    name: str
    baseline: Duration
    candidate: Duration
    elements: int
    trials: int
    normalization: Normalization
    expectation: Expectation
    threshold: float
    unit: TimeUnit = TimeUnit.MS

    @property
    def divisor(self) -> int:
        return self.normalization.divisor(self.elements, self.trials)

    @property
    def baseline_cost(self) -> float:
        """Baseline cost per trial or call, in ``unit``."""
        return (self.baseline / self.divisor).to(self.unit)

    @property
    def candidate_cost(self) -> float:
        """Candidate cost per trial or call, in ``unit``."""
        return (self.candidate / self.divisor).to(self.unit)

    @property
    def delta(self) -> float:
        """Candidate cost minus baseline cost, in ``unit``."""
        return self.candidate_cost - self.baseline_cost

    @property
    def passed(self) -> bool:
        """Whether delta satisfies the expectation."""
        return self.expectation.holds(self.delta, self.threshold)

    def summary(self) -> str:
        """Generate summary string.

        Returns:
            Human-readable multi-line summary.
        """
        suffix = self.unit.suffix
        lines = [
            f"Scenario:  {self.name}",
            f"Baseline:  {self.baseline_cost:.6g} {suffix} ({self.normalization.label})",
            f"Candidate: {self.candidate_cost:.6g} {suffix} ({self.normalization.label})",
            f"Delta:     {self.delta:.6g} {suffix}",
            f"Expected:  delta {self.expectation.value} {self.threshold:.6g} {suffix}",
            f"Result:    {'PASS' if self.passed else 'FAIL'}",
        ]
        return "\n".join(lines)

    def failure_message(self) -> str:
        """One-line message with every measured value and the threshold."""
        suffix = self.unit.suffix
        return (
            f"{self.name}: expected delta {self.expectation.value} "
            f"{self.threshold:.6g} {suffix} {self.normalization.label}, "
            f"measured delta={self.delta:.6g} {suffix} "
            f"(baseline={self.baseline_cost:.6g} {suffix}, "
            f"candidate={self.candidate_cost:.6g} {suffix}, "
            f"elements={self.elements}, trials={self.trials})"
        )

    def assert_holds(self) -> None:
        """Raise if the expectation does not hold.

        Raises:
            OverheadAssertionError: With the measured values in its message.
        """
        if not self.passed:
            raise OverheadAssertionError(
                self.name,
                self.delta,
                self.threshold,
                message=self.failure_message(),
                context=self.to_dict(),
            )

    def to_dict(self) -> dict[str, Any]:
        """Convert result to dictionary.

        Returns:
            JSON-serializable dictionary representation.
        """
        return {
            "name": self.name,
            "elements": self.elements,
            "trials": self.trials,
            "normalization": self.normalization.name,
            "unit": self.unit.suffix,
            "baseline_total_ns": self.baseline.nanoseconds,
            "candidate_total_ns": self.candidate.nanoseconds,
            "baseline_cost": self.baseline_cost,
            "candidate_cost": self.candidate_cost,
            "delta": self.delta,
            "expectation": self.expectation.value,
            "threshold": self.threshold,
            "passed": self.passed,
        }


def compare(
    baseline: Workload,
    candidate: Workload,
    *,
    name: str = "comparison",
    elements: int,
    trials: int = DEFAULT_TRIALS,
    normalization: Normalization = Normalization.PER_TRIAL,
    expectation: Expectation = Expectation.BELOW,
    threshold: float,
    unit: TimeUnit = TimeUnit.MS,
    verify: bool = True,
) -> ComparisonResult:
    """Compare a candidate workload against a baseline.

    Each workload is called as ``workload(elements)``. With ``verify``
    both are first run once and must return equal values.

    Args:
        baseline: Reference workload.
        candidate: Workload expressed through the abstraction under test.
        name: Label used in logs and failure messages.
        elements: Size argument passed to both workloads.
        trials: Timed repetitions per workload.
        normalization: Per-trial or per-call costs.
        expectation: Direction of the threshold check.
        threshold: Bound on ``candidate_cost - baseline_cost``.
        unit: Unit for costs and threshold.
        verify: Check result equality before timing.

    Returns:
        ComparisonResult; call ``assert_holds()`` to enforce it.

    Raises:
        ResultMismatchError: If verify is set and the results differ.

    Example:
        ```python
        result = compare(
            sum_doubled_loop,
            sum_doubled_static,
            name="loop_vs_static",
            elements=1_000_000,
            threshold=90.0,
        )
        print(result.summary())
        ```
    """
    logger.debug(
        f"Comparing '{name}': elements={elements}, trials={trials}, "
        f"baseline={getattr(baseline, '__name__', baseline)!s}, "
        f"candidate={getattr(candidate, '__name__', candidate)!s}"
    )

    if verify:
        baseline_result = baseline(elements)
        candidate_result = candidate(elements)
        if baseline_result != candidate_result:
            raise ResultMismatchError(name, baseline_result, candidate_result)

    baseline_duration = measure(lambda: baseline(elements), trials)
    candidate_duration = measure(lambda: candidate(elements), trials)

    result = ComparisonResult(
        name=name,
        baseline=baseline_duration,
        candidate=candidate_duration,
        elements=elements,
        trials=trials,
        normalization=normalization,
        expectation=expectation,
        threshold=threshold,
        unit=unit,
    )

    if result.passed:
        logger.info(
            f"'{name}' holds: delta={result.delta:.6g} {unit.suffix} "
            f"{expectation.value} {threshold:.6g} {unit.suffix}"
        )
    else:
        logger.warning(f"Threshold violated: {result.failure_message()}")

    return result
