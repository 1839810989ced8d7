"""
overheadbench Exception Hierarchy

Custom exceptions raised by the harness. Measurement itself has no
recoverable errors: workload and clock failures propagate unchanged.
"""
from __future__ import annotations

from typing import Any, Optional


class OverheadBenchError(Exception):
    """Base exception for all overheadbench errors.

    Attributes:
        message: Human-readable error description.
        context: Optional dict of additional context for debugging.
    """

    def __init__(
        self,
        message: str,
        *,
        context: Optional[dict[str, Any]] = None,
    ) -> None:
        """Initialize OverheadBenchError.

        Args:
            message: Error message.
            context: Optional context dict.
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        ctx_str = f", context={self.context}" if self.context else ""
        return f"{self.__class__.__name__}({self.message!r}{ctx_str})"


class OverheadAssertionError(OverheadBenchError, AssertionError):
    """Raised when a scenario's measured overhead violates its threshold.

    Subclasses AssertionError so test runners report it as a failed
    assertion rather than an error.

    Attributes:
        scenario: Name of the scenario that failed.
        delta: Measured candidate-minus-baseline cost.
        threshold: Threshold the delta was checked against.
    """

    def __init__(
        self,
        scenario: str,
        delta: float,
        threshold: float,
        *,
        message: Optional[str] = None,
        context: Optional[dict[str, Any]] = None,
    ) -> None:
        self.scenario = scenario
        self.delta = delta
        self.threshold = threshold

        if message is None:
            message = (
                f"Scenario '{scenario}' violated its threshold: "
                f"delta={delta:.6g}, threshold={threshold:.6g}"
            )

        merged = {"scenario": scenario, "delta": delta, "threshold": threshold}
        merged.update(context or {})
        super().__init__(message, context=merged)


class ResultMismatchError(OverheadBenchError):
    """Raised when baseline and candidate compute different results.

    A comparison is only meaningful between functionally-equivalent
    workloads, so timings are never taken when this fires.

    Attributes:
        scenario: Name of the scenario being compared.
        baseline_result: Value returned by the baseline workload.
        candidate_result: Value returned by the candidate workload.
    """

    def __init__(
        self,
        scenario: str,
        baseline_result: Any,
        candidate_result: Any,
    ) -> None:
        self.scenario = scenario
        self.baseline_result = baseline_result
        self.candidate_result = candidate_result

        super().__init__(
            f"Scenario '{scenario}' is not comparing equivalent workloads: "
            f"baseline returned {baseline_result!r}, "
            f"candidate returned {candidate_result!r}",
            context={
                "scenario": scenario,
                "baseline_result": baseline_result,
                "candidate_result": candidate_result,
            },
        )


class UnknownScenarioError(OverheadBenchError, LookupError):
    """Raised when a scenario name is not in the registry."""

    def __init__(self, name: str, available: Optional[list[str]] = None) -> None:
        self.name = name
        self.available = list(available) if available else []

        message = f"Unknown scenario '{name}'"
        if self.available:
            message += f". Available: {', '.join(self.available)}"

        super().__init__(
            message,
            context={"name": name, "available": self.available},
        )


class ConfigError(OverheadBenchError, ValueError):
    """Raised when a config file or environment override is invalid.

    Attributes:
        source: Where the bad value came from (file path or env var).
    """

    def __init__(self, message: str, *, source: Optional[str] = None) -> None:
        self.source = source
        super().__init__(message, context={"source": source})
