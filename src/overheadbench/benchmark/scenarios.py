"""
Overhead Scenarios

Registry of baseline-vs-candidate scenarios. Each scenario pairs two
functionally-equivalent workloads with the sizes to run them at and the
bound the candidate's excess cost must respect.

Threshold policy: delta is always ``candidate_cost - baseline_cost``
and every scenario carries a single expectation. Defaults are
calibrated for CPython, where neither traversal can inline the callback
body; override them through HarnessConfig on other hardware.

Reference CPython excess costs and the bounds set from them:

    loop_vs_dynamic          ~175 ms/trial   below 400 ms
    loop_vs_static            ~30 ms/trial   below 90 ms
    direct_vs_erased_call    ~100 ns/call    below 300 ns

The static bound sits well under the dynamic excess, so a static
traversal that regresses to boxed dispatch fails loop_vs_static.
"""
from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from overheadbench.benchmark import workloads
from overheadbench.benchmark.comparison import (
    ComparisonResult,
    Expectation,
    Normalization,
    Workload,
    compare,
)
from overheadbench.benchmark.timer import DEFAULT_TRIALS, TimeUnit
from overheadbench.config import HarnessConfig, ScenarioOverride
from overheadbench.exceptions import UnknownScenarioError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Scenario:
    """A baseline/candidate pair with sizes and a threshold.

    Attributes:
        name: Registry key.
        description: What the scenario demonstrates.
        baseline: Reference workload, called as ``baseline(elements)``.
        candidate: Abstraction-wrapped workload with the same result.
        elements: Size argument for both workloads.
        trials: Timed repetitions per workload.
        normalization: Per-trial or per-call costs.
        expectation: Direction of the threshold check.
        threshold: Bound on delta, in ``unit``.
        unit: Unit for costs and threshold.
    """

    name: str
    description: str
    baseline: Workload
    candidate: Workload
    elements: int
    threshold: float
    trials: int = DEFAULT_TRIALS
    normalization: Normalization = Normalization.PER_TRIAL
    expectation: Expectation = Expectation.BELOW
    unit: TimeUnit = TimeUnit.MS

    def with_overrides(self, override: ScenarioOverride) -> "Scenario":
        """Return a copy with the override's non-empty values applied."""
        if override.is_empty:
            return self
        changes = {
            key: value
            for key, value in (
                ("threshold", override.threshold),
                ("elements", override.elements),
                ("trials", override.trials),
            )
            if value is not None
        }
        return dataclasses.replace(self, **changes)

    def run(self, verify: bool = True) -> ComparisonResult:
        """Time both workloads and build the comparison result."""
        return compare(
            self.baseline,
            self.candidate,
            name=self.name,
            elements=self.elements,
            trials=self.trials,
            normalization=self.normalization,
            expectation=self.expectation,
            threshold=self.threshold,
            unit=self.unit,
            verify=verify,
        )


_SCENARIOS: dict[str, Scenario] = {
    scenario.name: scenario
    for scenario in (
        Scenario(
            name="loop_vs_dynamic",
            description=(
                "Summation through the type-erased traversal costs more than "
                "a hand-written loop, within an upper bound"
            ),
            baseline=workloads.sum_doubled_loop,
            candidate=workloads.sum_doubled_dynamic,
            elements=1_000_000,
            trials=10,
            threshold=400.0,
        ),
        Scenario(
            name="loop_vs_dynamic_stress",
            description=(
                "Type-erased traversal overhead is large enough to detect "
                "over many short trials"
            ),
            baseline=workloads.sum_doubled_loop,
            candidate=workloads.sum_doubled_dynamic,
            elements=100_000,
            trials=100,
            expectation=Expectation.ABOVE,
            threshold=1.0,
        ),
        Scenario(
            name="loop_vs_static",
            description=(
                "Summation through the direct-call traversal stays close "
                "to a hand-written loop"
            ),
            baseline=workloads.sum_doubled_loop,
            candidate=workloads.sum_doubled_static,
            elements=1_000_000,
            trials=10,
            threshold=90.0,
        ),
        Scenario(
            name="direct_vs_erased_call",
            description=(
                "Calling a closure through a type-erased wrapper adds a "
                "negligible cost per call"
            ),
            baseline=workloads.call_direct,
            candidate=workloads.call_erased,
            elements=1_000_000,
            trials=1,
            normalization=Normalization.PER_CALL,
            unit=TimeUnit.NS,
            threshold=300.0,
        ),
        Scenario(
            name="named_vs_self_passing_recursion",
            description=(
                "A closure recursing by receiving itself as an argument "
                "costs about the same as a named recursive function"
            ),
            baseline=workloads.factorial,
            candidate=workloads.factorial_self_passing,
            elements=100,
            trials=10_000,
            threshold=1.0,
        ),
        Scenario(
            name="static_vs_dynamic",
            description=(
                "The type-erased traversal is strictly slower than the "
                "direct-call traversal for the same workload"
            ),
            baseline=workloads.sum_doubled_static,
            candidate=workloads.sum_doubled_dynamic,
            elements=100_000,
            trials=10,
            expectation=Expectation.ABOVE,
            threshold=0.0,
        ),
    )
}


def list_scenarios() -> list[str]:
    """Names of all registered scenarios, in registration order."""
    return list(_SCENARIOS)


def get_scenario(name: str, config: Optional[HarnessConfig] = None) -> Scenario:
    """Look up a scenario and apply any configured override.

    Args:
        name: Scenario name.
        config: Overrides to apply. Defaults to none.

    Returns:
        The resolved Scenario.

    Raises:
        UnknownScenarioError: If the name is not registered.
    """
    try:
        scenario = _SCENARIOS[name]
    except KeyError:
        raise UnknownScenarioError(name, list_scenarios()) from None

    if config is None:
        return scenario
    return scenario.with_overrides(config.override_for(name))


def run_scenario(name: str, config: Optional[HarnessConfig] = None) -> ComparisonResult:
    """Resolve and run a single scenario."""
    return get_scenario(name, config).run()


def run_all(
    names: Optional[Iterable[str]] = None,
    config: Optional[HarnessConfig] = None,
) -> list[ComparisonResult]:
    """Run several scenarios in sequence.

    Args:
        names: Scenarios to run. Defaults to all registered scenarios.
        config: Overrides to apply.

    Returns:
        One ComparisonResult per scenario, in the order run.
    """
    selected = list(names) if names is not None else list_scenarios()

    if config is not None:
        for unknown in sorted(set(config.overrides) - set(_SCENARIOS)):
            logger.warning(f"Ignoring override for unknown scenario '{unknown}'")

    # Resolve all names before timing anything.
    scenarios = [get_scenario(name, config) for name in selected]
    return [scenario.run() for scenario in scenarios]
