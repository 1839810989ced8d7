"""
overheadbench Benchmark Module

Provides the timing primitive, the baseline-vs-candidate comparator and
the registry of overhead scenarios.
"""
from overheadbench.benchmark.timer import (
    DEFAULT_TRIALS,
    Duration,
    TimeUnit,
    measure,
    per_unit,
)
from overheadbench.benchmark.comparison import (
    ComparisonResult,
    Expectation,
    Normalization,
    compare,
)
from overheadbench.benchmark.scenarios import (
    Scenario,
    get_scenario,
    list_scenarios,
    run_all,
    run_scenario,
)

__all__ = [
    # Timer
    "DEFAULT_TRIALS",
    "Duration",
    "TimeUnit",
    "measure",
    "per_unit",
    # Comparison
    "ComparisonResult",
    "Expectation",
    "Normalization",
    "compare",
    # Scenarios
    "Scenario",
    "get_scenario",
    "list_scenarios",
    "run_all",
    "run_scenario",
]
