"""
overheadbench - Abstraction Overhead Micro-Benchmarks

Measures whether an abstraction layer costs measurable runtime compared
to a hand-written baseline:
- Range traversal with direct-call vs. type-erased callbacks
- Direct closure calls vs. calls through a type-erased wrapper
- Named recursion vs. self-passing closure recursion

Main APIs:
- measure(): Time an operation over repeated trials
- traverse_static() / traverse_dynamic(): Range traversal entry points
- compare(): Time a baseline and candidate and check the excess cost
- run_scenario(): Run one of the registered overhead scenarios
"""

__version__ = "0.1.0"

from overheadbench.benchmark import (
    ComparisonResult,
    Duration,
    Expectation,
    Normalization,
    Scenario,
    TimeUnit,
    compare,
    get_scenario,
    list_scenarios,
    measure,
    run_all,
    run_scenario,
)
from overheadbench.config import (
    HarnessConfig,
    ScenarioOverride,
    load_config,
)
from overheadbench.dispatch import (
    DispatchMode,
    ErasedCallable,
    IndexRange,
    traverse,
    traverse_dynamic,
    traverse_items,
    traverse_static,
)
from overheadbench.exceptions import (
    ConfigError,
    OverheadAssertionError,
    OverheadBenchError,
    ResultMismatchError,
    UnknownScenarioError,
)

__all__ = [
    "__version__",
    # Timing
    "Duration",
    "TimeUnit",
    "measure",
    # Traversal
    "DispatchMode",
    "ErasedCallable",
    "IndexRange",
    "traverse",
    "traverse_dynamic",
    "traverse_items",
    "traverse_static",
    # Comparison
    "ComparisonResult",
    "Expectation",
    "Normalization",
    "Scenario",
    "compare",
    "get_scenario",
    "list_scenarios",
    "run_all",
    "run_scenario",
    # Configuration
    "HarnessConfig",
    "ScenarioOverride",
    "load_config",
    # Exceptions
    "ConfigError",
    "OverheadAssertionError",
    "OverheadBenchError",
    "ResultMismatchError",
    "UnknownScenarioError",
]
