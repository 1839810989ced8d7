#!/usr/bin/env python3
"""
overheadbench Scenario Runner

Runs the registered overhead scenarios and reports per-scenario costs,
deltas and verdicts.

Usage:
    # Run all scenarios with defaults
    python benchmarks/run_scenarios.py

    # Run specific scenarios
    python benchmarks/run_scenarios.py --only loop_vs_static --only static_vs_dynamic

    # Quick mode (element and trial counts divided by 10)
    python benchmarks/run_scenarios.py --quick

    # Apply threshold overrides and save results to JSON
    python benchmarks/run_scenarios.py --config thresholds.yaml --output results.json
"""
from __future__ import annotations

import argparse
import json
import logging
import os
import platform
import sys
import time
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from overheadbench import (  # noqa: E402
    ComparisonResult,
    HarnessConfig,
    Normalization,
    ScenarioOverride,
    get_scenario,
    list_scenarios,
    load_config,
    run_all,
)

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)

QUICK_DIVISOR = 10


@dataclass(slots=True)
class RunnerConfig:
    """Configuration for the scenario runner.

    Attributes:
        only: Scenario names to run. Empty runs all.
        quick: Divide element and trial counts by QUICK_DIVISOR.
        config_path: YAML file with scenario overrides.
        output_json: Path to save results JSON.
        verbose: Verbose output.
    """
    only: list[str] = field(default_factory=list)
    quick: bool = False
    config_path: Path | None = None
    output_json: Path | None = None
    verbose: bool = False


def get_system_info() -> dict[str, Any]:
    """Collect system information for reproducibility.

    Returns:
        Dictionary with system information.
    """
    return {
        "platform": platform.platform(),
        "python_version": platform.python_version(),
        "python_implementation": platform.python_implementation(),
        "processor": platform.processor(),
        "machine": platform.machine(),
        "cpu_count": os.cpu_count(),
        "timestamp": datetime.now().isoformat(),
    }


def build_harness_config(config: RunnerConfig, names: list[str]) -> HarnessConfig:
    """Combine environment, file and quick-mode overrides.

    Quick mode scales the already-overridden sizes, so it composes with
    values from the file and environment. Per-trial thresholds shrink in
    proportion to the element count; per-call thresholds are unchanged.
    """
    harness_config = HarnessConfig.from_env()
    if config.config_path is not None:
        harness_config = harness_config.merged(load_config(config.config_path))

    if not config.quick:
        return harness_config

    quick_overrides = {}
    for name in names:
        scenario = get_scenario(name, harness_config)
        elements = max(scenario.elements // QUICK_DIVISOR, 1)
        threshold = scenario.threshold
        if scenario.normalization is Normalization.PER_TRIAL and scenario.elements > 0:
            threshold = threshold * elements / scenario.elements
        quick_overrides[name] = ScenarioOverride(
            threshold=threshold,
            elements=elements,
            trials=max(scenario.trials // QUICK_DIVISOR, 1),
        )
    return harness_config.merged(HarnessConfig(overrides=quick_overrides))


def print_final_summary(results: list[ComparisonResult], total_time: float) -> None:
    """Print final summary of all scenarios.

    Args:
        results: Completed comparison results.
        total_time: Wall time for the whole run in seconds.
    """
    print("\n")
    print("="*70)
    print("FINAL SCENARIO SUMMARY")
    print("="*70)

    for result in results:
        status = "PASS" if result.passed else "FAIL"
        suffix = result.unit.suffix
        print(
            f"  [{status}] {result.name}: delta {result.delta:.4g} {suffix} "
            f"(expected {result.expectation.value} {result.threshold:.4g} {suffix}, "
            f"{result.normalization.label})"
        )

    passed = sum(1 for r in results if r.passed)
    print(f"\nScenarios passed: {passed}/{len(results)}")
    print(f"Total time: {total_time:.2f} seconds")


def save_results(
    results: list[ComparisonResult],
    config: RunnerConfig,
    output_path: Path,
) -> None:
    """Save results to JSON file.

    Args:
        results: Completed comparison results.
        config: Runner configuration.
        output_path: Path to save JSON.
    """
    payload = {
        "scenario_run": {
            "timestamp": datetime.now().isoformat(),
            "config": {
                "only": config.only,
                "quick": config.quick,
                "config_path": str(config.config_path) if config.config_path else None,
            },
            "system_info": get_system_info(),
        },
        "results": [r.to_dict() for r in results],
    }

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        json.dump(payload, f, indent=2)

    print(f"\nResults saved to: {output_path}")


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the scenario runner.

    Returns:
        Exit code (0 when every scenario holds).
    """
    parser = argparse.ArgumentParser(
        description="overheadbench Scenario Runner",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="Scenarios:\n" + "\n".join(f"    {n}" for n in list_scenarios()),
    )
    parser.add_argument(
        "--only",
        action="append",
        choices=list_scenarios(),
        default=[],
        help="Run only this scenario (repeatable)",
    )
    parser.add_argument(
        "--quick",
        action="store_true",
        help=f"Divide element and trial counts (and per-trial thresholds) by {QUICK_DIVISOR}",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="YAML file with scenario overrides",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Output JSON file path for results",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Verbose output",
    )

    args = parser.parse_args(argv)

    config = RunnerConfig(
        only=args.only,
        quick=args.quick,
        config_path=Path(args.config) if args.config else None,
        output_json=Path(args.output) if args.output else None,
        verbose=args.verbose,
    )

    if config.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    names = config.only or list_scenarios()

    print("\n")
    print("="*70)
    print("OVERHEADBENCH SCENARIOS")
    print("="*70)

    sys_info = get_system_info()
    print(f"\nSystem Information:")
    print(f"  Platform:     {sys_info['platform']}")
    print(f"  Python:       {sys_info['python_implementation']} {sys_info['python_version']}")
    print(f"  CPU:          {sys_info['processor']}")
    print(f"  CPU Count:    {sys_info['cpu_count']}")

    total_start = time.monotonic()
    try:
        harness_config = build_harness_config(config, names)
        results = run_all(names, harness_config)
    except Exception as e:
        logger.error(f"Scenario run failed: {e}")
        if config.verbose:
            import traceback
            traceback.print_exc()
        return 1
    total_time = time.monotonic() - total_start

    for result in results:
        print("\n" + "-"*70)
        print(result.summary())

    print_final_summary(results, total_time)

    if config.output_json:
        save_results(results, config, config.output_json)

    return 0 if all(r.passed for r in results) else 1


if __name__ == "__main__":
    sys.exit(main())
