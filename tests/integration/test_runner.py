"""Integration tests for the benchmarks/run_scenarios.py runner."""
from __future__ import annotations

import importlib.util
import json
import sys
from pathlib import Path
from types import ModuleType

import pytest

RUNNER_PATH = Path(__file__).parent.parent.parent / "benchmarks" / "run_scenarios.py"


@pytest.fixture(scope="module")
def runner() -> ModuleType:
    """Load the runner script as a module."""
    spec = importlib.util.spec_from_file_location("run_scenarios", RUNNER_PATH)
    module = importlib.util.module_from_spec(spec)
    sys.modules[spec.name] = module
    spec.loader.exec_module(module)
    return module


class TestRunner:
    """Tests for the scenario runner script."""

    def test_quick_mode_scales_sizes(self, runner: ModuleType, clean_env: None) -> None:
        config = runner.RunnerConfig(quick=True)

        harness_config = runner.build_harness_config(config, ["loop_vs_dynamic"])
        override = harness_config.override_for("loop_vs_dynamic")

        assert override.elements == 100_000
        assert override.trials == 1

    def test_quick_mode_scales_per_trial_thresholds(
        self, runner: ModuleType, clean_env: None
    ) -> None:
        config = runner.RunnerConfig(quick=True)

        harness_config = runner.build_harness_config(
            config, ["loop_vs_dynamic", "loop_vs_dynamic_stress"]
        )

        assert harness_config.override_for("loop_vs_dynamic").threshold == pytest.approx(40.0)
        assert harness_config.override_for("loop_vs_dynamic_stress").threshold == pytest.approx(0.1)

    def test_quick_mode_keeps_per_call_threshold(
        self, runner: ModuleType, clean_env: None
    ) -> None:
        config = runner.RunnerConfig(quick=True)

        harness_config = runner.build_harness_config(config, ["direct_vs_erased_call"])

        assert harness_config.override_for("direct_vs_erased_call").threshold == 300.0

    def test_quick_mode_scales_file_threshold(
        self, runner: ModuleType, clean_env: None, tmp_path: Path
    ) -> None:
        path = tmp_path / "overrides.yaml"
        path.write_text("scenarios:\n  loop_vs_static:\n    threshold: 50\n")
        config = runner.RunnerConfig(quick=True, config_path=path)

        harness_config = runner.build_harness_config(config, ["loop_vs_static"])

        assert harness_config.override_for("loop_vs_static").threshold == pytest.approx(5.0)

    def test_quick_mode_keeps_minimum_of_one(
        self, runner: ModuleType, clean_env: None
    ) -> None:
        config = runner.RunnerConfig(quick=True)

        harness_config = runner.build_harness_config(config, ["direct_vs_erased_call"])

        assert harness_config.override_for("direct_vs_erased_call").trials == 1

    def test_config_file_applied(
        self, runner: ModuleType, clean_env: None, tmp_path: Path
    ) -> None:
        path = tmp_path / "overrides.yaml"
        path.write_text("scenarios:\n  loop_vs_static:\n    threshold: 42\n")
        config = runner.RunnerConfig(config_path=path)

        harness_config = runner.build_harness_config(config, ["loop_vs_static"])

        assert harness_config.override_for("loop_vs_static").threshold == 42.0

    def test_main_writes_json(
        self, runner: ModuleType, clean_env: None, tmp_path: Path
    ) -> None:
        output = tmp_path / "results" / "run.json"

        exit_code = runner.main(
            [
                "--only", "named_vs_self_passing_recursion",
                "--quick",
                "--output", str(output),
            ]
        )

        assert exit_code == 0
        payload = json.loads(output.read_text())
        assert payload["scenario_run"]["config"]["quick"] is True
        assert [r["name"] for r in payload["results"]] == ["named_vs_self_passing_recursion"]
        assert payload["results"][0]["passed"] is True

    def test_unknown_scenario_rejected(self, runner: ModuleType) -> None:
        with pytest.raises(SystemExit):
            runner.main(["--only", "nope"])
