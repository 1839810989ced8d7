"""
Harness configuration.

Scenario thresholds, element counts and trial counts are calibrated for
one reference machine. This module lets them be overridden per scenario
from a YAML file and from environment variables.

YAML format::

    scenarios:
      loop_vs_dynamic:
        threshold: 600.0
        trials: 5
      direct_vs_erased_call:
        elements: 200000
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, ClassVar, Mapping, Optional

import yaml

from overheadbench.exceptions import ConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScenarioOverride:
    """Per-scenario replacement values. ``None`` keeps the default.

    Attributes:
        threshold: Replacement threshold, in the scenario's unit.
        elements: Replacement element count.
        trials: Replacement trial count.
    """

    threshold: Optional[float] = None
    elements: Optional[int] = None
    trials: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate override values."""
        if self.elements is not None and self.elements < 0:
            raise ConfigError(f"elements must be non-negative, got {self.elements}")
        if self.trials is not None and self.trials < 1:
            raise ConfigError(f"trials must be >= 1, got {self.trials}")

    @property
    def is_empty(self) -> bool:
        return self.threshold is None and self.elements is None and self.trials is None

    def merged(self, other: "ScenarioOverride") -> "ScenarioOverride":
        """Combine with ``other``; values set in ``other`` win."""
        return ScenarioOverride(
            threshold=other.threshold if other.threshold is not None else self.threshold,
            elements=other.elements if other.elements is not None else self.elements,
            trials=other.trials if other.trials is not None else self.trials,
        )


@dataclass(frozen=True)
class HarnessConfig:
    """Overrides for the built-in scenarios, keyed by scenario name.

    The overrides mapping is stored read-only.

    Example:
        config = HarnessConfig(
            overrides={"loop_vs_static": ScenarioOverride(threshold=500.0)},
        )
    """

    ENV_PREFIX: ClassVar[str] = "OVERHEADBENCH_"
    CONFIG_PATH_ENV: ClassVar[str] = "OVERHEADBENCH_CONFIG"
    _FIELD_SUFFIXES: ClassVar[tuple[str, ...]] = ("_THRESHOLD", "_ELEMENTS", "_TRIALS")

    overrides: Mapping[str, ScenarioOverride] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "overrides", MappingProxyType(dict(self.overrides)))

    def override_for(self, name: str) -> ScenarioOverride:
        """Get the override for a scenario (empty if none is set)."""
        return self.overrides.get(name, ScenarioOverride())

    def merged(self, other: "HarnessConfig") -> "HarnessConfig":
        """Combine with ``other``; values set in ``other`` win."""
        combined = dict(self.overrides)
        for name, override in other.overrides.items():
            combined[name] = combined.get(name, ScenarioOverride()).merged(override)
        return HarnessConfig(overrides=combined)

    @classmethod
    def from_env(cls) -> "HarnessConfig":
        """Create config from environment variables.

        Environment variables:
            OVERHEADBENCH_CONFIG: Path to a YAML config file, loaded first
            OVERHEADBENCH_<NAME>_THRESHOLD: Threshold for scenario <name>
            OVERHEADBENCH_<NAME>_ELEMENTS: Element count for scenario <name>
            OVERHEADBENCH_<NAME>_TRIALS: Trial count for scenario <name>

        Per-scenario variables win over values from the file.

        Returns:
            HarnessConfig with values from environment.

        Raises:
            ConfigError: If a variable holds an unparseable value.
        """
        path = os.environ.get(cls.CONFIG_PATH_ENV)
        base = load_config(path) if path else cls()

        raw: dict[str, dict[str, str]] = {}
        for key, value in os.environ.items():
            if not key.startswith(cls.ENV_PREFIX) or key == cls.CONFIG_PATH_ENV:
                continue
            for suffix in cls._FIELD_SUFFIXES:
                if key.endswith(suffix):
                    name = key[len(cls.ENV_PREFIX):-len(suffix)].lower()
                    if name:
                        raw.setdefault(name, {})[suffix[1:].lower()] = value
                    break

        overrides = {
            name: _parse_override(values, source=f"{cls.ENV_PREFIX}{name.upper()}_*")
            for name, values in raw.items()
        }
        if overrides:
            logger.debug(f"Scenario overrides from environment: {sorted(overrides)}")

        return base.merged(cls(overrides=overrides))


def _parse_override(values: Mapping[str, Any], *, source: str) -> ScenarioOverride:
    unknown = set(values) - {"threshold", "elements", "trials"}
    if unknown:
        raise ConfigError(
            f"Unknown override keys {sorted(unknown)} in {source}",
            source=source,
        )
    try:
        threshold = values.get("threshold")
        elements = values.get("elements")
        trials = values.get("trials")
        return ScenarioOverride(
            threshold=float(threshold) if threshold is not None else None,
            elements=int(elements) if elements is not None else None,
            trials=int(trials) if trials is not None else None,
        )
    except ConfigError:
        raise
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid override in {source}: {e}", source=source) from e


def load_config(path: "str | Path") -> HarnessConfig:
    """Load scenario overrides from a YAML file.

    Args:
        path: Path to YAML configuration file.

    Returns:
        HarnessConfig with the file's overrides.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ConfigError: If config file is invalid.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "r") as f:
        data = yaml.safe_load(f)

    if data is None:
        return HarnessConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid config file format: {path}", source=str(path))

    scenarios = data.get("scenarios") or {}
    if not isinstance(scenarios, dict):
        raise ConfigError(
            f"'scenarios' must be a mapping in {path}", source=str(path)
        )

    overrides = {}
    for name, values in scenarios.items():
        if not isinstance(values, dict):
            raise ConfigError(
                f"Scenario '{name}' must map to a mapping in {path}",
                source=str(path),
            )
        overrides[str(name)] = _parse_override(values, source=str(path))

    logger.debug(f"Loaded {len(overrides)} scenario overrides from {path}")
    return HarnessConfig(overrides=overrides)
