"""
PyTest Configuration for overheadbench Tests

Provides fixtures, markers, and test setup.
"""
import sys
from pathlib import Path
from typing import Callable

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "benchmark: mark test as a full-size overhead scenario")
    config.addinivalue_line("markers", "slow: mark test as slow running")


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove OVERHEADBENCH_* variables for the duration of a test."""
    import os

    for key in list(os.environ):
        if key.startswith("OVERHEADBENCH_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def recorder() -> tuple[list[int], Callable[[int], None]]:
    """Callback that records every index it receives."""
    seen: list[int] = []

    def record(index: int) -> None:
        seen.append(index)

    return seen, record
