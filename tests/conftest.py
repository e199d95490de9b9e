"""Pytest fixtures for sortkit tests"""

import pytest

from sortkit.domain.strategies import (
    MergeSort,
    QuickSort,
    ShellSort,
    StrategyRegistry,
)


@pytest.fixture
def fruit() -> list[str]:
    """Unsorted sample list"""
    return ["banana", "apple", "cherry"]


@pytest.fixture
def fresh_registry() -> StrategyRegistry:
    """Registry holding the three built-in strategies only"""
    test_registry = StrategyRegistry()
    test_registry.register("quick", QuickSort)
    test_registry.register("merge", MergeSort)
    test_registry.register("shell", ShellSort)
    return test_registry


@pytest.fixture
def clean_env(monkeypatch):
    """Remove sortkit environment variables"""
    for key in ["SORTKIT_STRATEGY", "SORTKIT_LOG_LEVEL", "SORTKIT_LOG_FILE"]:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch
