"""Pytest configuration and shared fixtures for masonry tests."""

from __future__ import annotations

import pytest

from masonry.domain import (
    BondLayoutGenerator,
    BondType,
    Brick,
    BrickDimensions,
    PlannerSettings,
    StridePlanner,
)


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared fixtures for layouts and planners
# =============================================================================


@pytest.fixture
def dimensions() -> BrickDimensions:
    """Standard brick: 210 x 100 x 50 with 10mm head and 12.5mm bed joints."""
    return BrickDimensions()


@pytest.fixture
def generator(dimensions: BrickDimensions) -> BondLayoutGenerator:
    return BondLayoutGenerator(dimensions)


@pytest.fixture
def planner() -> StridePlanner:
    return StridePlanner(PlannerSettings())


@pytest.fixture
def stretcher_wall(generator: BondLayoutGenerator) -> list[Brick]:
    """Stretcher bond layout of a 2300 x 2000 mm wall."""
    return generator.generate(BondType.STRETCHER, 2300.0, 2000.0)
