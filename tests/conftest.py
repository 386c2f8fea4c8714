"""
Pytest configuration for the vivaldi test suite.
"""

import random
import tempfile

from typing import Generator

import pytest

from vivaldi import Coordinate, VivaldiModel
from vivaldi.logging import LoggingConfig


@pytest.fixture(autouse=True)
def reset_logging_config() -> Generator[None, None, None]:
    """Logging settings live in contextvars shared across tests."""
    LoggingConfig().reset()
    yield
    LoggingConfig().reset()


@pytest.fixture
def temp_log_directory() -> Generator[str, None, None]:
    with tempfile.TemporaryDirectory() as temp_directory:
        yield temp_directory


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1337)


@pytest.fixture
def model_2d(seeded_rng: random.Random) -> VivaldiModel:
    return VivaldiModel(dimensions=2, rng=seeded_rng)


@pytest.fixture
def model_3d() -> VivaldiModel:
    return VivaldiModel(dimensions=3, seed=42)


@pytest.fixture
def origin_3d() -> Coordinate:
    return Coordinate.origin(3)
