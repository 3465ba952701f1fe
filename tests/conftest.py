"""
Shared test fixtures.

Populations are built from fixed seeds so every test sees the same people.
"""

import os
import sys

import pytest

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from pop_pipelines.core.data_structures import (  # noqa: E402
    Gender,
    Person,
    Population
)
from pop_pipelines.population import initialize_population  # noqa: E402


def make_people(*ages):
    """People with the given ages and predictable names."""
    return [
        Person(name=f"Person{i}",
               gender=Gender.MALE if i % 2 else Gender.FEMALE,
               age=age)
        for i, age in enumerate(ages)
    ]


@pytest.fixture(scope="session")
def seeded_population():
    """Default-size population (100 people) from a fixed seed."""
    return initialize_population(seed=42)


@pytest.fixture(scope="session")
def large_population():
    """Larger population for equivalence checks across many ranges."""
    return initialize_population(size=1000, seed=7)


@pytest.fixture
def empty_population():
    return Population()
