"""Imperative and declarative queries over a synthetic population."""

from typing import List

from .core.data_structures import Gender, Person, Population
from .random_utils import make_rng, random_int, random_string
from .population import (
    POPULATION,
    MIN_AGE,
    MAX_AGE,
    MIN_NAME_LENGTH,
    MAX_NAME_LENGTH,
    random_person,
    initialize_population
)
from .queries import (
    get_all_within_imperative,
    get_all_within_declarative,
    average_age_imperative,
    average_age_declarative,
    within_agrees,
    average_agrees
)

__all__: List[str] = [
    # Data model
    "Gender",
    "Person",
    "Population",
    # Random utilities
    "make_rng",
    "random_int",
    "random_string",
    # Population initializer
    "POPULATION",
    "MIN_AGE",
    "MAX_AGE",
    "MIN_NAME_LENGTH",
    "MAX_NAME_LENGTH",
    "random_person",
    "initialize_population",
    # Queries, imperative and declarative pairs
    "get_all_within_imperative",
    "get_all_within_declarative",
    "average_age_imperative",
    "average_age_declarative",
    "within_agrees",
    "average_agrees",
]
__version__ = "0.1.0"
