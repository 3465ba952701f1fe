"""
Population initializer.

Builds the synthetic population the queries run over: people with random
lowercase names (first letter capitalized), random ages and a random gender.
"""

from typing import Optional

import numpy as np

from .core.data_structures import Gender, Person, Population
from .random_utils import make_rng, random_int, random_string
from .utils.logging import log_call

POPULATION = 100
MIN_AGE = 5
MAX_AGE = 75
MIN_NAME_LENGTH = 5
MAX_NAME_LENGTH = 10


@log_call
def random_person(rng: Optional[np.random.Generator] = None) -> Person:
    """Generate one person with random name, gender and age."""
    name = random_string("a", "z",
                         random_int(MIN_NAME_LENGTH, MAX_NAME_LENGTH, rng),
                         rng)
    name = name[0].upper() + name[1:]
    age = random_int(MIN_AGE, MAX_AGE, rng)
    gender = Gender.MALE if random_int(1, 2, rng) == 1 else Gender.FEMALE
    return Person(name=name, gender=gender, age=age)


@log_call
def initialize_population(
    size: int = POPULATION,
    rng: Optional[np.random.Generator] = None,
    seed: Optional[int] = None
) -> Population:
    """
    Generate a population of ``size`` random people.

    Parameters
    ----------
    size : int, default=POPULATION
        Number of people to generate.
    rng : np.random.Generator, optional
        Source of randomness. Takes precedence over ``seed``.
    seed : int, optional
        Seed for a fresh generator; the same seed yields the same population.

    Returns
    -------
    population : Population
        The generated people, in generation order.
    """
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")
    if rng is None and seed is not None:
        rng = make_rng(seed)
    return Population(tuple(random_person(rng) for _ in range(size)))
