"""
Query operations over a population, each written twice.

Every query comes as a pair: an imperative version that walks the people
with an explicit loop and a mutable accumulator, and a declarative version
that composes ``filter``/``map``/``reduce`` into a single expression. The two
versions of a pair return identical results for every input; the
``*_agrees`` helpers check exactly that.

All functions accept any sequence of ``Person``, so a ``Population`` and a
plain list work equally.
"""

import math
from functools import reduce
from operator import attrgetter
from typing import Iterable, List, Tuple

from .core.data_structures import Person, PersonSequence
from .utils.logging import log_call


@log_call
def get_all_within_imperative(
    people: PersonSequence,
    lower_age: int,
    upper_age: int
) -> List[Person]:
    """
    Return everyone aged in ``[lower_age, upper_age)``, using a loop.

    Parameters
    ----------
    people : sequence of Person
        The population to search.
    lower_age : int
        Lower age bound, inclusive.
    upper_age : int
        Upper age bound, exclusive.

    Returns
    -------
    age_group : list of Person
        Matching people in population order. Empty when
        ``lower_age >= upper_age``.
    """
    age_group = []
    for person in people:
        if lower_age <= person.age < upper_age:
            age_group.append(person)
    return age_group


@log_call
def get_all_within_declarative(
    people: PersonSequence,
    lower_age: int,
    upper_age: int
) -> List[Person]:
    """
    Return everyone aged in ``[lower_age, upper_age)``, using a pipeline.

    The whole query is one expression::

        list(filter(lambda p: lower_age <= p.age < upper_age, people))

    ``filter`` is the intermediate step: it takes a predicate (a function
    returning a bool for one element) and lazily yields only the people for
    whom it is true. Nothing is evaluated yet; ``filter`` returns an
    iterator, not a list.

    ``list`` is the terminal step. It drains the iterator and materializes
    the survivors, in their original order, into the result. No accumulator
    is visible to the caller; the collection is built by ``list`` itself.

    The predicate could equally be a named function or a comprehension
    (``[p for p in people if lower_age <= p.age < upper_age]``); a lambda
    keeps the predicate next to the pipeline that uses it.

    Parameters
    ----------
    people : sequence of Person
        The population to search.
    lower_age : int
        Lower age bound, inclusive.
    upper_age : int
        Upper age bound, exclusive.

    Returns
    -------
    age_group : list of Person
        Matching people in population order. Empty when
        ``lower_age >= upper_age``.
    """
    return list(filter(lambda p: lower_age <= p.age < upper_age, people))


@log_call
def average_age_imperative(people: PersonSequence) -> float:
    """
    Return the mean age, summing in a loop.

    Returns ``nan`` for an empty population, matching
    :func:`average_age_declarative`.
    """
    total = 0.0
    count = 0
    for person in people:
        total += person.age
        count += 1
    if count == 0:
        return math.nan
    return total / count


def _accumulate(acc: Tuple[float, int], age: int) -> Tuple[float, int]:
    total, count = acc
    return total + age, count + 1


def _mean(ages: Iterable[int]) -> float:
    total, count = reduce(_accumulate, ages, (0.0, 0))
    return total / count if count else math.nan


@log_call
def average_age_declarative(people: PersonSequence) -> float:
    """
    Return the mean age as a map/reduce pipeline.

    ``map(attrgetter("age"), people)`` is the intermediate step. It changes
    the element type of the stream from ``Person`` to ``int``.
    ``attrgetter("age")`` is the operator-module spelling of
    ``lambda p: p.age``; both build the same one-argument function.

    The mean is then a reduction: ``reduce`` folds the ages into a single
    ``(sum, count)`` pair, which is divided once at the end. Folding the
    count alongside the sum means the ages are consumed in a single pass,
    so the pipeline works on any iterable, not only on sized sequences.

    Returns
    -------
    mean_age : float
        ``nan`` for an empty population, matching
        :func:`average_age_imperative`.
    """
    return _mean(map(attrgetter("age"), people))


@log_call
def within_agrees(
    people: PersonSequence,
    lower_age: int,
    upper_age: int
) -> bool:
    """True when both age-range filters return the same people in order."""
    return (get_all_within_imperative(people, lower_age, upper_age)
            == get_all_within_declarative(people, lower_age, upper_age))


@log_call
def average_agrees(people: PersonSequence, rel_tol: float = 1e-9) -> bool:
    """True when both averages agree; ``nan`` matches ``nan``."""
    imperative = average_age_imperative(people)
    declarative = average_age_declarative(people)
    if math.isnan(imperative) or math.isnan(declarative):
        return math.isnan(imperative) and math.isnan(declarative)
    return math.isclose(imperative, declarative, rel_tol=rel_tol)
