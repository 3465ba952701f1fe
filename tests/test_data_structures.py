import dataclasses

import pandas as pd
import pytest

from pop_pipelines.core.data_structures import Gender, Person, Population


def test_person_is_immutable():
    person = Person(name="Alice", gender=Gender.FEMALE, age=30)
    with pytest.raises(dataclasses.FrozenInstanceError):
        person.age = 31


def test_person_value_equality():
    a = Person(name="Bob", gender=Gender.MALE, age=40)
    b = Person(name="Bob", gender=Gender.MALE, age=40)
    assert a == b
    assert hash(a) == hash(b)
    assert a != Person(name="Bob", gender=Gender.MALE, age=41)


def test_person_str_includes_all_fields():
    text = str(Person(name="Carol", gender=Gender.FEMALE, age=12))
    assert text == "Carol (FEMALE, 12)"


def test_gender_is_closed_set():
    assert {g.name for g in Gender} == {"MALE", "FEMALE"}


def test_population_stores_tuple():
    people = [Person("Ann", Gender.FEMALE, 5), Person("Ben", Gender.MALE, 6)]
    pop = Population(people)
    assert isinstance(pop.persons, tuple)
    assert len(pop) == 2
    assert pop[0] == people[0]
    assert list(pop) == people
    # Mutating the source list does not touch the population
    people.append(Person("Cid", Gender.MALE, 7))
    assert len(pop) == 2


def test_population_is_immutable():
    pop = Population([Person("Ann", Gender.FEMALE, 5)])
    with pytest.raises(dataclasses.FrozenInstanceError):
        pop.persons = ()


def test_population_to_frame():
    pop = Population([Person("Ann", Gender.FEMALE, 5),
                      Person("Ben", Gender.MALE, 6)])
    frame = pop.to_frame()
    assert isinstance(frame, pd.DataFrame)
    assert list(frame.columns) == ["name", "gender", "age"]
    assert frame["name"].tolist() == ["Ann", "Ben"]
    assert frame["gender"].tolist() == ["FEMALE", "MALE"]
    assert frame["age"].tolist() == [5, 6]


def test_empty_population_to_frame():
    frame = Population().to_frame()
    assert frame.empty
    assert list(frame.columns) == ["name", "gender", "age"]
