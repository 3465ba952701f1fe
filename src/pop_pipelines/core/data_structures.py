from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Sequence, Tuple, Union, overload

import pandas as pd

from ..utils.logging import log_call


class Gender(Enum):
    """The two genders a generated person can have."""

    MALE = "male"
    FEMALE = "female"


@dataclass(frozen=True)
class Person:
    name: str
    gender: Gender
    age: int

    def __str__(self) -> str:
        return f"{self.name} ({self.gender.name}, {self.age})"


@dataclass(frozen=True)
class Population:
    """
    Ordered, read-only collection of people.

    Behaves like a sequence of ``Person`` so the query functions can take
    either a ``Population`` or a plain list.
    """

    persons: Tuple[Person, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Accept any iterable but always store a tuple
        object.__setattr__(self, "persons", tuple(self.persons))

    def __len__(self) -> int:
        return len(self.persons)

    def __iter__(self) -> Iterator[Person]:
        return iter(self.persons)

    @overload
    def __getitem__(self, index: int) -> Person: ...

    @overload
    def __getitem__(self, index: slice) -> Tuple[Person, ...]: ...

    def __getitem__(
        self, index: Union[int, slice]
    ) -> Union[Person, Tuple[Person, ...]]:
        return self.persons[index]

    def __str__(self) -> str:
        return "[" + ", ".join(str(p) for p in self.persons) + "]"

    @log_call
    def to_frame(self) -> pd.DataFrame:
        """Tabular view with one row per person, in population order."""
        return pd.DataFrame(
            {
                "name": [p.name for p in self.persons],
                "gender": [p.gender.name for p in self.persons],
                "age": [p.age for p in self.persons],
            },
            columns=["name", "gender", "age"],
        )


PersonSequence = Union[Population, Sequence[Person]]
