from dataclasses import dataclass, field
from typing import Optional


@dataclass
class PopulationConfig:
    size: int = 100
    seed: Optional[int] = None


@dataclass
class QueryConfig:
    lower_age: int = 10
    upper_age: int = 20


@dataclass
class AppConfig:
    population: PopulationConfig = field(default_factory=PopulationConfig)
    query: QueryConfig = field(default_factory=QueryConfig)
