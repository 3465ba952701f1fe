"""Core data model: people and the population that holds them."""

from .data_structures import Gender, Person, Population

__all__ = ["Gender", "Person", "Population"]
