"""Animals with a readable text form."""

from __future__ import annotations

import math
from dataclasses import dataclass


def _format_number(value: float) -> str:
    value = float(value)
    if math.isfinite(value) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


@dataclass
class Animal:
    """An animal with a kind, a name and some measurements."""

    animal_type: str = ""
    name: str = ""
    weight: float = 0.0
    height: int = 0

    def __str__(self) -> str:
        return (
            f"Animal{{type = {self.animal_type}, name = '{self.name}', "
            f"weight = {_format_number(self.weight)}, height = {self.height}}}"
        )

    def update_name(self, name: str) -> None:
        """Rename the animal and print its new text form."""
        self.name = name
        print(f"\na.String(): {self}", end="")


@dataclass
class Cat(Animal):
    """A cat."""


@dataclass
class Dog(Animal):
    """A dog."""


def new_cat(name: str, weight: float, height: int) -> Cat:
    return Cat("cat", name, weight, height)


def new_dog(name: str, weight: float, height: int) -> Dog:
    return Dog("dog", name, weight, height)


def print_animal(animal: Animal) -> None:
    print(str(animal))


def print_animal_type(animal: Animal) -> None:
    print(f"\nType of animal = {animal.animal_type}", end="")