"""A person identified by a name and an age."""

from dataclasses import dataclass


@dataclass
class Person:
    """A named person of a given age; two people are equal when both fields match."""

    name: str = ""
    age: int = 0

    def __str__(self):
        return f"({self.name}, {self.age})"

    def __gt__(self, other):
        """True only when both ages match and this name sorts after the other one."""
        if not isinstance(other, Person):
            return NotImplemented
        return self.age == other.age and self.name > other.name