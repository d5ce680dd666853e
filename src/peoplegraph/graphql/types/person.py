"""
Person GraphQL type definitions
"""

from typing import Self

import strawberry

from ...models import Person as PersonModel


@strawberry.type
class Person:
    """A person from the static directory."""

    first_name: str
    last_name: str

    @classmethod
    def from_model(cls, person: PersonModel) -> Self:
        return cls(first_name=person.first_name, last_name=person.last_name)
