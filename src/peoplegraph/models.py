"""
In-memory data served by the GraphQL API
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Person:
    first_name: str
    last_name: str


# Read-only for the life of the process; order is the order clients see.
PEOPLE: tuple[Person, ...] = (
    Person(first_name="Jane", last_name="Milton"),
    Person(first_name="Travis", last_name="Smith"),
)


@dataclass(frozen=True)
class Message:
    """View model for the greeting pages."""

    text: str
