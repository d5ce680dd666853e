"""
People resolvers for GraphQL API
"""

import strawberry

from ..types.person import Person


def resolve_people(info: strawberry.Info) -> list[Person]:
    """Get every person from the data source bound to this execution.

    Arguments are ignored; the whole list is returned in its stored order.
    """
    people = info.context["people"]
    return [Person.from_model(person) for person in people]
