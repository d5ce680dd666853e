"""
Root GraphQL query definitions
"""

import strawberry

from ..types.person import Person


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    def people(self, info: strawberry.Info) -> list[Person]:
        """Get all people."""
        from ..resolvers.people import resolve_people

        return resolve_people(info)
