"""
Strawberry schema extensions
"""

from collections.abc import Iterator

from graphql.validation import NoUnusedVariablesRule
from strawberry.extensions import SchemaExtension


class AllowUnusedVariables(SchemaExtension):
    """Accept operations that declare variables they never use.

    The remaining standard validation rules are left in place.
    """

    def on_operation(self) -> Iterator[None]:
        self.execution_context.validation_rules = tuple(
            rule
            for rule in self.execution_context.validation_rules
            if rule is not NoUnusedVariablesRule
        )
        yield
