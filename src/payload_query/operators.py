from __future__ import annotations

from enum import Enum

from .exceptions import OperatorNotFoundError


class Operator(str, Enum):
    """Filter operators understood by the REST API's ``where`` syntax."""

    # Comparison
    EQUALS = "equals"
    NOT_EQUALS = "not_equals"
    GREATER_THAN = "greater_than"
    GREATER_THAN_EQUAL = "greater_than_equal"
    LESS_THAN = "less_than"
    LESS_THAN_EQUAL = "less_than_equal"

    # String matching
    CONTAINS = "contains"
    LIKE = "like"
    NOT_LIKE = "not_like"

    # Set membership
    IN = "in"
    NOT_IN = "not_in"
    ALL = "all"

    # Presence
    EXISTS = "exists"

    # Geometry
    WITHIN = "within"
    INTERSECTS = "intersects"
    NEAR = "near"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def resolve(cls, value: Operator | str) -> Operator:
        """
        Strictly map *value* to a member.

        The builders accept any string as an operator key; use this when
        unknown operators must be rejected before a query is built.

        Raises:
            OperatorNotFoundError: If *value* names no member.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise OperatorNotFoundError(
                str(value), [member.value for member in cls]
            ) from None


def operator_key(operator: Operator | str) -> str:
    """Return the plain string key an operator serializes to."""
    if isinstance(operator, Operator):
        return operator.value
    return str(operator)
