"""
Errors raised around the query DSL.

Building and encoding a query never raises: ``WhereBuilder``,
``JoinBuilder``, ``QueryBuilder`` and ``QueryStringEncoder`` absorb
malformed input. These exceptions come from the strict helpers layered
on top of them, ``Operator.resolve`` and ``QueryParameters.from_dict``.
Each one renders itself for an API response with ``to_dict()``.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any


class PayloadQueryError(Exception):
    """Root of every payload-query error."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class OperatorNotFoundError(PayloadQueryError):
    """
    A ``where`` comparison named an operator the CMS does not know.

    The operator is the innermost bracket key of a filter, as in
    ``where[title][equals]=foo``. ``suggestions`` lists the closest known
    operators so a typo such as ``equal`` can be reported as ``equals``.
    """

    def __init__(self, operator: str, valid_operators: list[str]) -> None:
        self.operator = operator
        self.valid_operators = valid_operators
        self.suggestions = get_close_matches(operator, valid_operators, n=3, cutoff=0.6)

        message = f"Unknown where operator '{operator}' in where[<field>][{operator}]."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        message += f" Known operators: {', '.join(sorted(valid_operators))}."
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "OPERATOR_NOT_FOUND",
            "operator": self.operator,
            "suggestions": self.suggestions,
            "valid_operators": sorted(self.valid_operators),
        }


class MappingError(PayloadQueryError):
    """A raw parameter dict could not be mapped onto a typed record."""

    def __init__(self, message: str, path: str | None = None) -> None:
        self.message = message
        self.path = path
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "MAPPING_ERROR",
            "message": self.message,
            "path": self.path,
        }
