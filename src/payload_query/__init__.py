"""Fluent query builders and bracket-notation query-string encoding for a CMS REST API."""

from .builder import QueryBuilder
from .clauses import AndClause, Clause, FieldClause, JoinClause, OrClause
from .config import EncoderConfig
from .encoding import QueryStringEncoder
from .exceptions import MappingError, OperatorNotFoundError, PayloadQueryError
from .joins import JoinBuilder
from .mappers import (
    document_from_json,
    document_to_json,
    paginated_docs_from_json,
    total_docs_from_json,
    total_docs_to_json,
)
from .models import Document, PaginatedDocs, QueryParameters, TotalDocs
from .operators import Operator
from .where import WhereBuilder

__all__ = [
    # Builders
    "QueryBuilder",
    "WhereBuilder",
    "JoinBuilder",
    # Clauses
    "Clause",
    "FieldClause",
    "AndClause",
    "OrClause",
    "JoinClause",
    "Operator",
    # Encoding
    "EncoderConfig",
    "QueryStringEncoder",
    # Records
    "Document",
    "PaginatedDocs",
    "TotalDocs",
    "QueryParameters",
    "document_from_json",
    "document_to_json",
    "paginated_docs_from_json",
    "total_docs_from_json",
    "total_docs_to_json",
    # Exceptions
    "PayloadQueryError",
    "OperatorNotFoundError",
    "MappingError",
]
