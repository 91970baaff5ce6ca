"""Business logic services."""

from app.services.dates import (
    InvalidDateError,
    is_valid_date,
    previous_business_day,
    resolve_date,
)
from app.services.query_builder import (
    ALL_FIELDS,
    FILTERED_FIELDS,
    REDUCED_FIELDS,
    QueryBuilder,
    QuerySpec,
    build_query,
)
from app.services.relevance import RelevanceAnalyzer, parse_model_reply, strip_code_fence
from app.services.secop_client import FetchResult, SecopClient

__all__ = [
    "ALL_FIELDS",
    "FILTERED_FIELDS",
    "REDUCED_FIELDS",
    "FetchResult",
    "InvalidDateError",
    "QueryBuilder",
    "QuerySpec",
    "RelevanceAnalyzer",
    "SecopClient",
    "build_query",
    "is_valid_date",
    "parse_model_reply",
    "previous_business_day",
    "resolve_date",
    "strip_code_fence",
]
