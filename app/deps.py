"""Shared dependencies for FastAPI routes.

Clients live on ``app.state`` (created in the lifespan) so tests can swap
them through ``app.dependency_overrides``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import HTTPException, Request

from app.services.query_builder import QueryBuilder, default_builder

if TYPE_CHECKING:
    from app.services.relevance import RelevanceAnalyzer
    from app.services.secop_client import SecopClient


def _from_state(request: Request, name: str):
    client = getattr(request.app.state, name, None)
    if client is None:
        raise HTTPException(status_code=503, detail=f"{name} client not initialized")
    return client


def get_secop_client(request: Request) -> "SecopClient":
    """Get the open-data client created at startup."""
    return _from_state(request, "secop")


def get_analyzer(request: Request) -> "RelevanceAnalyzer":
    """Get the relevance analyzer created at startup."""
    return _from_state(request, "analyzer")


def get_query_builder() -> QueryBuilder:
    """Get the query builder holding the fixed filters."""
    return default_builder


__all__ = ["get_analyzer", "get_query_builder", "get_secop_client"]
