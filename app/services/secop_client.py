"""SECOP II open-data client.

Reads contracting processes from the Socrata resource endpoint. Failures are
reported through ``FetchResult.error`` instead of being raised.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

import httpx

from app.services.query_builder import QuerySpec

logger = logging.getLogger(__name__)


def _reject_constant(name: str):
    raise ValueError(f"non-standard JSON constant: {name}")


@dataclass(frozen=True, slots=True)
class FetchResult:
    """Outcome of a fetch: records on success, a cause on failure."""

    records: list[dict[str, Any]] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class SecopClient:
    """Async client for the SECOP II Socrata dataset."""

    def __init__(
        self,
        base_url: str,
        *,
        app_token: str = "",
        timeout: float = 30.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = base_url
        self.headers = {"Accept": "application/json"}
        if app_token:
            self.headers["X-App-Token"] = app_token
        self._client = http_client or httpx.AsyncClient(timeout=timeout)

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def fetch(self, query: QuerySpec) -> FetchResult:
        """Run one query against the dataset.

        Never raises for transport, HTTP status or decoding failures; those
        are logged and returned as a failed ``FetchResult``.
        """
        try:
            response = await self._client.get(
                self.base_url, params=query.to_params(), headers=self.headers
            )
            response.raise_for_status()
            data = response.json(parse_constant=_reject_constant)
        except httpx.HTTPError as e:
            logger.error("Error fetching SECOP data: %s", e)
            return FetchResult(error=f"request failed: {e}")
        except ValueError as e:
            logger.error("SECOP returned a non-JSON body: %s", e)
            return FetchResult(error=f"invalid JSON: {e}")

        if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
            logger.error("SECOP body is not a list of records: %.200r", data)
            return FetchResult(error="unexpected response shape")

        logger.info("Fetched %d SECOP records", len(data))
        return FetchResult(records=data)
