"""SECOP query endpoints: raw, filtered and AI-analyzed."""

import logging
from datetime import date
from typing import Optional, Sequence

from fastapi import APIRouter, Depends, HTTPException, Query

from app.deps import get_analyzer, get_query_builder, get_secop_client
from app.schemas.api import AnalysisResponse, RecordsResponse
from app.schemas.domain import ContractRecord
from app.services.dates import InvalidDateError, resolve_date
from app.services.query_builder import (
    ALL_FIELDS,
    FILTERED_FIELDS,
    REDUCED_FIELDS,
    QueryBuilder,
)
from app.services.relevance import RelevanceAnalyzer
from app.services.secop_client import FetchResult, SecopClient

logger = logging.getLogger(__name__)

router = APIRouter(tags=["secop"])

FECHA_QUERY = Query(None, description="Publication date from which to search (YYYY-MM-DD)")


def _resolve_or_400(fecha: Optional[str]) -> date:
    """Resolve the request date, rejecting bad input before any upstream call."""
    try:
        return resolve_date(fecha)
    except InvalidDateError:
        raise HTTPException(status_code=400, detail="Invalid date format. Use YYYY-MM-DD")


async def _fetch_records(
    secop: SecopClient,
    builder: QueryBuilder,
    fields: Sequence[str],
    on_date: date,
) -> list[ContractRecord]:
    query = builder.build_query(fields, on_date)
    try:
        result = await secop.fetch(query)
    except Exception as e:
        logger.exception("SECOP fetch raised for %s", on_date)
        result = FetchResult(error=str(e))
    if not result.ok:
        # Upstream failures are served as an empty result set
        logger.warning("Serving empty result for %s: %s", on_date, result.error)
    return result.records


async def _records_response(
    fecha: Optional[str],
    fields: Sequence[str],
    secop: SecopClient,
    builder: QueryBuilder,
) -> RecordsResponse:
    on_date = _resolve_or_400(fecha)
    try:
        records = await _fetch_records(secop, builder, fields, on_date)
        return RecordsResponse(
            date_used=on_date.isoformat(),
            total_records=len(records),
            data=records,
        )
    except Exception:
        logger.exception("Error processing SECOP request for %s", on_date)
        raise HTTPException(status_code=500, detail="Error processing the data")


@router.get("/raw", response_model=RecordsResponse)
async def raw(
    fecha: Optional[str] = FECHA_QUERY,
    secop: SecopClient = Depends(get_secop_client),
    builder: QueryBuilder = Depends(get_query_builder),
):
    """Matching processes with every field."""
    return await _records_response(fecha, ALL_FIELDS, secop, builder)


@router.get("/filtered", response_model=RecordsResponse)
async def filtered(
    fecha: Optional[str] = FECHA_QUERY,
    secop: SecopClient = Depends(get_secop_client),
    builder: QueryBuilder = Depends(get_query_builder),
):
    """Matching processes with the filtered field set."""
    return await _records_response(fecha, FILTERED_FIELDS, secop, builder)


@router.get("/analyzed", response_model=AnalysisResponse)
async def analyzed(
    fecha: Optional[str] = FECHA_QUERY,
    secop: SecopClient = Depends(get_secop_client),
    analyzer: RelevanceAnalyzer = Depends(get_analyzer),
    builder: QueryBuilder = Depends(get_query_builder),
):
    """Matching processes scored for relevance by the LLM."""
    on_date = _resolve_or_400(fecha)
    try:
        records = await _fetch_records(secop, builder, REDUCED_FIELDS, on_date)
        analysis = await analyzer.analyze(records)
        return AnalysisResponse(
            date_used=on_date.isoformat(),
            total_records_analyzed=len(records),
            ai_analysis=analysis,
        )
    except Exception:
        logger.exception("Error processing SECOP analysis for %s", on_date)
        raise HTTPException(status_code=500, detail="Error processing the data")
