"""Schemas for SECOP records and API envelopes."""

from app.schemas.api import AnalysisResponse, RecordsResponse
from app.schemas.domain import AnalysisResult, ContractRecord

__all__ = [
    "AnalysisResponse",
    "AnalysisResult",
    "ContractRecord",
    "RecordsResponse",
]
