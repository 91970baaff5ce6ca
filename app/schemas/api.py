"""API response models for SECOP endpoints."""

from pydantic import BaseModel

from app.schemas.domain import AnalysisResult, ContractRecord


class RecordsResponse(BaseModel):
    """Envelope for /raw and /filtered."""

    date_used: str
    total_records: int
    data: list[ContractRecord]


class AnalysisResponse(BaseModel):
    """Envelope for /analyzed."""

    date_used: str
    total_records_analyzed: int
    ai_analysis: AnalysisResult
