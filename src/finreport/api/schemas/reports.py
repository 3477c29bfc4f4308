"""Schemas for /api/reports endpoints."""

from typing import Any, Optional

from pydantic import BaseModel, model_validator

from finreport.domain.models.report import ReportRequest


def _fold(key: str) -> str:
    return key.replace("_", "").lower()


class ReportGenerateRequest(BaseModel):
    """Request body. Keys match case-insensitively, camelCase or snake_case."""

    report_type: Optional[str] = None
    report_type_name: Optional[str] = None
    year: int = 0
    client_name: Optional[str] = None
    generated_date: Optional[str] = None
    report_id: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def fold_keys(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        fields = {_fold(name): name for name in cls.model_fields}
        return {fields.get(_fold(key), key): value for key, value in data.items()}

    def to_domain(self) -> ReportRequest:
        return ReportRequest(**self.model_dump())


class ReportTypeResponse(BaseModel):
    code: str
    name: str


class ErrorResponse(BaseModel):
    message: str
    error: Optional[str] = None
