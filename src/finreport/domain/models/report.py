"""Domain types for report requests and rendered documents."""

from typing import Optional

from pydantic import BaseModel

from finreport.domain.enums import RejectionReason

DEFAULT_REPORT_ID = "N/A"


class ReportRequest(BaseModel):
    """A client's description of the report to build."""

    report_type: Optional[str] = None  # Form code, e.g. "pl"; informational only
    report_type_name: Optional[str] = None  # Rendered label, e.g. "Profit & Loss"
    year: int = 0
    client_name: Optional[str] = None
    report_id: Optional[str] = None
    generated_date: Optional[str] = None  # Client clock; the server stamps its own time

    @property
    def effective_report_id(self) -> str:
        return DEFAULT_REPORT_ID if self.report_id is None else self.report_id


class ValidationOutcome(BaseModel):
    """Result of validating a ReportRequest. `reason` is set only when invalid."""

    reason: Optional[RejectionReason] = None

    @property
    def is_valid(self) -> bool:
        return self.reason is None

    @classmethod
    def valid(cls) -> "ValidationOutcome":
        return cls()

    @classmethod
    def invalid(cls, reason: RejectionReason) -> "ValidationOutcome":
        return cls(reason=reason)


class RenderedDocument(BaseModel):
    """A generated report, ready to stream back to the caller."""

    content: bytes
    content_type: str
    filename: str
