from finreport.domain.enums.rejection import RejectionReason
from finreport.domain.enums.report_type import ReportType

__all__ = [
    "RejectionReason",
    "ReportType",
]
