"""Accept or refuse a report request before rendering."""

from finreport.domain.enums import RejectionReason
from finreport.domain.models.report import ReportRequest, ValidationOutcome

MIN_CLIENT_NAME_LENGTH = 2


class ReportValidator:
    """Checks a ReportRequest against the rendering rules.

    Rules run in a fixed order and the first failure wins. Client names are
    not restricted to any character set; filesystem safety is handled by
    FileNamer.
    """

    def validate(self, request: ReportRequest | None) -> ValidationOutcome:
        if request is None:
            return ValidationOutcome.invalid(RejectionReason.INVALID_REQUEST)

        client_name = (request.client_name or "").strip()
        if len(client_name) < MIN_CLIENT_NAME_LENGTH:
            return ValidationOutcome.invalid(RejectionReason.CLIENT_NAME_TOO_SHORT)

        if not (request.report_type_name or "").strip():
            return ValidationOutcome.invalid(RejectionReason.REPORT_TYPE_REQUIRED)

        if request.year <= 0:
            return ValidationOutcome.invalid(RejectionReason.YEAR_REQUIRED)

        return ValidationOutcome.valid()
