from finreport.domain.enums import RejectionReason


class ReportValidationError(Exception):
    """The request was refused by ReportValidator."""

    def __init__(self, reason: RejectionReason) -> None:
        super().__init__(reason.value)
        self.reason = reason


class ReportGenerationError(Exception):
    """The document could not be built. Carries the underlying error text."""
