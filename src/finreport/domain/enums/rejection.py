from enum import Enum


class RejectionReason(str, Enum):
    """Why a report request was refused. Values are the user-facing messages."""

    INVALID_REQUEST = "Invalid request data"
    CLIENT_NAME_TOO_SHORT = "Client name must be at least 2 characters"
    REPORT_TYPE_REQUIRED = "Report type is required"
    YEAR_REQUIRED = "Valid year is required"
