"""ReportService — orchestrates report generation."""

import logging

from finreport.domain.models.report import RenderedDocument, ReportRequest
from finreport.report.docx_writer import DOCX_CONTENT_TYPE, DocxWriter
from finreport.report.errors import ReportGenerationError, ReportValidationError
from finreport.report.file_namer import FileNamer
from finreport.report.validator import ReportValidator

logger = logging.getLogger(__name__)


class ReportService:
    """Orchestrates validation → .docx rendering → filename derivation.

    Holds no per-request state, so a single instance serves every request.
    """

    def __init__(self, validator: ReportValidator, writer: DocxWriter, file_namer: FileNamer) -> None:
        self._validator = validator
        self._writer = writer
        self._file_namer = file_namer

    def generate(self, request: ReportRequest | None) -> RenderedDocument:
        """Validate the request and build the document in memory.

        Raises ReportValidationError for a refused request and
        ReportGenerationError when the document cannot be built.
        """
        outcome = self._validator.validate(request)
        if not outcome.is_valid:
            logger.info("Report request rejected: %s", outcome.reason.value)
            raise ReportValidationError(outcome.reason)

        try:
            content = self._writer.render(
                request.client_name,
                request.report_type_name,
                request.year,
                request.effective_report_id,
            )
            filename = self._file_namer.name(request.client_name, request.year)
        except Exception as e:
            logger.exception("Report generation failed")
            raise ReportGenerationError(str(e)) from e

        logger.info(
            "Report generated: %s (%d bytes, type=%s)",
            filename, len(content), request.report_type or "-",
        )
        return RenderedDocument(content=content, content_type=DOCX_CONTENT_TYPE, filename=filename)
