"""DocxWriter — builds the financial report .docx with python-docx."""

from datetime import datetime
from io import BytesIO
from typing import Callable

from docx import Document
from docx.shared import Pt, RGBColor
from docx.text.paragraph import Paragraph

DOCX_CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

TITLE_SIZE = Pt(16)
BODY_SIZE = Pt(12)
META_SIZE = Pt(10)

TITLE_COLOR = RGBColor(0x1A, 0x1A, 0x1A)
META_COLOR = RGBColor(0x73, 0x73, 0x73)

GENERATED_FORMAT = "%Y-%m-%d %H:%M:%S"

SUMMARY_HEADING = "Financial Summary"
SUMMARY_PLACEHOLDER = (
    "This is a sample financial report. It does not contain computed financial figures."
)


class DocxWriter:
    """Renders a validated report request into an in-memory Word document.

    Output is identical between calls except for the "Generated:" timestamp,
    which is read from ``clock`` at render time.
    """

    def __init__(self, clock: Callable[[], datetime] = datetime.now) -> None:
        self._clock = clock

    def render(self, client_name: str, report_type_name: str, year: int, report_id: str) -> bytes:
        """Build the report and return the .docx bytes."""
        _check_inputs(client_name, report_type_name, year, report_id)

        doc = Document()
        self._add_title(doc.add_paragraph(), report_type_name)
        self._add_line(doc.add_paragraph(), f"Client: {client_name}")
        self._add_line(doc.add_paragraph(), f"Reporting Year: {year}")
        doc.add_paragraph()
        self._add_metadata(doc.add_paragraph(), report_id)
        doc.add_paragraph()
        self._add_summary(doc)

        buf = BytesIO()
        doc.save(buf)
        return buf.getvalue()

    def _add_title(self, para: Paragraph, report_type_name: str) -> None:
        run = para.add_run(f"{report_type_name} Report")
        run.bold = True
        run.font.size = TITLE_SIZE
        run.font.color.rgb = TITLE_COLOR

    def _add_line(self, para: Paragraph, text: str) -> None:
        run = para.add_run(text)
        run.font.size = BODY_SIZE

    def _add_metadata(self, para: Paragraph, report_id: str) -> None:
        generated = self._clock().strftime(GENERATED_FORMAT)
        run = para.add_run(f"Generated: {generated}")
        run.add_break()
        run.add_text(f"Report ID: {report_id}")
        run.italic = True
        run.font.size = META_SIZE
        run.font.color.rgb = META_COLOR

    def _add_summary(self, doc) -> None:
        heading = doc.add_paragraph().add_run(SUMMARY_HEADING)
        heading.bold = True
        heading.font.size = BODY_SIZE

        doc.add_paragraph(SUMMARY_PLACEHOLDER)


def _check_inputs(client_name, report_type_name, year, report_id) -> None:
    """Guard against callers that skipped validation."""
    for label, value in (
        ("client_name", client_name),
        ("report_type_name", report_type_name),
        ("report_id", report_id),
    ):
        if not isinstance(value, str):
            raise TypeError(f"{label} must be str, got {type(value).__name__}")
    if isinstance(year, bool) or not isinstance(year, int):
        raise TypeError(f"year must be int, got {type(year).__name__}")
