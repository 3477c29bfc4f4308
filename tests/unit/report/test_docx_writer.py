"""Tests for DocxWriter — python-docx document generation."""

from datetime import datetime
from io import BytesIO

import pytest
from docx import Document
from docx.shared import Pt, RGBColor

from finreport.report.docx_writer import SUMMARY_HEADING, SUMMARY_PLACEHOLDER, DocxWriter


def _clock():
    return datetime(2024, 3, 5, 14, 7, 9)


def _render(**overrides) -> bytes:
    args = {
        "client_name": "Acme Corporation",
        "report_type_name": "Profit & Loss",
        "year": 2024,
        "report_id": "RPT-123",
    }
    args.update(overrides)
    return DocxWriter(clock=_clock).render(**args)


def _paragraphs(content: bytes):
    return Document(BytesIO(content)).paragraphs


class TestDocumentStructure:
    def test_produces_docx_bytes(self):
        content = _render()
        assert isinstance(content, bytes)
        assert content[:2] == b"PK"  # OOXML is a zip package

    def test_block_order(self):
        texts = [p.text for p in _paragraphs(_render())]
        assert texts == [
            "Profit & Loss Report",
            "Client: Acme Corporation",
            "Reporting Year: 2024",
            "",
            "Generated: 2024-03-05 14:07:09\nReport ID: RPT-123",
            "",
            SUMMARY_HEADING,
            SUMMARY_PLACEHOLDER,
        ]

    def test_na_report_id(self):
        meta = _paragraphs(_render(report_id="N/A"))[4]
        assert "Report ID: N/A" in meta.text

    def test_exactly_eight_blocks(self):
        assert len(_paragraphs(_render())) == 8

    def test_long_names_render(self):
        long_client = "C" * 300
        long_type = "T" * 300
        texts = [p.text for p in _paragraphs(_render(client_name=long_client, report_type_name=long_type))]
        assert texts[0] == f"{long_type} Report"
        assert texts[1] == f"Client: {long_client}"

    def test_only_timestamp_depends_on_clock(self):
        early = DocxWriter(clock=lambda: datetime(2020, 1, 1)).render("Acme", "Balance Sheet", 2020, "X")
        late = DocxWriter(clock=lambda: datetime(2030, 1, 1)).render("Acme", "Balance Sheet", 2020, "X")
        early_texts = [p.text for p in _paragraphs(early)]
        late_texts = [p.text for p in _paragraphs(late)]
        assert early_texts[4] != late_texts[4]
        assert early_texts[:4] + early_texts[5:] == late_texts[:4] + late_texts[5:]


class TestFormatting:
    def test_title_run(self):
        run = _paragraphs(_render())[0].runs[0]
        assert run.bold is True
        assert run.font.size == Pt(16)
        assert run.font.color.rgb == RGBColor(0x1A, 0x1A, 0x1A)

    def test_client_and_year_runs(self):
        paras = _paragraphs(_render())
        for para in paras[1:3]:
            run = para.runs[0]
            assert run.font.size == Pt(12)
            assert not run.bold

    def test_metadata_run(self):
        run = _paragraphs(_render())[4].runs[0]
        assert run.italic is True
        assert run.font.size == Pt(10)
        assert run.font.color.rgb == RGBColor(0x73, 0x73, 0x73)

    def test_summary_heading_run(self):
        run = _paragraphs(_render())[6].runs[0]
        assert run.bold is True
        assert run.font.size == Pt(12)

    def test_spacing_paragraphs_are_empty(self):
        paras = _paragraphs(_render())
        assert paras[3].runs == []
        assert paras[5].runs == []


class TestFailures:
    def test_none_client_name_rejected(self):
        with pytest.raises(TypeError):
            _render(client_name=None)

    def test_non_int_year_rejected(self):
        with pytest.raises(TypeError):
            _render(year="2024")

    def test_xml_incompatible_text_fails(self):
        with pytest.raises(ValueError):
            _render(client_name="Acme\x00Corp")
