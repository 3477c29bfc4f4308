from datetime import datetime

import pytest
from httpx import ASGITransport, AsyncClient

from finreport.report.docx_writer import DocxWriter
from finreport.report.file_namer import FileNamer
from finreport.report.service import ReportService
from finreport.report.validator import ReportValidator

FIXED_NOW = datetime(2024, 3, 5, 14, 7, 9)


@pytest.fixture()
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture()
def report_service(fixed_clock) -> ReportService:
    return ReportService(
        validator=ReportValidator(),
        writer=DocxWriter(clock=fixed_clock),
        file_namer=FileNamer(clock=fixed_clock),
    )


@pytest.fixture()
async def client(report_service):
    from finreport.api.deps import get_report_service
    from finreport.api.main import app

    app.dependency_overrides[get_report_service] = lambda: report_service
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
