"""Reports API — generate and download a .docx financial report."""

import logging
from io import BytesIO
from typing import Annotated
from urllib.parse import quote

from fastapi import APIRouter, Depends, Request
from fastapi.responses import StreamingResponse
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool

from finreport.api.deps import get_report_service
from finreport.api.schemas.reports import ReportGenerateRequest, ReportTypeResponse
from finreport.domain.enums import ReportType
from finreport.domain.models.report import ReportRequest
from finreport.report.service import ReportService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/reports", tags=["reports"])

ServiceDep = Annotated[ReportService, Depends(get_report_service)]


async def _parse_body(request: Request) -> ReportRequest | None:
    """Decode the JSON body; None when it is missing or malformed."""
    try:
        payload = await request.json()
        return ReportGenerateRequest.model_validate(payload).to_domain()
    except (ValueError, ValidationError) as e:
        logger.info("Unparseable report request: %s", e)
        return None


def content_disposition(filename: str) -> str:
    """Attachment header; adds an RFC 5987 parameter for non-ASCII names."""
    if filename.isascii():
        return f'attachment; filename="{filename}"'
    fallback = "".join(c if c.isascii() else "_" for c in filename)
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename)}"


@router.post("/generate")
async def generate_report(request: Request, service: ServiceDep):
    """Validate the request and stream back the generated .docx."""
    report_request = await _parse_body(request)
    document = await run_in_threadpool(service.generate, report_request)

    return StreamingResponse(
        BytesIO(document.content),
        media_type=document.content_type,
        headers={"Content-Disposition": content_disposition(document.filename)},
    )


@router.get("/types", response_model=list[ReportTypeResponse])
async def list_report_types() -> list[ReportTypeResponse]:
    """Report type codes and the labels the form sends as reportTypeName."""
    return [ReportTypeResponse(code=t.value, name=t.display_name) for t in ReportType]
