from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from finreport.container import Container
from finreport.report.service import ReportService


@inject
def get_report_service(
    service: ReportService = Depends(Provide[Container.report_service]),
) -> ReportService:
    return service
