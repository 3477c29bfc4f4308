from datetime import datetime

from dependency_injector import containers, providers

from finreport.config import Settings
from finreport.report.docx_writer import DocxWriter
from finreport.report.file_namer import FileNamer
from finreport.report.service import ReportService
from finreport.report.validator import ReportValidator


class Container(containers.DeclarativeContainer):
    wiring_config = containers.WiringConfiguration(modules=["finreport.api.deps"])

    settings = providers.Singleton(Settings)

    # Local wall clock; reports and filenames are stamped in server time.
    clock = providers.Object(datetime.now)

    validator = providers.Singleton(ReportValidator)

    writer = providers.Singleton(DocxWriter, clock=clock)

    file_namer = providers.Singleton(
        FileNamer,
        clock=clock,
        prefix=settings.provided.report_filename_prefix,
    )

    report_service = providers.Singleton(
        ReportService,
        validator=validator,
        writer=writer,
        file_namer=file_namer,
    )
