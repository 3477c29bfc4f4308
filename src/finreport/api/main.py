import logging
import traceback
from contextlib import asynccontextmanager
from datetime import UTC, datetime

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

from finreport.api.reports import router as reports_router
from finreport.config import settings
from finreport.container import Container
from finreport.report.errors import ReportGenerationError, ReportValidationError

LOG_FORMAT = "%(asctime)s %(levelname)-5s %(name)s - %(message)s"

logger = logging.getLogger("finreport.api")

container = Container()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
    logger.info("%s %s ready", settings.app_name, settings.app_version)
    yield


app = FastAPI(title=settings.app_name, version=settings.app_version, lifespan=lifespan)
app.state.container = container


@app.exception_handler(ReportValidationError)
async def report_validation_handler(request: Request, exc: ReportValidationError):
    return JSONResponse(status_code=400, content={"message": exc.reason.value})


@app.exception_handler(ReportGenerationError)
async def report_generation_handler(request: Request, exc: ReportGenerationError):
    return JSONResponse(
        status_code=500,
        content={"message": "Error generating report", "error": str(exc)},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    tb = traceback.format_exception(type(exc), exc, exc.__traceback__)
    logger.error("Unhandled error on %s %s:\n%s", request.method, request.url.path, "".join(tb))
    return JSONResponse(status_code=500, content={"message": "Internal server error", "error": str(exc)})


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(reports_router)


@app.get("/api/health")
async def health():
    return {"status": "healthy", "timestamp": datetime.now(UTC).isoformat()}
