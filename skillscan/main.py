# skillscan/main.py
import time
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse

from skillscan.core.config import settings
from skillscan.core.errors import ErrorKind, ServiceError
from skillscan.core.logging import configure_logging, get_logger
from skillscan.db.session import engine, SessionLocal
from skillscan.db.base import Base
from skillscan.schemas.common import ErrorResponse

# Import models so SQLAlchemy knows about them (for create_all)
from skillscan.models.job_role import JobRole  # noqa: F401
from skillscan.models.applicant import Applicant  # noqa: F401

# Routers
from skillscan.api.routes import router as api_router
from skillscan.api.job_role_routes import router as job_role_router
from skillscan.api.applicant_routes import router as applicant_router
from skillscan.api.match_routes import router as match_router
from skillscan.api.upload_routes import router as upload_router

# Seeder
from skillscan.db.seed import seed_job_roles

configure_logging()
logger = get_logger(__name__)

STATUS_BY_KIND = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.CONFLICT: 409,
    ErrorKind.UNAVAILABLE: 503,
}


def setup_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError):
        logger.warning(
            "Service error",
            kind=exc.kind.value,
            message=exc.message,
            path=request.url.path,
        )
        body = ErrorResponse(
            error=exc.kind.value,
            message=exc.message,
            field=exc.field,
            timestamp=datetime.now(timezone.utc),
        )
        return JSONResponse(
            status_code=STATUS_BY_KIND[exc.kind],
            content=body.model_dump(mode="json", by_alias=True, exclude_none=True),
        )


def setup_middleware(app: FastAPI) -> None:
    # CORS
    origins = [o.strip() for o in settings.BACKEND_CORS_ORIGINS.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins or ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        logger.info(
            "Request completed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_seconds=round(time.perf_counter() - start, 4),
        )
        return response


def create_app() -> FastAPI:
    app = FastAPI(title=settings.APP_NAME)

    # Root -> redirect to Swagger UI
    @app.get("/", include_in_schema=False)
    def root():
        return RedirectResponse(url="/docs")

    setup_middleware(app)
    setup_exception_handlers(app)

    # Ensure tables exist (uses the database from .env)
    Base.metadata.create_all(bind=engine)

    # Auto-seed job roles if empty
    if settings.SEED_JOB_ROLES:
        with SessionLocal() as db:
            inserted = seed_job_roles(db)
            if inserted:
                logger.info("Seeded job roles", inserted=inserted)

    # API routes
    app.include_router(api_router)                                   # /health
    app.include_router(job_role_router, prefix=settings.API_PREFIX)  # /job-roles
    app.include_router(applicant_router, prefix=settings.API_PREFIX) # /applicants
    app.include_router(match_router, prefix=settings.API_PREFIX)     # /match
    app.include_router(upload_router, prefix=settings.API_PREFIX)    # /upload-resume, /uploads

    return app


app = create_app()


def run() -> None:
    import uvicorn

    uvicorn.run("skillscan.main:app", host=settings.APP_HOST, port=settings.APP_PORT)
