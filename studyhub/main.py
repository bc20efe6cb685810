import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError

from studyhub.api import (
    articles,
    countries,
    dashboard,
    faqs,
    inquiries,
    majors,
    settings as settings_api,
    universities,
    university_majors,
    users,
)
from studyhub.config import settings
from studyhub.db.session import engine
from studyhub.errors import (
    DependencyConflict,
    ReferentialIntegrityError,
    StudyHubError,
    UniquenessViolation,
)

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

ERROR_STATUS = {
    ReferentialIntegrityError: 400,
    UniquenessViolation: 409,
    DependencyConflict: 409,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await engine.dispose()


app = FastAPI(
    title="StudyHub CMS",
    description="Multilingual content and lead management for study-abroad consultancies",
    version="0.1.0",
    lifespan=lifespan,
)


@app.exception_handler(StudyHubError)
async def handle_domain_error(request: Request, exc: StudyHubError):
    status_code = ERROR_STATUS.get(type(exc), 400)
    logger.info(f"{request.method} {request.url.path} rejected ({status_code}): {exc}")
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


@app.exception_handler(IntegrityError)
async def handle_integrity_error(request: Request, exc: IntegrityError):
    logger.warning(f"{request.method} {request.url.path} hit a database constraint: {exc.orig}")
    return JSONResponse(status_code=409, content={"detail": "Conflicting write"})


@app.exception_handler(ValidationError)
async def handle_validation_error(request: Request, exc: ValidationError):
    return JSONResponse(
        status_code=422,
        content={"detail": exc.errors(include_url=False, include_context=False)},
    )


app.include_router(countries.router, prefix="/api/countries", tags=["countries"])
app.include_router(universities.router, prefix="/api/universities", tags=["universities"])
app.include_router(majors.router, prefix="/api/majors", tags=["majors"])
app.include_router(
    university_majors.router, prefix="/api/university-majors", tags=["university-majors"]
)
app.include_router(articles.router, prefix="/api/articles", tags=["articles"])
app.include_router(inquiries.router, prefix="/api/inquiries", tags=["inquiries"])
app.include_router(users.router, prefix="/api/users", tags=["users"])
app.include_router(faqs.router, prefix="/api/faqs", tags=["faqs"])
app.include_router(settings_api.router, prefix="/api/settings", tags=["settings"])
app.include_router(dashboard.router, prefix="/api/dashboard", tags=["dashboard"])


@app.get("/health")
async def health():
    return {"status": "ok", "env": settings.app_env}
