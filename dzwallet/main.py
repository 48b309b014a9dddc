# dzwallet/main.py
"""
FastAPI app entrypoint
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from dzwallet.api.v1.router import api_router
from dzwallet.core.config import settings
from dzwallet.core.exception import (
    BackendAPIError,
    BaseAppException,
    RateLimitExceededError,
    ResourceNotFoundError,
    UnsupportedConversionError,
    ValidationError,
)
from dzwallet.core.logging import log_error, logger, setup_logging
from dzwallet.schemas.validation import ErrorResponse
from dzwallet.services.backend import backend_client

STATUS_BY_EXCEPTION = {
    ValidationError: 422,
    RateLimitExceededError: 429,
    UnsupportedConversionError: 400,
    ResourceNotFoundError: 404,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown lifecycle"""

    setup_logging()
    logger.info("🚀 Starting {} v{} ({})", settings.APP_NAME, settings.APP_VERSION, settings.ENVIRONMENT)
    logger.info("Backend: {}", settings.BACKEND_URL)

    yield

    await backend_client.close()
    logger.info("👋 Stopped")


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Validation, conversion and backend gateway for the DZ wallet",
    lifespan=lifespan,
    docs_url="/docs",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix=settings.API_V1_PREFIX)


def _status_for(exc: BaseAppException) -> int:
    if isinstance(exc, BackendAPIError):
        # Backend rejections keep their 4xx; anything else is a bad gateway
        return exc.status_code if 400 <= exc.status_code < 500 else 502
    for exc_type, status_code in STATUS_BY_EXCEPTION.items():
        if isinstance(exc, exc_type):
            return status_code
    return 500


@app.exception_handler(BaseAppException)
async def app_exception_handler(request: Request, exc: BaseAppException):
    status_code = _status_for(exc)
    if status_code >= 500:
        log_error(exc, {"path": request.url.path})

    body = ErrorResponse(
        error=exc.message,
        kind=exc.kind,
        errors=getattr(exc, "errors", [exc.message]),
        details={k: v for k, v in exc.details.items() if k not in ("kind", "errors")},
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


@app.get("/")
async def root():
    return {
        "name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "status": "running",
        "docs": "/docs",
    }
