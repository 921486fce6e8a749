import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from presigner.api.routers import health as health_router
from presigner.api.routers import uploads as uploads_router
from presigner.core.config import ServiceConfig, Settings, build_service_config, get_settings
from presigner.core.errors import BadRequestError, ServiceError
from presigner.services.storage import StorageService
from presigner.services.uploads import UploadUrlIssuer

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    config: ServiceConfig = app.state.service_config
    if not config.bucket:
        logger.warning("AWS_BUCKET_NAME is not set; upload URL requests will fail")
    logger.info(
        "Issuing upload URLs for bucket %r (ttl=%ss, api key required=%s)",
        config.bucket,
        config.url_ttl_seconds,
        config.require_api_key,
    )
    yield


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug("Rejected request to %s: %s", request.url.path, exc.errors())
    error = BadRequestError()
    return JSONResponse(status_code=error.status_code, content={"error": error.message})


def create_app(
    config: ServiceConfig | None = None,
    storage: StorageService | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    config = config or build_service_config(settings)
    storage = storage or StorageService(config)

    app = FastAPI(
        debug=settings.debug,
        title="Upload URL Issuer",
        lifespan=lifespan,
    )
    app.state.service_config = config
    app.state.upload_issuer = UploadUrlIssuer(config, storage)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    app.include_router(health_router.router)
    app.include_router(uploads_router.router)

    return app


app = create_app()
