import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from leasechain.api.main import api_router
from leasechain.core.config import Settings, settings
from leasechain.errors import ApiError, InvalidRequestError, UpstreamError

logger = logging.getLogger(__name__)


def error_payload(exc: ApiError, config: Settings) -> dict[str, str]:
    payload = {"message": exc.message}
    if exc.status_code >= 500:
        payload["error"] = (
            exc.error if config.EXPOSE_ERROR_DETAILS and exc.error else "Internal server error"
        )
    elif exc.error:
        payload["error"] = exc.error
    return payload


def create_app(config: Settings = settings) -> FastAPI:
    logging.basicConfig(
        level=config.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    app = FastAPI(title=config.PROJECT_NAME)

    if config.all_cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.all_cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content=error_payload(exc, config))

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.info("Rejected malformed request to %s: %s", request.url.path, exc.errors())
        error = InvalidRequestError(error=str(exc.errors()))
        return JSONResponse(status_code=error.status_code, content=error_payload(error, config))

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        # Errors outside the routes' own handling, e.g. while resolving dependencies.
        # ServerErrorMiddleware re-raises after this response, so the server logs the traceback.
        error = UpstreamError(error=str(exc))
        return JSONResponse(status_code=error.status_code, content=error_payload(error, config))

    app.include_router(api_router, prefix=config.API_PREFIX)
    return app


app = create_app()
