import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shopreviews.api.v1.routers.health import router as health_router
from shopreviews.api.v1.routers.products import router as products_router
from shopreviews.api.v1.routers.reviews import router as reviews_router
from shopreviews.core.config import get_settings
from shopreviews.core.errors import ServiceError
from shopreviews.core.lifespan import lifespan
from shopreviews.core.logging import configure_logging

logger = logging.getLogger(__name__)


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    level = logging.ERROR if exc.status_code >= 500 else logging.INFO
    logger.log(level, "%s %s -> %s %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Malformed input is a 400 across the API, not FastAPI's default 422
    errors = [{"loc": list(e.get("loc", ())), "msg": e.get("msg"), "type": e.get("type")} for e in exc.errors()]
    logger.info("%s %s -> 400 %s", request.method, request.url.path, errors)
    return JSONResponse(
        status_code=400,
        content={"detail": "Invalid request", "error": "ValidationError", "errors": errors},
    )


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(level=logging.DEBUG if settings.DEBUG else logging.INFO)

    app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

    # ------- CORS -------
    # ALLOWED_ORIGINS="https://shop.example.com,http://localhost:5173"
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins or ["http://localhost:5173"],
        allow_credentials=False,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        max_age=86400,
    )

    # ------- Errors -------
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # ------- Routes -------
    app.include_router(health_router)
    app.include_router(products_router, prefix=settings.api_prefix)
    app.include_router(reviews_router, prefix=settings.api_prefix)
    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    settings = get_settings()
    uvicorn.run("shopreviews.main:app", host=settings.HOST, port=settings.PORT, log_config=None)
