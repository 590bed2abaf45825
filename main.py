from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uvicorn

from tiyende.config import settings
from tiyende.core.logging_config import setup_logging, get_logger
from tiyende.middleware import RequestTrackingMiddleware
from tiyende.routes import (
    activity_router,
    auth_router,
    dashboard_router,
    route_router,
    setting_router,
    ticket_router,
    user_router,
    vendor_router,
)
from tiyende.storage import MemStorage, build_storage
from tiyende.utils.response_utils import ResponseWrapper

# Setup logging as early as possible
setup_logging(log_level=settings.LOG_LEVEL, force_configure=True, use_colors=settings.LOG_USE_COLORS)

logger = get_logger(__name__)


def create_app(storage: Optional[MemStorage] = None) -> FastAPI:
    """
    Build the API around a storage instance. Without one, a fresh store is
    created and seeded according to SEED_SAMPLE_DATA.
    """
    app = FastAPI(
        title=f"{settings.APP_NAME} API",
        description="Back-office API for vendors, routes, tickets and users",
        version=settings.APP_VERSION,
    )

    app.state.storage = storage if storage is not None else build_storage(seed=settings.SEED_SAMPLE_DATA)

    # Set up CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestTrackingMiddleware)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Validation failed for {request.method} {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "detail": ResponseWrapper.error(
                    message="Request validation failed",
                    error_code="VALIDATION_ERROR",
                    details={"errors": jsonable_encoder(exc.errors())},
                )
            },
        )

    # Include routers
    app.include_router(auth_router, prefix=settings.API_PREFIX)
    app.include_router(user_router, prefix=settings.API_PREFIX)
    app.include_router(vendor_router, prefix=settings.API_PREFIX)
    app.include_router(route_router, prefix=settings.API_PREFIX)
    app.include_router(ticket_router, prefix=settings.API_PREFIX)
    app.include_router(setting_router, prefix=settings.API_PREFIX)
    app.include_router(dashboard_router, prefix=settings.API_PREFIX)
    app.include_router(activity_router, prefix=settings.API_PREFIX)

    @app.get("/")
    async def root():
        return {"message": f"Welcome to {settings.APP_NAME} API"}

    @app.get("/health")
    async def health_check():
        return {"message": "I Am Alive!!"}

    logger.info(f"{settings.APP_NAME} API ready (env={settings.ENV}, prefix={settings.API_PREFIX})")
    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=settings.DEBUG)
