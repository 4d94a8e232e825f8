"""
BookingMX application entry point
Hotel reservation CRUD plus a nearby-city lookup
"""
import logging
from contextlib import asynccontextmanager
from datetime import datetime, UTC

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from bookingmx.config import settings
from bookingmx.dependencies import get_city_graph, get_reservation_repository
from bookingmx.exceptions import BookingError
from bookingmx.routers import cities, reservations

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO"):
    """Setup logging configuration"""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def error_body(message: str, status_code: int) -> dict:
    return {
        "timestamp": datetime.now(UTC).isoformat(),
        "status": status_code,
        "message": message,
    }


def _first_error_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    field = ".".join(str(part) for part in first.get("loc", ())[1:])
    message = first.get("msg", "Invalid value")
    return f"{field}: {message}" if field else message


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan"""
    setup_logging(settings.LOG_LEVEL)

    # Build the store and the city graph before the first request
    get_reservation_repository()
    if get_city_graph() is None:
        logger.warning("City graph unavailable, nearby-city lookups will return no results")

    logger.info(f"{settings.APP_NAME} {settings.APP_VERSION} started "
                f"(reservation store: {settings.RESERVATION_STORE})")
    yield


def create_application() -> FastAPI:
    """Create and configure the FastAPI application"""
    app = FastAPI(
        title=settings.APP_NAME,
        description="Hotel reservations and nearby-city lookup",
        version=settings.APP_VERSION,
        lifespan=lifespan
    )

    @app.exception_handler(BookingError)
    async def booking_error_handler(request: Request, exc: BookingError) -> JSONResponse:
        """NotFoundError -> 404, ValidationError -> 400"""
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(exc.message, exc.status_code),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        """Malformed request bodies and parameters are plain 400s"""
        return JSONResponse(status_code=400, content=error_body(_first_error_message(exc), 400))

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
        return JSONResponse(status_code=500, content=error_body("Unexpected error", 500))

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(reservations.router, prefix=settings.API_PREFIX)
    app.include_router(cities.router, prefix=settings.API_PREFIX)

    @app.get("/")
    def root():
        """Root"""
        return {
            "name": settings.APP_NAME,
            "version": settings.APP_VERSION,
        }

    @app.get("/health")
    def health_check():
        """Health check"""
        return {"status": "healthy"}

    return app


app = create_application()


def run():
    """Console entry point"""
    import uvicorn

    uvicorn.run(
        "bookingmx.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    run()
