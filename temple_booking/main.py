import time
from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from temple_booking.api import bookings
from temple_booking.core.config import Settings, settings as default_settings
from temple_booking.core.errors import BookingServiceError
from temple_booking.core.logger import logger, setup_logging
from temple_booking.services.booking_store import BookingStore
from temple_booking.services.db_service import close_database, open_database


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message or "Internal Server Error"}
    )


def create_app(settings: Settings = None, store: BookingStore = None) -> FastAPI:
    """
    Builds the API. When ``store`` is given the database lifespan is skipped
    and requests go straight to it.
    """
    settings = settings or default_settings
    setup_logging(settings.LOG_LEVEL, settings.ERROR_LOG_FILE)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        logger.info(f"🚀 Starting {settings.PROJECT_NAME}")
        if app.state.booking_store is not None:
            yield
            logger.info("🛑 Shutting down backend")
            return

        connection = await open_database(settings)
        if not connection.ok:
            logger.critical("❌ MongoDB is unreachable, refusing to serve requests")
            raise SystemExit(1)

        app.state.booking_store = BookingStore(connection.database[settings.MONGODB_COLLECTION])
        try:
            yield
        finally:
            # Shutdown
            logger.info("🛑 Shutting down backend")
            app.state.booking_store = None
            await close_database(connection)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version="0.1.0",
        lifespan=lifespan
    )
    app.state.settings = settings
    app.state.booking_store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=settings.CORS_METHODS,
        allow_headers=settings.CORS_HEADERS,
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(f"{request.method} {request.url.path} {response.status_code} {elapsed_ms:.3f} ms")
        return response

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return error_response(exc.status_code, str(exc.detail))

    # Global Exception Handler
    @app.exception_handler(BookingServiceError)
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        status_code = getattr(exc, "status", None) or 500
        if status_code >= 500:
            logger.opt(exception=exc).error(f"🔥 UNHANDLED ERROR: {exc}")
        else:
            logger.warning(f"Global error: {exc}")
        return error_response(status_code, str(exc))

    app.include_router(bookings.router, prefix=settings.API_PREFIX, tags=["Bookings"])

    @app.get("/health")
    async def health_check():
        return {"status": "ok", "environment": settings.ENVIRONMENT, "timestamp": datetime.now().isoformat()}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("temple_booking.main:app", host=default_settings.HOST, port=default_settings.PORT)
