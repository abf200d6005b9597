from contextlib import asynccontextmanager
from datetime import datetime
from pathlib import Path
from typing import Optional
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
import uvicorn

from sportcenter.config import Settings
from sportcenter.database import (
    StorageError,
    make_engine,
    make_session_factory,
    run_migrations,
)
from sportcenter.errors import ApiError, Conflict, ValidationError
from sportcenter.init_db import seed_initial_data
from sportcenter.routers import admin, auth, member, public
from sportcenter.services.payments import MockPaymentProcessor, PaymentProcessor

# Configure base logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("sportcenter")


def initialize_database(app: FastAPI) -> None:
    """Migrate and seed the store. Any failure here aborts startup."""
    logger.info("Initializing database...")
    run_migrations(app.state.engine)
    db = app.state.session_factory()
    try:
        seed_initial_data(db, app.state.settings)
    finally:
        db.close()
    logger.info("Database initialized successfully")


@asynccontextmanager
async def lifespan(app: FastAPI):
    initialize_database(app)
    logger.info(f"Environment: {app.state.settings.environment}")
    yield
    app.state.engine.dispose()


def security_headers(settings: Settings) -> dict:
    headers = {
        "X-Content-Type-Options": "nosniff",
        "X-Frame-Options": "SAMEORIGIN",
        "Referrer-Policy": "no-referrer",
    }
    if settings.is_production:
        headers["Content-Security-Policy"] = "default-src 'self'"
        headers["Strict-Transport-Security"] = "max-age=15552000; includeSubDomains"
    return headers


def _add_security_headers(app: FastAPI, settings: Settings) -> None:
    @app.middleware("http")
    async def add_security_headers(request: Request, call_next):
        response = await call_next(request)
        for name, value in security_headers(settings).items():
            response.headers.setdefault(name, value)
        return response


def _add_exception_handlers(app: FastAPI, settings: Settings) -> None:
    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        return JSONResponse(
            status_code=exc.status_code, content=exc.to_content(), headers=exc.headers
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ):
        error = ValidationError.from_errors(exc.errors())
        return JSONResponse(status_code=error.status_code, content=error.to_content())

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            content = {"error": "Route not found"}
        else:
            content = {"error": exc.detail}
        return JSONResponse(
            status_code=exc.status_code,
            content=content,
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError):
        if exc.is_duplicate:
            error = Conflict("Resource already exists")
            return JSONResponse(
                status_code=error.status_code, content=error.to_content()
            )
        return await unhandled_exception_handler(request, exc)

    # Global unhandled exception handler -> logs ERROR
    # Runs outside the middleware stack, so headers are set here too
    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(
            "Unhandled error | path=%s | method=%s | client=%s",
            request.url.path,
            request.method,
            request.client.host if request.client else "unknown",
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": "Something went wrong!",
                "message": "Internal server error"
                if settings.is_production
                else str(exc),
            },
            headers=security_headers(settings),
        )


def create_app(
    settings: Optional[Settings] = None,
    payment_processor: Optional[PaymentProcessor] = None,
) -> FastAPI:
    settings = settings or Settings.from_env()

    app = FastAPI(
        title="Nylöse SportCenter API",
        description="API for sports, schedules and club memberships",
        version="1.0.0",
        lifespan=lifespan,
    )

    engine = make_engine(settings.database_url)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = make_session_factory(engine)
    app.state.payment_processor = payment_processor or MockPaymentProcessor()

    _add_exception_handlers(app, settings)
    _add_security_headers(app, settings)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.frontend_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(auth.router, prefix="/api/auth", tags=["authentication"])
    app.include_router(admin.router, prefix="/api/admin", tags=["admin"])
    app.include_router(member.router, prefix="/api/member", tags=["member"])
    app.include_router(public.router, prefix="/api/public", tags=["public"])

    @app.get("/api/health")
    def health():
        return {"status": "OK", "timestamp": datetime.utcnow().isoformat()}

    # Uploaded sport images
    upload_dir = Path(settings.upload_dir)
    upload_dir.mkdir(parents=True, exist_ok=True)
    app.mount("/uploads", StaticFiles(directory=upload_dir), name="uploads")

    return app


def run() -> None:
    settings = Settings.from_env()
    uvicorn.run(create_app(settings), host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    run()
