"""
GBL Fishing API — roster, login and leaderboard scores.

Builds the FastAPI app: routers, CORS, the request-id / access-log
middleware, JSON error handlers, and the lifespan that owns the database
pool.
"""

import uuid
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import APP_VERSION, settings
from .database import Database
from .logging_config import setup_logging
from .routers import auth, scores, users
from .schemas.errors import ErrorResponse
from .startup import init_schema


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


def create_app(database: Database | None = None) -> FastAPI:
    """Build the app. An injected database is used as-is and left open on shutdown."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging()
        db = database or Database.from_settings(settings)
        app.state.db = db
        if settings.auto_create_tables:
            init_schema(db)
        logger.info("Server is running on http://localhost:{}", settings.port)
        try:
            yield
        finally:
            if database is None:
                db.close()

    app = FastAPI(title=settings.app_name, version=APP_VERSION, lifespan=lifespan)

    # ── Middleware ────────────────────────────────────────────────────

    @app.middleware("http")
    async def request_id_middleware(request: Request, call_next):
        request_id = uuid.uuid4().hex[:8]
        with logger.contextualize(request_id=request_id):
            logger.info("{} {}", request.method, request.url.path)
            try:
                response = await call_next(request)
            except Exception as exc:
                logger.opt(exception=exc).error(
                    "Unhandled error on {} {}", request.method, request.url.path
                )
                response = _error(500, "Something went wrong!")
            logger.info("{} {} -> {}", request.method, request.url.path, response.status_code)
        response.headers["X-Request-ID"] = request_id
        return response

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Error handlers ────────────────────────────────────────────────

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        status_code, message = exc.status_code, str(exc.detail)
        # Unknown method on a known path is still an unmatched route
        if status_code == 405:
            status_code, message = 404, "Not Found"
        if status_code == 404 and message == "Not Found":
            logger.info("404 Not Found: {} {}", request.method, request.url.path)
        return _error(status_code, message)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.info("Rejected body on {} {}: {}", request.method, request.url.path, exc.errors())
        return _error(400, "Invalid request body")

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.opt(exception=exc).error("Unhandled error on {} {}", request.method, request.url.path)
        return _error(500, "Something went wrong!")

    # ── Routes ────────────────────────────────────────────────────────

    @app.get("/")
    async def index():
        return {"message": f"Welcome to the {settings.app_name}"}

    @app.get("/health")
    async def health():
        return {"status": "ok", "version": APP_VERSION}

    app.include_router(auth.router)
    app.include_router(users.router)
    app.include_router(scores.router)

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    uvicorn.run("gbl_api.main:app", host=settings.host, port=settings.port, log_config=None)
