import os
import logging
from datetime import datetime, timezone
import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from culture_app.db import DATABASE_URL, init_schema, make_engine, make_session_factory
from culture_app.api import levels, videos
from culture_app.seed import seed_sample_levels
from culture_app.services.storage import MAX_BODY_BYTES, STATIC_DIR, BodyLimitMiddleware, ensure_storage, page_path

SERVER_HOST = os.getenv("CULTURE_SERVER_HOST", "0.0.0.0")
SERVER_PORT = int(os.getenv("CULTURE_SERVER_PORT", "3000"))
SEED_SAMPLE_DATA = os.getenv("CULTURE_SEED_SAMPLE_DATA", "1").strip().lower() in {"1", "true", "yes", "on"}
QUIET_ACCESS_LOG = os.getenv("CULTURE_QUIET_ACCESS_LOG", "1").strip().lower() in {"1", "true", "yes", "on"}

logger = logging.getLogger(__name__)

if QUIET_ACCESS_LOG:
    # Keep warning/error lines, suppress normal access noise (200 etc).
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def _storage_error_message(exc: SQLAlchemyError) -> str:
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


def _validation_error_message(exc: RequestValidationError) -> str:
    # e.g. "body.level_id: Input should be a valid integer"
    parts = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()))
        parts.append(f"{location}: {err.get('msg', 'invalid value')}")
    return "; ".join(parts) or "Invalid request"


def create_app(
    database_url: str | None = None,
    static_dir: str | None = None,
    max_body_bytes: int | None = None,
    seed_sample_data: bool | None = None,
) -> FastAPI:
    database_url = database_url or DATABASE_URL
    static_dir = static_dir or STATIC_DIR
    max_body_bytes = max_body_bytes if max_body_bytes is not None else MAX_BODY_BYTES
    seed_sample_data = SEED_SAMPLE_DATA if seed_sample_data is None else seed_sample_data
    ensure_storage(static_dir)

    app = FastAPI(title="Bharatiya Culture API")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.on_event("startup")
    def open_storage() -> None:
        engine = make_engine(database_url)
        app.state.engine = engine
        app.state.session_factory = make_session_factory(engine)
        logger.info("Connected to database %s", engine.url.render_as_string(hide_password=True))
        init_schema(engine)
        if seed_sample_data:
            seed_sample_levels(app.state.session_factory)

    @app.on_event("shutdown")
    def close_storage() -> None:
        engine = getattr(app.state, "engine", None)
        if engine is None:
            return
        logger.info("Closing database connection...")
        engine.dispose()
        app.state.engine = None
        logger.info("Database connection closed.")

    @app.exception_handler(SQLAlchemyError)
    async def storage_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error("Storage error on %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse({"error": _storage_error_message(exc)}, status_code=500)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse({"error": exc.detail}, status_code=exc.status_code, headers=getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse({"error": _validation_error_message(exc)}, status_code=422)

    app.add_middleware(BodyLimitMiddleware, max_body_bytes=max_body_bytes)

    @app.get("/api/health")
    def health():
        return {
            "status": "OK",
            "message": "Server is running",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    app.include_router(levels.router)
    app.include_router(videos.router)

    def _page(route: str):
        path = page_path(static_dir, route)
        if path is None:
            return JSONResponse({"error": "Not Found"}, status_code=404)
        return FileResponse(path, media_type="text/html")

    @app.get("/", include_in_schema=False)
    def index_page():
        return _page("/")

    @app.get("/levels.html", include_in_schema=False)
    def levels_page():
        return _page("/levels.html")

    @app.get("/admin.html", include_in_schema=False)
    def admin_page():
        return _page("/admin.html")

    app.mount("/", StaticFiles(directory=static_dir), name="static")
    return app


app = create_app()


def run() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    base_url = f"http://localhost:{SERVER_PORT}"
    logger.info("Server running on %s", base_url)
    logger.info("- Home: %s/", base_url)
    logger.info("- Levels: %s/levels.html", base_url)
    logger.info("- Admin: %s/admin.html", base_url)
    logger.info("- Health check: %s/api/health", base_url)
    uvicorn.run(app, host=SERVER_HOST, port=SERVER_PORT)


if __name__ == "__main__":
    run()
