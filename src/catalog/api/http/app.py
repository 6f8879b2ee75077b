"""FastAPI application factory and setup."""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.staticfiles import StaticFiles
from loguru import logger
from starlette.responses import PlainTextResponse

from src.catalog.api.http.app_data import ApplicationDependencies
from src.catalog.api.http.middleware.method_override import MethodOverrideMiddleware
from src.catalog.api.http.middleware.security import SecurityHeadersMiddleware
from src.catalog.api.http.routers import authors, books, health, index
from src.catalog.api.utils.app_startup import configure_logging
from src.catalog.core.services import CoverImageStore, DbSessionService
from src.catalog.runtime.context import get_config


async def startup(app: FastAPI) -> None:
    config = get_config()
    logger.info("Starting up application in {} environment", config.app.environment)

    database_service = DbSessionService(config)
    database_service.create_all()

    cover_store = CoverImageStore.from_config(config.storage)
    cover_store.ensure_directory()

    app.state.app_dependencies = ApplicationDependencies(
        database_service=database_service,
        cover_store=cover_store,
    )


async def shutdown(app: FastAPI) -> None:
    logger.info("Shutting down application")
    app_dependencies: ApplicationDependencies | None = getattr(
        app.state, "app_dependencies", None
    )
    if app_dependencies is not None:
        app_dependencies.database_service.dispose()


@asynccontextmanager
async def lifespan(app: FastAPI):
    await startup(app)
    try:
        yield
    finally:
        await shutdown(app)


def create_app() -> FastAPI:
    config = get_config()
    configure_logging()

    app = FastAPI(
        title=config.app.title,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
    )

    app.add_middleware(SecurityHeadersMiddleware)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        xff = request.headers.get("x-forwarded-for")
        client_ip = (
            xff.split(",")[0].strip()
            if xff
            else request.client.host
            if request.client
            else "unknown"
        )

        start = time.perf_counter()
        with logger.contextualize(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
            client_ip=client_ip,
        ):
            try:
                logger.info("request.start")
                response = await call_next(request)
            except Exception as exc:
                duration_ms = (time.perf_counter() - start) * 1000
                logger.bind(
                    status_code=500,
                    duration_ms=round(duration_ms, 1),
                    error_type=type(exc).__name__,
                ).exception("request.error")
                return PlainTextResponse(
                    "Internal Server Error",
                    status_code=500,
                    headers={"X-Request-ID": request_id},
                )

            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=response.status_code,
                duration_ms=round(duration_ms, 1),
            ).info("request.end")
            response.headers.setdefault("X-Request-ID", request_id)
            return response

    # Outermost, so routing sees the overridden method
    app.add_middleware(MethodOverrideMiddleware)

    app.mount(
        config.storage.url_prefix,
        StaticFiles(directory=config.storage.upload_dir, check_dir=False),
        name="covers",
    )

    app.include_router(index.router)
    app.include_router(books.router)
    app.include_router(authors.router)
    app.include_router(health.router)

    return app


app = create_app()

__all__ = ["app", "create_app", "startup", "shutdown"]


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host="0.0.0.0",
        port=get_config().app.port,
        access_log=False,
    )
