from __future__ import annotations

import logging
import time
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from hosting_api import __version__
from hosting_api.config import HostingConfig
from hosting_api.routers import health, projects

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

logger = logging.getLogger("hosting_api.requests")


def configure_logging(level: str) -> None:
    package_logger = logging.getLogger("hosting_api")
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)
    package_logger.propagate = False
    package_logger.setLevel(level)


def create_app(config: Optional[HostingConfig] = None) -> FastAPI:
    config = config or HostingConfig.from_env()
    configure_logging(config.log_level)

    app = FastAPI(title="Project Hosting API", version=__version__)
    app.state.config = config

    if config.allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(config.allowed_origins),
            allow_methods=["GET"],
            allow_headers=["*"],
        )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000.0
            logger.info(
                "request method=%s path=%s status=%s elapsed_ms=%.2f",
                request.method,
                request.url.path,
                status_code,
                elapsed_ms,
            )

    @app.exception_handler(Exception)
    async def unhandled_exception(request: Request, exc: Exception) -> JSONResponse:
        # Internal paths and tracebacks stay in the log.
        logger.error(
            "unhandled_exception method=%s path=%s exception=%s",
            request.method,
            request.url.path,
            exc.__class__.__name__,
            exc_info=exc,
        )
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})

    app.include_router(health.router, tags=["health"])
    app.include_router(projects.router, prefix="/api", tags=["projects"])
    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn on the configured port."""
    config: HostingConfig = app.state.config
    logger.info(
        "starting port=%s projects_root=%s workspace_root=%s hosting_config_dir=%s",
        config.port,
        config.projects_root,
        config.workspace_root,
        config.hosting_config_dir,
    )
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())


if __name__ == "__main__":
    run()
