# dockdemo/server/api.py
# FastAPI application for the Docker demo dashboard

from __future__ import annotations

import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from dockdemo import __version__
from dockdemo.base.config import DemoConfig, get_config, setup_logging
from dockdemo.errors import DemoError
from dockdemo.server.routers import logs, scenarios, system
from dockdemo.server.state import ApplicationState
from dockdemo.state.logs import LogCategory, LogType

logger = logging.getLogger(__name__)


def create_app(config: Optional[DemoConfig] = None) -> FastAPI:
    """
    Build the application around a fresh ApplicationState.

    Args:
        config: Configuration to use (defaults to the global config)
    """
    config = config or get_config()
    ApplicationState.reset_instance(config)

    app = FastAPI(
        title="Docker Demo API",
        description="Simulated Docker orchestration scenarios for the demo dashboard",
        version=__version__,
    )

    @app.exception_handler(DemoError)
    async def demo_error_handler(request: Request, exc: DemoError):
        """Render DemoError as the JSON body the dashboard expects."""
        logger.error(f"[API] {exc.code.value}: {exc.message}", extra={"details": exc.details})
        return JSONResponse(status_code=exc.http_status, content=exc.to_dict())

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.error(f"[API] Unhandled error on {request.url.path}: {exc}", exc_info=exc)
        return JSONResponse(status_code=500, content={"success": False, "error": str(exc)})

    @app.on_event("startup")
    async def startup_event():
        setup_logging(config)
        logger.info(f"Docker demo server running on {config.api_host}:{config.api_port}")
        logger.info(f"Environment: {config.environment}")

        logs_store = ApplicationState.instance().holder.current.logs
        logs_store.append(LogCategory.ORCHESTRATION, "Docker Demo Server started", LogType.SUCCESS)
        logs_store.append(LogCategory.ORCHESTRATION, "System ready for testing", LogType.INFO)

    @app.on_event("shutdown")
    async def shutdown_event():
        logger.info("Docker demo server shutting down")

    app.include_router(system.router)
    app.include_router(scenarios.router)
    app.include_router(logs.router)

    # The dashboard is optional; mounted last so the API routes win
    if config.static_dir.is_dir():
        app.mount("/", StaticFiles(directory=config.static_dir, html=True), name="static")
    else:
        logger.debug(f"Static directory {config.static_dir} not found; serving API only")

    return app


def serve(port: Optional[int] = None, host: Optional[str] = None):
    """Run the server with uvicorn (SIGINT/SIGTERM handled by uvicorn)."""
    config = get_config()
    uvicorn.run(
        create_app(config),
        host=host or config.api_host,
        port=port or config.api_port,
        log_level="info",
    )


if __name__ == "__main__":
    serve()
