"""Entry point for the Employee Management API.

Starts the FastAPI application under Uvicorn.  Host and port come
from ``API_HOST`` and ``API_PORT`` (defaults ``0.0.0.0`` and ``8080``);
see ``employee_management_api/app/core/config.py`` for the other
supported environment variables.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from employee_management_api.app.core.config import settings
from employee_management_api.app.main import app


async def main() -> None:
    config = Config(
        app=app,
        host=settings.api_host,
        port=settings.api_port,
        reload=False,
        # Logging is configured by create_app; uvicorn records go to the
        # root handlers and uvicorn.access keeps ACCESS_LOG_LEVEL.
        log_config=None,
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
