"""Entry point for serving the Exercise Tracker API.

Starts the FastAPI application with Uvicorn.  Host, port, database
location and log level come from the environment (or a ``.env`` file
next to this script), see ``exercise_tracker.app.core.config``.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from exercise_tracker.app.core.config import settings
from exercise_tracker.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
