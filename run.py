"""Entry point for the Inventory API server.

Builds the FastAPI application and serves it with Uvicorn.  Host and
port come from the ``HOST`` and ``PORT`` environment variables
(defaults ``0.0.0.0`` and ``8080``) and can be overridden on the
command line.  On SIGINT or SIGTERM the server stops accepting
connections and gives in‑flight requests up to ``SHUTDOWN_TIMEOUT``
seconds to finish.

Usage:
    python run.py [--host HOST] [--port PORT]
"""
import argparse
import asyncio
import logging

from uvicorn import Config, Server

from inventory_api.app.core.config import settings
from inventory_api.app.main import create_app

logger = logging.getLogger("inventory_api.server")


def parse_args() -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Run the Inventory API HTTP server.")
    ap.add_argument("--host", default=settings.host, help="Interface to bind (default: %(default)s)")
    ap.add_argument("--port", type=int, default=settings.port, help="Port to listen on (default: %(default)s)")
    return ap.parse_args()


async def serve(host: str, port: int) -> None:
    """Run Uvicorn until a shutdown signal is received."""
    app = create_app(settings)
    config = Config(
        app=app,
        host=host,
        port=port,
        log_level=settings.log_level.lower(),
        # Keep the handlers installed by setup_logging.
        log_config=None,
        timeout_graceful_shutdown=settings.shutdown_timeout,
    )
    server = Server(config)
    logger.info("http server: start at address %s:%s", host, port)
    await server.serve()
    logger.info("http server: closed successfully")


def main() -> None:
    args = parse_args()
    asyncio.run(serve(args.host, args.port))


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        pass
