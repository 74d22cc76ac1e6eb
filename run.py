"""Entry point for the Customer Directory API.

Starts the FastAPI application under Uvicorn.  Host and port are read
from the ``HOST`` and ``PORT`` environment variables (or a ``.env``
file in the working directory); defaults are ``0.0.0.0`` and ``3000``.
The database connection string is read from ``DATABASE_URL``.

Usage:
    python run.py
"""
from uvicorn import Config, Server

from customer_directory_api.app.core.config import settings


def main() -> None:
    config = Config(
        app="customer_directory_api.app.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    server.run()


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        pass
