import logging

from fastapi import FastAPI

from src.api.deps import Settings, get_settings
from src.api.routes import pizza
from src.shell.http.health import create_health_router

__version__ = "0.1.0"

LOG_FORMAT = "%(levelname)s %(message)s"


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
    # Lambda installs a root handler first, making basicConfig a no-op
    logging.getLogger().setLevel(settings.log_level)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the API application."""
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title="Pizza Price API",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.include_router(pizza.router, tags=["Pizza"])
    app.include_router(create_health_router(version=__version__))

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
