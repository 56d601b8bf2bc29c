import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import get_settings
from app.infrastructure.database import engine, initialize_database
from app.interfaces.api.errors import register_exception_handlers
from app.interfaces.api.routes import register_routes

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Inicializa o banco de dados ao subir e libera os recursos ao encerrar."""

    initialize_database()
    logger.info("Database initialized")
    yield
    engine.dispose()


def create_app() -> FastAPI:
    """Cria e configura a aplicação principal do FastAPI."""

    settings = get_settings()
    app = FastAPI(title="Baco API", lifespan=lifespan)

    # Allows requests from the web client origins.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    register_routes(app)
    return app


app = create_app()
