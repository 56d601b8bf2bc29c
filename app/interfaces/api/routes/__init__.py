from fastapi import FastAPI

from .auth import router as auth_router
from .categories import router as categories_router
from .chat import router as chat_router
from .co_organizers import router as co_organizers_router
from .events import router as events_router
from .notifications import router as notifications_router
from .participants import router as participants_router
from .users import router as users_router


def register_routes(app: FastAPI) -> None:
    """Registra todos os routers da API na aplicação FastAPI."""

    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(categories_router)
    app.include_router(events_router)
    app.include_router(participants_router)
    app.include_router(notifications_router)
    app.include_router(chat_router)
    app.include_router(co_organizers_router)
