from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.errors import register_exception_handlers
from api.router import api_router
from infrastructure.services import get_settings
from server.lifespan import lifespan
from server.middleware import RequestContextMiddleware


def create_app() -> FastAPI:
    """Build the Lango API application."""
    settings = get_settings()
    app = FastAPI(title="Lango", version=settings.GIT_SHA, lifespan=lifespan)

    allow_origins = ["*"] if settings.is_production else settings.server.CORS_ORIGINS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestContextMiddleware)

    register_exception_handlers(app)
    app.include_router(api_router)
    return app


handler = create_app()
