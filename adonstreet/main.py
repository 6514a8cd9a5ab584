"""FastAPI application entrypoint. No business logic; only wiring and middleware."""

from dotenv import load_dotenv

load_dotenv()

import logging

import uvicorn
from fastapi import FastAPI, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from adonstreet.api import build_router
from adonstreet.api.auth import AuthGate
from adonstreet.api.middleware import register_exception_handlers, register_middleware
from adonstreet.core.config import Settings, get_settings
from adonstreet.core.security import TokenService
from adonstreet.schemas.common import ValidationErrorResponse

logger = logging.getLogger(__name__)

DOCS_URL = "/api-docs"


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the application. The token service is created here from settings and
    shared by login and the auth gate through app.state.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title="AdOnStreet API",
        version="1.0.0",
        description="Outdoor and on-ground marketing inventory with user registration and login.",
        docs_url=DOCS_URL,
        redoc_url="/redoc",
    )

    token_service = TokenService.from_settings(settings)
    app.state.settings = settings
    app.state.token_service = token_service
    app.state.auth_gate = AuthGate(token_service)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["*"],
    )
    register_middleware(app)
    register_exception_handlers(app)

    if not settings.AUTH_ENABLED:
        logger.warning("AUTH_ENABLED is false: CRUD and dashboard routes are public")
    app.include_router(
        build_router(protect_resources=settings.AUTH_ENABLED),
        prefix=settings.API_PREFIX,
        responses={
            status.HTTP_422_UNPROCESSABLE_ENTITY: {
                "model": ValidationErrorResponse,
                "description": "Invalid request",
            },
        },
    )

    @app.get("/", include_in_schema=False)
    def root() -> RedirectResponse:
        """Send browsers to the interactive API docs."""
        return RedirectResponse(url=DOCS_URL)

    return app


app = create_app()


if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
