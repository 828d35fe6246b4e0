# app/main.py
from contextlib import asynccontextmanager
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from app.core.config import settings
from app.core.logging import configure_logging, get_logger
from app.api import routes_pages, routes_teams

configure_logging(settings.LOG_LEVEL, settings.APP_ENV)
logger = get_logger(__name__)

STATIC_DIR = os.path.join(os.path.dirname(__file__), "static")


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings.validate_at_startup()
    logger.info(
        "app_starting",
        app=settings.APP_NAME,
        env=settings.APP_ENV,
        league=settings.LEAGUE_ID,
        season=settings.SEASON,
        fake_mode=settings.API_FOOTBALL_FAKE_MODE,
    )
    yield
    logger.info("app_stopping", app=settings.APP_NAME)


def create_application() -> FastAPI:
    app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["GET"],
        allow_headers=["*"],
        max_age=600,
    )

    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    # Routers
    app.include_router(routes_pages.router)
    app.include_router(routes_teams.router)

    @app.get("/health")
    def health():
        return {"ok": True, "env": settings.APP_ENV}

    return app


app = create_application()
