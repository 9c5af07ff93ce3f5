# src/personapi/api/main.py
import os
from typing import Callable

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from personapi.api.routes.person import generate_person_router
from personapi.db.repository import PersonRepository, get_person_repository

LOCAL_DEV_ORIGINS = (
    "http://localhost:3000",
    "http://localhost:5173",
    "http://127.0.0.1:3000",
    "http://127.0.0.1:5173",
)


def cors_settings() -> dict:
    """CORS options from ``PERSONAPI_CORS_ORIGINS`` (comma separated) and
    ``PERSONAPI_CORS_ALLOW_CREDENTIALS``; local dev servers when unset."""
    origins = [
        origin.strip()
        for origin in os.getenv("PERSONAPI_CORS_ORIGINS", "").split(",")
        if origin.strip()
    ]
    credentials = os.getenv("PERSONAPI_CORS_ALLOW_CREDENTIALS", "").strip().lower()
    return {
        "allow_origins": origins or list(LOCAL_DEV_ORIGINS),
        "allow_credentials": credentials in {"1", "true", "yes", "y", "on"},
        "allow_methods": ["GET", "POST", "OPTIONS"],
        "allow_headers": ["*"],
    }


def create_app(
    *, get_repository: Callable[..., PersonRepository] = get_person_repository
) -> FastAPI:
    """Build the application; ``get_repository`` supplies the person store."""

    app = FastAPI(title="personapi")
    app.add_middleware(CORSMiddleware, **cors_settings())

    @app.get("/status")
    def status():
        return {"ok": True}

    app.include_router(generate_person_router(get_repository=get_repository))
    return app


app = create_app()
