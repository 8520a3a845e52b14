"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bimgeom.api.routes import router


def create_app() -> FastAPI:
    app = FastAPI(
        title="BIM Geometry Engine",
        description="Wall, opening and brick geometry derivation for building layouts",
        version="0.1.0",
    )

    # CORS — allow the viewer dev server
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router, prefix="/api")

    return app


app = create_app()
