"""FastAPI application factory for the Flop Traffic Lights backend."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from flop_traffic_lights import __version__
from flop_traffic_lights.api import advice_router, core_router, hands_router


def create_app() -> FastAPI:
    app = FastAPI(title="Flop Traffic Lights", version=__version__)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(core_router)
    app.include_router(hands_router)
    app.include_router(advice_router)

    return app


app = create_app()


__all__ = ["app", "create_app"]
