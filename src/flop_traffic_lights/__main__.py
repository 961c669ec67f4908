"""Executable entry point for running the FastAPI app."""

from __future__ import annotations

import logging

import uvicorn

from flop_traffic_lights.app import app
from flop_traffic_lights.config import build_settings


if __name__ == "__main__":
    settings = build_settings()
    logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
