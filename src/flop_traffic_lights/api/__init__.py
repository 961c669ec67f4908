"""API routers for the Flop Traffic Lights backend."""

from .advice import router as advice_router
from .hands import router as hands_router
from .main import router as core_router

__all__ = ["core_router", "hands_router", "advice_router"]
