"""Primary API routes."""

from __future__ import annotations

from fastapi import APIRouter

from flop_traffic_lights import __version__
from flop_traffic_lights.data.bundles import DISCLAIMER, tier_legend

router = APIRouter(prefix="/api", tags=["core"])


@router.get("/health", summary="Service health check")
async def health() -> dict[str, str]:
    """Return a simple health payload for uptime checks."""

    return {"status": "ok"}


@router.get("/metadata", summary="Metadata about the service")
async def metadata() -> dict[str, str]:
    """Expose lightweight build metadata for the frontend landing page."""

    return {
        "service": "Flop Traffic Lights",
        "version": __version__,
        "description": "Green / yellow / red flop families for two-card starting hands.",
    }


@router.get("/legend", summary="How to read the advice tiers")
async def legend() -> dict[str, object]:
    return {"tiers": tier_legend(), "disclaimer": DISCLAIMER}


__all__ = ["router"]
