"""Hand parsing and sampling routes."""

from __future__ import annotations

from fastapi import APIRouter, Query

from flop_traffic_lights.data.cards import ParseError, hand_summary, parse_hand
from flop_traffic_lights.services.sampler import random_hand

router = APIRouter(prefix="/api/hands", tags=["hands"])


@router.get("/parse", summary="Validate a starting hand")
async def parse(hand: str = Query("", description="Starting hand, e.g. Js9s")) -> dict[str, object]:
    """Report whether `hand` parses; invalid input is a normal response, not an error."""

    result = parse_hand(hand)
    if isinstance(result, ParseError):
        return {"valid": False, "error": result.as_dict()}
    return {"valid": True, "hand": hand_summary(result)}


@router.get("/random", summary="Sample a random valid hand")
async def sample() -> dict[str, str]:
    return {"hand": random_hand()}


__all__ = ["router"]
