"""Flop-family advice routes."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Query

from flop_traffic_lights.config import resolve_max_examples
from flop_traffic_lights.data.cards import InvalidHandError, hand_label, require_hand, shape_key
from flop_traffic_lights.services.advice import build_advice_payload

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["advice"])


@router.get("/advice", summary="Green / yellow / red flop families for a hand")
async def advice(hand: str = Query(..., description="Starting hand, e.g. Js9s")) -> dict[str, object]:
    """Return the parsed hand and its advice tiers in favorable/marginal/unfavorable order."""

    try:
        parsed = require_hand(hand)
    except InvalidHandError as exc:
        logger.debug("rejected hand input", extra={"raw": hand, "kind": exc.error.kind.value})
        raise HTTPException(status_code=422, detail=exc.error.as_dict()) from exc

    payload = build_advice_payload(parsed, max_examples=resolve_max_examples())
    logger.info(
        "advice",
        extra={
            "hand_label": hand_label(parsed),
            "shape": shape_key(parsed),
            "entries": {key: len(entries) for key, entries in payload["tiers"].items()},
        },
    )
    return payload


__all__ = ["router"]
