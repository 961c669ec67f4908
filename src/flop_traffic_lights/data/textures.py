"""Example board-texture formatting.

Advice rules describe example flops with small patterns such as
``"T*8x"`` or ``"Qh Jh 9 (two-tone)"``:

* a rank symbol (``A``..``2``) or ``x`` for "any card",
* an optional suit letter (``c``/``d``/``h``/``s``) directly after a rank,
* ``*`` after a rank for "the hand's own suit",
* an optional trailing annotation in parentheses, kept verbatim.

`format_texture` turns a pattern into display text in two passes: the hand
suit placeholder is resolved first, then explicit suit letters become glyphs.
Only the board part before the annotation is touched, so words like
"straight" or "flush" in an annotation are never rewritten.
"""

from __future__ import annotations

import re
from typing import Dict, Iterable, List, Optional

SUIT_GLYPHS: Dict[str, str] = {"c": "♣", "d": "♦", "h": "♥", "s": "♠"}
HAND_SUIT = "*"

_CARD_SUIT = re.compile(r"([AKQJT2-9x])([cdhs])(?![a-z])")


def suit_glyph(suit: str) -> str:
    """Return the display glyph for a suit letter (``"?"`` when unknown)."""

    return SUIT_GLYPHS.get(suit, "?")


def _split_annotation(pattern: str) -> tuple[str, str]:
    index = pattern.find("(")
    if index < 0:
        return pattern, ""
    return pattern[:index], pattern[index:]


def apply_hand_suit(board: str, hand_suit: Optional[str]) -> str:
    """First pass: replace the ``*`` placeholder with the hand's suit glyph."""

    if HAND_SUIT not in board:
        return board
    if hand_suit not in SUIT_GLYPHS:
        raise ValueError(f"pattern {board!r} needs a hand suit, got {hand_suit!r}")
    return board.replace(HAND_SUIT, SUIT_GLYPHS[hand_suit])


def apply_suit_glyphs(board: str) -> str:
    """Second pass: turn explicit suit letters that follow a rank into glyphs."""

    return _CARD_SUIT.sub(lambda match: match.group(1) + SUIT_GLYPHS[match.group(2)], board)


def format_texture(pattern: str, hand_suit: Optional[str] = None) -> str:
    board, annotation = _split_annotation(pattern)
    board = apply_hand_suit(board, hand_suit)
    board = apply_suit_glyphs(board)
    return board + annotation


def format_textures(patterns: Iterable[str], hand_suit: Optional[str] = None) -> List[str]:
    return [format_texture(pattern, hand_suit) for pattern in patterns]


__all__ = [
    "HAND_SUIT",
    "SUIT_GLYPHS",
    "apply_hand_suit",
    "apply_suit_glyphs",
    "format_texture",
    "format_textures",
    "suit_glyph",
]
