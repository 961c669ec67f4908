"""Reusable data definitions shared across the advice engine."""

from .bundles import ADVICE_TIERS, AdviceBundle, AdviceEntry
from .cards import Hand, ParseError, ParseErrorKind, hand_label, parse_hand
from .textures import format_texture

__all__ = [
    "ADVICE_TIERS",
    "AdviceBundle",
    "AdviceEntry",
    "Hand",
    "ParseError",
    "ParseErrorKind",
    "format_texture",
    "hand_label",
    "parse_hand",
]
