"""Heuristic flop-family guidance for two-card poker starting hands."""

from flop_traffic_lights.data.cards import Hand, ParseError, ParseErrorKind, hand_label, parse_hand
from flop_traffic_lights.services.advice import generate_advice
from flop_traffic_lights.services.sampler import random_hand

__version__ = "0.1.0"

__all__ = [
    "Hand",
    "ParseError",
    "ParseErrorKind",
    "__version__",
    "generate_advice",
    "hand_label",
    "parse_hand",
    "random_hand",
]
