"""Advice generation and hand sampling services."""

from .advice import build_advice_payload, generate_advice
from .sampler import random_hand

__all__ = ["build_advice_payload", "generate_advice", "random_hand"]
