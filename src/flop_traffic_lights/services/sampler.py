"""Random starting-hand sampler for quick manual exploration.

The two cards are drawn independently rather than from a 52-card deck; the
only guarantee is that they differ from each other.
"""

from __future__ import annotations

import random
from typing import Optional

from flop_traffic_lights.data.cards import SUITS
from flop_traffic_lights.data.ranks import RANKS


def random_hand(rng: Optional[random.Random] = None) -> str:
    """Return a parseable four-character hand string such as ``"Kd7c"``."""

    rng = rng or random.Random()
    rank_1, rank_2 = rng.choice(RANKS), rng.choice(RANKS)
    suit_1, suit_2 = rng.choice(SUITS), rng.choice(SUITS)
    if rank_1 == rank_2 and suit_1 == suit_2:
        suit_2 = SUITS[(SUITS.index(suit_2) + 1) % len(SUITS)]
    return f"{rank_1}{suit_1}{rank_2}{suit_2}"


__all__ = ["random_hand"]
