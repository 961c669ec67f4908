"""Rank ordering helpers shared by the parser, classifier and advice rules.

Ranks are ordered high to low, so index 0 is the Ace and index 12 the deuce.
Stepping clamps at both ends of the table: asking for the rank above an Ace
returns the Ace, and the rank below a deuce is the deuce.
"""

from __future__ import annotations

from typing import Dict, Sequence

RANKS: Sequence[str] = ("A", "K", "Q", "J", "T", "9", "8", "7", "6", "5", "4", "3", "2")
RANK_INDEX: Dict[str, int] = {rank: index for index, rank in enumerate(RANKS)}

BROADWAY_RANKS = frozenset({"A", "K", "Q", "J", "T"})
WHEEL_RANKS = frozenset({"A", "5", "4", "3", "2"})


def rank_index(rank: str) -> int:
    """Return the 0-based order index of `rank` (0 = Ace, 12 = deuce)."""

    return RANK_INDEX[rank]


def rank_at(index: int) -> str:
    """Return the rank at `index`, clamped to the ends of the table."""

    return RANKS[max(0, min(len(RANKS) - 1, index))]


def rank_distance(a: str, b: str) -> int:
    return abs(rank_index(a) - rank_index(b))


def step_toward_low(rank: str) -> str:
    """Rank one step lower; a deuce stays a deuce."""

    return rank_at(rank_index(rank) + 1)


def step_toward_high(rank: str) -> str:
    """Rank one step higher; an Ace stays an Ace."""

    return rank_at(rank_index(rank) - 1)


def step_toward_high_or_same(rank: str) -> str:
    return rank_at(rank_index(rank))


def is_broadway(rank: str) -> bool:
    return rank in BROADWAY_RANKS


def is_wheel_card(rank: str) -> bool:
    return rank in WHEEL_RANKS


def rank_label(rank: str) -> str:
    """Display form of a rank; Ten is written out as ``10``."""

    return "10" if rank == "T" else rank


__all__ = [
    "BROADWAY_RANKS",
    "RANKS",
    "RANK_INDEX",
    "WHEEL_RANKS",
    "is_broadway",
    "is_wheel_card",
    "rank_at",
    "rank_distance",
    "rank_index",
    "rank_label",
    "step_toward_high",
    "step_toward_high_or_same",
    "step_toward_low",
]
