"""Parsing and classification of two-card starting hands.

`parse_hand` accepts free-form user text such as ``"Js9s"``, ``"ah kd"`` or
``" 7C7d "`` and returns either a `Hand` or a `ParseError`. It never raises,
so it can be called on every keystroke. `require_hand` is the raising variant
for callers that prefer exceptions.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from flop_traffic_lights.data.ranks import RANK_INDEX, rank_distance, rank_index
from flop_traffic_lights.data.textures import SUIT_GLYPHS, suit_glyph

SUITS = ("c", "d", "h", "s")

_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class Card:
    """A single card in canonical form (upper-case rank, lower-case suit)."""

    rank: str
    suit: str

    def __post_init__(self) -> None:
        if self.rank not in RANK_INDEX:
            raise ValueError(f"unknown rank {self.rank!r}")
        if self.suit not in SUIT_GLYPHS:
            raise ValueError(f"unknown suit {self.suit!r}")

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    @property
    def pretty(self) -> str:
        return f"{self.rank}{suit_glyph(self.suit)}"


@dataclass(frozen=True, eq=False)
class Hand:
    """Two distinct cards. Card order is kept for display only."""

    first: Card
    second: Card
    is_suited: bool = field(init=False)
    is_pair: bool = field(init=False)
    high_rank: str = field(init=False)
    low_rank: str = field(init=False)
    gap: int = field(init=False)

    def __post_init__(self) -> None:
        if self.first == self.second:
            raise ValueError(f"duplicate card {self.first}")
        high, low = self.first.rank, self.second.rank
        if rank_index(low) < rank_index(high):
            high, low = low, high
        object.__setattr__(self, "is_suited", self.first.suit == self.second.suit)
        object.__setattr__(self, "is_pair", self.first.rank == self.second.rank)
        object.__setattr__(self, "high_rank", high)
        object.__setattr__(self, "low_rank", low)
        object.__setattr__(self, "gap", rank_distance(high, low))

    @property
    def cards(self) -> tuple[Card, Card]:
        return (self.first, self.second)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return frozenset(self.cards) == frozenset(other.cards)

    def __hash__(self) -> int:
        return hash(frozenset(self.cards))

    def __str__(self) -> str:
        return f"{self.first}{self.second}"


class ParseErrorKind(str, Enum):
    INVALID_LENGTH = "invalid_length"
    INVALID_FORMAT = "invalid_format"
    DUPLICATE_CARD = "duplicate_card"


@dataclass(frozen=True)
class ParseError:
    """Typed parse failure returned (not raised) by `parse_hand`."""

    kind: ParseErrorKind
    message: str

    def as_dict(self) -> dict[str, str]:
        return {"kind": self.kind.value, "message": self.message}


class InvalidHandError(ValueError):
    """Raised by `require_hand` when the input does not describe a hand."""

    def __init__(self, error: ParseError) -> None:
        super().__init__(error.message)
        self.error = error


def _parse_card(token: str) -> Card | None:
    rank, suit = token[0].upper(), token[1].lower()
    if rank not in RANK_INDEX or suit not in SUIT_GLYPHS:
        return None
    return Card(rank=rank, suit=suit)


def parse_hand(raw: str | None) -> Union[Hand, ParseError]:
    """Parse ``RankSuitRankSuit`` text into a `Hand`.

    All whitespace is ignored and matching is case-insensitive. Failures are
    reported as a `ParseError` value:

    * ``INVALID_LENGTH`` when the stripped text is not exactly four characters
    * ``INVALID_FORMAT`` when a rank or suit character is outside its alphabet
    * ``DUPLICATE_CARD`` when both cards normalise to the same card
    """

    text = _WHITESPACE.sub("", raw or "")
    if len(text) != 4:
        return ParseError(
            ParseErrorKind.INVALID_LENGTH,
            f"expected 4 characters (RankSuitRankSuit), got {len(text)}",
        )

    tokens = (text[:2], text[2:])
    cards = [_parse_card(token) for token in tokens]
    for token, card in zip(tokens, cards):
        if card is None:
            return ParseError(ParseErrorKind.INVALID_FORMAT, f"invalid card {token!r}")

    first, second = cards
    if first == second:
        return ParseError(ParseErrorKind.DUPLICATE_CARD, f"duplicate card {first}")
    return Hand(first=first, second=second)


def require_hand(raw: str | None) -> Hand:
    result = parse_hand(raw)
    if isinstance(result, ParseError):
        raise InvalidHandError(result)
    return result


@dataclass(frozen=True)
class PocketPair:
    rank: str


@dataclass(frozen=True)
class SuitedHand:
    high: str
    low: str
    gap: int
    suit: str


@dataclass(frozen=True)
class OffsuitHand:
    high: str
    low: str
    gap: int


HandShape = Union[PocketPair, SuitedHand, OffsuitHand]


def classify_hand(hand: Hand) -> HandShape:
    """Return the shape variant carrying only the fields that shape needs."""

    if hand.is_pair:
        return PocketPair(rank=hand.high_rank)
    if hand.is_suited:
        return SuitedHand(high=hand.high_rank, low=hand.low_rank, gap=hand.gap, suit=hand.first.suit)
    return OffsuitHand(high=hand.high_rank, low=hand.low_rank, gap=hand.gap)


def shape_key(hand: Hand) -> str:
    if hand.is_pair:
        return "pair"
    return "suited" if hand.is_suited else "offsuit"


def hand_label(hand: Hand, with_cards: bool = False) -> str:
    """Canonical label such as ``"77"``, ``"J9s"`` or ``"AKo"``.

    With ``with_cards`` the cards are appended in input order, e.g.
    ``"AKo (A♥ K♦)"``.
    """

    if hand.is_pair:
        label = f"{hand.high_rank}{hand.low_rank}"
    else:
        label = f"{hand.high_rank}{hand.low_rank}{'s' if hand.is_suited else 'o'}"
    if with_cards:
        label = f"{label} ({hand.first.pretty} {hand.second.pretty})"
    return label


def hand_summary(hand: Hand) -> dict[str, object]:
    """Payload backing the "parsed hand" panel."""

    return {
        "hand": str(hand),
        "label": hand_label(hand),
        "label_with_cards": hand_label(hand, with_cards=True),
        "cards": [str(card) for card in hand.cards],
        "shape": shape_key(hand),
        "high_rank": hand.high_rank,
        "low_rank": hand.low_rank,
        "gap": hand.gap,
        "suited": hand.is_suited,
        "pair": hand.is_pair,
    }


__all__ = [
    "Card",
    "Hand",
    "HandShape",
    "InvalidHandError",
    "OffsuitHand",
    "ParseError",
    "ParseErrorKind",
    "PocketPair",
    "SUITS",
    "SuitedHand",
    "classify_hand",
    "hand_label",
    "hand_summary",
    "parse_hand",
    "require_hand",
    "shape_key",
]
