"""Advice value types and the ordered tier definitions.

Tiers follow the traffic-light metaphor: favorable flops are green (build
pots), marginal flops yellow (realise equity cheaply) and unfavorable flops
red (let it go).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple

DEFAULT_MAX_EXAMPLES = 6


@dataclass(frozen=True)
class AdviceEntry:
    """One named strategy note with guidance bullets and example flops."""

    title: str
    bullets: Tuple[str, ...]
    examples: Tuple[str, ...] = ()

    def display_examples(self, limit: int = DEFAULT_MAX_EXAMPLES) -> Tuple[str, ...]:
        return self.examples[: max(0, limit)]

    def to_dict(self, max_examples: int = DEFAULT_MAX_EXAMPLES) -> dict:
        return {
            "title": self.title,
            "bullets": list(self.bullets),
            "examples": list(self.display_examples(max_examples)),
        }


@dataclass(frozen=True)
class TierSpec:
    """Describes one advice tier for legends and column headers."""

    key: str
    light: str
    label: str
    summary: str
    description: str


ADVICE_TIERS: Sequence[TierSpec] = (
    TierSpec(
        key="favorable",
        light="green",
        label="Green-light",
        summary="build pots",
        description="Strong value/combo equity: build pots (size up multiway for protection).",
    ),
    TierSpec(
        key="marginal",
        light="yellow",
        label="Yellow-light",
        summary="realize cheap",
        description="Marginal / backdoor-heavy: realize equity cheap; fold to heat multiway.",
    ),
    TierSpec(
        key="unfavorable",
        light="red",
        label="Red-light",
        summary="let it go",
        description="Range disadvantage / dominated: check-fold; don't bloat.",
    ),
)

DISCLAIMER = (
    "This tool encodes practical heuristics for MTT/cash NLHE. Always adjust to position, "
    "SPR, players, and bet sizing. Use as a quick traffic light guide, not absolute rules."
)


@dataclass(frozen=True)
class AdviceBundle:
    """Advice for one hand, split into the three ordered tiers."""

    favorable: Tuple[AdviceEntry, ...]
    marginal: Tuple[AdviceEntry, ...]
    unfavorable: Tuple[AdviceEntry, ...]

    def tiers(self) -> Iterator[Tuple[TierSpec, Tuple[AdviceEntry, ...]]]:
        """Yield ``(tier_spec, entries)`` in favorable/marginal/unfavorable order."""

        for spec in ADVICE_TIERS:
            yield spec, getattr(self, spec.key)

    def to_dict(self, max_examples: int = DEFAULT_MAX_EXAMPLES) -> dict:
        return {
            spec.key: [entry.to_dict(max_examples) for entry in entries]
            for spec, entries in self.tiers()
        }


def tier_legend(specs: Sequence[TierSpec] = ADVICE_TIERS) -> list[dict[str, str]]:
    return [spec.__dict__.copy() for spec in specs]


__all__ = [
    "ADVICE_TIERS",
    "AdviceBundle",
    "AdviceEntry",
    "DEFAULT_MAX_EXAMPLES",
    "DISCLAIMER",
    "TierSpec",
    "tier_legend",
]
