#!/usr/bin/env python3
"""Print green / yellow / red flop families for a starting hand."""

from __future__ import annotations

import argparse
import sys
from typing import List

from flop_traffic_lights.config import resolve_max_examples
from flop_traffic_lights.data.bundles import DISCLAIMER
from flop_traffic_lights.data.cards import InvalidHandError, hand_label, require_hand
from flop_traffic_lights.services.advice import generate_advice
from flop_traffic_lights.services.sampler import random_hand


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--hand", help="Starting hand such as Js9s, AhKd or 7c7d (case-insensitive)")
    source.add_argument("--random", action="store_true", help="Sample a random valid hand")
    parser.add_argument(
        "--max-examples",
        type=int,
        default=None,
        help="Examples shown per entry (defaults to FLOP_LIGHTS_MAX_EXAMPLES or 6)",
    )
    return parser.parse_args(argv)


def render(raw: str, max_examples: int) -> List[str]:
    hand = require_hand(raw)
    bundle = generate_advice(hand)
    lines = [f"Parsed hand: {hand_label(hand, with_cards=True)}"]
    lines.append(
        f"Suited: {'Yes' if hand.is_suited else 'No'} · Pair: {'Yes' if hand.is_pair else 'No'} · Gap: {hand.gap}"
    )
    for spec, entries in bundle.tiers():
        lines.append("")
        lines.append(f"[{spec.label}] {spec.summary}")
        for entry in entries:
            lines.append(f"  {entry.title}")
            lines.extend(f"    - {bullet}" for bullet in entry.bullets)
            examples = entry.display_examples(max_examples)
            if examples:
                lines.append("    e.g. " + " | ".join(examples))
    lines.append("")
    lines.append(DISCLAIMER)
    return lines


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    raw = random_hand() if args.random else args.hand
    max_examples = args.max_examples if args.max_examples and args.max_examples > 0 else resolve_max_examples()
    try:
        lines = render(raw, max_examples)
    except InvalidHandError as exc:
        print(f"Invalid hand {raw!r}: {exc}", file=sys.stderr)
        return 2
    print("\n".join(lines))
    return 0


if __name__ == "__main__":  # pragma: no cover - exercised via CLI
    raise SystemExit(main())
