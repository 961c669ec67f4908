"""Heuristic flop-family advice for a starting hand.

`generate_advice` dispatches on the hand shape (pocket pair, suited, offsuit)
and builds all three tiers inside the branch for that shape. Example flops are
synthesised from the hand's own ranks (and suit, for suited hands) and are
illustrative only; nothing here evaluates equity.
"""

from __future__ import annotations

from typing import List

from flop_traffic_lights.data.bundles import DEFAULT_MAX_EXAMPLES, AdviceBundle, AdviceEntry
from flop_traffic_lights.data.cards import (
    Hand,
    OffsuitHand,
    PocketPair,
    SuitedHand,
    classify_hand,
    hand_summary,
)
from flop_traffic_lights.data.ranks import (
    is_broadway,
    rank_index,
    rank_label,
    step_toward_high,
    step_toward_high_or_same,
    step_toward_low,
)
from flop_traffic_lights.data.textures import format_textures


def _entry(title: str, bullets: List[str], examples: List[str], hand_suit: str | None = None) -> AdviceEntry:
    return AdviceEntry(
        title=title,
        bullets=tuple(bullets),
        examples=tuple(format_textures(examples, hand_suit)),
    )


def _pocket_pair_advice(shape: PocketPair) -> AdviceBundle:
    pocket = shape.rank
    below = step_toward_low(pocket)
    above = step_toward_high(pocket)

    # Pockets below Tens anchor the overcard board one step under the Four.
    anchor = step_toward_low("4" if rank_index(pocket) > rank_index("T") else "T")

    favorable = _entry(
        "Sets / Overpairs",
        [
            "Top set or middle/bottom set: build pots vs one player; size up multiway for value/protection.",
            "Overpair on safe boards (low/medium disconnected): bet for value/protection; keep barreling clean turns.",
        ],
        [
            f"{pocket}{pocket}x (rainbow)",
            f"{pocket}{below}{step_toward_low(below)} (r)",
        ],
    )
    marginal = _entry(
        "Underpairs / Paired boards",
        [
            "Underpair to one or two overcards: realize equity cheap; check-call small once in-position.",
            "Paired boards w/ one over: pot control; take free cards; avoid big pots without improvement.",
        ],
        [
            f"A {rank_label(pocket)} 4 (r)",
            f"{above} {step_toward_high(above)} {rank_label(pocket)} (r)",
        ],
    )
    unfavorable = _entry(
        "Two+ overs / High, wet textures",
        [
            "Boards with two or more higher cards, especially connected or two-tone, are bad for under-repped pocket pairs.",
            "Fold to sizable aggression multiway; avoid check-raise bluffs without strong equity.",
        ],
        [
            f"A K {anchor} (r)",
            f"Qh Jh {step_toward_low('T')}c (two-tone)",
        ],
    )
    return AdviceBundle(favorable=(favorable,), marginal=(marginal,), unfavorable=(unfavorable,))


def _suited_advice(shape: SuitedHand) -> AdviceBundle:
    hi, lo, suit = shape.high, shape.low, shape.suit
    lo_1 = step_toward_low(lo)
    lo_2 = step_toward_low(lo_1)
    hi_up = step_toward_high(hi)
    has_strong_draws = shape.gap in (1, 2) or (is_broadway(hi) and is_broadway(lo))

    favorable: List[AdviceEntry] = []
    if has_strong_draws:
        favorable.append(
            _entry(
                "Strong combo equity (OESDs/GS + backdoors)",
                [
                    "Open-ender or pair + draw with your suit/backdoors: build pots vs singles; mix check-raises vs late stabs.",
                    "Pressure good turns (your suit, straight completers, or overcards you rep).",
                ],
                [f"{lo}*{lo_1}x", f"{hi_up}*{lo}x", f"{lo_1}*{lo_2}* x"],
                suit,
            )
        )
    favorable.append(
        _entry(
            "Top two or better",
            [
                "Two-pair on uncoordinated boards: value bet; size up multiway (60–75%).",
                "Trips on paired boards: value but beware when obvious straights/flushes complete.",
            ],
            [f"{hi}{lo}x (no straight/flush)", f"{hi}{hi}{lo} (r)"],
        )
    )
    if hi == "A":
        favorable.append(
            _entry(
                "Nut FD + extras",
                [
                    "A-high nut FD with gutter/overcards: semi-bluff aggressively vs folds; deny equity.",
                    "In-position, raise some small c-bets; out-of-position, prefer check-raise mixes on dynamic boards.",
                ],
                ["Q* J x (BDFD + GS)", f"{lo}* {lo_1}* x (NFD + pair outs)"],
                suit,
            )
        )

    marginal = (
        _entry(
            "Decent one-pair / backdoors",
            [
                "Top pair weak kicker or second pair w/ backdoors: check-call small once; fold to heat multiway.",
                "Favor pot control when your kicker is dominated or board shifts on the turn.",
            ],
            [
                f"{hi} {step_toward_low(hi)} {step_toward_high_or_same(lo)} (r)",
                f"{lo} {lo_1} {hi_up} (two-tone)",
            ],
        ),
        _entry(
            "Non-nut FDs with extras",
            [
                "Front-door FD without overcards: peel small; avoid big pots unless with extra equity (gutter/overs).",
                "Raise mainly when you can fold out better highs or realize fold equity vs capped ranges.",
            ],
            ["A* Q* 7 (you have FD only)", "T* 8 3 (BDFD + backdoor straight)"],
            suit,
        ),
    )

    unfavorable = (
        _entry(
            "Dry, high-card boards you miss",
            [
                "Disconnected high-card boards heavily favor tight ranges; your equity realization is poor.",
                "Mostly check-fold; continue only vs tiny bets with backdoors in-position.",
            ],
            ["A K 4 (r)", "Q 7 2 (r)"],
        ),
        _entry(
            "Monotone boards without nut advantage",
            [
                "Avoid building 3-street pots when you lack the nut on monotone textures.",
                "Call tiny, fold big; realize equity when cheap.",
            ],
            [
                f"{hi}* {step_toward_low(hi)}* x* (all same suit)",
                f"{hi_up}* {lo_1}* {lo_2}* (all same suit)",
            ],
            suit,
        ),
    )
    return AdviceBundle(favorable=tuple(favorable), marginal=marginal, unfavorable=unfavorable)


def _offsuit_advice(shape: OffsuitHand) -> AdviceBundle:
    hi, lo = shape.high, shape.low
    broadway = is_broadway(hi) and is_broadway(lo)
    connected = shape.gap == 1

    if broadway:
        title = "Top pair / two-pair / strong gutters"
        bullet = "Top pair good kicker and two-pair on safe boards: value/protection; barrel good turns."
    elif connected:
        title = "Open-enders / pair+draw"
        bullet = "Open-enders and pair+draws: pressure single opponents; mix raises vs small c-bets."
    else:
        title = "Strong top-pair / two-pair"
        bullet = "When you smash (two-pair+), build pots; protect vs live overcards/backdoors."

    if connected:
        second_example = f"{step_toward_high(hi)} {hi} {lo} (r)"
    else:
        second_example = f"{step_toward_high(hi)} {step_toward_low(lo)} x"

    favorable = _entry(title, [bullet], [f"{hi}{lo}x (r)", second_example])
    marginal = _entry(
        "Marginal one-pair / backdoors",
        [
            "Check-call small once in-position; fold to pressure on turns that help opponent's range.",
            "Favor pot control multiway; avoid thin value on coordinated runouts.",
        ],
        [
            f"{hi} {step_toward_low(hi)} {step_toward_low(lo)} (r)",
            f"{lo} {step_toward_low(lo)} {step_toward_high(hi)} (two-tone)",
        ],
    )
    unfavorable = _entry(
        "High, disconnected boards you miss / bad low boards",
        [
            "AKx/QTx without connection; also super-low boards that smash callers' ranges.",
            "Mostly give up out-of-position; continue only with strong backdoors or vs tiny sizes in-position.",
        ],
        ["A K 4 (r)", "6 5 4 (two-tone)"],
    )
    return AdviceBundle(favorable=(favorable,), marginal=(marginal,), unfavorable=(unfavorable,))


def generate_advice(hand: Hand) -> AdviceBundle:
    """Return the favorable/marginal/unfavorable flop families for `hand`."""

    shape = classify_hand(hand)
    if isinstance(shape, PocketPair):
        return _pocket_pair_advice(shape)
    if isinstance(shape, SuitedHand):
        return _suited_advice(shape)
    return _offsuit_advice(shape)


def build_advice_payload(hand: Hand, max_examples: int = DEFAULT_MAX_EXAMPLES) -> dict:
    """Serialise a hand and its advice for the API and CLI."""

    bundle = generate_advice(hand)
    return {
        "hand": hand_summary(hand),
        "tiers": bundle.to_dict(max_examples),
    }


__all__ = ["build_advice_payload", "generate_advice"]
