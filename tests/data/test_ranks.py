"""Unit tests for rank ordering helpers."""

from __future__ import annotations

import unittest

from flop_traffic_lights.data.ranks import (
    RANKS,
    is_broadway,
    is_wheel_card,
    rank_at,
    rank_distance,
    rank_index,
    rank_label,
    step_toward_high,
    step_toward_high_or_same,
    step_toward_low,
)


class RankTests(unittest.TestCase):
    def test_order_is_high_to_low(self) -> None:
        self.assertEqual(rank_index("A"), 0)
        self.assertEqual(rank_index("T"), 4)
        self.assertEqual(rank_index("2"), 12)
        self.assertEqual(len(RANKS), 13)

    def test_distance_is_symmetric(self) -> None:
        self.assertEqual(rank_distance("J", "9"), 2)
        self.assertEqual(rank_distance("9", "J"), 2)
        self.assertEqual(rank_distance("7", "7"), 0)
        self.assertEqual(rank_distance("A", "2"), 12)

    def test_stepping_clamps_at_both_ends(self) -> None:
        self.assertEqual(step_toward_low("A"), "K")
        self.assertEqual(step_toward_low("3"), "2")
        self.assertEqual(step_toward_low("2"), "2")
        self.assertEqual(step_toward_high("2"), "3")
        self.assertEqual(step_toward_high("K"), "A")
        self.assertEqual(step_toward_high("A"), "A")
        self.assertEqual(step_toward_high_or_same("9"), "9")

    def test_rank_at_clamps(self) -> None:
        self.assertEqual(rank_at(-5), "A")
        self.assertEqual(rank_at(99), "2")
        self.assertEqual(rank_at(4), "T")

    def test_broadway_and_wheel_membership(self) -> None:
        self.assertTrue(all(is_broadway(rank) for rank in "AKQJT"))
        self.assertFalse(is_broadway("9"))
        self.assertTrue(all(is_wheel_card(rank) for rank in "A5432"))
        self.assertFalse(is_wheel_card("6"))
        self.assertFalse(is_wheel_card("K"))

    def test_rank_label_spells_out_ten(self) -> None:
        self.assertEqual(rank_label("T"), "10")
        self.assertEqual(rank_label("J"), "J")


if __name__ == "__main__":
    unittest.main()
