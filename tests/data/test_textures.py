"""Unit tests for example texture formatting."""

from __future__ import annotations

import unittest

from flop_traffic_lights.data.textures import (
    apply_hand_suit,
    apply_suit_glyphs,
    format_texture,
    format_textures,
    suit_glyph,
)


class TextureFormatTests(unittest.TestCase):
    def test_hand_suit_placeholder(self) -> None:
        self.assertEqual(format_texture("T*8x", "s"), "T♠8x")
        self.assertEqual(format_texture("T*8x", "h"), "T♥8x")
        self.assertEqual(format_texture("8*7* x", "d"), "8♦7♦ x")

    def test_explicit_suit_letters(self) -> None:
        self.assertEqual(format_texture("Qh Jh 9c (two-tone)"), "Q♥ J♥ 9♣ (two-tone)")
        self.assertEqual(apply_suit_glyphs("As Kd xs"), "A♠ K♦ x♠")

    def test_annotation_is_left_alone(self) -> None:
        self.assertEqual(format_texture("J9x (no straight/flush)"), "J9x (no straight/flush)")
        self.assertEqual(
            format_texture("T* 8 3 (BDFD + backdoor straight)", "c"),
            "T♣ 8 3 (BDFD + backdoor straight)",
        )

    def test_hand_suit_pass_runs_before_generic_pass(self) -> None:
        # A heart hand suit must not be turned into a spade by the generic pass.
        self.assertEqual(format_texture("Q* Js x", "h"), "Q♥ J♠ x")
        self.assertEqual(apply_hand_suit("A*", "c"), "A♣")

    def test_placeholder_without_hand_suit_is_an_error(self) -> None:
        with self.assertRaises(ValueError):
            format_texture("T*8x")

    def test_plain_patterns_pass_through(self) -> None:
        self.assertEqual(format_texture("A K 4 (r)"), "A K 4 (r)")
        self.assertEqual(format_textures(["77x (rainbow)", "765 (r)"]), ["77x (rainbow)", "765 (r)"])

    def test_suit_glyph(self) -> None:
        self.assertEqual([suit_glyph(s) for s in "cdhs"], ["♣", "♦", "♥", "♠"])
        self.assertEqual(suit_glyph("z"), "?")


if __name__ == "__main__":
    unittest.main()
