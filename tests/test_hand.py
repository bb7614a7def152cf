import itertools
import unittest

from feen.core import Piece, NotationSyntaxError, CountError, CanonicalOrderError
from feen.hand import (
    HandEntry, Hands,
    canonical_sort, collapse, decode_hand, decode_hands, encode_hand, encode_hands, expand,
    partition_by_case,
)


P, B, K = Piece("P"), Piece("B"), Piece("K")
p = Piece("p")


class TestHandEncode(unittest.TestCase):
    def test_canonical_string_is_order_independent(self):
        entries = [HandEntry(P, 3), HandEntry(B, 2), HandEntry(K, 1)]
        for perm in itertools.permutations(entries):
            with self.subTest(order=[str(e) for e in perm]):
                self.assertEqual(encode_hand(perm), "3P2BK")

    def test_identical_tokens_are_grouped(self):
        self.assertEqual(encode_hand(["P", "B", "P"]), "2PB")
        self.assertEqual(encode_hand([P, HandEntry(P, 2)]), "3P")
        self.assertEqual(encode_hand([]), "")

    def test_modifiers_are_part_of_identity(self):
        tokens = ["P", "P'", "+P", "-P", "P"]
        self.assertEqual(encode_hand(tokens), "2P+P-PP'")

    def test_count_then_code_point(self):
        self.assertEqual(encode_hand(["p", "p", "B"]), "2pB")
        self.assertEqual(encode_hand(["b", "B", "a"]), "Bab")

    def test_collapse_and_expand(self):
        entries = collapse(["R", "R", "S"])
        self.assertEqual(entries, (HandEntry(Piece("R"), 2), HandEntry(Piece("S"), 1)))
        self.assertEqual(expand(entries), (Piece("R"), Piece("R"), Piece("S")))
        self.assertEqual(canonical_sort([HandEntry(K), HandEntry(B, 4)]), (HandEntry(B, 4), HandEntry(K)))

    def test_counts_out_of_range(self):
        with self.assertRaises(CountError):
            HandEntry(P, 0)
        with self.assertRaises(CountError):
            HandEntry(P, 1000)
        with self.assertRaises(CountError):
            encode_hand([HandEntry(P, 999), P])
        with self.assertRaises(TypeError):
            encode_hand([42])


class TestHandDecode(unittest.TestCase):
    def test_decode_entries(self):
        self.assertEqual(decode_hand("3P2BK"), (HandEntry(P, 3), HandEntry(B, 2), HandEntry(K)))
        self.assertEqual(decode_hand(""), ())
        self.assertEqual(decode_hand("10+R'"), (HandEntry(Piece("R", "+", "'"), 10),))
        self.assertEqual(decode_hand("999P"), (HandEntry(P, 999),))

    def test_roundtrip(self):
        for items in (["P"] * 4 + ["+B"] * 2 + ["K'"], ["a", "A", "z", "Z"], ["-n"] * 12):
            with self.subTest(items=items):
                text = encode_hand(items)
                self.assertEqual(decode_hand(text), collapse(items))
                self.assertEqual(encode_hand(decode_hand(text)), text)

    def test_bad_counts(self):
        for s in ("0P", "01P", "1P", "02P", "1000P", "K1B"):
            with self.subTest(hand=s):
                with self.assertRaises(CountError):
                    decode_hand(s)

    def test_bad_syntax(self):
        for s in ("3", "P3", "+", "P+", "++P", "'P", "P?", "2/"):
            with self.subTest(hand=s):
                with self.assertRaises(NotationSyntaxError):
                    decode_hand(s)

    def test_non_canonical_rejected(self):
        cases = {
            "PB": "BP",
            "K2P": "2PK",
            "PP": "2P",
            "2P3B": "3B2P",
            "P'P": "PP'",
        }
        for given, expected in cases.items():
            with self.subTest(hand=given):
                with self.assertRaises(CanonicalOrderError) as cm:
                    decode_hand(given)
                self.assertEqual(cm.exception.expected, expected)

    def test_error_positions(self):
        with self.assertRaises(CountError) as cm:
            decode_hand("2P0B")
        self.assertEqual(cm.exception.position, 2)
        with self.assertRaises(CanonicalOrderError) as cm:
            decode_hand("2PKB")
        self.assertEqual(cm.exception.position, 2)


class TestHands(unittest.TestCase):
    def test_partition_by_case(self):
        first, second = partition_by_case(["p", "P", "b"])
        self.assertEqual([str(e.piece) for e in first], ["P"])
        self.assertEqual([str(e.piece) for e in second], ["p", "b"])

    def test_encode_segments(self):
        self.assertEqual(encode_hands(["p", "P", "B", "p", "P", "p"]), "2PB/3p")
        self.assertEqual(encode_hands([]), "/")
        self.assertEqual(encode_hands(["r"]), "/r")
        self.assertEqual(encode_hands(Hands.of(["R"])), "R/")

    def test_decode_segments(self):
        hands = decode_hands("2P/p")
        self.assertEqual(hands.first, (HandEntry(P, 2),))
        self.assertEqual(hands.second, (HandEntry(p),))
        self.assertEqual(decode_hands("/"), Hands())
        self.assertTrue(decode_hands("/").is_empty())
        self.assertEqual(str(hands), "2P/p")

    def test_segment_roundtrip(self):
        items = ["+P"] * 3 + ["s", "s", "G", "n'"]
        text = encode_hands(items)
        self.assertEqual(text, "3+PG/2sn'")
        self.assertEqual(decode_hands(text), Hands.of(items))
        self.assertEqual(sorted(map(str, decode_hands(text).pieces())), sorted(items))

    def test_leading_zero_counts(self):
        for s in ("01P/", "0P/", "/01p", "/1p"):
            with self.subTest(hands=s):
                with self.assertRaises(CountError):
                    decode_hands(s)

    def test_wrong_segment_or_separator(self):
        with self.assertRaises(CanonicalOrderError):
            decode_hands("p/")
        with self.assertRaises(CanonicalOrderError):
            decode_hands("/P")
        for s in ("", "P", "P/p/", "//"):
            with self.subTest(hands=s):
                with self.assertRaises(NotationSyntaxError):
                    decode_hands(s)

    def test_hands_value_checks_case(self):
        with self.assertRaises(CanonicalOrderError) as cm:
            Hands(first=(HandEntry(p),))
        self.assertEqual(cm.exception.expected, "/p")
        with self.assertRaises(CanonicalOrderError) as cm:
            Hands(first=(HandEntry(B),), second=(HandEntry(P, 2),))
        self.assertEqual(cm.exception.expected, "2PB/")

    def test_merged_count_over_limit(self):
        for s, position in (("999PP/", 4), ("/998p2p", 5), ("999P/P", 5)):
            with self.subTest(hands=s):
                with self.assertRaises(CountError) as cm:
                    decode_hands(s)
                self.assertEqual(cm.exception.position, position)
        with self.assertRaises(CountError) as cm:
            decode_hand("500K500K")
        self.assertEqual(cm.exception.position, 4)

    def test_very_long_count(self):
        with self.assertRaises(CountError) as cm:
            decode_hands("9" * 5000 + "P/")
        self.assertEqual(cm.exception.position, 0)

    def test_hands_are_canonicalised(self):
        self.assertEqual(Hands(first=(HandEntry(K), HandEntry(P, 2))), Hands(first=(HandEntry(P, 2), HandEntry(K))))
        self.assertEqual(Hands(first=(HandEntry(P), HandEntry(P))).first, (HandEntry(P, 2),))


if __name__ == "__main__":
    unittest.main()
