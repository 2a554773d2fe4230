import unittest

from textcompare.core.similarity import overlap_ratio, similar
from textcompare.core.tokenizer import Token


class TestSimilarity(unittest.TestCase):
    def test_space_runs_always_similar(self):
        self.assertTrue(similar(Token(" "), Token("   ")))
        self.assertTrue(similar(Token("\n"), Token("  ")))

    def test_case_insensitive_equal(self):
        self.assertTrue(similar(Token("Cat"), Token("cAT")))

    def test_positional_overlap(self):
        self.assertAlmostEqual(overlap_ratio("cat", "cot"), 2 / 3)
        self.assertTrue(similar(Token("cat"), Token("cot")))

    def test_threshold_is_strict(self):
        # 3 of 5 positions equal: exactly 0.6
        self.assertEqual(overlap_ratio("abcde", "abcxy"), 0.6)
        self.assertFalse(similar(Token("abcde"), Token("abcxy")))

    def test_just_above_threshold(self):
        a = "a" * 61 + "b" * 39
        b = "a" * 61 + "c" * 39
        self.assertAlmostEqual(overlap_ratio(a, b), 0.61)
        self.assertTrue(similar(Token(a), Token(b)))

    def test_shifted_word_not_similar(self):
        # one extra letter at the front shifts every position
        self.assertFalse(similar(Token("cat"), Token("scat")))

    def test_unrelated_words(self):
        self.assertFalse(similar(Token("now"), Token("later")))

    def test_empty_token(self):
        self.assertFalse(similar(Token(""), Token("Hi")))
        self.assertTrue(similar(Token(""), Token("")))
        # both trim to the empty string
        self.assertTrue(similar(Token(""), Token(" ")))


if __name__ == "__main__":
    unittest.main()
