import unittest

from textcompare.core.space_runs import SpaceRun, classify_space_run
from textcompare.core.tokenizer import Token, tokenize


class TestSpaceRuns(unittest.TestCase):
    def test_double_space_between_words_is_interior(self):
        self.assertEqual(classify_space_run(tokenize("Hello  world"), 1), SpaceRun.INTERIOR)

    def test_multi_space_at_edges_is_highlighted(self):
        self.assertEqual(classify_space_run(tokenize("  a"), 0), SpaceRun.HIGHLIGHTED)
        self.assertEqual(classify_space_run(tokenize("a  "), 1), SpaceRun.HIGHLIGHTED)

    def test_single_space_between_words_is_plain(self):
        self.assertEqual(classify_space_run(tokenize("a b"), 1), SpaceRun.PLAIN)

    def test_single_leading_or_trailing_space_is_highlighted(self):
        self.assertEqual(classify_space_run(tokenize(" a"), 0), SpaceRun.HIGHLIGHTED)
        self.assertEqual(classify_space_run(tokenize("a "), 1), SpaceRun.HIGHLIGHTED)

    def test_single_space_next_to_empty_token_is_highlighted(self):
        toks = [Token("a"), Token(" "), Token(""), Token("b")]
        self.assertEqual(classify_space_run(toks, 1), SpaceRun.HIGHLIGHTED)

    def test_words_are_not_space_runs(self):
        self.assertEqual(classify_space_run(tokenize("a b"), 0), SpaceRun.NOT_SPACE)
        self.assertEqual(classify_space_run(tokenize(""), 0), SpaceRun.NOT_SPACE)


if __name__ == "__main__":
    unittest.main()
