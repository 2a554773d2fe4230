import unittest

from textcompare.core.char_aligner import align_chars


def _flags(tagged):
    return [(c.char, c.changed) for c in tagged]


class TestCharAligner(unittest.TestCase):
    def test_substituted_letter(self):
        old, new = align_chars("cat", "cot")
        self.assertEqual(_flags(old), [("c", False), ("a", True), ("t", False)])
        self.assertEqual(_flags(new), [("c", False), ("o", True), ("t", False)])

    def test_case_change_flagged_on_both_sides(self):
        old, new = align_chars("Cat", "cat")
        self.assertEqual(_flags(old), [("C", True), ("a", False), ("t", False)])
        self.assertEqual(_flags(new), [("c", True), ("a", False), ("t", False)])

    def test_deleted_letter(self):
        old, new = align_chars("colour", "color")
        self.assertEqual([c.char for c in old if c.changed], ["u"])
        self.assertTrue(all(not c.changed for c in new))

    def test_sides_keep_all_characters(self):
        old, new = align_chars("receive", "recieve")
        self.assertEqual("".join(c.char for c in old), "receive")
        self.assertEqual("".join(c.char for c in new), "recieve")


if __name__ == "__main__":
    unittest.main()
